import pytest

from logic import ticket_converter
from logic.errors import MalformedOutputError, UpstreamError


def test_convert_runs_full_pipeline():
    captured = {}

    def fake_generate(prompt, llm_options=None):
        captured["prompt"] = prompt
        captured["llm_options"] = llm_options
        return '{"id": "p1", "title": "Fix login bug"},\n{"id": "c1", "title": "Button color", "isSubtask": true, "parentId": "p1"},'

    tickets = ticket_converter.convert_text_to_tickets(
        "Fix login bug", generate=fake_generate, llm_options={"temperature": 0}
    )

    assert "---\nFix login bug\n---" in captured["prompt"]
    assert captured["llm_options"] == {"temperature": 0}
    assert [t["id"] for t in tickets] == ["p1", "c1"]
    assert tickets[1]["parentId"] == "p1"
    assert tickets[0]["status"] == "todo"


def test_convert_uses_default_completion_client(monkeypatch):
    monkeypatch.setattr(ticket_converter, "generate_completion", lambda prompt, options=None: "[]")

    assert ticket_converter.convert_text_to_tickets("text") == []


def test_convert_propagates_malformed_output():
    with pytest.raises(MalformedOutputError):
        ticket_converter.convert_text_to_tickets("text", generate=lambda p, o=None: "Sure! Here you go")


def test_convert_propagates_upstream_error():
    def failing(prompt, llm_options=None):
        raise UpstreamError("boom")

    with pytest.raises(UpstreamError):
        ticket_converter.convert_text_to_tickets("text", generate=failing)
