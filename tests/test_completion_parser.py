import pytest

from logic.completion_parser import repair_and_parse, repair_completion
from logic.errors import MalformedOutputError


def test_missing_wrapper_is_added():
    raw = '{"title":"A"}'

    assert repair_completion(raw) == '[{"title":"A"}\n]'
    assert repair_and_parse(raw) == [{"title": "A"}]


def test_trailing_comma_and_missing_close():
    raw = '[{"title":"A"},'

    assert repair_completion(raw) == '[{"title":"A"}\n]'
    assert repair_and_parse(raw) == [{"title": "A"}]


def test_complete_array_is_left_alone():
    raw = '  [{"title":"A"}, {"title":"B"}]\n'

    assert repair_completion(raw) == '[{"title":"A"}, {"title":"B"}]'
    assert len(repair_and_parse(raw)) == 2


def test_truncated_at_stop_marker():
    # Generation stops at the first "]" and the prompt supplied the opening "[".
    raw = '\n  {"id": "1", "title": "Fix login bug"},\n  {"id": "2", "title": "Button color", "parentId": "1"}\n'

    records = repair_and_parse(raw)

    assert [r["id"] for r in records] == ["1", "2"]


def test_garbage_is_malformed():
    assert repair_completion("not json at all") == "[not json at all\n]"
    with pytest.raises(MalformedOutputError):
        repair_and_parse("not json at all")


def test_inner_trailing_comma_is_not_repaired():
    with pytest.raises(MalformedOutputError):
        repair_and_parse('[{"title":"A",}]')


def test_non_standard_constants_rejected():
    with pytest.raises(MalformedOutputError):
        repair_and_parse('[{"title": NaN}]')


def test_records_are_not_type_checked():
    assert repair_and_parse('[1, "two", {"title": 3}]') == [1, "two", {"title": 3}]
