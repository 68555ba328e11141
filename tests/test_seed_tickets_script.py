import json

import pytest

from logic.errors import StoreError
from scripts import seed_tickets


class FakeStore:
    def __init__(self, error=None):
        self.error = error
        self.records = None
        self.created = False

    def create_tables(self):
        self.created = True

    def replace_all_tickets(self, records):
        self.records = list(records)
        if self.error is not None:
            raise self.error
        return len(self.records)


@pytest.fixture(autouse=True)
def no_env_file(monkeypatch, tmp_path):
    monkeypatch.setattr(seed_tickets, "ENV_FILE", tmp_path / "missing.env")


@pytest.mark.parametrize("env", [{}, {"TICKET_STORE_URL": "sqlite://"}, {"TICKET_STORE_KEY": "k"}])
def test_missing_configuration_exits_non_zero(monkeypatch, capsys, env):
    for name, value in env.items():
        monkeypatch.setenv(name, value)

    assert seed_tickets.main([]) == 1
    assert "TICKET_STORE_URL and TICKET_STORE_KEY" in capsys.readouterr().err


def test_seed_success(monkeypatch, capsys):
    monkeypatch.setenv("TICKET_STORE_URL", "postgresql+psycopg://postgres@localhost/board")
    monkeypatch.setenv("TICKET_STORE_KEY", "secret")
    store = FakeStore()
    opened = {}

    def fake_open(url, key, echo=False):
        opened.update(url=url, key=key)
        return store

    monkeypatch.setattr(seed_tickets, "open_store", fake_open)

    assert seed_tickets.main(["--create-tables"]) == 0
    out = capsys.readouterr().out
    assert "Inserted 20 tickets." in out
    assert opened == {"url": "postgresql+psycopg://postgres@localhost/board", "key": "secret"}
    assert store.created
    assert len(store.records) == 20


def test_insert_failure_still_exits_zero(monkeypatch, capsys):
    monkeypatch.setenv("TICKET_STORE_URL", "sqlite://")
    monkeypatch.setenv("TICKET_STORE_KEY", "k")
    error = StoreError("Error inserting tickets: duplicate key", details="Key (id) exists", hint="check ids")
    monkeypatch.setattr(seed_tickets, "open_store", lambda url, key, echo=False: FakeStore(error))

    assert seed_tickets.main([]) == 0
    captured = capsys.readouterr()
    assert "Details: Key (id) exists" in captured.err
    assert "Hint: check ids" in captured.err
    assert "Seeding process finished." in captured.out


def test_seed_against_sqlite(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("TICKET_STORE_URL", f"sqlite:///{tmp_path / 'board.db'}")
    monkeypatch.setenv("TICKET_STORE_KEY", "unused")

    assert seed_tickets.main(["--create-tables"]) == 0
    assert "Inserted 20 tickets." in capsys.readouterr().out


def test_dry_run_prints_rows(capsys):
    assert seed_tickets.main(["--dry-run"]) == 0

    rows = json.loads(capsys.readouterr().out)
    assert len(rows) == 20
    assert {"is_subtask", "parent_id", "created_at", "updated_at"} <= set(rows[0])
