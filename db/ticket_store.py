"""Bulk replacement of the ``tickets`` table used by the seed script."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

from sqlalchemy import delete, func, insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from db.models import Base, Ticket, make_engine
from logic.errors import StoreError

logger = logging.getLogger(__name__)

# Never a real ticket id; filtering on it matches every row.
SENTINEL_ID = "00000000-0000-0000-0000-000000000000"


def _iso(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    return datetime.fromisoformat(str(value)).isoformat()


def to_store_row(ticket: Mapping[str, Any]) -> Dict[str, Any]:
    """Translate a camelCase ticket into the store's snake_case columns."""

    return {
        "id": ticket["id"],
        "title": ticket["title"],
        "description": ticket["description"],
        "status": ticket["status"],
        "category": ticket["category"],
        "section": ticket["section"],
        "is_subtask": ticket["isSubtask"],
        "parent_id": ticket["parentId"],
        "created_at": _iso(ticket["createdAt"]),
        "updated_at": _iso(ticket["updatedAt"]),
    }


def _store_error(exc: SQLAlchemyError, message: str) -> StoreError:
    orig = getattr(exc, "orig", None)
    diag = getattr(orig, "diag", None)
    details = getattr(diag, "message_detail", None) or (str(orig) if orig is not None else None)
    hint = getattr(diag, "message_hint", None)
    return StoreError(f"{message}: {exc}", details=details, hint=hint)


class TicketStore:
    """Thin wrapper over a SQLAlchemy engine bound to the ticket store."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def create_tables(self) -> None:
        Base.metadata.create_all(self.engine)

    def delete_all_tickets(self) -> int:
        with self.engine.begin() as conn:
            result = conn.execute(delete(Ticket).where(Ticket.id != SENTINEL_ID))
        return int(result.rowcount or 0)

    def insert_tickets(self, rows: List[Dict[str, Any]]) -> int:
        if not rows:
            return 0
        with self.engine.begin() as conn:
            conn.execute(insert(Ticket), rows)
        return len(rows)

    def replace_all_tickets(self, records: Iterable[Mapping[str, Any]]) -> int:
        """Delete every ticket then insert ``records`` (camelCase tickets).

        The delete and the insert run in separate transactions; a failed
        delete is logged and the insert still runs. A failed insert raises
        :class:`StoreError`. Returns the number of inserted rows.
        """

        rows = [to_store_row(r) for r in records]

        try:
            deleted = self.delete_all_tickets()
            logger.info("Deleted %d existing tickets", deleted)
        except SQLAlchemyError as exc:
            logger.error("Error deleting existing tickets: %s", exc)

        try:
            return self.insert_tickets(rows)
        except SQLAlchemyError as exc:
            raise _store_error(exc, "Error inserting tickets") from exc

    def count(self) -> int:
        with self.engine.connect() as conn:
            return int(conn.execute(select(func.count()).select_from(Ticket)).scalar_one())


def open_store(url: Optional[str] = None, key: Optional[str] = None, echo: bool = False) -> TicketStore:
    return TicketStore(make_engine(url, key, echo=echo))
