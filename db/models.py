from __future__ import annotations
import os
from datetime import datetime
from typing import Optional
from enum import Enum

from sqlalchemy import create_engine, MetaData, String, Boolean, DateTime, TypeDecorator
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.dialects.postgresql import TEXT

# --- Engine helper (store URL + access key, usually from env) ---
def make_engine(url: Optional[str] = None, key: Optional[str] = None, echo: bool = False):
    url = url or os.getenv("TICKET_STORE_URL")
    key = key or os.getenv("TICKET_STORE_KEY")
    if not url:
        raise ValueError("TICKET_STORE_URL is not configured.")
    parsed = make_url(url)
    # sqlite URLs reject credentials
    if key and parsed.get_backend_name() != "sqlite":
        parsed = parsed.set(password=key)
    return create_engine(parsed, echo=echo, future=True)

# --- Base ---
class Base(DeclarativeBase):
    metadata = MetaData()

# --- Enums (mirror the board's status values) ---
class TicketStatus(str, Enum):
    todo = "todo"
    in_progress = "inProgress"
    done = "done"

class IsoTimestamp(TypeDecorator):
    """Timestamp column that also accepts ISO-8601 strings on insert."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if isinstance(value, str):
            return datetime.fromisoformat(value)
        return value

# --- Models ---
class Ticket(Base):
    __tablename__ = "tickets"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(TEXT, nullable=False)
    description: Mapped[str] = mapped_column(TEXT, nullable=False, default="")
    # plain string: generated tickets are not validated against TicketStatus
    status: Mapped[str] = mapped_column(String, nullable=False, default=TicketStatus.todo.value)
    category: Mapped[str] = mapped_column(String, nullable=False, default="General")
    section: Mapped[str] = mapped_column(String, nullable=False, default="")
    is_subtask: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    parent_id: Mapped[Optional[str]] = mapped_column(String(36))
    created_at: Mapped[datetime] = mapped_column(IsoTimestamp, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(IsoTimestamp, nullable=False)
