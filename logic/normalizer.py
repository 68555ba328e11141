"""Fill in defaults so every parsed ticket has the same shape."""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Mapping

from logic.errors import MalformedOutputError

UNTITLED_TICKET = "Untitled Ticket"
DEFAULT_STATUS = "todo"
DEFAULT_CATEGORY = "General"

# Field order matches the wire shape; ``id`` is handled separately.
TICKET_DEFAULTS: Dict[str, Any] = {
    "title": UNTITLED_TICKET,
    "description": "",
    "status": DEFAULT_STATUS,
    "category": DEFAULT_CATEGORY,
    "section": "",
    "isSubtask": False,
    "parentId": None,
}


def is_falsy(value: Any) -> bool:
    """JavaScript truthiness: empty lists and dicts count as present."""

    if value is None or value is False:
        return True
    if isinstance(value, (int, float)):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    if isinstance(value, str):
        return value == ""
    return False


def normalize_record(record: Any) -> Dict[str, Any]:
    """Build a ticket from one parsed element.

    Non-object elements (numbers, strings, arrays) carry no fields and
    become placeholder tickets; only ``null`` is rejected.
    """

    if record is None:
        raise MalformedOutputError("Ticket entry must not be null.")
    if not isinstance(record, Mapping):
        record = {}

    ticket: Dict[str, Any] = {}
    if "id" in record:
        ticket["id"] = record["id"]
    for field, default in TICKET_DEFAULTS.items():
        value = record.get(field)
        # NOTE: falsy values such as 0 or "" are replaced too, not only missing ones.
        ticket[field] = default if is_falsy(value) else value
    return ticket


def normalize(records: Iterable[Any]) -> List[Dict[str, Any]]:
    """Map parsed records to tickets one-to-one, preserving order."""

    return [normalize_record(record) for record in records]
