"""Fixed backlog used to seed the ticket board with demo data."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

from db.models import TicketStatus

# (title, description) pairs; the first entry of each group is the parent.
_GroupSpec = Sequence[Tuple[str, str]]

TERMINOLOGY = [
    (
        "Rename 'Enhancement' to 'Enrichment' in UI",
        "Find and replace all instances of 'Enhancement' with 'Enrichment' throughout the UI.",
    ),
    (
        "Rename 'Connection' to 'Route' in UI",
        "Find and replace all instances of 'Connection' with 'Route' throughout the UI.",
    ),
]

SUPPLY_PARTNERS_TABLE = [
    (
        "Supply Partners - Main Table Screen",
        "Update the Supply Partners main table screen with appropriate metrics and controls.",
    ),
    (
        "Update metrics columns",
        "Use the same metrics columns as the Supply Tags page: Ad Requests, Fill Rate, Impressions, "
        "Media Cost, Revenue",
    ),
    ("Add Date Picker", "Add a Date Picker in the top-right, same as on Supply Tags page"),
    (
        "Use customizable schema",
        "Ensure the table uses a customizable schema from src/lib/client/components/data-table/column-schemas",
    ),
]

SUPPLY_PARTNERS_EDIT = [
    (
        "Supply Partners - Edit Drawer/Page",
        "Create the edit drawer/page for Supply Partner details with multiple tabs.",
    ),
    (
        "Settings Tab",
        "Create Settings tab with Name field as text input and Active/Inactive toggle slider",
    ),
    (
        "Enrichments Tab",
        "Create Enrichments tab with Inherited Enrichments display and Partner Level Enrichments "
        "(same functionality as 'Tag Level Request Enhancements' in the Supply Tags screen)",
    ),
    (
        "Supply Tags Tab",
        "Create Supply Tags tab with a table listing all tags belonging to this supply partner. "
        "Table should be the same as used on Supply Tags screen, but optimized for in-drawer usage. "
        "Clicking on a row should open that tag's details in a new tab.",
    ),
]

SUPPLY_PACKAGES_TABLE = [
    (
        "Supply Packages - Main Table Screen",
        "Update the Supply Packages main table screen with appropriate metrics.",
    ),
    (
        "Update metrics columns",
        "Use the same metrics columns as the Supply Tags page: Ad Requests, Fill Rate, Impressions, "
        "Media Cost, Revenue",
    ),
]

SUPPLY_PACKAGES_EDIT = [
    (
        "Supply Packages - Edit Drawer/Page",
        "Create the edit drawer/page for Supply Package details with Targeting tab.",
    ),
    ("Use filter builder", "Use same filter builder as Supply Tags Targeting Tab"),
    (
        "Add Supply Tag Targeting section",
        "Add 'Supply Tag Targeting' section above filters with radio button group: "
        "Include All Tags, Include Specific Tags, Exclude Specific Tags",
    ),
    (
        "Implement tag selection modal",
        "If Include/Exclude Specific Tags is selected, open modal with searchable table of supply tags "
        "and checkbox column to select tags. After selection, show summary and provide Edit option.",
    ),
    (
        "Add confirmation prompt",
        "Show confirmation prompt if the user switches targeting types (e.g., from Include to Exclude), "
        "warning that it will reset selected tags",
    ),
]

DATA_PERSISTENCE = [
    ("Data Persistence & UX", "Implement data persistence and UX improvements for all screens."),
    (
        "Use Edit Drawer or Page",
        "All screens (Supply Partners + Supply Packages) must use an Edit Drawer or Page",
    ),
    (
        "Temporary edits until Save",
        "All edits to a record should be temporary until 'Save' is clicked. No automatic saves. "
        "Allows adops to configure entire record before persisting changes.",
    ),
]

# (category, section, entries, has_subtasks)
CATALOG_GROUPS = [
    ("terminology", "Global Changes", TERMINOLOGY, False),
    ("supply-partners", "Main Table Screen", SUPPLY_PARTNERS_TABLE, True),
    ("supply-partners", "Edit Drawer", SUPPLY_PARTNERS_EDIT, True),
    ("supply-packages", "Main Table Screen", SUPPLY_PACKAGES_TABLE, True),
    ("supply-packages", "Edit Drawer", SUPPLY_PACKAGES_EDIT, True),
    ("supply-partners", "General", DATA_PERSISTENCE, True),
]


def _make_ticket(
    title: str,
    description: str,
    category: str,
    section: str,
    now: datetime,
    parent_id: Optional[str] = None,
) -> Dict[str, Any]:
    return {
        "id": str(uuid.uuid4()),
        "title": title,
        "description": description,
        "status": TicketStatus.todo.value,
        "category": category,
        "section": section,
        "isSubtask": parent_id is not None,
        "parentId": parent_id,
        "createdAt": now,
        "updatedAt": now,
    }


def _build_group(category: str, section: str, entries: _GroupSpec, has_subtasks: bool, now: datetime):
    if not has_subtasks:
        return [_make_ticket(title, desc, category, section, now) for title, desc in entries]

    (parent_title, parent_desc), *children = entries
    parent = _make_ticket(parent_title, parent_desc, category, section, now)
    group = [parent]
    for title, desc in children:
        group.append(_make_ticket(title, desc, category, section, now, parent_id=parent["id"]))
    return group


def build_seed_catalog() -> List[Dict[str, Any]]:
    """Return the demo backlog with fresh ids and one shared timestamp."""

    now = datetime.now(timezone.utc)
    catalog: List[Dict[str, Any]] = []
    for category, section, entries, has_subtasks in CATALOG_GROUPS:
        catalog.extend(_build_group(category, section, entries, has_subtasks, now))
    return catalog
