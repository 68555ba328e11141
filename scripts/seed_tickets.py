"""Replace the contents of the ``tickets`` table with the demo backlog."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from db.ticket_store import open_store, to_store_row
from logic.errors import StoreError
from logic.seed_catalog import build_seed_catalog

logger = logging.getLogger(__name__)

ENV_FILE = Path(__file__).resolve().parents[1] / ".env"


def read_store_config():
    """Return ``(url, key)`` or ``None`` when either is missing."""
    url = os.getenv("TICKET_STORE_URL")
    key = os.getenv("TICKET_STORE_KEY")
    if not url or not key:
        return None
    return url, key


def seed_data(store, *, create_tables: bool = False) -> None:
    tickets = build_seed_catalog()

    if create_tables:
        store.create_tables()

    print(f"Attempting to seed {len(tickets)} tickets...")
    try:
        inserted = store.replace_all_tickets(tickets)
    except StoreError as exc:
        print("Error seeding ticket data:", file=sys.stderr)
        print(f"Message: {exc}", file=sys.stderr)
        if exc.details:
            print(f"Details: {exc.details}", file=sys.stderr)
        if exc.hint:
            print(f"Hint: {exc.hint}", file=sys.stderr)
        return

    print("Data seeded successfully!")
    print(f"Inserted {inserted} tickets.")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Delete every ticket and insert the demo backlog."
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create the tickets table first if it does not exist.",
    )
    parser.add_argument(
        "--echo",
        action="store_true",
        help="Log SQL emitted while seeding.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the rows that would be inserted and exit.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if args.dry_run:
        rows = [to_store_row(t) for t in build_seed_catalog()]
        print(json.dumps(rows, indent=2))
        return 0

    load_dotenv(ENV_FILE)
    config = read_store_config()
    if config is None:
        print("Error: ticket store URL and access key are required.", file=sys.stderr)
        print(
            "Make sure TICKET_STORE_URL and TICKET_STORE_KEY are set in your environment or .env file.",
            file=sys.stderr,
        )
        return 1

    url, key = config
    try:
        seed_data(open_store(url, key, echo=args.echo), create_tables=args.create_tables)
    except Exception as exc:
        logger.exception("Unhandled error during seeding process: %s", exc)
    print("Seeding process finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
