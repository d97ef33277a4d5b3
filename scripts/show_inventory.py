"""Utility CLI for inspecting an inventory file before starting the console."""
from __future__ import annotations

import argparse
import json
from collections import Counter
from pathlib import Path
from typing import Sequence

from hotel_reservations.config.inventory import Inventory, RoomEntry
from hotel_reservations.config.settings import Settings
from hotel_reservations.core.errors import InventoryError


def _format_room(entry: RoomEntry) -> str:
    price = "free" if entry.price == 0 else f"${entry.price:.2f}"
    return f"{entry.number:>8} | {entry.type.name:8} | {price:>10}"


def _print_rooms(entries: Sequence[RoomEntry]) -> None:
    for entry in entries:
        print(_format_room(entry))


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect a hotel inventory TOML file.")
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help="Inventory file; defaults to HOTEL_INVENTORY_PATH when omitted.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the validated inventory as JSON instead of a table.",
    )
    parser.add_argument(
        "--type-summary",
        action="store_true",
        help="Print room counts per room type instead of individual rooms.",
    )
    args = parser.parse_args()

    path = args.path or Settings().inventory_path
    if path is None:
        parser.error("no inventory path given and HOTEL_INVENTORY_PATH is not set")

    try:
        inventory = Inventory.load(path)
    except InventoryError as exc:
        parser.exit(status=1, message=f"{exc}\n")

    if args.json:
        print(json.dumps(inventory.model_dump(mode="json"), indent=2))
        return

    print(f"Inventory source: {path}")
    if inventory.title:
        print(f"Title: {inventory.title}")

    rooms = sorted(inventory.rooms, key=lambda entry: (len(entry.number), entry.number))
    duplicates = [number for number, count in Counter(entry.number for entry in rooms).items() if count > 1]
    if duplicates:
        print(f"Warning: duplicate room numbers (last entry wins): {', '.join(duplicates)}")

    if args.type_summary:
        counts = Counter(entry.type.name for entry in rooms)
        for name in sorted(counts):
            print(f"{name:8} {counts[name]:3}")
    else:
        _print_rooms(rooms)

    print(f"Customers: {len(inventory.customers)}")
    for customer in inventory.customers:
        print(f"  {customer.email} ({customer.first_name} {customer.last_name})".rstrip())


if __name__ == "__main__":
    main()
