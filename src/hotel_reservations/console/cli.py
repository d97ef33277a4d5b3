"""Command-line entry point for the reservation console."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from hotel_reservations.config.inventory import Inventory
from hotel_reservations.config.settings import Settings
from hotel_reservations.console.menu import MainMenu
from hotel_reservations.core.errors import HotelError
from hotel_reservations.core.logging import configure_logging
from hotel_reservations.services.registry import build_services


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive hotel reservation console.")
    parser.add_argument(
        "--inventory",
        type=Path,
        default=None,
        help="TOML file with rooms and customers to load before the menu starts.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured log level (e.g. DEBUG, INFO).",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    settings = Settings()
    if args.inventory is not None:
        settings.inventory_path = args.inventory.expanduser()
    if args.log_level:
        settings.log_level = args.log_level
    settings.ensure_directories()
    configure_logging(settings.log_level, settings.log_dir)

    services = build_services(settings)
    if settings.inventory_path:
        try:
            Inventory.load(settings.inventory_path).apply_to(services)
        except HotelError as exc:
            logging.error("Could not load inventory %s: %s", settings.inventory_path, exc)
            return 1

    MainMenu(services.booking, services.admin).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
