"""Entry point for interactive runs."""
from __future__ import annotations

from hotel_reservations.console.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
