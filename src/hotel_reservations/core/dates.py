"""Date helpers for the ``MM/DD/YYYY`` text form used at the console boundary."""
from __future__ import annotations

import re
from datetime import date

from hotel_reservations.core.errors import InvalidDateError, InvalidDateRangeError

_CANONICAL_DATE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")


def parse_date(value: str) -> date:
    """Parse ``MM/DD/YYYY`` strictly; padding and calendar validity are enforced."""
    match = _CANONICAL_DATE.match(value.strip())
    if not match:
        raise InvalidDateError(value)
    month, day, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateError(value) from exc


def format_date(value: date) -> str:
    # strftime("%Y") does not pad years below 1000 on every platform
    return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"


def validate_date_range(check_in: date, check_out: date) -> None:
    """Raise ``InvalidDateRangeError`` unless ``check_out`` is strictly after ``check_in``."""
    if check_out <= check_in:
        raise InvalidDateRangeError(check_in, check_out)


__all__ = ["format_date", "parse_date", "validate_date_range"]
