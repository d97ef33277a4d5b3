"""Recoverable errors surfaced to callers of the booking core."""
from __future__ import annotations

from datetime import date
from typing import Optional


class HotelError(Exception):
    """Base class for every error raised by the reservation core."""


class InvalidEmailError(HotelError, ValueError):
    """Raised when an email address does not look like ``local@domain.tld``."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Invalid email format: '{email}'. Expected name@domain.com")
        self.email = email


class InvalidRoomTypeError(HotelError, ValueError):
    """Raised when a room type label is neither SINGLE nor DOUBLE."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Invalid room type label: '{label}'. Use 1 for single bed or 2 for double bed")
        self.label = label


class InvalidRoomError(HotelError, ValueError):
    """Raised when a room number or price cannot be accepted."""

    def __init__(self, message: str, *, room_number: Optional[str] = None) -> None:
        super().__init__(message)
        self.room_number = room_number


class DuplicateRoomNumberError(HotelError):
    def __init__(self, room_number: str) -> None:
        super().__init__(f"Room number {room_number} already exists")
        self.room_number = room_number


class CustomerNotFoundError(HotelError, LookupError):
    def __init__(self, email: str) -> None:
        super().__init__(f"No customer registered with email '{email}'")
        self.email = email


class RoomNotFoundError(HotelError, LookupError):
    def __init__(self, room_number: str) -> None:
        super().__init__(f"Room {room_number} not found")
        self.room_number = room_number


class InvalidDateError(HotelError, ValueError):
    """Raised when date text is not a real calendar date in MM/DD/YYYY form."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid date '{text}'. Please enter date in MM/DD/YYYY format")
        self.text = text


class InvalidDateRangeError(HotelError, ValueError):
    def __init__(self, check_in: date, check_out: date) -> None:
        super().__init__(
            f"Check-out date {check_out.isoformat()} must be after check-in date {check_in.isoformat()}"
        )
        self.check_in = check_in
        self.check_out = check_out


class RoomUnavailableError(HotelError):
    """Raised when a room already has a reservation overlapping the requested stay."""

    def __init__(self, room_number: str, check_in: date, check_out: date) -> None:
        super().__init__(
            f"Room {room_number} is already booked between {check_in.isoformat()} and {check_out.isoformat()}"
        )
        self.room_number = room_number
        self.check_in = check_in
        self.check_out = check_out


class NoAvailabilityFoundError(HotelError):
    """Raised when the bounded alternative-date search finds no free room."""

    def __init__(self, check_in: date, check_out: date, attempts: int, step_days: int) -> None:
        super().__init__(
            f"No rooms available within {attempts * step_days} days after "
            f"{check_in.isoformat()} → {check_out.isoformat()}"
        )
        self.check_in = check_in
        self.check_out = check_out
        self.attempts = attempts
        self.step_days = step_days


class InventoryError(HotelError):
    """Raised when an inventory file cannot be read or validated."""


__all__ = [
    "CustomerNotFoundError",
    "DuplicateRoomNumberError",
    "HotelError",
    "InvalidDateError",
    "InvalidDateRangeError",
    "InvalidEmailError",
    "InvalidRoomError",
    "InvalidRoomTypeError",
    "InventoryError",
    "NoAvailabilityFoundError",
    "RoomNotFoundError",
    "RoomUnavailableError",
]
