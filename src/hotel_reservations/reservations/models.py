"""Reservation record."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from hotel_reservations.core.dates import format_date
from hotel_reservations.customers.models import Customer
from hotel_reservations.rooms.models import Room


@dataclass(frozen=True, slots=True)
class Reservation:
    """A customer's booking of one room over ``[check_in, check_out)``.

    The ordering of the two dates is validated by the caller before the
    reservation is created.
    """

    customer: Customer
    room: Room
    check_in: date
    check_out: date

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    def to_dict(self) -> dict[str, object]:
        return {
            "customer": self.customer.to_dict(),
            "room": self.room.to_dict(),
            "check_in": format_date(self.check_in),
            "check_out": format_date(self.check_out),
            "nights": self.nights,
        }

    def __str__(self) -> str:
        return (
            f"Reservation{{{self.customer}, Room: {self.room}, "
            f"Check-In Date: {format_date(self.check_in)}, "
            f"Check-Out Date: {format_date(self.check_out)}}}"
        )
