"""Reservation ledger: the append-only source of truth for room availability."""
from __future__ import annotations

import logging
import threading
from datetime import date
from typing import Iterable

from hotel_reservations.core.errors import RoomUnavailableError
from hotel_reservations.customers.models import Customer
from hotel_reservations.reservations.models import Reservation
from hotel_reservations.rooms.catalog import RoomCatalog
from hotel_reservations.rooms.models import Room

logger = logging.getLogger(__name__)


def windows_overlap(start: date, end: date, other_start: date, other_end: date) -> bool:
    """Half-open overlap of ``[start, end)`` and ``[other_start, other_end)``.

    Touching windows (one ends the day the other starts) do not overlap.
    """
    return start < other_end and end > other_start


class ReservationLedger:
    """Stores reservations per customer email and answers availability queries."""

    def __init__(self, catalog: RoomCatalog) -> None:
        self._catalog = catalog
        self._reservations: dict[str, list[Reservation]] = {}
        self._lock = threading.RLock()

    def find_available_rooms(self, check_in: date, check_out: date) -> set[Room]:
        """Return catalog rooms with no reservation overlapping ``[check_in, check_out)``."""
        with self._lock:
            booked = {
                reservation.room.room_number
                for reservation in self._overlapping(check_in, check_out)
            }
            available = {room for room in self._catalog.values() if room.room_number not in booked}
        logger.debug(
            "%d of %d rooms free for %s → %s",
            len(available),
            len(self._catalog),
            check_in,
            check_out,
        )
        return available

    def reserve(self, customer: Customer, room: Room, check_in: date, check_out: date) -> Reservation:
        """Append a reservation without checking availability."""
        reservation = Reservation(customer=customer, room=room, check_in=check_in, check_out=check_out)
        with self._lock:
            self._reservations.setdefault(customer.email, []).append(reservation)
        logger.debug("Recorded reservation of room %s for %s", room.room_number, customer.email)
        return reservation

    def reserve_if_available(
        self,
        customer: Customer,
        room: Room,
        check_in: date,
        check_out: date,
    ) -> Reservation:
        """Check and append under one lock so two bookings cannot claim the same nights.

        Raises:
            RoomUnavailableError: If ``room`` overlaps an existing reservation.
        """
        with self._lock:
            if self.is_booked(room, check_in, check_out):
                raise RoomUnavailableError(room.room_number, check_in, check_out)
            return self.reserve(customer, room, check_in, check_out)

    def is_booked(self, room: Room, check_in: date, check_out: date) -> bool:
        with self._lock:
            return any(
                reservation.room.room_number == room.room_number
                for reservation in self._overlapping(check_in, check_out)
            )

    def get_reservations_for(self, customer: Customer) -> list[Reservation]:
        with self._lock:
            return list(self._reservations.get(customer.email, ()))

    def list_all_reservations(self) -> list[Reservation]:
        with self._lock:
            return [
                reservation
                for reservations in self._reservations.values()
                for reservation in reservations
            ]

    def _overlapping(self, check_in: date, check_out: date) -> Iterable[Reservation]:
        for reservations in self._reservations.values():
            for reservation in reservations:
                if windows_overlap(check_in, check_out, reservation.check_in, reservation.check_out):
                    yield reservation
