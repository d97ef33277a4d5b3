"""Guest-facing booking operations."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Union

from hotel_reservations.core.dates import validate_date_range
from hotel_reservations.core.errors import (
    CustomerNotFoundError,
    NoAvailabilityFoundError,
    RoomNotFoundError,
    RoomUnavailableError,
)
from hotel_reservations.customers.directory import CustomerDirectory
from hotel_reservations.customers.models import Customer
from hotel_reservations.reservations.ledger import ReservationLedger
from hotel_reservations.reservations.models import Reservation
from hotel_reservations.rooms.catalog import RoomCatalog
from hotel_reservations.rooms.models import Room

logger = logging.getLogger(__name__)

DEFAULT_STEP_DAYS = 7
DEFAULT_MAX_ATTEMPTS = 12


@dataclass(frozen=True)
class Recommendation:
    """First shifted stay window that has at least one free room."""

    check_in: date
    check_out: date
    rooms: frozenset[Room]
    shift_days: int


class BookingFacade:
    """Answers find/book/list requests by coordinating the directory, catalog and ledger."""

    def __init__(
        self,
        customers: CustomerDirectory,
        rooms: RoomCatalog,
        ledger: ReservationLedger,
        *,
        recommendation_step_days: int = DEFAULT_STEP_DAYS,
        recommendation_max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if recommendation_step_days <= 0:
            raise ValueError("recommendation_step_days must be positive")
        if recommendation_max_attempts <= 0:
            raise ValueError("recommendation_max_attempts must be positive")
        self.customers = customers
        self.rooms = rooms
        self.ledger = ledger
        self.recommendation_step_days = recommendation_step_days
        self.recommendation_max_attempts = recommendation_max_attempts

    # Customers -----------------------------------------------------------------

    def create_customer(self, email: str, first_name: str, last_name: str) -> Customer:
        customer = self.customers.add_customer(email, first_name, last_name)
        logger.info("Created account for %s", email)
        return customer

    def get_customer(self, email: str) -> Optional[Customer]:
        return self.customers.get_customer(email)

    def get_room(self, room_number: str) -> Optional[Room]:
        return self.rooms.get_room(room_number)

    # Availability --------------------------------------------------------------

    def find_room(self, check_in: date, check_out: date) -> set[Room]:
        validate_date_range(check_in, check_out)
        return self.ledger.find_available_rooms(check_in, check_out)

    def recommend_alternative_dates(self, check_in: date, check_out: date) -> Recommendation:
        """Shift the stay forward one step at a time until some room is free.

        The search stops after ``recommendation_max_attempts`` shifts.

        Raises:
            NoAvailabilityFoundError: If every shifted window is fully booked.
        """
        validate_date_range(check_in, check_out)
        for attempt in range(1, self.recommendation_max_attempts + 1):
            shift = timedelta(days=self.recommendation_step_days * attempt)
            try:
                candidate_in = check_in + shift
                candidate_out = check_out + shift
            except OverflowError:
                logger.info("Shifted window runs past %s; stopping search", date.max)
                break
            rooms = self.ledger.find_available_rooms(candidate_in, candidate_out)
            if rooms:
                logger.info(
                    "Recommending %s → %s (%d rooms free, shifted %d days)",
                    candidate_in,
                    candidate_out,
                    len(rooms),
                    shift.days,
                )
                return Recommendation(
                    check_in=candidate_in,
                    check_out=candidate_out,
                    rooms=frozenset(rooms),
                    shift_days=shift.days,
                )
            logger.info("No rooms free for %s → %s; shifting again", candidate_in, candidate_out)
        logger.warning(
            "No availability within %d attempts after %s → %s",
            self.recommendation_max_attempts,
            check_in,
            check_out,
        )
        raise NoAvailabilityFoundError(
            check_in,
            check_out,
            attempts=self.recommendation_max_attempts,
            step_days=self.recommendation_step_days,
        )

    # Booking -------------------------------------------------------------------

    def book_room(
        self,
        customer_email: str,
        room: Union[Room, str],
        check_in: date,
        check_out: date,
    ) -> Reservation:
        """Book ``room`` (a Room or a room number) for a registered customer.

        Raises:
            InvalidDateRangeError: If ``check_out`` is not after ``check_in``.
            CustomerNotFoundError: If no customer has ``customer_email``.
            RoomNotFoundError: If the room is not in the catalog.
            RoomUnavailableError: If the room is already booked for part of the stay.
        """
        validate_date_range(check_in, check_out)
        customer = self.customers.get_customer(customer_email)
        if customer is None:
            logger.warning("Booking rejected: unknown customer %s", customer_email)
            raise CustomerNotFoundError(customer_email)

        room_number = room.room_number if isinstance(room, Room) else str(room).strip()
        catalog_room = self.rooms.get_room(room_number)
        if catalog_room is None:
            logger.warning("Booking rejected: room %s not in catalog", room_number)
            raise RoomNotFoundError(room_number)

        try:
            reservation = self.ledger.reserve_if_available(customer, catalog_room, check_in, check_out)
        except RoomUnavailableError:
            logger.warning(
                "Booking rejected: room %s already taken for %s → %s", room_number, check_in, check_out
            )
            raise
        logger.info(
            "Booked room %s for %s (%s → %s)",
            room_number,
            customer_email,
            check_in,
            check_out,
        )
        return reservation

    def get_reservations(self, customer_email: str) -> list[Reservation]:
        customer = self.customers.get_customer(customer_email)
        if customer is None:
            return []
        return self.ledger.get_reservations_for(customer)
