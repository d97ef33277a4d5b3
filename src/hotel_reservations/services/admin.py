"""Administrator operations: room management and read-only listings."""
from __future__ import annotations

import logging
import math
from typing import Iterable, Optional, Union

from hotel_reservations.core.errors import DuplicateRoomNumberError, InvalidRoomError
from hotel_reservations.customers.directory import CustomerDirectory
from hotel_reservations.customers.models import Customer
from hotel_reservations.reservations.ledger import ReservationLedger
from hotel_reservations.reservations.models import Reservation
from hotel_reservations.rooms.catalog import RoomCatalog
from hotel_reservations.rooms.models import Room, RoomType

logger = logging.getLogger(__name__)


def _parse_price(value: Union[float, int, str], room_number: str) -> float:
    try:
        price = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidRoomError(f"Room price must be a number (got '{value}')", room_number=room_number) from exc
    if not math.isfinite(price) or price < 0:
        raise InvalidRoomError(
            f"Room price must be a finite non-negative number (got '{value}')", room_number=room_number
        )
    return price


class AdminFacade:
    def __init__(self, customers: CustomerDirectory, rooms: RoomCatalog, ledger: ReservationLedger) -> None:
        self.customers = customers
        self.rooms = rooms
        self.ledger = ledger

    def add_room(
        self,
        room_number: str,
        price: Union[float, int, str],
        room_type: Union[RoomType, str],
    ) -> Room:
        """Add a new room, refusing numbers that are already catalogued.

        Raises:
            InvalidRoomError: If the number is not numeric or the price is negative.
            InvalidRoomTypeError: If ``room_type`` is not a known label.
            DuplicateRoomNumberError: If the room number already exists.
        """
        number = str(room_number).strip()
        if not number.isdigit():
            raise InvalidRoomError(f"Room number must be numeric (got '{room_number}')", room_number=number)
        if number in self.rooms:
            raise DuplicateRoomNumberError(number)
        resolved_type = room_type if isinstance(room_type, RoomType) else RoomType.from_label(room_type)
        room = Room(room_number=number, price=_parse_price(price, number), room_type=resolved_type)
        self.rooms.add_room(room)
        logger.info("Added room %s (%s, %.2f)", number, resolved_type.name, room.price)
        return room

    def add_rooms(self, rooms: Iterable[Room]) -> None:
        """Bulk insert; later entries replace earlier rooms with the same number."""
        for room in rooms:
            self.rooms.add_room(room)

    def get_room(self, room_number: str) -> Optional[Room]:
        return self.rooms.get_room(room_number)

    def list_rooms(self) -> list[Room]:
        return self.rooms.list_rooms()

    def list_customers(self) -> list[Customer]:
        return self.customers.list_customers()

    def list_all_reservations(self) -> list[Reservation]:
        return self.ledger.list_all_reservations()
