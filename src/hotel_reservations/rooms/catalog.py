"""Room catalog keyed by room number."""
from __future__ import annotations

import logging
from typing import Iterable, MutableMapping, Optional

from hotel_reservations.rooms.models import Room

logger = logging.getLogger(__name__)


class RoomCatalog:
    """Every room known to the hotel, independent of booking status."""

    def __init__(self, rooms: Optional[MutableMapping[str, Room]] = None) -> None:
        self._rooms: MutableMapping[str, Room] = rooms if rooms is not None else {}

    def add_room(self, room: Room) -> None:
        """Insert ``room``; an existing room with the same number is replaced."""
        if room.room_number in self._rooms:
            logger.debug("Replacing room %s in catalog", room.room_number)
        self._rooms[room.room_number] = room
        logger.debug("Catalogued room %s (%s, %.2f)", room.room_number, room.room_type.name, room.price)

    def get_room(self, room_number: str) -> Optional[Room]:
        return self._rooms.get(room_number)

    def list_rooms(self) -> list[Room]:
        return list(self._rooms.values())

    def values(self) -> Iterable[Room]:
        return self._rooms.values()

    def __contains__(self, room_number: object) -> bool:
        return room_number in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)
