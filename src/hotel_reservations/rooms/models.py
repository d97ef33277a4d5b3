"""Room model and room type enumeration."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from hotel_reservations.core.errors import InvalidRoomError, InvalidRoomTypeError


class RoomType(Enum):
    SINGLE = "1"
    DOUBLE = "2"

    @classmethod
    def from_label(cls, label: str) -> "RoomType":
        """Resolve ``"1"``/``"2"`` or a member name such as ``"double"``."""
        text = str(label).strip()
        for member in cls:
            if text == member.value or text.upper() == member.name:
                return member
        raise InvalidRoomTypeError(label)


@dataclass(frozen=True, slots=True, eq=False)
class Room:
    """A bookable room. Identity is the room number alone."""

    room_number: str
    price: float
    room_type: RoomType

    def __post_init__(self) -> None:
        if not math.isfinite(self.price) or self.price < 0:
            raise InvalidRoomError(
                f"Room price must be a finite non-negative number (got {self.price})",
                room_number=self.room_number,
            )

    @classmethod
    def free(cls, room_number: str, room_type: RoomType) -> "Room":
        return cls(room_number=room_number, price=0.0, room_type=room_type)

    @property
    def is_free(self) -> bool:
        return self.price == 0

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Room):
            return NotImplemented
        return self.room_number == other.room_number

    def __hash__(self) -> int:
        return hash(self.room_number)

    def to_dict(self) -> dict[str, object]:
        return {
            "room_number": self.room_number,
            "price": self.price,
            "room_type": self.room_type.name,
            "is_free": self.is_free,
        }

    def __str__(self) -> str:
        return f"Room Number: {self.room_number} Price: ${self.price:.2f} Room Type: {self.room_type.name}"
