"""Room domain models and catalog."""

from .catalog import RoomCatalog
from .models import Room, RoomType

__all__ = [
    "Room",
    "RoomCatalog",
    "RoomType",
]
