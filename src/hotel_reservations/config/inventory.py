"""Inventory file loader used to seed rooms and customers at start-up."""
from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from pydantic import BaseModel, Field, ValidationError, field_validator

from hotel_reservations.core.errors import InvalidRoomTypeError, InventoryError
from hotel_reservations.rooms.models import Room, RoomType

if TYPE_CHECKING:  # pragma: no cover
    from hotel_reservations.services.registry import HotelServices

logger = logging.getLogger(__name__)


class RoomEntry(BaseModel):
    """A single ``[[rooms]]`` table."""

    number: str = Field(description="Room number; digits only")
    price: float = Field(default=0.0, ge=0, allow_inf_nan=False, description="Nightly price; 0 marks a free room")
    type: RoomType = Field(default=RoomType.SINGLE, description="SINGLE/DOUBLE or the 1/2 menu label")

    @field_validator("number", mode="before")
    @classmethod
    def _coerce_number(cls, value: object) -> str:
        text = str(value).strip()
        if not text.isdigit():
            raise ValueError(f"room number must contain digits only (got '{value}')")
        return text

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: object) -> RoomType:
        if isinstance(value, RoomType):
            return value
        try:
            return RoomType.from_label(str(value))
        except InvalidRoomTypeError as exc:
            raise ValueError(str(exc)) from exc

    def to_room(self) -> Room:
        return Room(room_number=self.number, price=self.price, room_type=self.type)


class CustomerEntry(BaseModel):
    """A single ``[[customers]]`` table."""

    email: str
    first_name: str = ""
    last_name: str = ""


@dataclass(frozen=True)
class InventoryCounts:
    rooms: int
    customers: int


class Inventory(BaseModel):
    """Top-level inventory decoded from TOML."""

    title: Optional[str] = None
    rooms: list[RoomEntry] = Field(default_factory=list)
    customers: list[CustomerEntry] = Field(default_factory=list)

    @classmethod
    def load(cls, path: Path) -> "Inventory":
        """Load an inventory from a TOML file."""
        if not path.exists():
            raise InventoryError(f"Inventory file not found at {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InventoryError(f"Inventory file {path} could not be read: {exc}") from exc
        try:
            data = tomllib.loads(text)
            return cls.model_validate(data)
        except tomllib.TOMLDecodeError as exc:
            raise InventoryError(f"Inventory file {path} is not valid TOML: {exc}") from exc
        except ValidationError as exc:
            raise InventoryError(f"Inventory file {path} failed validation: {exc}") from exc

    def apply_to(self, services: "HotelServices") -> InventoryCounts:
        """Add the inventory's rooms and customers to running services.

        Raises:
            InvalidEmailError: If a customer entry carries a malformed email.
        """
        services.admin.add_rooms(entry.to_room() for entry in self.rooms)
        for entry in self.customers:
            services.customers.add_customer(entry.email, entry.first_name, entry.last_name)
        counts = InventoryCounts(rooms=len(self.rooms), customers=len(self.customers))
        logger.info(
            "Loaded inventory %s: %d rooms, %d customers",
            self.title or "(untitled)",
            counts.rooms,
            counts.customers,
        )
        return counts


__all__ = ["CustomerEntry", "Inventory", "InventoryCounts", "RoomEntry"]
