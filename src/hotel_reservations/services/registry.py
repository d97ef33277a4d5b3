"""Construction of the service graph used by the console."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from hotel_reservations.config.settings import Settings
from hotel_reservations.customers.directory import CustomerDirectory
from hotel_reservations.reservations.ledger import ReservationLedger
from hotel_reservations.rooms.catalog import RoomCatalog
from hotel_reservations.services.admin import AdminFacade
from hotel_reservations.services.booking import BookingFacade


@dataclass(frozen=True)
class HotelServices:
    customers: CustomerDirectory
    rooms: RoomCatalog
    ledger: ReservationLedger
    booking: BookingFacade
    admin: AdminFacade


def build_services(settings: Optional[Settings] = None) -> HotelServices:
    """Create one set of stores and the facades that share them."""
    settings = settings or Settings()
    customers = CustomerDirectory()
    rooms = RoomCatalog()
    ledger = ReservationLedger(rooms)
    booking = BookingFacade(
        customers,
        rooms,
        ledger,
        recommendation_step_days=settings.recommendation_step_days,
        recommendation_max_attempts=settings.recommendation_max_attempts,
    )
    admin = AdminFacade(customers, rooms, ledger)
    return HotelServices(customers=customers, rooms=rooms, ledger=ledger, booking=booking, admin=admin)
