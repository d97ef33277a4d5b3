from __future__ import annotations

from datetime import date

import pytest

from hotel_reservations.config.settings import Settings
from hotel_reservations.core.errors import DuplicateRoomNumberError, InvalidRoomError, InvalidRoomTypeError
from hotel_reservations.rooms import Room, RoomType
from hotel_reservations.services import build_services


@pytest.fixture()
def services():
    return build_services(Settings(_env_file=None))


def test_add_room_resolves_labels_and_price_text(services):
    room = services.admin.add_room("101", "99.5", "2")

    assert room.room_type is RoomType.DOUBLE
    assert room.price == 99.5
    assert services.admin.list_rooms() == [room]


def test_add_room_rejects_duplicate_number(services):
    services.admin.add_room("101", 100, RoomType.SINGLE)
    with pytest.raises(DuplicateRoomNumberError) as excinfo:
        services.admin.add_room("101", 200, RoomType.DOUBLE)
    assert excinfo.value.room_number == "101"
    assert services.admin.get_room("101").price == 100


@pytest.mark.parametrize(
    ("number", "price"),
    [("A1", 100), ("", 100), ("101", -5), ("101", "cheap"), ("101", "nan"), ("101", "inf"), ("101", "-inf")],
)
def test_add_room_rejects_invalid_values(services, number, price):
    with pytest.raises(InvalidRoomError):
        services.admin.add_room(number, price, RoomType.SINGLE)
    assert services.admin.list_rooms() == []


def test_add_room_rejects_unknown_type(services):
    with pytest.raises(InvalidRoomTypeError):
        services.admin.add_room("101", 100, "3")


def test_add_rooms_uses_overwrite_semantics(services):
    services.admin.add_rooms(
        [
            Room(room_number="101", price=100.0, room_type=RoomType.SINGLE),
            Room(room_number="101", price=80.0, room_type=RoomType.SINGLE),
        ]
    )
    assert [room.price for room in services.admin.list_rooms()] == [80.0]


def test_listings_reflect_bookings(services):
    services.admin.add_room("101", 100, RoomType.SINGLE)
    services.booking.create_customer("alice@x.com", "Alice", "Doe")
    reservation = services.booking.book_room("alice@x.com", "101", date(2025, 1, 1), date(2025, 1, 3))

    assert [customer.email for customer in services.admin.list_customers()] == ["alice@x.com"]
    assert services.admin.list_all_reservations() == [reservation]
