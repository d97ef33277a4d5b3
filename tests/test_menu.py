from __future__ import annotations

from datetime import date
from typing import Iterable

import pytest

from hotel_reservations.config.settings import Settings
from hotel_reservations.console import MainMenu
from hotel_reservations.rooms import RoomType
from hotel_reservations.services import HotelServices, build_services


class _Console:
    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self.output: list[str] = []

    def read(self) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


def _run(services: HotelServices, lines: list[str]) -> _Console:
    console = _Console(lines)
    MainMenu(services.booking, services.admin, reader=console.read, writer=console.write).run()
    return console


@pytest.fixture()
def services() -> HotelServices:
    services = build_services(Settings(_env_file=None))
    services.admin.add_room("101", 100, RoomType.SINGLE)
    services.admin.add_room("102", 150, RoomType.DOUBLE)
    return services


def test_create_account_then_book(services):
    console = _run(
        services,
        ["3", "alice@x.com", "Alice", "Doe", "1", "01/10/2025", "01/12/2025", "y", "y", "alice@x.com", "101", "5"],
    )

    assert "Account created successfully!" in console.output
    assert "Reservation successful:" in console.output
    assert console.output[-1] == "Exiting..."
    reservations = services.booking.get_reservations("alice@x.com")
    assert [(r.room.room_number, r.check_in) for r in reservations] == [("101", date(2025, 1, 10))]


def test_search_reprompts_for_bad_dates(services):
    console = _run(services, ["1", "13/01/2025", "01/10/2025", "01/09/2025", "01/12/2025", "n", "5"])

    assert "Invalid date format. Please enter date in MM/DD/YYYY format." in console.output
    assert "Check-Out date must be after Check-In date." in console.output
    assert "Returning to main menu." in console.output
    assert "Room Number: 101 Price: $100.00 Room Type: SINGLE" in console.output


def test_search_recommends_shifted_dates(services):
    services.booking.create_customer("alice@x.com", "Alice", "Doe")
    for number in ("101", "102"):
        services.booking.book_room("alice@x.com", number, date(2025, 1, 10), date(2025, 1, 12))

    console = _run(services, ["1", "01/10/2025", "01/12/2025", "y", "y", "alice@x.com", "102", "5"])

    assert (
        "Recommended rooms for alternative dates: checkin 01/17/2025 and checkout 01/19/2025"
        in console.output
    )
    latest = services.booking.get_reservations("alice@x.com")[-1]
    assert (latest.room.room_number, latest.check_in, latest.check_out) == (
        "102",
        date(2025, 1, 17),
        date(2025, 1, 19),
    )


def test_search_reports_no_availability_when_search_exhausted():
    services = build_services(Settings(_env_file=None, recommendation_max_attempts=2))
    services.admin.add_room("101", 100, RoomType.SINGLE)
    services.booking.create_customer("alice@x.com", "Alice", "Doe")
    services.booking.book_room("alice@x.com", "101", date(2025, 1, 1), date(2025, 3, 1))

    console = _run(services, ["1", "01/10/2025", "01/12/2025", "5"])

    assert any(line.startswith("No recommended rooms available") for line in console.output)
    assert len(services.ledger.list_all_reservations()) == 1


def test_booking_unknown_customer_and_invalid_room(services):
    services.booking.create_customer("alice@x.com", "Alice", "Doe")
    console = _run(
        services,
        [
            "1", "01/10/2025", "01/12/2025", "y", "y", "bob@x.com",
            "1", "01/10/2025", "01/12/2025", "y", "y", "alice@x.com", "999",
            "5",
        ],
    )

    assert "Customer not found. Please create a new account, choose menu 3." in console.output
    assert "Invalid room number." in console.output
    assert services.ledger.list_all_reservations() == []


def test_search_without_rooms_prompts_admin():
    console = _run(build_services(Settings(_env_file=None)), ["1", "5"])
    assert "No rooms found, try to insert in admin menu" in console.output


def test_display_reservations_and_invalid_email(services):
    console = _run(services, ["2", "not-an-email", "2", "bob@x.com", "3", "bad", "B", "R", "5"])

    assert console.output.count("Invalid email format. Please enter a valid email address.") == 1
    assert "No reservations found." in console.output
    assert any(line.startswith("Invalid email format: 'bad'") for line in console.output)
    assert services.admin.list_customers() == []


def test_admin_adds_room_with_retries(services):
    console = _run(
        services,
        ["4", "4", "A1", "Y", "103", "abc", "-1", "120", "7", "2", "N", "4", "101", "N", "2", "5", "5"],
    )

    assert "Invalid input! Please enter a valid number." in console.output
    assert "Invalid input! Price cannot be negative." in console.output
    assert "Invalid input! Please choose 1 for single bed or 2 for double bed." in console.output
    assert "Room added successfully!" in console.output
    assert any(line.startswith("Oops, room number already added before") for line in console.output)
    assert "Room Number: 103 Price: $120.00 Room Type: DOUBLE" in console.output
    assert services.admin.get_room("103").room_type is RoomType.DOUBLE


def test_admin_rejects_non_finite_prices(services):
    console = _run(services, ["4", "4", "104", "inf", "nan", "80", "1", "N", "5", "5"])

    assert console.output.count("Invalid input! Please enter a valid number.") == 2
    assert services.admin.get_room("104").price == 80.0


def test_admin_listings_when_empty():
    console = _run(build_services(Settings(_env_file=None)), ["4", "1", "3", "5", "5"])

    assert "No customers found." in console.output
    assert "No reservations found." in console.output


def test_invalid_menu_input_and_eof(services):
    console = _run(services, ["12", "9"])

    assert "Invalid input" in console.output
    assert "Unknown action" in console.output
    assert console.output[-1] == "Exiting..."
