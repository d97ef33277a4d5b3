"""Interactive main and admin menus.

Both menus read one line at a time through ``reader`` and emit text through
``writer`` so they can be driven by scripted input in tests. End of input
ends the session.
"""
from __future__ import annotations

import logging
import math
from datetime import date
from typing import Callable, Iterable, Optional

from hotel_reservations.core.dates import format_date, parse_date
from hotel_reservations.core.errors import (
    CustomerNotFoundError,
    DuplicateRoomNumberError,
    InvalidDateError,
    InvalidEmailError,
    InvalidRoomError,
    InvalidRoomTypeError,
    NoAvailabilityFoundError,
    RoomNotFoundError,
    RoomUnavailableError,
)
from hotel_reservations.customers.models import is_valid_email
from hotel_reservations.rooms.models import Room, RoomType
from hotel_reservations.services.admin import AdminFacade
from hotel_reservations.services.booking import BookingFacade

logger = logging.getLogger(__name__)

Reader = Callable[[], str]
Writer = Callable[[str], None]

SEPARATOR = "-" * 44

MAIN_MENU_TEXT = "\n".join(
    [
        "Welcome to the Hotel Reservation Application",
        SEPARATOR,
        "1. Search and reserve a room",
        "2. Display my reservations",
        "3. Create an Account",
        "4. Admin",
        "5. Exit",
        SEPARATOR,
        "Please select a number for the menu option:",
    ]
)

ADMIN_MENU_TEXT = "\n".join(
    [
        "",
        "Admin Menu",
        SEPARATOR,
        "1. Show all Customers",
        "2. Show all Rooms",
        "3. Show all Reservations",
        "4. Add a Room",
        "5. Back to Main Menu",
        SEPARATOR,
        "Please select a number for the menu option:",
    ]
)


def _room_sort_key(room: Room) -> tuple[int, str]:
    return len(room.room_number), room.room_number


def _print_items(writer: Writer, items: Iterable[object], empty_message: str, header: str) -> None:
    materialised = list(items)
    writer(header)
    if not materialised:
        writer(empty_message)
        return
    for item in materialised:
        writer(str(item))


class _Prompter:
    def __init__(self, reader: Reader, writer: Writer) -> None:
        self.reader = reader
        self.writer = writer

    def ask(self, prompt: str) -> str:
        self.writer(prompt)
        return self.reader().strip()

    def ask_yes_no(self, prompt: Optional[str] = None) -> bool:
        if prompt:
            self.writer(prompt)
        while True:
            answer = self.reader().strip().upper()
            if answer == "Y":
                return True
            if answer == "N":
                return False
            self.writer("Please enter Y (Yes) or N (No)")

    def ask_date(self, prompt: str) -> date:
        self.writer(prompt)
        while True:
            try:
                return parse_date(self.reader())
            except InvalidDateError:
                self.writer("Invalid date format. Please enter date in MM/DD/YYYY format.")


class AdminMenu:
    """Room management and read-only listings for staff."""

    def __init__(self, admin: AdminFacade, *, reader: Reader = input, writer: Writer = print) -> None:
        self.admin = admin
        self.writer = writer
        self._prompter = _Prompter(reader, writer)

    def run(self) -> None:
        """Loop until the user picks "Back to Main Menu"."""
        while True:
            self.writer(ADMIN_MENU_TEXT)
            choice = self._prompter.reader().strip()
            if len(choice) != 1:
                self.writer("Error: Invalid action")
                continue
            if choice == "1":
                _print_items(self.writer, self.admin.list_customers(), "No customers found.", "All Customers:")
            elif choice == "2":
                rooms = sorted(self.admin.list_rooms(), key=_room_sort_key)
                _print_items(self.writer, rooms, "No rooms found.", "All Rooms:")
            elif choice == "3":
                _print_items(
                    self.writer,
                    self.admin.list_all_reservations(),
                    "No reservations found.",
                    "All Reservations:",
                )
            elif choice == "4":
                self.add_rooms()
            elif choice == "5":
                return
            else:
                self.writer("Unknown action")

    def add_rooms(self) -> None:
        """Prompt for rooms until the administrator declines to add another."""
        while True:
            room_number = self._prompter.ask("Enter room number:")
            if not room_number.isdigit():
                self.writer(
                    "Oops, please input a valid room number. "
                    "Would you like to continue adding a new room? (Y/N)"
                )
            elif self.admin.get_room(room_number) is not None:
                self.writer(
                    "Oops, room number already added before. Please add another unique number. "
                    "Would you like to add another room? (Y/N)"
                )
            else:
                price = self._ask_price()
                room_type = self._ask_room_type()
                try:
                    self.admin.add_room(room_number, price, room_type)
                except (DuplicateRoomNumberError, InvalidRoomError) as exc:
                    self.writer(f"{exc}. Would you like to add another room? (Y/N)")
                else:
                    self.writer("Room added successfully!")
                    self.writer("Would you like to add another room? (Y/N)")
            if not self._prompter.ask_yes_no():
                return

    def _ask_price(self) -> float:
        self.writer("Enter room price:")
        while True:
            text = self._prompter.reader().strip()
            try:
                price = float(text)
            except ValueError:
                self.writer("Invalid input! Please enter a valid number.")
                continue
            if not math.isfinite(price):
                self.writer("Invalid input! Please enter a valid number.")
                continue
            if price < 0:
                self.writer("Invalid input! Price cannot be negative.")
                continue
            return price

    def _ask_room_type(self) -> RoomType:
        self.writer("Enter room type (1 for single bed, 2 for double bed):")
        while True:
            try:
                return RoomType.from_label(self._prompter.reader())
            except InvalidRoomTypeError:
                self.writer("Invalid input! Please choose 1 for single bed or 2 for double bed.")


class MainMenu:
    """Guest menu: search, book, list reservations and create accounts."""

    def __init__(
        self,
        booking: BookingFacade,
        admin: AdminFacade,
        *,
        reader: Reader = input,
        writer: Writer = print,
    ) -> None:
        self.booking = booking
        self.admin = admin
        self.writer = writer
        self._prompter = _Prompter(reader, writer)
        self._admin_menu = AdminMenu(admin, reader=reader, writer=writer)

    def run(self) -> None:
        try:
            while self._handle_choice():
                pass
        except EOFError:
            logger.debug("Input closed; leaving main menu")
            self.writer("Exiting...")

    def _handle_choice(self) -> bool:
        self.writer(MAIN_MENU_TEXT)
        choice = self._prompter.reader().strip()
        if len(choice) != 1:
            self.writer("Invalid input")
            return True
        if choice == "1":
            self.search_and_reserve()
        elif choice == "2":
            self.display_my_reservations()
        elif choice == "3":
            self.create_account()
        elif choice == "4":
            self._admin_menu.run()
        elif choice == "5":
            self.writer("Exiting...")
            return False
        else:
            self.writer("Unknown action")
        return True

    # Search and reserve ---------------------------------------------------------

    def search_and_reserve(self) -> None:
        if not self.admin.list_rooms():
            self.writer("No rooms found, try to insert in admin menu")
            return

        check_in = self._prompter.ask_date("Enter Check-In Date (MM/DD/YYYY):")
        while True:
            check_out = self._prompter.ask_date("Enter Check-Out Date (MM/DD/YYYY):")
            if check_out > check_in:
                break
            self.writer("Check-Out date must be after Check-In date.")

        rooms = self.booking.find_room(check_in, check_out)
        if not rooms:
            self.writer("No rooms available for selected dates. Searching for recommended rooms...")
            try:
                recommendation = self.booking.recommend_alternative_dates(check_in, check_out)
            except NoAvailabilityFoundError as exc:
                self.writer(f"No recommended rooms available for alternative dates. {exc}")
                return
            check_in, check_out = recommendation.check_in, recommendation.check_out
            rooms = set(recommendation.rooms)
            self.writer(
                "Recommended rooms for alternative dates: "
                f"checkin {format_date(check_in)} and checkout {format_date(check_out)}"
            )

        _print_items(self.writer, sorted(rooms, key=_room_sort_key), "No rooms found.", "Available rooms:")
        self._offer_booking(check_in, check_out)

    def _offer_booking(self, check_in: date, check_out: date) -> None:
        if not self._prompter.ask_yes_no("Would you like to book a room? (y/n)"):
            self.writer("Returning to main menu.")
            return
        if not self._prompter.ask_yes_no("Do you have an account with us? (y/n)"):
            self.writer("Please create an account first, in menu 3. Create an Account.")
            return

        email = self._prompter.ask("Enter your email: eg. name@domain.com")
        if not is_valid_email(email):
            self.writer("Invalid email format. Please enter a valid email address.")
            return
        if self.booking.get_customer(email) is None:
            self.writer("Customer not found. Please create a new account, choose menu 3.")
            return

        room_number = self._prompter.ask("Enter room number:")
        try:
            reservation = self.booking.book_room(email, room_number, check_in, check_out)
        except (RoomNotFoundError, RoomUnavailableError):
            self.writer("Invalid room number.")
            return
        except CustomerNotFoundError:
            self.writer("Customer not found. Please create a new account, choose menu 3.")
            return
        self.writer("Reservation successful:")
        self.writer(str(reservation))

    # Accounts ------------------------------------------------------------------

    def display_my_reservations(self) -> None:
        email = self._prompter.ask("Enter your email: eg. name@domain.com")
        if not is_valid_email(email):
            self.writer("Invalid email format. Please enter a valid email address.")
            return
        reservations = self.booking.get_reservations(email)
        if not reservations:
            self.writer("No reservations found.")
            return
        self.writer("Your reservations:")
        for reservation in reservations:
            self.writer(str(reservation))

    def create_account(self) -> None:
        email = self._prompter.ask("Enter Email (name@domain.com):")
        first_name = self._prompter.ask("Enter First Name:")
        last_name = self._prompter.ask("Enter Last Name:")
        try:
            self.booking.create_customer(email, first_name, last_name)
        except InvalidEmailError as exc:
            self.writer(str(exc))
            return
        self.writer("Account created successfully!")
