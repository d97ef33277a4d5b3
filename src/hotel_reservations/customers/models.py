"""Customer model and email validation."""
from __future__ import annotations

import re
from dataclasses import dataclass

from hotel_reservations.core.errors import InvalidEmailError

EMAIL_PATTERN = re.compile(r"^(.+)@(.+)\.(.+)$")


def is_valid_email(email: str) -> bool:
    """Return True when ``email`` has a local part, an ``@`` and a dotted domain."""
    return bool(EMAIL_PATTERN.fullmatch(email))


@dataclass(frozen=True, slots=True)
class Customer:
    """A registered guest, keyed by email."""

    email: str
    first_name: str
    last_name: str

    def __post_init__(self) -> None:
        if not is_valid_email(self.email):
            raise InvalidEmailError(self.email)

    def to_dict(self) -> dict[str, object]:
        return {
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
        }

    def __str__(self) -> str:
        return (
            f"Customer: {{First Name: '{self.first_name}', "
            f"Last Name: '{self.last_name}', Email: '{self.email}'}}"
        )
