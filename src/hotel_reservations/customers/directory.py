"""Customer directory keyed by email."""
from __future__ import annotations

import logging
from typing import MutableMapping, Optional

from hotel_reservations.customers.models import Customer

logger = logging.getLogger(__name__)


class CustomerDirectory:
    """Keeps registered customers in memory."""

    def __init__(self, customers: Optional[MutableMapping[str, Customer]] = None) -> None:
        self._customers: MutableMapping[str, Customer] = customers if customers is not None else {}

    def add_customer(self, email: str, first_name: str, last_name: str) -> Customer:
        """Register a customer, replacing any existing entry with the same email.

        Raises:
            InvalidEmailError: If ``email`` is malformed.
        """
        customer = Customer(email=email, first_name=first_name, last_name=last_name)
        if email in self._customers:
            logger.debug("Replacing customer record for %s", email)
        self._customers[email] = customer
        logger.debug("Registered customer %s", email)
        return customer

    def get_customer(self, email: str) -> Optional[Customer]:
        return self._customers.get(email)

    def list_customers(self) -> list[Customer]:
        return list(self._customers.values())

    def __contains__(self, email: object) -> bool:
        return email in self._customers

    def __len__(self) -> int:
        return len(self._customers)
