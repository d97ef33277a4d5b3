"""Reservation records and the availability ledger."""

from .ledger import ReservationLedger, windows_overlap
from .models import Reservation

__all__ = [
    "Reservation",
    "ReservationLedger",
    "windows_overlap",
]
