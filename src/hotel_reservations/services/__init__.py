"""Booking and administration facades over the in-memory stores."""

from .admin import AdminFacade
from .booking import BookingFacade, Recommendation
from .registry import HotelServices, build_services

__all__ = [
    "AdminFacade",
    "BookingFacade",
    "HotelServices",
    "Recommendation",
    "build_services",
]
