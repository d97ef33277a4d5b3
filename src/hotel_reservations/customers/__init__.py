"""Customer model and directory."""

from .directory import CustomerDirectory
from .models import Customer, is_valid_email

__all__ = [
    "Customer",
    "CustomerDirectory",
    "is_valid_email",
]
