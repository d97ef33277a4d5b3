"""Console front end."""

from .menu import AdminMenu, MainMenu

__all__ = [
    "AdminMenu",
    "MainMenu",
]
