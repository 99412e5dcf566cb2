"""Database models for core application."""

from core.models.menu_item import MenuItem
from core.models.restaurant import Restaurant
from core.models.review import Review
from core.models.user import User

__all__ = ["MenuItem", "Restaurant", "Review", "User"]
