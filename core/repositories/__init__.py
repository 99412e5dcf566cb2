"""Data access repositories for the core app."""

from core.repositories.menu_item_repository import MenuItemRepository
from core.repositories.restaurant_repository import RestaurantRepository
from core.repositories.review_repository import ReviewRepository
from core.repositories.user_repository import UserRepository

__all__ = [
    "MenuItemRepository",
    "RestaurantRepository",
    "ReviewRepository",
    "UserRepository",
]
