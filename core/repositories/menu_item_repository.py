"""Repository for menu items."""

from typing import Any

from django.utils import timezone

from core.models import MenuItem
from core.pagination import Page, paginate


class MenuItemRepository:
    """Repository for encapsulating menu item database queries.

    Aggregate fields are never written here; see ``RatingAggregator``.
    """

    def __init__(self, using: str = "default") -> None:
        self.using = using

    def _menu_items(self):
        return MenuItem.objects.using(self.using)

    def find_by_id(self, menu_item_id: int) -> MenuItem | None:
        """Fetch a menu item with its restaurant, or None."""
        return (
            self._menu_items()
            .select_related("restaurant")
            .filter(menu_item_id=menu_item_id)
            .first()
        )

    def exists(self, menu_item_id: int) -> bool:
        """Return True if the menu item exists."""
        return self._menu_items().filter(menu_item_id=menu_item_id).exists()

    def find_by_restaurant(
        self,
        restaurant_id: int,
        page: int,
        limit: int,
        category: str | None = None,
    ) -> Page[MenuItem]:
        """List a restaurant's menu, ordered by category then name."""
        queryset = self._menu_items().filter(restaurant_id=restaurant_id)
        if category:
            queryset = queryset.filter(category=category)
        return paginate(
            queryset.order_by("category", "name", "menu_item_id"), page, limit
        )

    def top_rated(self, limit: int) -> list[MenuItem]:
        """Reviewed items, best average first, ties broken by review count."""
        return list(
            self._menu_items()
            .select_related("restaurant")
            .filter(review_count__gte=1)
            .order_by("-avg_rating", "-review_count", "menu_item_id")[:limit]
        )

    def create(
        self, restaurant_id: int, created_by_id: int, **fields: Any
    ) -> MenuItem:
        """Insert a menu item with a zero aggregate."""
        menu_item = self._menu_items().create(
            restaurant_id=restaurant_id, created_by_id=created_by_id, **fields
        )
        return self.find_by_id(menu_item.menu_item_id)

    def attach_image(self, menu_item_id: int, image_ref: str) -> MenuItem | None:
        """Set the image of a menu item, returning it or None if missing."""
        updated = self._menu_items().filter(menu_item_id=menu_item_id).update(
            image_url=image_ref, updated_at=timezone.now()
        )
        return self.find_by_id(menu_item_id) if updated else None
