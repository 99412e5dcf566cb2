"""Repository for restaurants."""

from typing import Any

from django.db.models import Q
from django.utils import timezone

from core.models import Restaurant
from core.pagination import Page, paginate


class RestaurantRepository:
    """Repository for encapsulating restaurant database queries."""

    def __init__(self, using: str = "default") -> None:
        self.using = using

    def _restaurants(self):
        return Restaurant.objects.using(self.using)

    def find_by_id(self, restaurant_id: int) -> Restaurant | None:
        """Fetch a restaurant by primary key, or None."""
        return self._restaurants().filter(restaurant_id=restaurant_id).first()

    def exists(self, restaurant_id: int) -> bool:
        """Return True if the restaurant exists."""
        return self._restaurants().filter(restaurant_id=restaurant_id).exists()

    def find_all(
        self,
        page: int,
        limit: int,
        city: str | None = None,
        cuisine: str | None = None,
        search: str | None = None,
    ) -> Page[Restaurant]:
        """List restaurants, newest first.

        ``city`` and ``cuisine`` match case-insensitive substrings; ``search``
        matches the name or the cuisine.
        """
        queryset = self._restaurants()
        if city:
            queryset = queryset.filter(city__icontains=city)
        if cuisine:
            queryset = queryset.filter(cuisine__icontains=cuisine)
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search) | Q(cuisine__icontains=search)
            )
        return paginate(
            queryset.order_by("-created_at", "-restaurant_id"), page, limit
        )

    def create(self, created_by_id: int, **fields: Any) -> Restaurant:
        """Insert a restaurant owned by ``created_by_id``."""
        return self._restaurants().create(created_by_id=created_by_id, **fields)

    def attach_image(self, restaurant_id: int, image_ref: str) -> Restaurant | None:
        """Set the image of a restaurant, returning it or None if missing."""
        updated = self._restaurants().filter(restaurant_id=restaurant_id).update(
            image_url=image_ref, updated_at=timezone.now()
        )
        return self.find_by_id(restaurant_id) if updated else None
