"""Discovery feeds: top-rated dishes, recent reviews and recent photos."""

from typing import Any

from core.constants.pagination import (
    DISCOVERY_MAX_LIMIT,
    RECENT_PHOTOS_DEFAULT_LIMIT,
    RECENT_REVIEWS_DEFAULT_LIMIT,
    TOP_RATED_DEFAULT_LIMIT,
)
from core.models import MenuItem, Review
from core.repositories import MenuItemRepository, ReviewRepository


def clamp_limit(raw: Any, default: int) -> int:
    """Parse a ``limit`` query value and clamp it to [1, DISCOVERY_MAX_LIMIT].

    Missing or non-numeric values fall back to ``default``.
    """
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        return default
    return max(1, min(limit, DISCOVERY_MAX_LIMIT))


class DiscoveryService:
    """Read-only feeds for the home page."""

    def __init__(
        self, menu_items: MenuItemRepository, reviews: ReviewRepository
    ) -> None:
        self.menu_items = menu_items
        self.reviews = reviews

    def top_rated(self, limit: Any = None) -> list[MenuItem]:
        """Reviewed items by average rating, then review count."""
        return self.menu_items.top_rated(clamp_limit(limit, TOP_RATED_DEFAULT_LIMIT))

    def recent_reviews(self, limit: Any = None) -> list[Review]:
        """Newest reviews with author, menu item and restaurant."""
        return self.reviews.recent(clamp_limit(limit, RECENT_REVIEWS_DEFAULT_LIMIT))

    def recent_photos(self, limit: Any = None) -> list[Review]:
        """Newest reviews that carry a photo."""
        return self.reviews.recent_with_images(
            clamp_limit(limit, RECENT_PHOTOS_DEFAULT_LIMIT)
        )
