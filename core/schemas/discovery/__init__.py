"""Discovery feed schemas."""

from core.schemas.discovery.discovery_items import (
    MenuItemReference,
    PhotoItem,
    RecentReview,
    TopRatedItem,
)

__all__ = ["MenuItemReference", "PhotoItem", "RecentReview", "TopRatedItem"]
