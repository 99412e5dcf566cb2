"""Menu item response schemas."""

from datetime import datetime

from core.models import MenuItem
from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.restaurant.response import RestaurantSummary


class MenuItemResponse(BaseSchemaModel):
    """Menu item with its rating aggregate."""

    id: int
    restaurant_id: int
    name: str
    description: str | None = None
    price: float
    category: str
    image_url: str | None = None
    avg_rating: float
    review_count: int
    created_by_id: int | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, menu_item: MenuItem) -> "MenuItemResponse":
        """Build from a MenuItem model instance."""
        return cls(**_menu_item_fields(menu_item))


class MenuItemDetailResponse(MenuItemResponse):
    """Menu item with a summary of its restaurant."""

    restaurant: RestaurantSummary

    @classmethod
    def from_model(cls, menu_item: MenuItem) -> "MenuItemDetailResponse":
        """Build from a MenuItem whose restaurant is loaded."""
        return cls(
            **_menu_item_fields(menu_item),
            restaurant=RestaurantSummary.from_model(menu_item.restaurant),
        )


def _menu_item_fields(menu_item: MenuItem) -> dict:
    return {
        "id": menu_item.menu_item_id,
        "restaurant_id": menu_item.restaurant_id,
        "name": menu_item.name,
        "description": menu_item.description,
        "price": float(menu_item.price),
        "category": menu_item.category,
        "image_url": menu_item.image_url,
        "avg_rating": float(menu_item.avg_rating),
        "review_count": menu_item.review_count,
        "created_by_id": menu_item.created_by_id,
        "created_at": menu_item.created_at,
        "updated_at": menu_item.updated_at,
    }
