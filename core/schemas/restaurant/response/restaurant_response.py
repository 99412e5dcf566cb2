"""Restaurant response schemas."""

from datetime import datetime

from core.models import Restaurant
from core.schemas.base_schema_model import BaseSchemaModel


class RestaurantSummary(BaseSchemaModel):
    """Restaurant reference embedded in menu items."""

    id: int
    name: str
    cuisine: str | None = None

    @classmethod
    def from_model(
        cls, restaurant: Restaurant, include_cuisine: bool = True
    ) -> "RestaurantSummary":
        """Build from a Restaurant model instance."""
        return cls(
            id=restaurant.restaurant_id,
            name=restaurant.name,
            cuisine=restaurant.cuisine if include_cuisine else None,
        )


class RestaurantResponse(BaseSchemaModel):
    """Full restaurant representation."""

    id: int
    name: str
    address: str
    city: str
    state: str
    zip_code: str
    phone: str | None = None
    website: str | None = None
    cuisine: str
    price_range: int
    image_url: str | None = None
    created_by_id: int | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, restaurant: Restaurant) -> "RestaurantResponse":
        """Build from a Restaurant model instance."""
        return cls(
            id=restaurant.restaurant_id,
            name=restaurant.name,
            address=restaurant.address,
            city=restaurant.city,
            state=restaurant.state,
            zip_code=restaurant.zip_code,
            phone=restaurant.phone,
            website=restaurant.website,
            cuisine=restaurant.cuisine,
            price_range=restaurant.price_range,
            image_url=restaurant.image_url,
            created_by_id=restaurant.created_by_id,
            created_at=restaurant.created_at,
            updated_at=restaurant.updated_at,
        )
