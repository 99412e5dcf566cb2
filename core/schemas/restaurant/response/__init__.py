"""Restaurant response schemas."""

from core.schemas.restaurant.response.restaurant_response import (
    RestaurantResponse,
    RestaurantSummary,
)

__all__ = ["RestaurantResponse", "RestaurantSummary"]
