"""Restaurant schemas."""

from core.schemas.restaurant.request import (
    RestaurantCreateRequest,
    RestaurantListQuery,
)
from core.schemas.restaurant.response import RestaurantResponse, RestaurantSummary

__all__ = [
    "RestaurantCreateRequest",
    "RestaurantListQuery",
    "RestaurantResponse",
    "RestaurantSummary",
]
