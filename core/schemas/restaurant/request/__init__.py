"""Restaurant request schemas."""

from core.schemas.restaurant.request.restaurant_create_request import (
    RestaurantCreateRequest,
)
from core.schemas.restaurant.request.restaurant_list_query import RestaurantListQuery

__all__ = ["RestaurantCreateRequest", "RestaurantListQuery"]
