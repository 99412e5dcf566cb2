"""Schemas for the core app."""

from core.schemas.auth import LoginRequest, RegisterRequest, UserResponse, UserSummary
from core.schemas.common import PaginationParams
from core.schemas.discovery import PhotoItem, RecentReview, TopRatedItem
from core.schemas.health import (
    DependencyHealth,
    HealthCheckResponse,
    LivenessResponse,
    ReadinessResponse,
)
from core.schemas.menu_item import (
    MenuItemCreateRequest,
    MenuItemDetailResponse,
    MenuItemListQuery,
    MenuItemResponse,
)
from core.schemas.restaurant import (
    RestaurantCreateRequest,
    RestaurantListQuery,
    RestaurantResponse,
    RestaurantSummary,
)
from core.schemas.review import (
    ReviewCreateRequest,
    ReviewResponse,
    ReviewWithUserResponse,
)

__all__ = [
    "DependencyHealth",
    "HealthCheckResponse",
    "LivenessResponse",
    "LoginRequest",
    "MenuItemCreateRequest",
    "MenuItemDetailResponse",
    "MenuItemListQuery",
    "MenuItemResponse",
    "PaginationParams",
    "PhotoItem",
    "ReadinessResponse",
    "RecentReview",
    "RegisterRequest",
    "RestaurantCreateRequest",
    "RestaurantListQuery",
    "RestaurantResponse",
    "RestaurantSummary",
    "ReviewCreateRequest",
    "ReviewResponse",
    "ReviewWithUserResponse",
    "TopRatedItem",
    "UserResponse",
    "UserSummary",
]
