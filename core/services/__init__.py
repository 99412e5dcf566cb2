"""Services for the core app.

Services are plain classes with their collaborators passed in; they are
assembled once in ``core.dependencies``.
"""

from core.services.auth_service import AuthService
from core.services.discovery_service import DiscoveryService
from core.services.health_service import HealthService
from core.services.media_service import ImageStorageService
from core.services.menu_item_service import MenuItemService
from core.services.rating_aggregation_service import RatingAggregator, RatingSummary
from core.services.restaurant_service import RestaurantService
from core.services.review_service import ReviewService

__all__ = [
    "AuthService",
    "DiscoveryService",
    "HealthService",
    "ImageStorageService",
    "MenuItemService",
    "RatingAggregator",
    "RatingSummary",
    "RestaurantService",
    "ReviewService",
]
