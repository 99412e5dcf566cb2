"""Restaurant browsing and creation."""

from typing import Any

import structlog

from core.auth.policy import AccessPolicy
from core.enums import AccessAction
from core.exceptions import RestaurantNotFoundError
from core.models import Restaurant
from core.pagination import Page
from core.repositories import RestaurantRepository
from core.schemas.restaurant import RestaurantCreateRequest
from core.services.media_service import ImageStorageService

logger = structlog.get_logger(__name__)


class RestaurantService:
    """Service for restaurant operations."""

    def __init__(
        self,
        restaurants: RestaurantRepository,
        media: ImageStorageService,
        policy: AccessPolicy,
    ) -> None:
        self.restaurants = restaurants
        self.media = media
        self.policy = policy

    def list(
        self,
        page: int,
        limit: int,
        city: str | None = None,
        cuisine: str | None = None,
        search: str | None = None,
    ) -> Page[Restaurant]:
        """Page through restaurants, newest first, with optional filters."""
        return self.restaurants.find_all(
            page, limit, city=city, cuisine=cuisine, search=search
        )

    def get(self, restaurant_id: int) -> Restaurant:
        """Fetch a restaurant.

        Raises:
            RestaurantNotFoundError: If it does not exist
        """
        restaurant = self.restaurants.find_by_id(restaurant_id)
        if restaurant is None:
            raise RestaurantNotFoundError(restaurant_id)
        return restaurant

    def create(self, actor: Any, payload: RestaurantCreateRequest) -> Restaurant:
        """Create a restaurant owned by the actor."""
        self.policy.enforce(actor, AccessAction.CREATE_RESTAURANT)
        restaurant = self.restaurants.create(
            created_by_id=actor.user_id, **payload.model_dump()
        )
        logger.info(
            "Restaurant created",
            restaurant_id=restaurant.restaurant_id,
            user_id=actor.user_id,
        )
        return restaurant

    def attach_image(self, actor: Any, restaurant_id: int, upload) -> Restaurant:
        """Store an uploaded image and attach it to a restaurant.

        Raises:
            RestaurantNotFoundError: If it does not exist
            UnsupportedImageError: If the upload is rejected
        """
        self.policy.enforce(actor, AccessAction.ATTACH_RESTAURANT_IMAGE)
        self.get(restaurant_id)
        image_url = self.media.store(upload)
        restaurant = self.restaurants.attach_image(restaurant_id, image_url)
        if restaurant is None:
            self.media.discard(image_url)
            raise RestaurantNotFoundError(restaurant_id)
        return restaurant
