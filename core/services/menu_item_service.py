"""Menu item browsing and creation."""

from typing import Any

import structlog

from core.auth.policy import AccessPolicy
from core.enums import AccessAction
from core.exceptions import MenuItemNotFoundError, RestaurantNotFoundError
from core.models import MenuItem
from core.pagination import Page
from core.repositories import MenuItemRepository, RestaurantRepository
from core.schemas.menu_item import MenuItemCreateRequest
from core.services.media_service import ImageStorageService

logger = structlog.get_logger(__name__)


class MenuItemService:
    """Service for menu item operations.

    New items start with a zero rating aggregate; only the rating
    aggregator changes it afterwards.
    """

    def __init__(
        self,
        menu_items: MenuItemRepository,
        restaurants: RestaurantRepository,
        media: ImageStorageService,
        policy: AccessPolicy,
    ) -> None:
        self.menu_items = menu_items
        self.restaurants = restaurants
        self.media = media
        self.policy = policy

    def get(self, menu_item_id: int) -> MenuItem:
        """Fetch a menu item with its restaurant.

        Raises:
            MenuItemNotFoundError: If it does not exist
        """
        menu_item = self.menu_items.find_by_id(menu_item_id)
        if menu_item is None:
            raise MenuItemNotFoundError(menu_item_id)
        return menu_item

    def list_for_restaurant(
        self,
        restaurant_id: int,
        page: int,
        limit: int,
        category: str | None = None,
    ) -> Page[MenuItem]:
        """Page through a restaurant's menu, ordered by category then name."""
        return self.menu_items.find_by_restaurant(
            restaurant_id, page, limit, category=category
        )

    def create(self, actor: Any, payload: MenuItemCreateRequest) -> MenuItem:
        """Create a menu item on an existing restaurant.

        Raises:
            RestaurantNotFoundError: If the restaurant does not exist
        """
        self.policy.enforce(actor, AccessAction.CREATE_MENU_ITEM)
        if not self.restaurants.exists(payload.restaurant_id):
            raise RestaurantNotFoundError(payload.restaurant_id)

        menu_item = self.menu_items.create(
            restaurant_id=payload.restaurant_id,
            created_by_id=actor.user_id,
            name=payload.name,
            description=payload.description,
            price=payload.price,
            category=payload.category,
        )
        logger.info(
            "Menu item created",
            menu_item_id=menu_item.menu_item_id,
            restaurant_id=payload.restaurant_id,
            user_id=actor.user_id,
        )
        return menu_item

    def attach_image(self, actor: Any, menu_item_id: int, upload) -> MenuItem:
        """Store an uploaded image and attach it to a menu item.

        Raises:
            MenuItemNotFoundError: If it does not exist
            UnsupportedImageError: If the upload is rejected
        """
        self.policy.enforce(actor, AccessAction.ATTACH_MENU_ITEM_IMAGE)
        if not self.menu_items.exists(menu_item_id):
            raise MenuItemNotFoundError(menu_item_id)
        image_url = self.media.store(upload)
        menu_item = self.menu_items.attach_image(menu_item_id, image_url)
        if menu_item is None:
            self.media.discard(image_url)
            raise MenuItemNotFoundError(menu_item_id)
        return menu_item
