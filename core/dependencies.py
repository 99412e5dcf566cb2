"""Wiring of repositories and services.

Everything a request handler needs is built here from settings and handed
to the views through ``as_view(**initkwargs)``. ``core.urls`` builds the
registry once, when the URLconf is imported; nothing else holds services
at module level, and tests can build a registry with their own
collaborators.
"""

from dataclasses import dataclass

from django.conf import settings
from django.core.files.storage import FileSystemStorage

from core.auth.policy import AccessPolicy
from core.repositories import (
    MenuItemRepository,
    RestaurantRepository,
    ReviewRepository,
    UserRepository,
)
from core.services import (
    AuthService,
    DiscoveryService,
    HealthService,
    ImageStorageService,
    MenuItemService,
    RatingAggregator,
    RestaurantService,
    ReviewService,
)


@dataclass(frozen=True)
class ServiceRegistry:
    """The set of services the API views are built with."""

    auth: AuthService
    restaurants: RestaurantService
    menu_items: MenuItemService
    reviews: ReviewService
    discovery: DiscoveryService
    health: HealthService


def build_service_registry(using: str = "default") -> ServiceRegistry:
    """Construct every service against one database alias.

    Args:
        using: Database alias handed to repositories and the aggregator

    Returns:
        A fully wired ServiceRegistry
    """
    policy = AccessPolicy(
        admin_may_attach_review_images=settings.REVIEW_IMAGE_ADMIN_OVERRIDE
    )
    media = ImageStorageService(
        storage=FileSystemStorage(
            location=settings.MEDIA_ROOT, base_url=settings.MEDIA_URL
        ),
        max_bytes=settings.MAX_UPLOAD_SIZE,
    )

    users = UserRepository(using=using)
    restaurants = RestaurantRepository(using=using)
    menu_items = MenuItemRepository(using=using)
    reviews = ReviewRepository(using=using)

    return ServiceRegistry(
        auth=AuthService(users),
        restaurants=RestaurantService(restaurants, media, policy),
        menu_items=MenuItemService(menu_items, restaurants, media, policy),
        reviews=ReviewService(
            reviews=reviews,
            menu_items=menu_items,
            aggregator=RatingAggregator(using=using),
            media=media,
            policy=policy,
        ),
        discovery=DiscoveryService(menu_items, reviews),
        health=HealthService(version=settings.SERVICE_VERSION),
    )
