"""URL routing configuration for core application."""

from django.urls import path

from core.dependencies import build_service_registry

from .views import (
    HealthCheckView,
    LivenessCheckView,
    LoginView,
    MeView,
    MenuItemCreateView,
    MenuItemDetailView,
    MenuItemImageView,
    MenuItemReviewsView,
    ReadinessCheckView,
    RecentPhotosView,
    RecentReviewsView,
    RegisterView,
    RestaurantDetailView,
    RestaurantImageView,
    RestaurantListView,
    RestaurantMenuView,
    ReviewCreateView,
    ReviewDetailView,
    ReviewImageView,
    TopRatedView,
    UserReviewsView,
)

registry = build_service_registry()

urlpatterns = [
    # Health check endpoints
    path("health", HealthCheckView.as_view(service=registry.health), name="health"),
    path("live", LivenessCheckView.as_view(service=registry.health), name="live"),
    path("ready", ReadinessCheckView.as_view(service=registry.health), name="ready"),
    # Authentication endpoints
    path(
        "auth/register",
        RegisterView.as_view(service=registry.auth),
        name="auth-register",
    ),
    path("auth/login", LoginView.as_view(service=registry.auth), name="auth-login"),
    path("auth/me", MeView.as_view(service=registry.auth), name="auth-me"),
    # Restaurant endpoints
    path(
        "restaurants",
        RestaurantListView.as_view(service=registry.restaurants),
        name="restaurant-list",
    ),
    path(
        "restaurants/<int:restaurant_id>",
        RestaurantDetailView.as_view(service=registry.restaurants),
        name="restaurant-detail",
    ),
    path(
        "restaurants/<int:restaurant_id>/image",
        RestaurantImageView.as_view(service=registry.restaurants),
        name="restaurant-image",
    ),
    path(
        "restaurants/<int:restaurant_id>/menu-items",
        RestaurantMenuView.as_view(service=registry.menu_items),
        name="restaurant-menu",
    ),
    # Menu item endpoints (specific routes before generic)
    path(
        "menu-items",
        MenuItemCreateView.as_view(service=registry.menu_items),
        name="menu-item-create",
    ),
    path(
        "menu-items/restaurant/<int:restaurant_id>",
        RestaurantMenuView.as_view(service=registry.menu_items),
        name="menu-item-by-restaurant",
    ),
    path(
        "menu-items/<int:menu_item_id>",
        MenuItemDetailView.as_view(service=registry.menu_items),
        name="menu-item-detail",
    ),
    path(
        "menu-items/<int:menu_item_id>/reviews",
        MenuItemReviewsView.as_view(service=registry.reviews),
        name="menu-item-reviews",
    ),
    path(
        "menu-items/<int:menu_item_id>/image",
        MenuItemImageView.as_view(service=registry.menu_items),
        name="menu-item-image",
    ),
    # Review endpoints
    path(
        "reviews",
        ReviewCreateView.as_view(service=registry.reviews),
        name="review-create",
    ),
    path(
        "reviews/user/<int:user_id>",
        UserReviewsView.as_view(service=registry.reviews),
        name="user-reviews",
    ),
    path(
        "reviews/<int:review_id>",
        ReviewDetailView.as_view(service=registry.reviews),
        name="review-detail",
    ),
    path(
        "reviews/<int:review_id>/image",
        ReviewImageView.as_view(service=registry.reviews),
        name="review-image",
    ),
    # Discovery endpoints
    path(
        "discover/top-rated",
        TopRatedView.as_view(service=registry.discovery),
        name="discover-top-rated",
    ),
    path(
        "discover/recent",
        RecentReviewsView.as_view(service=registry.discovery),
        name="discover-recent",
    ),
    path(
        "discover/photos",
        RecentPhotosView.as_view(service=registry.discovery),
        name="discover-photos",
    ),
]
