"""Discovery feed item schemas."""

from datetime import datetime

from core.models import MenuItem, Review
from core.schemas.auth.response import UserSummary
from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.restaurant.response import RestaurantSummary


class MenuItemReference(BaseSchemaModel):
    """Menu item name plus the restaurant serving it."""

    id: int
    name: str
    restaurant: RestaurantSummary

    @classmethod
    def from_model(cls, menu_item: MenuItem) -> "MenuItemReference":
        """Build from a MenuItem whose restaurant is loaded."""
        return cls(
            id=menu_item.menu_item_id,
            name=menu_item.name,
            restaurant=RestaurantSummary.from_model(
                menu_item.restaurant, include_cuisine=False
            ),
        )


class TopRatedItem(BaseSchemaModel):
    """Entry of the top-rated feed."""

    id: int
    name: str
    avg_rating: float
    review_count: int
    image_url: str | None = None
    restaurant: RestaurantSummary

    @classmethod
    def from_model(cls, menu_item: MenuItem) -> "TopRatedItem":
        """Build from a MenuItem whose restaurant is loaded."""
        return cls(
            id=menu_item.menu_item_id,
            name=menu_item.name,
            avg_rating=float(menu_item.avg_rating),
            review_count=menu_item.review_count,
            image_url=menu_item.image_url,
            restaurant=RestaurantSummary.from_model(menu_item.restaurant),
        )


class RecentReview(BaseSchemaModel):
    """Entry of the recent reviews feed."""

    id: int
    rating: int
    comment: str | None = None
    created_at: datetime
    user: UserSummary
    menu_item: MenuItemReference

    @classmethod
    def from_model(cls, review: Review) -> "RecentReview":
        """Build from a Review with user, menu item and restaurant loaded."""
        return cls(
            id=review.review_id,
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
            user=UserSummary.from_model(review.user),
            menu_item=MenuItemReference.from_model(review.menu_item),
        )


class PhotoItem(BaseSchemaModel):
    """Entry of the recent photos feed."""

    id: int
    image_url: str
    menu_item: MenuItemReference

    @classmethod
    def from_model(cls, review: Review) -> "PhotoItem":
        """Build from a Review with menu item and restaurant loaded."""
        return cls(
            id=review.review_id,
            image_url=review.image_url,
            menu_item=MenuItemReference.from_model(review.menu_item),
        )
