"""Review response schemas."""

from datetime import datetime

from core.models import Review
from core.schemas.auth.response import UserSummary
from core.schemas.base_schema_model import BaseSchemaModel


class ReviewResponse(BaseSchemaModel):
    """A single review."""

    id: int
    menu_item_id: int
    user_id: int
    rating: int
    comment: str | None = None
    image_url: str | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, review: Review) -> "ReviewResponse":
        """Build from a Review model instance."""
        return cls(**_review_fields(review))


class ReviewWithUserResponse(ReviewResponse):
    """A review with its author's public details."""

    user: UserSummary

    @classmethod
    def from_model(cls, review: Review) -> "ReviewWithUserResponse":
        """Build from a Review whose user is loaded."""
        return cls(**_review_fields(review), user=UserSummary.from_model(review.user))


def _review_fields(review: Review) -> dict:
    return {
        "id": review.review_id,
        "menu_item_id": review.menu_item_id,
        "user_id": review.user_id,
        "rating": review.rating,
        "comment": review.comment,
        "image_url": review.image_url,
        "created_at": review.created_at,
        "updated_at": review.updated_at,
    }
