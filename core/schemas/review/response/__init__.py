"""Review response schemas."""

from core.schemas.review.response.review_response import (
    ReviewResponse,
    ReviewWithUserResponse,
)

__all__ = ["ReviewResponse", "ReviewWithUserResponse"]
