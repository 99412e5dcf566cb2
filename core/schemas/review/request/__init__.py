"""Review request schemas."""

from core.schemas.review.request.review_create_request import ReviewCreateRequest

__all__ = ["ReviewCreateRequest"]
