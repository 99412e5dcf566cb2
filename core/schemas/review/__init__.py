"""Review schemas."""

from core.schemas.review.request import ReviewCreateRequest
from core.schemas.review.response import ReviewResponse, ReviewWithUserResponse

__all__ = ["ReviewCreateRequest", "ReviewResponse", "ReviewWithUserResponse"]
