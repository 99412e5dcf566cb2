"""Exception handling utilities for the BiteLogs API."""

from core.exceptions.domain_exceptions import (
    AggregateRecomputationError,
    ApplicationError,
    ConflictError,
    DuplicateReviewError,
    EmailAlreadyRegisteredError,
    InvalidRatingError,
    MenuItemNotFoundError,
    RequestValidationError,
    ResourceNotFoundError,
    RestaurantNotFoundError,
    ReviewNotFoundError,
    UnsupportedImageError,
    UserNotFoundError,
)
from core.exceptions.handlers import custom_exception_handler

__all__ = [
    "AggregateRecomputationError",
    "ApplicationError",
    "ConflictError",
    "DuplicateReviewError",
    "EmailAlreadyRegisteredError",
    "InvalidRatingError",
    "MenuItemNotFoundError",
    "RequestValidationError",
    "ResourceNotFoundError",
    "RestaurantNotFoundError",
    "ReviewNotFoundError",
    "UnsupportedImageError",
    "UserNotFoundError",
    "custom_exception_handler",
]
