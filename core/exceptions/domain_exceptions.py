"""Domain exceptions raised by repositories and services.

Every exception carries the HTTP status and machine-readable error code the
API answers with, so the global exception handler can translate any of them
without knowing the concrete type.
"""

from typing import Any

from pydantic import ValidationError


class ApplicationError(Exception):
    """Base exception for expected application failures."""

    default_message = "An internal server error occurred."
    error_code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        status_code: int | None = None,
    ):
        """Initialize application error.

        Args:
            message: Error message (falls back to the class default)
            error_code: Machine-readable error code override
            status_code: HTTP status code override
        """
        self.message = message or self.default_message
        if error_code is not None:
            self.error_code = error_code
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class RequestValidationError(ApplicationError):
    """Malformed or out-of-range input (400)."""

    default_message = "Validation failed"
    error_code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
    ):
        """Initialize validation error.

        Args:
            message: Summary message
            errors: Per-field errors as ``{"field": ..., "message": ...}``
        """
        self.errors = errors or []
        super().__init__(message)

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "RequestValidationError":
        """Build a validation error from a pydantic ValidationError.

        Field names are reported with their camelCase aliases, which is how
        clients send them.
        """
        errors: list[dict[str, Any]] = []
        for error in exc.errors(include_url=False):
            field = ".".join(str(part) for part in error.get("loc", ())) or "body"
            message = str(error.get("msg", "Invalid value"))
            # pydantic prefixes messages raised from custom validators
            message = message.removeprefix("Value error, ")
            errors.append({"field": field, "message": message})
        return cls(errors=errors)


class InvalidRatingError(RequestValidationError):
    """Rating is not an integer between 1 and 5."""

    def __init__(self, rating: Any):
        """Initialize invalid rating error.

        Args:
            rating: The rejected rating value
        """
        self.rating = rating
        super().__init__(
            message="Validation failed",
            errors=[
                {"field": "rating", "message": "Rating must be between 1 and 5"}
            ],
        )


class UnsupportedImageError(ApplicationError):
    """Upload is missing, too large, of a disallowed type or undecodable."""

    default_message = "Invalid image upload"
    error_code = "UPLOAD_ERROR"
    status_code = 400


class ResourceNotFoundError(ApplicationError):
    """Requested resource does not exist (404)."""

    error_code = "NOT_FOUND"
    status_code = 404
    resource_name = "Resource"

    def __init__(self, resource_id: Any = None):
        """Initialize not found error.

        Args:
            resource_id: ID of the resource that was not found
        """
        self.resource_id = resource_id
        super().__init__(f"{self.resource_name} not found")


class RestaurantNotFoundError(ResourceNotFoundError):
    """Restaurant not found (404)."""

    resource_name = "Restaurant"


class MenuItemNotFoundError(ResourceNotFoundError):
    """Menu item not found (404)."""

    resource_name = "Menu item"


class ReviewNotFoundError(ResourceNotFoundError):
    """Review not found (404)."""

    resource_name = "Review"


class UserNotFoundError(ResourceNotFoundError):
    """User not found (404)."""

    resource_name = "User"


class ConflictError(ApplicationError):
    """Conflict error for operations that cannot be performed (409)."""

    default_message = "Resource already exists"
    error_code = "CONFLICT"
    status_code = 409

    def __init__(self, message: str | None = None, detail: str | None = None):
        """Initialize conflict error.

        Args:
            message: Error message
            detail: Additional details about the conflict
        """
        self.detail = detail
        super().__init__(message)


class DuplicateReviewError(ConflictError):
    """The user already reviewed this menu item."""

    def __init__(self, menu_item_id: int, user_id: int):
        """Initialize duplicate review error.

        Args:
            menu_item_id: Menu item that already has a review by the user
            user_id: Author of the existing review
        """
        self.menu_item_id = menu_item_id
        self.user_id = user_id
        super().__init__("You have already reviewed this menu item")


class EmailAlreadyRegisteredError(ConflictError):
    """An account with this email already exists."""

    def __init__(self, email: str):
        """Initialize duplicate email error.

        Args:
            email: The email address that is already taken
        """
        self.email = email
        super().__init__("Email already registered")


class AggregateRecomputationError(ApplicationError):
    """Rating aggregate could not be rewritten after a review change.

    The message stays in the logs; clients only see an opaque 500.
    """

    def __init__(self, menu_item_id: int):
        """Initialize recomputation error.

        Args:
            menu_item_id: Menu item whose aggregate may now be stale
        """
        self.menu_item_id = menu_item_id
        super().__init__(
            f"Failed to recompute rating aggregate for menu item {menu_item_id}"
        )
