"""Schemas and validators shared across resources."""

from core.schemas.common.pagination_params import PaginationParams
from core.schemas.common.validators import (
    OptionalText,
    RequiredText,
    is_valid_email,
    password_complexity_errors,
    sanitize_string,
)

__all__ = [
    "OptionalText",
    "PaginationParams",
    "RequiredText",
    "is_valid_email",
    "password_complexity_errors",
    "sanitize_string",
]
