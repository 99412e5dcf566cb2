"""Authentication schemas."""

from core.schemas.auth.request import LoginRequest, RegisterRequest
from core.schemas.auth.response import UserResponse, UserSummary

__all__ = ["LoginRequest", "RegisterRequest", "UserResponse", "UserSummary"]
