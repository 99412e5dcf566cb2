"""Auth response schemas."""

from core.schemas.auth.response.user_response import UserResponse, UserSummary

__all__ = ["UserResponse", "UserSummary"]
