"""User response schemas."""

from datetime import datetime

from pydantic import Field

from core.models import User
from core.schemas.base_schema_model import BaseSchemaModel


class UserSummary(BaseSchemaModel):
    """Public author details embedded in reviews."""

    id: int
    display_name: str
    avatar_url: str | None = None

    @classmethod
    def from_model(cls, user: User) -> "UserSummary":
        """Build from a User model instance."""
        return cls(
            id=user.user_id,
            display_name=user.display_name,
            avatar_url=user.avatar_url,
        )


class UserResponse(BaseSchemaModel):
    """Account details returned to the account owner."""

    id: int
    email: str
    display_name: str
    avatar_url: str | None = None
    is_admin: bool = Field(False, description="Administrator role")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, user: User) -> "UserResponse":
        """Build from a User model instance."""
        return cls(
            id=user.user_id,
            email=user.email,
            display_name=user.display_name,
            avatar_url=user.avatar_url,
            is_admin=user.is_admin,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
