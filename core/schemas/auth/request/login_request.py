"""Login request schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class LoginRequest(BaseSchemaModel):
    """Body of POST /auth/login."""

    email: str = Field("", description="Account email")
    password: str = Field("", description="Plain-text password")
