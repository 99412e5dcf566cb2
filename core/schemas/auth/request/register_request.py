"""Registration request schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class RegisterRequest(BaseSchemaModel):
    """Body of POST /auth/register.

    Only shapes are checked here; email format and password complexity are
    enforced by the auth service so every field error is reported at once.
    """

    email: str = Field("", description="Account email")
    password: str = Field("", description="Plain-text password")
    display_name: str = Field("", description="Public display name")
