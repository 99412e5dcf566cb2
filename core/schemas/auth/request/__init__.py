"""Auth request schemas."""

from core.schemas.auth.request.login_request import LoginRequest
from core.schemas.auth.request.register_request import RegisterRequest

__all__ = ["LoginRequest", "RegisterRequest"]
