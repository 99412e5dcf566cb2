"""Authentication and authorization for the BiteLogs API."""

from core.auth.authentication import (
    JWTAuthentication,
    OptionalJWTAuthentication,
    TokenUser,
)
from core.auth.policy import AccessPolicy
from core.auth.tokens import decode_access_token, generate_access_token

__all__ = [
    "AccessPolicy",
    "JWTAuthentication",
    "OptionalJWTAuthentication",
    "TokenUser",
    "decode_access_token",
    "generate_access_token",
]
