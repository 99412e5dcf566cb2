"""Issue and verify HS256 access tokens."""

from datetime import UTC, datetime, timedelta
from typing import Any

from django.conf import settings

import jwt

ACCESS_TOKEN_TYPE = "access_token"


def generate_access_token(user_id: int, email: str, is_admin: bool) -> str:
    """Sign an access token for a user.

    Args:
        user_id: Primary key of the user, stored as the ``sub`` claim
        email: User email
        is_admin: Whether the user holds the administrator role

    Returns:
        Encoded JWT string
    """
    issued_at = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "email": email,
        "is_admin": is_admin,
        "type": ACCESS_TOKEN_TYPE,
        "iat": issued_at,
        "exp": issued_at + timedelta(seconds=settings.JWT_EXPIRATION_SECONDS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """Verify signature, expiry and type of an access token.

    Args:
        token: Encoded JWT string

    Returns:
        Token claims

    Raises:
        jwt.ExpiredSignatureError: If the token has expired
        jwt.InvalidTokenError: If the token is malformed, badly signed,
            missing required claims or not an access token
    """
    payload = jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "exp", "iat"]},
    )
    if payload.get("type") != ACCESS_TOKEN_TYPE:
        raise jwt.InvalidTokenError(f"Invalid token type: {payload.get('type')}")
    return payload
