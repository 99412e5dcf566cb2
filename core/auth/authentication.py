"""Bearer token authentication backends for Django REST Framework."""

import jwt
import structlog
from rest_framework import authentication, exceptions

from core.auth.tokens import decode_access_token

logger = structlog.get_logger(__name__)


class TokenUser:
    """Authenticated actor built from access token claims.

    This is not a Django model, just a container for the identity the
    token vouches for: the user id and whether the user is an admin.
    """

    is_authenticated = True
    is_anonymous = False

    def __init__(self, user_id: int, email: str, is_admin: bool):
        """Initialize token user.

        Args:
            user_id: User ID from the ``sub`` claim
            email: User email from the token
            is_admin: Administrator flag from the token
        """
        self.id = user_id
        self.user_id = user_id
        self.email = email
        self.is_admin = is_admin

    def __str__(self):
        """String representation."""
        return f"TokenUser(user_id={self.user_id}, is_admin={self.is_admin})"


class JWTAuthentication(authentication.BaseAuthentication):
    """Bearer token authentication.

    A request without an Authorization header is anonymous. A header that
    is present but malformed, or carries a token that is expired, badly
    signed or of the wrong type, fails with 401.
    """

    keyword = "bearer"

    def authenticate(self, request):
        """Authenticate the request using the Bearer token.

        Args:
            request: DRF request object

        Returns:
            Tuple of (user, token) or None if authentication not attempted

        Raises:
            AuthenticationFailed: If authentication fails
        """
        auth_header = request.headers.get("authorization")
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2 or parts[0].lower() != self.keyword:
            raise exceptions.AuthenticationFailed("Invalid authorization header format")

        token = parts[1]
        payload = self._decode(token)

        try:
            user_id = int(payload["sub"])
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Token subject is not a user id", sub=payload.get("sub"))
            raise exceptions.AuthenticationFailed("Invalid token") from e

        user = TokenUser(
            user_id=user_id,
            email=payload.get("email", ""),
            is_admin=bool(payload.get("is_admin", False)),
        )
        return (user, token)

    def _decode(self, token: str) -> dict:
        try:
            return decode_access_token(token)
        except jwt.ExpiredSignatureError as e:
            logger.info("JWT token has expired")
            raise exceptions.AuthenticationFailed("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.warning("Invalid JWT token", error=str(e))
            raise exceptions.AuthenticationFailed("Invalid token") from e

    def authenticate_header(self, _request):
        """Return WWW-Authenticate header value for 401 responses.

        Args:
            _request: Django request object (unused)

        Returns:
            Authentication header value
        """
        return "Bearer"


class OptionalJWTAuthentication(JWTAuthentication):
    """Bearer token authentication for read endpoints.

    A valid token identifies the caller; an invalid one is treated as
    anonymous instead of failing the request.
    """

    def authenticate(self, request):
        """Authenticate the request, falling back to anonymous on failure."""
        try:
            return super().authenticate(request)
        except exceptions.AuthenticationFailed as e:
            logger.debug("Ignoring invalid credentials on optional auth", error=str(e))
            return None
