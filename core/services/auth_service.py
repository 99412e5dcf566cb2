"""Account registration, login and identity lookup."""

from typing import Any

import structlog
from rest_framework import exceptions

from core.auth.tokens import generate_access_token
from core.exceptions import RequestValidationError
from core.models import User
from core.repositories import UserRepository
from core.schemas.common.validators import (
    is_valid_email,
    password_complexity_errors,
    sanitize_string,
)

logger = structlog.get_logger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class AuthService:
    """Creates accounts and exchanges credentials for access tokens."""

    def __init__(self, users: UserRepository) -> None:
        self.users = users

    def register(
        self, email: str, password: str, display_name: str
    ) -> tuple[User, str]:
        """Create an account and sign a token for it.

        Args:
            email: Account email
            password: Plain-text password, checked for complexity
            display_name: Public display name

        Returns:
            Tuple of (user, access token)

        Raises:
            RequestValidationError: If any field is invalid
            EmailAlreadyRegisteredError: If the email is already taken
        """
        email = sanitize_string(email or "")
        display_name = sanitize_string(display_name or "")
        password = password or ""

        errors = []
        if not email or not is_valid_email(email):
            errors.append({"field": "email", "message": "Valid email is required"})
        if not password:
            errors.append({"field": "password", "message": "Password is required"})
        else:
            complexity_errors = password_complexity_errors(password)
            if complexity_errors:
                errors.append(
                    {"field": "password", "message": ". ".join(complexity_errors)}
                )
        if not display_name:
            errors.append(
                {"field": "displayName", "message": "Display name is required"}
            )
        if errors:
            raise RequestValidationError(errors=errors)

        user = self.users.create(email, password, display_name)
        logger.info("User registered", user_id=user.user_id)
        return user, self._token_for(user)

    def login(self, email: str, password: str) -> tuple[User, str]:
        """Verify credentials and sign a token.

        Raises:
            RequestValidationError: If email or password is missing
            AuthenticationFailed: If the credentials do not match an account
        """
        if not email or not password:
            raise RequestValidationError("Email and password are required")

        user = self.users.find_by_email(sanitize_string(email))
        if user is None or not user.check_password(password):
            logger.info("Login failed")
            raise exceptions.AuthenticationFailed(INVALID_CREDENTIALS_MESSAGE)

        logger.info("User logged in", user_id=user.user_id)
        return user, self._token_for(user)

    def me(self, actor: Any) -> User:
        """Load the account behind an authenticated actor.

        Raises:
            AuthenticationFailed: If the account no longer exists
        """
        user = self.users.find_by_id(actor.user_id)
        if user is None:
            raise exceptions.AuthenticationFailed("User not found")
        return user

    @staticmethod
    def _token_for(user: User) -> str:
        return generate_access_token(user.user_id, user.email, user.is_admin)
