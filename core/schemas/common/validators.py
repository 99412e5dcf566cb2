"""Input normalization and validation helpers shared by request schemas."""

import re
from typing import Annotated

from pydantic import AfterValidator

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
SPECIAL_CHARACTER_PATTERN = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")
MIN_PASSWORD_LENGTH = 8


def sanitize_string(value: str) -> str:
    """Trim whitespace and drop angle brackets."""
    return value.strip().replace("<", "").replace(">", "")


def is_valid_email(email: str) -> bool:
    """Loose email shape check: something@something.tld, no whitespace."""
    return bool(EMAIL_PATTERN.match(email))


def password_complexity_errors(password: str) -> list[str]:
    """Return every complexity rule the password breaks (empty when valid)."""
    errors = []
    if len(password) < MIN_PASSWORD_LENGTH:
        errors.append(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    if not re.search(r"[A-Z]", password):
        errors.append("Password must contain at least one uppercase letter")
    if not re.search(r"[a-z]", password):
        errors.append("Password must contain at least one lowercase letter")
    if not re.search(r"[0-9]", password):
        errors.append("Password must contain at least one number")
    if not SPECIAL_CHARACTER_PATTERN.search(password):
        errors.append("Password must contain at least one special character")
    return errors


def _required_text(value: str) -> str:
    value = sanitize_string(value)
    if not value:
        raise ValueError("This field is required")
    return value


def _optional_text(value: str | None) -> str | None:
    if value is None:
        return None
    return sanitize_string(value) or None


RequiredText = Annotated[str, AfterValidator(_required_text)]
OptionalText = Annotated[str | None, AfterValidator(_optional_text)]
