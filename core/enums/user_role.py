"""User role enumeration."""

from enum import Enum


class UserRole(str, Enum):
    """Role stored on each user account."""

    ADMIN = "ADMIN"
    USER = "USER"
