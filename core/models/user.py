"""User model."""

from typing import ClassVar

from django.contrib.auth.hashers import check_password, make_password
from django.db import models

from core.enums import UserRole


class User(models.Model):
    """Registered BiteLogs account.

    Passwords are stored as Django hasher strings; the plain text never
    reaches the database.
    """

    user_id = models.BigAutoField(primary_key=True)
    email = models.EmailField(max_length=255, unique=True)
    password_hash = models.CharField(max_length=255)
    display_name = models.CharField(max_length=100)
    avatar_url = models.CharField(max_length=500, null=True, blank=True)
    role = models.CharField(
        max_length=10,
        choices=[(role.value, role.value) for role in UserRole],
        default=UserRole.USER.value,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "users"
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of user."""
        return f"{self.display_name} ({self.email})"

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return f"<User(user_id={self.user_id}, email='{self.email}')>"

    @property
    def is_admin(self) -> bool:
        """Whether the account holds the administrator role."""
        return self.role == UserRole.ADMIN.value

    def set_password(self, raw_password: str) -> None:
        """Hash and store a new password."""
        self.password_hash = make_password(raw_password)

    def check_password(self, raw_password: str) -> bool:
        """Return True when raw_password matches the stored hash."""
        return check_password(raw_password, self.password_hash)
