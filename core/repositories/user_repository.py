"""Repository for user accounts."""

from django.db import IntegrityError, transaction

from core.exceptions import EmailAlreadyRegisteredError
from core.models import User


class UserRepository:
    """Repository for encapsulating user database queries."""

    def __init__(self, using: str = "default") -> None:
        self.using = using

    def _users(self):
        return User.objects.using(self.using)

    def find_by_id(self, user_id: int) -> User | None:
        """Fetch a user by primary key, or None."""
        return self._users().filter(user_id=user_id).first()

    def find_by_email(self, email: str) -> User | None:
        """Fetch a user by email (case-insensitive), or None."""
        return self._users().filter(email__iexact=email).first()

    def create(self, email: str, password: str, display_name: str) -> User:
        """Create a user with a hashed password.

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken
        """
        user = User(email=email, display_name=display_name)
        user.set_password(password)
        try:
            with transaction.atomic(using=self.using):
                if self._users().filter(email__iexact=email).exists():
                    raise EmailAlreadyRegisteredError(email)
                user.save(using=self.using)
        except IntegrityError as e:
            raise EmailAlreadyRegisteredError(email) from e
        return user
