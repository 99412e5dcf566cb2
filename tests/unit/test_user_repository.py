"""Unit tests for UserRepository."""

from unittest.mock import patch

from django.db.models.query import QuerySet

from core.exceptions import EmailAlreadyRegisteredError
from core.models import User
from core.repositories import UserRepository
from tests.base import BaseUnitTest
from tests.factories import create_user


class TestUserRepository(BaseUnitTest):
    """Test cases for UserRepository."""

    def setUp(self):
        """Set up test fixtures."""
        self.repository = UserRepository()

    def test_create_hashes_password(self):
        """Test that the stored password is hashed and verifiable."""
        user = self.repository.create("cook@example.com", "Str0ng!Pass", "Cook")

        self.assertNotEqual(user.password, "Str0ng!Pass")
        self.assertTrue(user.check_password("Str0ng!Pass"))

    def test_find_by_email_ignores_case(self):
        """Test that email lookups are case-insensitive."""
        existing = create_user(email="chef@example.com")

        found = self.repository.find_by_email("CHEF@example.com")

        self.assertEqual(found.user_id, existing.user_id)

    def test_registered_email_is_rejected(self):
        """Test that an email already on file is refused."""
        existing = create_user()

        with self.assertRaises(EmailAlreadyRegisteredError):
            self.repository.create(existing.email, "Str0ng!Pass", "Twin")

    def test_email_slipping_past_existence_check_hits_constraint(self):
        """Test that the unique constraint reports a racing registration as a conflict."""
        existing = create_user()

        # The pre-insert check misses the row, as under a concurrent registration
        with patch.object(QuerySet, "exists", return_value=False):
            with self.assertRaises(EmailAlreadyRegisteredError) as ctx:
                self.repository.create(existing.email, "Str0ng!Pass", "Twin")

        self.assertEqual(ctx.exception.status_code, 409)
        self.assertEqual(User.objects.count(), 1)
