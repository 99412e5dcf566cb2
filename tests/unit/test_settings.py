"""Unit tests for Django settings."""

import unittest

from django.conf import settings


class TestSettings(unittest.TestCase):
    """Test cases for the settings the application relies on."""

    def test_test_mode_is_enabled(self):
        """Test that the test settings module is loaded."""
        self.assertTrue(settings.TEST_MODE)
        self.assertEqual(
            settings.DATABASES["default"]["ENGINE"], "django.db.backends.sqlite3"
        )

    def test_rest_framework_wiring(self):
        """Test authentication and exception handler configuration."""
        self.assertEqual(
            settings.REST_FRAMEWORK["EXCEPTION_HANDLER"],
            "core.exceptions.handlers.custom_exception_handler",
        )
        self.assertIn(
            "core.auth.authentication.JWTAuthentication",
            settings.REST_FRAMEWORK["DEFAULT_AUTHENTICATION_CLASSES"],
        )

    def test_middleware_order(self):
        """Test that request ids are bound before anything logs."""
        middleware = settings.MIDDLEWARE
        self.assertLess(
            middleware.index("core.middleware.RequestIDMiddleware"),
            middleware.index("core.middleware.RequestLoggingMiddleware"),
        )
        self.assertLess(
            middleware.index("core.middleware.RequestIDMiddleware"),
            middleware.index("core.middleware.RateLimitMiddleware"),
        )

    def test_upload_and_token_defaults(self):
        """Test media, upload size and token settings."""
        self.assertEqual(settings.MEDIA_URL, "/uploads/")
        self.assertEqual(settings.MAX_UPLOAD_SIZE, 5 * 1024 * 1024)
        self.assertEqual(settings.JWT_ALGORITHM, "HS256")
        self.assertEqual(settings.JWT_EXPIRATION_SECONDS, 7 * 24 * 60 * 60)
        self.assertFalse(settings.REVIEW_IMAGE_ADMIN_OVERRIDE)

    def test_rate_limit_scopes(self):
        """Test the authentication and review submission buckets."""
        scopes = {scope["name"]: scope for scope in settings.RATE_LIMIT_SCOPES}
        self.assertEqual(scopes["auth"]["requests"], 5)
        self.assertEqual(scopes["auth"]["window"], 15 * 60)
        self.assertEqual(scopes["reviews"]["requests"], 20)
        self.assertEqual(scopes["reviews"]["window"], 60 * 60)


if __name__ == "__main__":
    unittest.main()
