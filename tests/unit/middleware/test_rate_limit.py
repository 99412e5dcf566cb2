"""Unit tests for RateLimitMiddleware."""

import json
import unittest
from unittest.mock import patch

from django.http import HttpRequest, HttpResponse
from django.test import SimpleTestCase, override_settings

from core.middleware.rate_limit import RateLimitMiddleware, RateLimitScope

SCOPES = [
    {
        "name": "auth",
        "path_prefixes": ["/api/auth/login"],
        "methods": ["POST"],
        "requests": 5,
        "window": 900,
    }
]


@override_settings(
    RATE_LIMIT_ENABLED=True,
    RATE_LIMIT_REQUESTS=100,
    RATE_LIMIT_WINDOW=900,
    RATE_LIMIT_SCOPES=SCOPES,
)
class TestRateLimitMiddleware(SimpleTestCase):
    """Test cases for RateLimitMiddleware."""

    def setUp(self):
        """Set up test fixtures."""

        def mock_get_response(request):
            return HttpResponse("OK")

        self.get_response = mock_get_response
        self.middleware = RateLimitMiddleware(self.get_response)

    def _create_request(self, method="GET", path="/api/restaurants"):
        """Helper to create a test request."""
        request = HttpRequest()
        request.method = method
        request.path = path
        request.META = {
            "REMOTE_ADDR": "127.0.0.1",
        }
        return request

    def test_builds_general_and_configured_scopes(self):
        """Test that the general bucket comes first, then configured ones."""
        names = [scope.name for scope in self.middleware.scopes]
        self.assertEqual(names, ["general", "auth"])
        self.assertEqual(self.middleware.scopes[1].max_requests, 5)

    @patch("core.middleware.rate_limit.cache")
    def test_allows_request_when_under_limit(self, mock_cache):
        """Test that request is allowed when under rate limit."""
        mock_cache.get.return_value = None  # First request
        request = self._create_request()

        response = self.middleware(request)

        self.assertEqual(response.status_code, 200)
        mock_cache.set.assert_called_once()
        self.assertEqual(mock_cache.set.call_args.args[0], "rate_limit:general:127.0.0.1")

    @patch("core.middleware.rate_limit.cache")
    def test_login_draws_from_both_buckets(self, mock_cache):
        """Test that a login attempt consumes general and auth tokens."""
        mock_cache.get.return_value = None

        self.middleware(self._create_request("POST", "/api/auth/login"))

        keys = [call.args[0] for call in mock_cache.set.call_args_list]
        self.assertEqual(
            keys, ["rate_limit:general:127.0.0.1", "rate_limit:auth:127.0.0.1"]
        )

    @patch("core.middleware.rate_limit.cache")
    def test_non_api_paths_are_not_limited(self, mock_cache):
        """Test that paths outside /api/ never touch the cache."""
        response = self.middleware(self._create_request(path="/uploads/a.webp"))

        self.assertEqual(response.status_code, 200)
        mock_cache.get.assert_not_called()

    @patch("core.middleware.rate_limit.time")
    @patch("core.middleware.rate_limit.cache")
    def test_rejects_request_when_over_limit(self, mock_cache, mock_time):
        """Test that request is rejected when rate limit exceeded."""
        mock_time.time.return_value = 1234567890.0
        # Simulate no tokens available (0 tokens, same refill time as current)
        mock_cache.get.return_value = (0, 1234567890.0)
        request = self._create_request()

        response = self.middleware(request)

        self.assertEqual(response.status_code, 429)
        self.assertIn("Retry-After", response)

    @patch("core.middleware.rate_limit.time")
    @patch("core.middleware.rate_limit.cache")
    def test_rate_limit_response_format(self, mock_cache, mock_time):
        """Test that rate limit response uses the standard error body."""
        mock_time.time.return_value = 1234567890.0
        mock_cache.get.return_value = (0, 1234567890.0)

        response = self.middleware(self._create_request())

        data = json.loads(response.content.decode("utf-8"))
        self.assertEqual(data["status"], 429)
        self.assertEqual(data["error"], "RATE_LIMITED")
        self.assertIn("message", data)
        self.assertIn("request_id", data)
        self.assertIn("timestamp", data)
        self.assertGreaterEqual(data["retry_after"], 1)

    @patch("core.middleware.rate_limit.time")
    @patch("core.middleware.rate_limit.cache")
    def test_tokens_refill_over_time(self, mock_cache, mock_time):
        """Test that an empty bucket refills after enough time has passed."""
        mock_time.time.return_value = 1000.0 + 900.0
        mock_cache.get.return_value = (0, 1000.0)

        response = self.middleware(self._create_request())

        self.assertEqual(response.status_code, 200)
        tokens, _ = mock_cache.set.call_args.args[1]
        self.assertEqual(tokens, 99)

    @patch("core.middleware.rate_limit.cache")
    def test_graceful_degradation_on_cache_failure(self, mock_cache):
        """Test that requests are allowed when the cache is unavailable."""
        mock_cache.get.side_effect = Exception("Redis connection failed")

        response = self.middleware(self._create_request())

        self.assertEqual(response.status_code, 200)

    @patch("core.middleware.rate_limit.cache")
    def test_disabled_middleware_passes_through(self, mock_cache):
        """Test that RATE_LIMIT_ENABLED=False skips every check."""
        with override_settings(RATE_LIMIT_ENABLED=False):
            middleware = RateLimitMiddleware(self.get_response)

        response = middleware(self._create_request())

        self.assertEqual(response.status_code, 200)
        mock_cache.get.assert_not_called()


class TestRateLimitScope(unittest.TestCase):
    """Test cases for RateLimitScope.matches."""

    def test_matches_method_and_prefix(self):
        """Test that both the method and the path prefix must match."""
        scope = RateLimitScope(
            name="reviews",
            max_requests=20,
            window=3600,
            path_prefixes=("/api/reviews",),
            methods=("POST",),
        )
        request = HttpRequest()
        request.path = "/api/reviews"

        request.method = "POST"
        self.assertTrue(scope.matches(request))
        request.method = "GET"
        self.assertFalse(scope.matches(request))


if __name__ == "__main__":
    unittest.main()
