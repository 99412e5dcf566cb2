"""Unit tests for HealthService."""

import unittest
from unittest.mock import patch

from django.db.utils import OperationalError

from core.services.health_service import HealthService


@patch("core.services.health_service.cache")
@patch("core.services.health_service.connection")
class TestHealthService(unittest.TestCase):
    """Test cases for HealthService."""

    def setUp(self):
        """Set up test fixtures."""
        self.service = HealthService(version="9.9.9")

    def _cache_ok(self, mock_cache):
        mock_cache.get.return_value = "ok"

    def test_liveness_is_always_alive(self, mock_connection, mock_cache):
        """Test that liveness never checks dependencies."""
        self.assertEqual(self.service.get_liveness_status().status, "alive")
        mock_connection.ensure_connection.assert_not_called()

    def test_healthy_when_database_up(self, mock_connection, mock_cache):
        """Test the combined health check with a working database."""
        health = self.service.get_health_status()

        self.assertEqual(health.status, "healthy")
        self.assertEqual(health.database, "connected")
        self.assertEqual(health.version, "9.9.9")

    def test_unhealthy_when_database_down(self, mock_connection, mock_cache):
        """Test the combined health check with the database unreachable."""
        mock_connection.ensure_connection.side_effect = OperationalError("refused")

        health = self.service.get_health_status()

        self.assertEqual(health.status, "unhealthy")
        self.assertEqual(health.database, "disconnected")

    def test_ready_when_all_dependencies_up(self, mock_connection, mock_cache):
        """Test readiness with database and cache healthy."""
        self._cache_ok(mock_cache)

        readiness = self.service.get_readiness_status()

        self.assertTrue(readiness.ready)
        self.assertFalse(readiness.degraded)
        self.assertEqual(readiness.status, "ready")
        self.assertEqual(set(readiness.dependencies), {"database", "cache"})

    def test_not_ready_without_database(self, mock_connection, mock_cache):
        """Test that a database outage makes the service not ready."""
        self._cache_ok(mock_cache)
        mock_connection.ensure_connection.side_effect = OperationalError("refused")

        readiness = self.service.get_readiness_status()

        self.assertFalse(readiness.ready)
        self.assertEqual(readiness.status, "not ready")
        self.assertIn("refused", readiness.dependencies["database"].message)

    def test_degraded_without_cache(self, mock_connection, mock_cache):
        """Test that a cache outage only degrades the service."""
        mock_cache.set.side_effect = ConnectionError("redis down")

        readiness = self.service.get_readiness_status()

        self.assertTrue(readiness.ready)
        self.assertTrue(readiness.degraded)
        self.assertEqual(readiness.status, "degraded")
        self.assertEqual(readiness.dependencies["cache"].status, "error")

    def test_results_are_cached_until_reset(self, mock_connection, mock_cache):
        """Test that repeated checks within the TTL reuse the result."""
        self.service.check_database_health()
        self.service.check_database_health()
        self.assertEqual(mock_connection.ensure_connection.call_count, 1)

        self.service.reset()
        self.service.check_database_health()
        self.assertEqual(mock_connection.ensure_connection.call_count, 2)


if __name__ == "__main__":
    unittest.main()
