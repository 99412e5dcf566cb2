"""Component tests for health check endpoints.

This module tests the health check endpoints through the full Django
request/response cycle, including URL routing and HTTP handling.
"""

from unittest.mock import patch

from django.db.utils import OperationalError
from django.test import Client, TestCase

from core.urls import registry


class TestHealthCheckEndpointIntegration(TestCase):
    """Component tests for health check endpoints through HTTP."""

    def setUp(self):
        """Set up test fixtures."""
        self.client = Client()
        # Force fresh checks instead of results cached by earlier tests
        registry.health.reset()
        self.addCleanup(registry.health.reset)

    def test_health_endpoint_reports_database(self):
        """Test that GET /api/health returns 200 with the database connected."""
        response = self.client.get("/api/health")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["status"], "healthy")
        self.assertEqual(data["database"], "connected")
        self.assertIn("timestamp", data)
        self.assertIn("version", data)

    def test_liveness_endpoint_returns_200_and_alive_status(self):
        """Test that GET /api/live returns HTTP 200 with alive status."""
        response = self.client.get("/api/live")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "alive"})

    def test_readiness_endpoint_returns_200_when_dependencies_healthy(self):
        """Test GET /api/ready returns HTTP 200 with ready status."""
        response = self.client.get("/api/ready")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["status"], "ready")
        self.assertTrue(data["ready"])
        self.assertFalse(data["degraded"])
        self.assertTrue(data["dependencies"]["database"]["healthy"])
        self.assertEqual(data["dependencies"]["database"]["status"], "healthy")
        self.assertTrue(data["dependencies"]["cache"]["healthy"])
        self.assertIn("responseTimeMs", data["dependencies"]["database"])

    @patch("core.services.health_service.connection.ensure_connection")
    def test_endpoints_return_503_when_database_down(self, mock_ensure_connection):
        """Test health and readiness answer 503 without a database."""
        mock_ensure_connection.side_effect = OperationalError("Connection refused")

        health = self.client.get("/api/health")
        ready = self.client.get("/api/ready")

        self.assertEqual(health.status_code, 503)
        self.assertEqual(health.json()["database"], "disconnected")
        self.assertEqual(ready.status_code, 503)
        data = ready.json()
        self.assertFalse(data["ready"])
        self.assertEqual(data["status"], "not ready")
        self.assertIn("Connection refused", data["dependencies"]["database"]["message"])

    @patch("core.services.health_service.cache")
    def test_readiness_degraded_when_cache_down(self, mock_cache):
        """Test that a cache outage answers 200 degraded."""
        mock_cache.set.side_effect = ConnectionError("Redis unavailable")

        response = self.client.get("/api/ready")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data["ready"])
        self.assertTrue(data["degraded"])
        self.assertEqual(data["status"], "degraded")

    def test_health_needs_no_credentials(self):
        """Test that an invalid token does not affect health checks."""
        response = self.client.get(
            "/api/live", headers={"Authorization": "Bearer garbage"}
        )

        self.assertEqual(response.status_code, 200)
