"""Unit tests for exception handlers."""

import logging
import unittest
from unittest.mock import Mock, patch

from django.core.exceptions import PermissionDenied
from django.http import Http404

from pydantic import BaseModel, ValidationError
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed, NotFound
from rest_framework.views import APIView

from core.exceptions import (
    AggregateRecomputationError,
    DuplicateReviewError,
    InvalidRatingError,
    MenuItemNotFoundError,
    RequestValidationError,
)
from core.exceptions.handlers import INTERNAL_ERROR_MESSAGE, custom_exception_handler


class TestCustomExceptionHandler(unittest.TestCase):
    """Test cases for custom exception handler."""

    def setUp(self):
        """Set up test fixtures."""
        self.mock_request = Mock()
        self.mock_request.path = "/test/"
        self.mock_request.method = "GET"
        self.mock_request.META = {"REMOTE_ADDR": "127.0.0.1"}

        self.mock_view = Mock(spec=APIView)
        self.mock_view.request = self.mock_request

        self.context = {"view": self.mock_view, "request": self.mock_request}

        patcher = patch(
            "core.exceptions.handlers.get_request_id", return_value="test-request-id"
        )
        patcher.start()
        self.addCleanup(patcher.stop)

    def assertErrorBody(self, response, status_code, error):
        """Assert the standard error body shape."""
        self.assertEqual(response.status_code, status_code)
        self.assertEqual(response.data["status"], status_code)
        self.assertEqual(response.data["error"], error)
        self.assertEqual(response.data["request_id"], "test-request-id")
        self.assertIn("message", response.data)
        self.assertIn("timestamp", response.data)
        self.assertEqual(response["X-Request-ID"], "test-request-id")

    def test_handles_drf_not_found_exception(self):
        """Test that DRF NotFound exception is handled correctly."""
        response = custom_exception_handler(NotFound("Gone"), self.context)

        self.assertErrorBody(response, status.HTTP_404_NOT_FOUND, "NOT_FOUND")
        self.assertEqual(response.data["message"], "Gone")

    def test_handles_authentication_failed(self):
        """Test that AuthenticationFailed keeps its message."""
        response = custom_exception_handler(
            AuthenticationFailed("Invalid email or password"), self.context
        )

        self.assertErrorBody(
            response, status.HTTP_401_UNAUTHORIZED, "AUTHENTICATION_FAILED"
        )
        self.assertEqual(response.data["message"], "Invalid email or password")

    def test_handles_django_http404(self):
        """Test that Django Http404 exception is handled correctly."""
        response = custom_exception_handler(Http404("Page not found"), self.context)

        self.assertErrorBody(response, status.HTTP_404_NOT_FOUND, "NOT_FOUND")

    def test_handles_django_permission_denied(self):
        """Test that Django PermissionDenied exception is handled correctly."""
        response = custom_exception_handler(PermissionDenied(), self.context)

        self.assertErrorBody(response, status.HTTP_403_FORBIDDEN, "PERMISSION_DENIED")

    def test_handles_not_found_domain_error(self):
        """Test that resource errors map to 404 with their message."""
        response = custom_exception_handler(MenuItemNotFoundError(3), self.context)

        self.assertErrorBody(response, status.HTTP_404_NOT_FOUND, "NOT_FOUND")
        self.assertEqual(response.data["message"], "Menu item not found")

    def test_handles_duplicate_review(self):
        """Test that a duplicate review maps to 409."""
        response = custom_exception_handler(DuplicateReviewError(3, 7), self.context)

        self.assertErrorBody(response, status.HTTP_409_CONFLICT, "CONFLICT")
        self.assertEqual(
            response.data["message"], "You have already reviewed this menu item"
        )

    def test_validation_errors_are_listed(self):
        """Test that field errors are returned under 'errors'."""
        response = custom_exception_handler(InvalidRatingError(6), self.context)

        self.assertErrorBody(response, status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR")
        self.assertEqual(
            response.data["errors"],
            [{"field": "rating", "message": "Rating must be between 1 and 5"}],
        )

    def test_server_side_domain_errors_are_opaque(self):
        """Test that 5xx application errors hide their message."""
        response = custom_exception_handler(
            AggregateRecomputationError(3), self.context
        )

        self.assertErrorBody(
            response, status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"
        )
        self.assertEqual(response.data["message"], INTERNAL_ERROR_MESSAGE)

    def test_handles_unexpected_exception(self):
        """Test that unknown exceptions become an opaque 500."""
        response = custom_exception_handler(
            RuntimeError("secret details"), self.context
        )

        self.assertErrorBody(
            response, status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"
        )
        self.assertNotIn("secret", response.data["message"])

    @patch("core.exceptions.handlers.logger")
    def test_client_errors_log_warning_server_errors_log_error(self, mock_logger):
        """Test that the log level follows the response status."""
        custom_exception_handler(NotFound(), self.context)
        self.assertEqual(mock_logger.log.call_args.args[0], logging.WARNING)

        custom_exception_handler(RuntimeError("boom"), self.context)
        self.assertEqual(mock_logger.log.call_args.args[0], logging.ERROR)


class TestRequestValidationErrorFromPydantic(unittest.TestCase):
    """Test cases for RequestValidationError.from_pydantic."""

    def test_reports_each_field(self):
        """Test that every invalid field is reported by location."""

        class Body(BaseModel):
            name: str
            price: float

        try:
            Body.model_validate({"price": "cheap"})
        except ValidationError as e:
            error = RequestValidationError.from_pydantic(e)

        fields = sorted(item["field"] for item in error.errors)
        self.assertEqual(fields, ["name", "price"])
        self.assertEqual(error.status_code, 400)

    def test_strips_custom_validator_prefix(self):
        """Test that 'Value error, ' is removed from validator messages."""
        from core.schemas import RestaurantCreateRequest  # noqa: PLC0415

        try:
            RestaurantCreateRequest.model_validate({"name": "  "})
        except ValidationError as e:
            error = RequestValidationError.from_pydantic(e)

        messages = {item["field"]: item["message"] for item in error.errors}
        self.assertEqual(messages["name"], "This field is required")


if __name__ == "__main__":
    unittest.main()
