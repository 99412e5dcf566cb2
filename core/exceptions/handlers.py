"""Global exception handler for the BiteLogs API."""

import logging
import traceback
from datetime import UTC, datetime
from typing import Any

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.http import Http404

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.exceptions.domain_exceptions import ApplicationError, RequestValidationError
from core.logging.context import get_request_id

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred."


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Custom exception handler for Django REST Framework.

    Every error leaves the API with the same body:
    ``{status, error, message, request_id, timestamp}`` plus ``errors`` for
    field-level validation failures. Server errors never expose their
    message to clients; the detail goes to the logs instead.

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response object with the error details.
    """
    view = context.get("view")
    request = context.get("request") or (view.request if view else None)
    request_id = get_request_id()

    # Let DRF handle its own exceptions first (keeps WWW-Authenticate etc.)
    response = exception_handler(exc, context)

    if response is not None:
        response.data = create_error_response(
            status_code=response.status_code,
            error=_drf_error_code(exc),
            message=_drf_error_message(exc, response.status_code),
            request_id=request_id,
        )
    elif isinstance(exc, ApplicationError):
        message = exc.message if exc.status_code < 500 else INTERNAL_ERROR_MESSAGE
        response_data = create_error_response(
            status_code=exc.status_code,
            error=exc.error_code,
            message=message,
            request_id=request_id,
        )
        if isinstance(exc, RequestValidationError) and exc.errors:
            response_data["errors"] = exc.errors
        response = Response(response_data, status=exc.status_code)
    else:
        # Unhandled exception - log as error and return 500
        response = Response(
            create_error_response(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                error="INTERNAL_ERROR",
                message=INTERNAL_ERROR_MESSAGE,
                request_id=request_id,
            ),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if request_id:
        response["X-Request-ID"] = request_id

    _log_exception(exc, request, response)

    return response


def create_error_response(
    status_code: int, error: str, message: str, request_id: str | None
) -> dict[str, Any]:
    """Create a standardized error response.

    Args:
        status_code: The HTTP status code.
        error: Machine-readable error code.
        message: The error message to return to the client.
        request_id: The request ID for tracing.

    Returns:
        Dictionary with standard error response format.
    """
    return {
        "status": status_code,
        "error": error,
        "message": message,
        "request_id": request_id,
        "timestamp": datetime.now(UTC).isoformat(),
    }


def _drf_error_code(exc: Exception) -> str:
    if isinstance(exc, Http404):
        return "NOT_FOUND"
    if isinstance(exc, PermissionDenied):
        return "PERMISSION_DENIED"
    return str(getattr(exc, "default_code", "error")).upper()


def _drf_error_message(exc: Exception, status_code: int) -> str:
    """Flatten DRF exception detail into a single client message."""
    if status_code >= 500:
        return INTERNAL_ERROR_MESSAGE
    if isinstance(exc, Http404):
        return "The requested resource was not found."
    if isinstance(exc, PermissionDenied):
        return "You do not have permission to perform this action."
    detail = getattr(exc, "detail", None)
    if isinstance(detail, str):
        return detail
    if isinstance(detail, list) and detail:
        return str(detail[0])
    if isinstance(detail, dict) and detail:
        field, messages = next(iter(detail.items()))
        first = messages[0] if isinstance(messages, list) and messages else messages
        return f"{field}: {first}"
    return str(exc) or "Request failed"


def _log_exception(
    exc: Exception,
    request: Any,
    response: Response | None,
) -> None:
    """Log detailed exception information for troubleshooting.

    Client errors (4xx) are logged as warnings, everything else as errors.
    In DEBUG mode, logs include stack traces and request details.

    Args:
        exc: The exception that was raised.
        request: The HTTP request object.
        response: The response object (if available).
    """
    status_code = response.status_code if response is not None else 500
    log_level = logging.WARNING if 400 <= status_code < 500 else logging.ERROR

    error_type = type(exc).__name__
    error_message = str(exc)
    request_path = request.path if request else "unknown"
    request_method = request.method if request else "unknown"

    log_message = (
        f"Exception occurred: {error_type}: {error_message} | "
        f"Path: {request_method} {request_path} | "
        f"Status: {status_code}"
    )

    if settings.DEBUG:
        stack_trace = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        log_message += f"\nStack trace:\n{stack_trace}"

        if request:
            log_message += f"\nRequest details: {_get_request_details(request)}"

    logger.log(log_level, log_message)


def _get_request_details(request: Any) -> str:
    """Extract relevant request details for logging.

    Args:
        request: The HTTP request object.

    Returns:
        String with formatted request details.
    """
    details = {
        "method": request.method,
        "path": request.path,
        "user": getattr(request, "user", "anonymous"),
        "ip": request.META.get("REMOTE_ADDR", "unknown"),
    }

    if request.GET:
        details["query_params"] = dict(request.GET)

    return str(details)
