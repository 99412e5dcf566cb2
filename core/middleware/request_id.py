"""Request ID middleware for distributed tracing."""

import logging
import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from core.constants import REQUEST_ID_HEADER
from core.logging.context import bind_request_context, clear_request_context

logger = logging.getLogger(__name__)


def get_client_ip(request: HttpRequest) -> str:
    """Extract the client IP address from the request.

    Checks X-Forwarded-For header for proxied requests, falls back to REMOTE_ADDR.

    Args:
        request: The HTTP request.

    Returns:
        The client IP address.
    """
    x_forwarded_for = request.headers.get("x-forwarded-for")
    if x_forwarded_for:
        # Get the first IP in the chain (the original client)
        return x_forwarded_for.split(",")[0].strip()
    return str(request.META.get("REMOTE_ADDR", "unknown"))


class RequestIDMiddleware:
    """Middleware to handle request ID for distributed tracing.

    This middleware:
    - Checks for an existing X-Request-ID header in the incoming request
    - Generates a new UUID if no request ID is present
    - Binds the request ID, client IP, method and path to the logging context
    - Adds the request ID to the response headers
    - Clears the logging context after the request completes
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process the request and add request ID tracking.

        Args:
            request: The incoming HTTP request.

        Returns:
            The HTTP response with request ID header added.
        """
        request_id = request.headers.get(REQUEST_ID_HEADER)
        if not request_id:
            request_id = str(uuid.uuid4())

        bind_request_context(
            request_id,
            client_ip=get_client_ip(request),
            method=request.method,
            path=request.path,
        )

        # Store on request object for easy access by views
        request.request_id = request_id  # type: ignore[attr-defined]

        try:
            response = self.get_response(request)
            response[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            # Context variables outlive the request on reused worker threads
            clear_request_context()
