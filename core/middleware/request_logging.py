"""Access logging and process time middleware."""

import logging
import time
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from core.constants import PROCESS_TIME_HEADER, SLOW_REQUEST_THRESHOLD

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """Middleware to log every request and track its processing time.

    This middleware:
    - Measures how long the rest of the chain takes
    - Adds the X-Process-Time header to the response
    - Logs one line per request, at ERROR for 5xx, WARNING for 4xx and
      INFO otherwise
    - Logs slow requests (those exceeding the threshold)

    Place it after RequestIDMiddleware so the lines carry the request ID.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process the request, then log its outcome.

        Args:
            request: The incoming HTTP request.

        Returns:
            The HTTP response with process time header added.
        """
        start_time = time.perf_counter()

        response = self.get_response(request)

        duration = time.perf_counter() - start_time
        response[PROCESS_TIME_HEADER] = f"{duration:.6f}"

        if response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        logger.log(
            level,
            f"{request.method} {request.path} {response.status_code}",
            extra={
                "status_code": response.status_code,
                "duration_ms": round(duration * 1000, 2),
            },
        )

        if duration > SLOW_REQUEST_THRESHOLD:
            logger.warning(
                f"Slow request detected: {request.method} {request.path} "
                f"took {duration:.2f}s (threshold: {SLOW_REQUEST_THRESHOLD}s)"
            )

        return response
