"""Middleware components for the BiteLogs API."""

from core.middleware.rate_limit import RateLimitMiddleware
from core.middleware.request_id import RequestIDMiddleware
from core.middleware.request_logging import RequestLoggingMiddleware
from core.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "RateLimitMiddleware",
    "RequestIDMiddleware",
    "RequestLoggingMiddleware",
    "SecurityHeadersMiddleware",
]
