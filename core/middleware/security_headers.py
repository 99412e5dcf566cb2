"""Security headers middleware for API responses."""

from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from core.constants import SECURITY_HEADERS


class SecurityHeadersMiddleware:
    """Middleware to add security headers to all responses.

    - Strict-Transport-Security with preload: HTTPS only
    - Content-Security-Policy: restricts resource loading
    - X-Frame-Options, X-Content-Type-Options, X-XSS-Protection
    - Referrer-Policy and Permissions-Policy
    - Cache-Control, Pragma and Expires: API answers are never cached

    Headers already set by a view are left alone.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process the request and add security headers to the response.

        Args:
            request: The incoming HTTP request.

        Returns:
            The HTTP response with security headers added.
        """
        response = self.get_response(request)

        for header, value in SECURITY_HEADERS.items():
            response.setdefault(header, value)

        return response
