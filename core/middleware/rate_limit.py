"""Rate limiting middleware using a cache-backed token bucket algorithm."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from django.conf import settings
from django.core.cache import cache
from django.http import HttpRequest, HttpResponse, JsonResponse

from core.constants import (
    DEFAULT_RATE_LIMIT_REQUESTS,
    DEFAULT_RATE_LIMIT_WINDOW,
    REQUEST_ID_HEADER,
)
from core.exceptions.handlers import create_error_response
from core.logging.context import get_request_id
from core.middleware.request_id import get_client_ip

logger = logging.getLogger(__name__)

API_PREFIX = "/api/"
RATE_LIMIT_MESSAGE = "Too many requests, please try again later."


@dataclass(frozen=True)
class RateLimitScope:
    """A token bucket applied to the requests it matches."""

    name: str
    max_requests: int
    window: int
    path_prefixes: tuple[str, ...] = (API_PREFIX,)
    methods: tuple[str, ...] = ()

    def matches(self, request: HttpRequest) -> bool:
        """Return True if the bucket applies to this request."""
        if self.methods and request.method not in self.methods:
            return False
        return any(request.path.startswith(prefix) for prefix in self.path_prefixes)


class RateLimitMiddleware:
    """Middleware to enforce rate limiting using a token bucket algorithm.

    Buckets live in the Django cache (Redis in production), so limits hold
    across service instances. Every API request draws from the general
    bucket; authentication and review submission additionally draw from
    their own, stricter buckets configured in ``RATE_LIMIT_SCOPES``.

    Rate limits are applied per client IP address.

    If the cache is unavailable, the middleware logs the failure and allows
    the request to proceed (graceful degradation).
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response
        self.enabled = getattr(settings, "RATE_LIMIT_ENABLED", True)
        general = RateLimitScope(
            name="general",
            max_requests=getattr(
                settings, "RATE_LIMIT_REQUESTS", DEFAULT_RATE_LIMIT_REQUESTS
            ),
            window=getattr(settings, "RATE_LIMIT_WINDOW", DEFAULT_RATE_LIMIT_WINDOW),
        )
        self.scopes = [general] + [
            RateLimitScope(
                name=scope["name"],
                max_requests=scope["requests"],
                window=scope["window"],
                path_prefixes=tuple(scope["path_prefixes"]),
                methods=tuple(scope.get("methods", ())),
            )
            for scope in getattr(settings, "RATE_LIMIT_SCOPES", [])
        ]

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process the request and enforce rate limiting.

        Args:
            request: The incoming HTTP request.

        Returns:
            The HTTP response, or a 429 response if rate limit exceeded.
        """
        if not self.enabled:
            return self.get_response(request)

        client_ip = get_client_ip(request)

        for scope in self.scopes:
            if not scope.matches(request):
                continue
            allowed, retry_after = self._check_rate_limit(scope, client_ip)
            if not allowed:
                logger.warning(
                    f"Rate limit exceeded for IP: {client_ip} (scope: {scope.name})"
                )
                return self._too_many_requests(retry_after)

        return self.get_response(request)

    def _too_many_requests(self, retry_after: int) -> JsonResponse:
        request_id = get_request_id()
        body = create_error_response(
            status_code=429,
            error="RATE_LIMITED",
            message=RATE_LIMIT_MESSAGE,
            request_id=request_id,
        )
        body["retry_after"] = retry_after
        headers = {"Retry-After": str(retry_after)}
        if request_id:
            headers[REQUEST_ID_HEADER] = request_id
        return JsonResponse(body, status=429, headers=headers)

    def _check_rate_limit(
        self, scope: RateLimitScope, client_ip: str
    ) -> tuple[bool, int]:
        """Check if the client has exceeded the rate limit of a scope.

        Uses token bucket algorithm:
        - Each client gets a bucket with max_requests tokens
        - Tokens refill at a rate of max_requests per window
        - Each request consumes one token
        - If no tokens available, request is rejected

        Args:
            scope: The bucket being drawn from.
            client_ip: The client IP address.

        Returns:
            Tuple of (allowed, retry_after_seconds).
            allowed is True if the request should be processed.
            retry_after_seconds indicates when to retry if rate limited.
        """
        cache_key = f"rate_limit:{scope.name}:{client_ip}"

        try:
            rate_limit_data = cache.get(cache_key)

            current_time = time.time()

            if rate_limit_data is None:
                # First request from this client
                tokens = scope.max_requests - 1
            else:
                tokens, last_refill = rate_limit_data

                time_elapsed = current_time - last_refill
                tokens_to_add = (time_elapsed / scope.window) * scope.max_requests
                tokens = min(scope.max_requests, tokens + tokens_to_add)

                if tokens < 1:
                    tokens_needed = 1 - tokens
                    retry_after = int(
                        (tokens_needed / scope.max_requests) * scope.window
                    )
                    return False, max(1, retry_after)

                tokens -= 1

            cache.set(cache_key, (tokens, current_time), timeout=scope.window * 2)

            return True, 0

        except Exception as e:
            # Cache backends raise their own connection errors; fail open
            logger.error(f"Rate limit check failed for {client_ip}: {e}")
            return True, 0
