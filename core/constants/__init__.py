"""Constants package for core application."""

from core.constants.http import (
    DEFAULT_RATE_LIMIT_REQUESTS,
    DEFAULT_RATE_LIMIT_WINDOW,
    PROCESS_TIME_HEADER,
    REQUEST_ID_HEADER,
    SECURITY_HEADERS,
    SLOW_REQUEST_THRESHOLD,
)
from core.constants.media import (
    ALLOWED_IMAGE_CONTENT_TYPES,
    IMAGE_MAX_DIMENSION,
    IMAGE_WEBP_QUALITY,
)
from core.constants.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
)

__all__ = [
    "ALLOWED_IMAGE_CONTENT_TYPES",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_RATE_LIMIT_REQUESTS",
    "DEFAULT_RATE_LIMIT_WINDOW",
    "IMAGE_MAX_DIMENSION",
    "IMAGE_WEBP_QUALITY",
    "MAX_PAGE_SIZE",
    "PROCESS_TIME_HEADER",
    "REQUEST_ID_HEADER",
    "SECURITY_HEADERS",
    "SLOW_REQUEST_THRESHOLD",
]
