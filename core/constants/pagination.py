"""Pagination and discovery limits."""

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

DISCOVERY_MAX_LIMIT = 50
TOP_RATED_DEFAULT_LIMIT = 10
RECENT_REVIEWS_DEFAULT_LIMIT = 10
RECENT_PHOTOS_DEFAULT_LIMIT = 12
