"""Page-number pagination shared by repositories and list endpoints."""

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from django.db.models import QuerySet

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the numbers needed to render pagination.

    Pages past the end are valid and simply empty.
    """

    items: list[T]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        """Number of pages needed to hold ``total`` items."""
        return math.ceil(self.total / self.limit) if self.limit else 0

    def to_response(self, func: Callable[[T], Any]) -> dict[str, Any]:
        """Build the ``{data, pagination}`` body returned by list endpoints."""
        return {
            "data": [func(item) for item in self.items],
            "pagination": {
                "page": self.page,
                "limit": self.limit,
                "total": self.total,
                "totalPages": self.total_pages,
            },
        }


def paginate(queryset: QuerySet, page: int, limit: int) -> Page:
    """Slice a queryset into a page.

    Args:
        queryset: Ordered queryset to paginate
        page: 1-based page number
        limit: Page size

    Returns:
        Page holding at most ``limit`` model instances
    """
    offset = (page - 1) * limit
    total = queryset.count()
    items = list(queryset[offset : offset + limit]) if offset < total else []
    return Page(items=items, page=page, limit=limit, total=total)
