"""Restaurant listing query schema."""

from core.schemas.common.pagination_params import PaginationParams


class RestaurantListQuery(PaginationParams):
    """Query parameters of GET /restaurants."""

    city: str | None = None
    cuisine: str | None = None
    search: str | None = None
