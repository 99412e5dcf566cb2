"""Menu listing query schema."""

from core.schemas.common.pagination_params import PaginationParams


class MenuItemListQuery(PaginationParams):
    """Query parameters of the restaurant menu listing."""

    category: str | None = None
