"""Menu item schemas."""

from core.schemas.menu_item.request import MenuItemCreateRequest, MenuItemListQuery
from core.schemas.menu_item.response import MenuItemDetailResponse, MenuItemResponse

__all__ = [
    "MenuItemCreateRequest",
    "MenuItemDetailResponse",
    "MenuItemListQuery",
    "MenuItemResponse",
]
