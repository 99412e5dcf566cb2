"""Menu item response schemas."""

from core.schemas.menu_item.response.menu_item_response import (
    MenuItemDetailResponse,
    MenuItemResponse,
)

__all__ = ["MenuItemDetailResponse", "MenuItemResponse"]
