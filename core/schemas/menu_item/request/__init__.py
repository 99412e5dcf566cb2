"""Menu item request schemas."""

from core.schemas.menu_item.request.menu_item_create_request import (
    MenuItemCreateRequest,
)
from core.schemas.menu_item.request.menu_item_list_query import MenuItemListQuery

__all__ = ["MenuItemCreateRequest", "MenuItemListQuery"]
