"""Actions checked by the access policy."""

from enum import Enum


class AccessAction(str, Enum):
    """Operations an actor can attempt against the API."""

    READ = "READ"
    CREATE_RESTAURANT = "CREATE_RESTAURANT"
    CREATE_MENU_ITEM = "CREATE_MENU_ITEM"
    CREATE_REVIEW = "CREATE_REVIEW"
    DELETE_REVIEW = "DELETE_REVIEW"
    ATTACH_RESTAURANT_IMAGE = "ATTACH_RESTAURANT_IMAGE"
    ATTACH_MENU_ITEM_IMAGE = "ATTACH_MENU_ITEM_IMAGE"
    ATTACH_REVIEW_IMAGE = "ATTACH_REVIEW_IMAGE"
