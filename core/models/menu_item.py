"""Menu item model."""

from decimal import Decimal
from typing import ClassVar

from django.db import models


class MenuItem(models.Model):
    """A dish offered by a restaurant.

    ``avg_rating`` and ``review_count`` are a cached projection over the
    item's reviews. They are only ever written by the rating aggregator.
    """

    menu_item_id = models.BigAutoField(primary_key=True)
    restaurant = models.ForeignKey(
        "core.Restaurant",
        on_delete=models.CASCADE,
        related_name="menu_items",
    )
    name = models.CharField(max_length=200)
    description = models.TextField(null=True, blank=True)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    category = models.CharField(max_length=100)
    image_url = models.CharField(max_length=500, null=True, blank=True)
    avg_rating = models.DecimalField(
        max_digits=3, decimal_places=2, default=Decimal("0.00")
    )
    review_count = models.PositiveIntegerField(default=0)
    created_by = models.ForeignKey(
        "core.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="menu_items",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "menu_items"
        ordering: ClassVar[list[str]] = ["category", "name"]
        indexes: ClassVar[list[models.Index]] = [
            models.Index(fields=["category"], name="idx_menu_items_category"),
            models.Index(fields=["-avg_rating"], name="idx_menu_items_avg_rating"),
        ]

    def __str__(self) -> str:
        """Return string representation of menu item."""
        return f"{self.name} ({self.avg_rating} from {self.review_count} reviews)"

    def __repr__(self) -> str:
        """Return detailed representation of menu item."""
        return (
            f"<MenuItem(menu_item_id={self.menu_item_id}, "
            f"restaurant_id={self.restaurant_id}, "
            f"avg_rating={self.avg_rating}, "
            f"review_count={self.review_count})>"
        )
