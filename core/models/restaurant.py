"""Restaurant model."""

from typing import ClassVar

from django.db import models


class Restaurant(models.Model):
    """A restaurant whose dishes can be reviewed."""

    restaurant_id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=200)
    address = models.CharField(max_length=300)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=50)
    zip_code = models.CharField(max_length=20)
    phone = models.CharField(max_length=30, null=True, blank=True)
    website = models.CharField(max_length=500, null=True, blank=True)
    cuisine = models.CharField(max_length=100)
    price_range = models.PositiveSmallIntegerField()
    image_url = models.CharField(max_length=500, null=True, blank=True)
    created_by = models.ForeignKey(
        "core.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="restaurants",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "restaurants"
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list[models.Index]] = [
            models.Index(fields=["city"], name="idx_restaurants_city"),
            models.Index(fields=["cuisine"], name="idx_restaurants_cuisine"),
        ]
        constraints: ClassVar[list[models.BaseConstraint]] = [
            models.CheckConstraint(
                condition=models.Q(price_range__gte=1, price_range__lte=4),
                name="restaurants_price_range_1_4",
            ),
        ]

    def __str__(self) -> str:
        """Return string representation of restaurant."""
        return f"{self.name} ({self.city})"

    def __repr__(self) -> str:
        """Return detailed representation of restaurant."""
        return (
            f"<Restaurant(restaurant_id={self.restaurant_id}, "
            f"name='{self.name}', cuisine='{self.cuisine}')>"
        )
