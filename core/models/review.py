"""Review model."""

from typing import ClassVar

from django.db import models


class Review(models.Model):
    """One user's 1-5 star rating and optional comment for a menu item.

    A user may review a given menu item at most once.
    """

    review_id = models.BigAutoField(primary_key=True)
    menu_item = models.ForeignKey(
        "core.MenuItem",
        on_delete=models.CASCADE,
        related_name="reviews",
    )
    user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="reviews",
    )
    rating = models.PositiveSmallIntegerField()
    comment = models.TextField(null=True, blank=True)
    image_url = models.CharField(max_length=500, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "reviews"
        ordering: ClassVar[list[str]] = ["-created_at"]
        constraints: ClassVar[list[models.BaseConstraint]] = [
            models.UniqueConstraint(
                fields=["menu_item", "user"], name="reviews_menu_item_user_unique"
            ),
            models.CheckConstraint(
                condition=models.Q(rating__gte=1, rating__lte=5),
                name="reviews_rating_1_5",
            ),
        ]

    def __str__(self) -> str:
        """Return string representation of review."""
        return f"Review {self.review_id}: {self.rating} stars for item {self.menu_item_id}"

    def __repr__(self) -> str:
        """Return detailed representation of review."""
        return (
            f"<Review(review_id={self.review_id}, "
            f"menu_item_id={self.menu_item_id}, "
            f"user_id={self.user_id}, "
            f"rating={self.rating})>"
        )
