"""Recomputes the cached rating aggregate of a menu item."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

import structlog
from django.db import DatabaseError, transaction
from django.db.models import Count, Sum
from django.utils import timezone

from core.exceptions import AggregateRecomputationError, MenuItemNotFoundError
from core.models import MenuItem, Review

logger = structlog.get_logger(__name__)

RATING_QUANTUM = Decimal("0.01")
ZERO_RATING = Decimal("0.00")


@dataclass(frozen=True)
class RatingSummary:
    """Aggregate written back onto a menu item."""

    menu_item_id: int
    avg_rating: Decimal
    review_count: int


def average_rating(total: int, count: int) -> Decimal:
    """Mean of ``count`` ratings summing to ``total``, rounded half-up to 0.01.

    Returns 0.00 when there are no ratings.
    """
    if count == 0:
        return ZERO_RATING
    return (Decimal(total) / Decimal(count)).quantize(
        RATING_QUANTUM, rounding=ROUND_HALF_UP
    )


class RatingAggregator:
    """Derives ``avg_rating`` and ``review_count`` from the review rows.

    Every run rescans all reviews of the item instead of applying a delta,
    so concurrent runs converge on the same state whatever their order.
    Call it after the review change has committed.
    """

    def __init__(self, using: str = "default") -> None:
        """Initialize the aggregator.

        Args:
            using: Database alias every query runs against
        """
        self.using = using

    def recompute(self, menu_item_id: int) -> RatingSummary:
        """Rewrite the aggregate of one menu item.

        The item row is locked for the duration of the read and the write,
        and both fields are written by a single UPDATE.

        Args:
            menu_item_id: Menu item to recompute

        Returns:
            The aggregate that was written

        Raises:
            MenuItemNotFoundError: If the menu item no longer exists
            AggregateRecomputationError: If the database rejects the read or write
        """
        try:
            with transaction.atomic(using=self.using):
                locked = list(
                    MenuItem.objects.using(self.using)
                    .select_for_update()
                    .filter(menu_item_id=menu_item_id)
                    .values_list("menu_item_id", flat=True)
                )
                if not locked:
                    raise MenuItemNotFoundError(menu_item_id)

                totals = (
                    Review.objects.using(self.using)
                    .filter(menu_item_id=menu_item_id)
                    .aggregate(count=Count("review_id"), total=Sum("rating"))
                )
                review_count = totals["count"] or 0
                avg_rating = average_rating(totals["total"] or 0, review_count)

                MenuItem.objects.using(self.using).filter(
                    menu_item_id=menu_item_id
                ).update(
                    avg_rating=avg_rating,
                    review_count=review_count,
                    updated_at=timezone.now(),
                )
        except DatabaseError as e:
            logger.error(
                "Rating aggregate recomputation failed, aggregate may be stale",
                menu_item_id=menu_item_id,
                error=str(e),
                exc_info=True,
            )
            raise AggregateRecomputationError(menu_item_id) from e

        logger.debug(
            "Rating aggregate recomputed",
            menu_item_id=menu_item_id,
            avg_rating=str(avg_rating),
            review_count=review_count,
        )
        return RatingSummary(
            menu_item_id=menu_item_id,
            avg_rating=avg_rating,
            review_count=review_count,
        )
