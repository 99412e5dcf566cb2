"""Repository for review persistence."""

import structlog
from django.db import IntegrityError, transaction
from django.utils import timezone

from core.exceptions import DuplicateReviewError, InvalidRatingError
from core.models import Review
from core.pagination import Page, paginate

logger = structlog.get_logger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def is_valid_rating(rating: object) -> bool:
    """Return True for an integer (not a bool) between 1 and 5."""
    return (
        isinstance(rating, int)
        and not isinstance(rating, bool)
        and MIN_RATING <= rating <= MAX_RATING
    )


class ReviewRepository:
    """Stores reviews, one per (menu item, user) pair.

    The repository enforces ownership on delete but knows nothing about
    roles; admin overrides are decided by the caller.
    """

    def __init__(self, using: str = "default") -> None:
        """Initialize the repository.

        Args:
            using: Database alias every query runs against
        """
        self.using = using

    def _reviews(self):
        return Review.objects.using(self.using)

    def create(
        self,
        menu_item_id: int,
        author_id: int,
        rating: int,
        comment: str | None = None,
    ) -> Review:
        """Insert a review.

        The existence check and the insert share one transaction. A
        concurrent duplicate that slips past the check is stopped by the
        unique constraint and reported the same way.

        Args:
            menu_item_id: Reviewed menu item
            author_id: Reviewing user
            rating: Integer between 1 and 5
            comment: Optional free text

        Returns:
            The created review

        Raises:
            InvalidRatingError: If rating is not an integer in [1, 5]
            DuplicateReviewError: If the user already reviewed the item
        """
        if not is_valid_rating(rating):
            raise InvalidRatingError(rating)

        try:
            with transaction.atomic(using=self.using):
                if (
                    self._reviews()
                    .filter(menu_item_id=menu_item_id, user_id=author_id)
                    .exists()
                ):
                    raise DuplicateReviewError(menu_item_id, author_id)
                review = self._reviews().create(
                    menu_item_id=menu_item_id,
                    user_id=author_id,
                    rating=rating,
                    comment=comment or None,
                )
        except IntegrityError as e:
            if (
                self._reviews()
                .filter(menu_item_id=menu_item_id, user_id=author_id)
                .exists()
            ):
                logger.info(
                    "Concurrent duplicate review rejected by constraint",
                    menu_item_id=menu_item_id,
                    user_id=author_id,
                )
                raise DuplicateReviewError(menu_item_id, author_id) from e
            raise

        logger.info(
            "Review created",
            review_id=review.review_id,
            menu_item_id=menu_item_id,
            user_id=author_id,
        )
        return review

    def find_by_id(self, review_id: int) -> Review | None:
        """Fetch a review with its author, or None."""
        return self._reviews().select_related("user").filter(review_id=review_id).first()

    def find_by_menu_item(
        self, menu_item_id: int, page: int, page_size: int
    ) -> Page[Review]:
        """Return a page of an item's reviews, most recent first, with authors."""
        queryset = (
            self._reviews()
            .select_related("user")
            .filter(menu_item_id=menu_item_id)
            .order_by("-created_at", "-review_id")
        )
        return paginate(queryset, page, page_size)

    def find_by_user(self, user_id: int, page: int, page_size: int) -> Page[Review]:
        """Return a page of a user's reviews, most recent first, with authors."""
        queryset = (
            self._reviews()
            .select_related("user")
            .filter(user_id=user_id)
            .order_by("-created_at", "-review_id")
        )
        return paginate(queryset, page, page_size)

    def delete(self, review_id: int, requesting_user_id: int) -> bool:
        """Delete a review owned by the requesting user.

        Args:
            review_id: Review to delete
            requesting_user_id: Must match the review's author

        Returns:
            True if exactly that review was removed, False otherwise
        """
        with transaction.atomic(using=self.using):
            deleted, _ = (
                self._reviews()
                .filter(review_id=review_id, user_id=requesting_user_id)
                .delete()
            )
        if deleted:
            logger.info("Review deleted", review_id=review_id)
        return deleted > 0

    def attach_image(self, review_id: int, image_ref: str) -> Review | None:
        """Set the image of a review.

        Returns:
            The updated review, or None if it does not exist
        """
        updated = self._reviews().filter(review_id=review_id).update(
            image_url=image_ref, updated_at=timezone.now()
        )
        if not updated:
            return None
        return self.find_by_id(review_id)

    def recent(self, limit: int) -> list[Review]:
        """Newest reviews with author, menu item and restaurant."""
        return list(
            self._reviews()
            .select_related("user", "menu_item", "menu_item__restaurant")
            .order_by("-created_at", "-review_id")[:limit]
        )

    def recent_with_images(self, limit: int) -> list[Review]:
        """Newest reviews that carry an image."""
        return list(
            self._reviews()
            .select_related("menu_item", "menu_item__restaurant")
            .filter(image_url__isnull=False)
            .exclude(image_url="")
            .order_by("-created_at", "-review_id")[:limit]
        )
