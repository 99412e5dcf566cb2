"""Review orchestration: access checks, persistence and aggregate upkeep."""

from typing import Any

import structlog

from core.auth.policy import AccessPolicy
from core.enums import AccessAction
from core.exceptions import (
    AggregateRecomputationError,
    InvalidRatingError,
    MenuItemNotFoundError,
    ReviewNotFoundError,
)
from core.models import Review
from core.pagination import Page
from core.repositories import MenuItemRepository, ReviewRepository
from core.repositories.review_repository import is_valid_rating
from core.services.media_service import ImageStorageService
from core.services.rating_aggregation_service import RatingAggregator

logger = structlog.get_logger(__name__)


class ReviewService:
    """Sequences every review operation.

    Each write runs: access check, input validation, existence checks, the
    store call, then exactly one aggregate recomputation for operations
    that change the set of reviews (submit and delete, not image attach).
    """

    def __init__(
        self,
        reviews: ReviewRepository,
        menu_items: MenuItemRepository,
        aggregator: RatingAggregator,
        media: ImageStorageService,
        policy: AccessPolicy,
    ) -> None:
        self.reviews = reviews
        self.menu_items = menu_items
        self.aggregator = aggregator
        self.media = media
        self.policy = policy

    def submit_review(
        self,
        actor: Any,
        menu_item_id: int,
        rating: Any,
        comment: str | None = None,
    ) -> Review:
        """Create a review and refresh the item's aggregate.

        Raises:
            NotAuthenticated: If the actor is anonymous
            InvalidRatingError: If rating is not an integer in [1, 5]
            MenuItemNotFoundError: If the menu item does not exist
            DuplicateReviewError: If the actor already reviewed the item
            AggregateRecomputationError: If the aggregate could not be rewritten
        """
        self.policy.enforce(actor, AccessAction.CREATE_REVIEW)

        if not is_valid_rating(rating):
            raise InvalidRatingError(rating)

        if not self.menu_items.exists(menu_item_id):
            raise MenuItemNotFoundError(menu_item_id)

        review = self.reviews.create(menu_item_id, actor.user_id, rating, comment)
        self._recompute(menu_item_id, review.review_id)
        return review

    def delete_review(self, actor: Any, review_id: int) -> None:
        """Delete a review as its author or as an administrator.

        Raises:
            ReviewNotFoundError: If the review does not exist
            NotAuthenticated: If the actor is anonymous
            PermissionDenied: If the actor is neither author nor admin
            AggregateRecomputationError: If the aggregate could not be rewritten
        """
        review = self.get_review(review_id)
        self.policy.enforce(actor, AccessAction.DELETE_REVIEW, owner_id=review.user_id)

        # The store only deletes on an ownership match, so pass the author;
        # the admin override was decided by the policy above.
        if not self.reviews.delete(review_id, review.user_id):
            raise ReviewNotFoundError(review_id)

        logger.info(
            "Review removed",
            review_id=review_id,
            menu_item_id=review.menu_item_id,
            actor_id=actor.user_id,
            by_admin=actor.user_id != review.user_id,
        )
        self._recompute(review.menu_item_id, review_id)

    def attach_review_image(self, actor: Any, review_id: int, upload) -> Review:
        """Store an uploaded image and attach it to a review.

        If the review disappears while the image is being stored, the
        stored file is removed again.

        Raises:
            ReviewNotFoundError: If the review does not exist
            NotAuthenticated: If the actor is anonymous
            PermissionDenied: If the actor may not modify the review
            UnsupportedImageError: If the upload is rejected
        """
        review = self.get_review(review_id)
        self.policy.enforce(
            actor, AccessAction.ATTACH_REVIEW_IMAGE, owner_id=review.user_id
        )

        image_url = self.media.store(upload)
        updated = self.reviews.attach_image(review_id, image_url)
        if updated is None:
            self.media.discard(image_url)
            raise ReviewNotFoundError(review_id)
        return updated

    def get_review(self, review_id: int) -> Review:
        """Fetch a review with its author.

        Raises:
            ReviewNotFoundError: If the review does not exist
        """
        review = self.reviews.find_by_id(review_id)
        if review is None:
            raise ReviewNotFoundError(review_id)
        return review

    def list_reviews_for_item(
        self, menu_item_id: int, page: int, page_size: int
    ) -> Page[Review]:
        """Page through an item's reviews, most recent first.

        Raises:
            MenuItemNotFoundError: If the menu item does not exist
        """
        if not self.menu_items.exists(menu_item_id):
            raise MenuItemNotFoundError(menu_item_id)
        return self.reviews.find_by_menu_item(menu_item_id, page, page_size)

    def list_reviews_for_user(
        self, user_id: int, page: int, page_size: int
    ) -> Page[Review]:
        """Page through a user's reviews, most recent first."""
        return self.reviews.find_by_user(user_id, page, page_size)

    def _recompute(self, menu_item_id: int, review_id: int) -> None:
        try:
            self.aggregator.recompute(menu_item_id)
        except AggregateRecomputationError:
            logger.error(
                "Review change committed but rating aggregate is stale",
                review_id=review_id,
                menu_item_id=menu_item_id,
            )
            raise
