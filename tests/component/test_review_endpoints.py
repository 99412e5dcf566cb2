"""Component tests for the review endpoints.

These drive the full request cycle and check the rating aggregate stored
on the menu item after every change.
"""

from unittest.mock import patch

from django.test import override_settings

from core.exceptions import AggregateRecomputationError
from core.models import MenuItem, Review
from core.services import RatingAggregator
from tests.base import BaseComponentTest
from tests.factories import (
    create_menu_item,
    create_review,
    create_user,
    image_upload,
)


class ReviewEndpointTest(BaseComponentTest):
    """Shared fixtures for review endpoint tests."""

    def setUp(self):
        """Set up test fixtures."""
        super().setUp()
        self.menu_item = create_menu_item()

    def submit(self, user, rating, comment=None, menu_item=None):
        """POST a review as ``user``."""
        body = {
            "menuItemId": (menu_item or self.menu_item).menu_item_id,
            "rating": rating,
        }
        if comment is not None:
            body["comment"] = comment
        return self.client_for(user).post(
            "/api/reviews", body, content_type="application/json"
        )

    def item_json(self):
        """GET the menu item under test."""
        response = self.client.get(f"/api/menu-items/{self.menu_item.menu_item_id}")
        return response.json()["menuItem"]


class TestSubmitReviewEndpoint(ReviewEndpointTest):
    """Component tests for POST /api/reviews."""

    def test_submit_review_updates_aggregate(self):
        """Test that the first review sets avgRating and reviewCount."""
        response = self.submit(self.user, 4, "Crunchy")

        self.assertEqual(response.status_code, 201)
        review = response.json()["review"]
        self.assertEqual(review["rating"], 4)
        self.assertEqual(review["comment"], "Crunchy")
        self.assertEqual(review["userId"], self.user.user_id)
        self.assertIsNone(review["imageUrl"])

        item = self.item_json()
        self.assertEqual(item["avgRating"], 4.0)
        self.assertEqual(item["reviewCount"], 1)

    def test_aggregate_follows_every_change(self):
        """Test [5, 4, 5, 3] gives 4.25 / 4, then 4.67 / 3 after deleting the 3."""
        authors = [create_user() for _ in range(4)]
        created = [
            self.submit(author, rating).json()["review"]
            for author, rating in zip(authors, (5, 4, 5, 3), strict=True)
        ]

        item = self.item_json()
        self.assertEqual(item["avgRating"], 4.25)
        self.assertEqual(item["reviewCount"], 4)

        response = self.client_for(authors[3]).delete(f"/api/reviews/{created[3]['id']}")
        self.assertEqual(response.status_code, 204)

        item = self.item_json()
        self.assertEqual(item["avgRating"], 4.67)
        self.assertEqual(item["reviewCount"], 3)

    def test_duplicate_review_conflicts_and_keeps_original(self):
        """Test that a second review by the same user answers 409."""
        original = self.submit(self.user, 5, "First").json()["review"]

        response = self.submit(self.user, 1, "Second")

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["error"], "CONFLICT")
        stored = Review.objects.get(review_id=original["id"])
        self.assertEqual((stored.rating, stored.comment), (5, "First"))
        self.assertEqual(self.item_json()["reviewCount"], 1)

    def test_out_of_range_rating_is_rejected_before_storing(self):
        """Test that rating=6 answers 400 and writes nothing."""
        for rating in (6, 0, 4.5, "5", None):
            with self.subTest(rating=rating):
                response = self.submit(self.user, rating)

                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json()["errors"][0]["field"], "rating")

        self.assertEqual(Review.objects.count(), 0)

    def test_missing_menu_item(self):
        """Test that reviewing an unknown item answers 404."""
        response = self.client_for(self.user).post(
            "/api/reviews",
            {"menuItemId": 999999, "rating": 5},
            content_type="application/json",
        )

        self.assertEqual(response.status_code, 404)

    def test_requires_authentication(self):
        """Test that anonymous submissions answer 401."""
        response = self.client.post(
            "/api/reviews",
            {"menuItemId": self.menu_item.menu_item_id, "rating": 5},
            content_type="application/json",
        )

        self.assertEqual(response.status_code, 401)
        self.assertEqual(Review.objects.count(), 0)

    def test_comment_is_sanitized(self):
        """Test that angle brackets are stripped from comments."""
        response = self.submit(self.user, 5, "<script>hi</script>")

        self.assertEqual(response.json()["review"]["comment"], "scripthi/script")

    def test_recomputation_failure_is_a_server_error(self):
        """Test that a failed aggregate refresh answers an opaque 500."""
        with patch.object(
            RatingAggregator,
            "recompute",
            side_effect=AggregateRecomputationError(self.menu_item.menu_item_id),
        ):
            response = self.submit(self.user, 5)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["error"], "INTERNAL_ERROR")
        self.assertEqual(
            response.json()["message"], "An internal server error occurred."
        )
        # The review itself was committed before the refresh failed
        self.assertEqual(Review.objects.count(), 1)


class TestReviewDetailEndpoint(ReviewEndpointTest):
    """Component tests for GET and DELETE /api/reviews/<id>."""

    def setUp(self):
        """Set up test fixtures."""
        super().setUp()
        self.author = create_user()
        self.review_id = self.submit(self.author, 2).json()["review"]["id"]

    def test_get_review_with_author(self):
        """Test that anyone can read a review."""
        response = self.client.get(f"/api/reviews/{self.review_id}")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json()["review"]["user"]["id"], self.author.user_id
        )

    def test_get_missing_review(self):
        """Test that an unknown review answers 404."""
        response = self.client.get("/api/reviews/999999")

        self.assertEqual(response.status_code, 404)

    def test_author_deletes_review(self):
        """Test that the author can delete and the aggregate resets to 0 / 0."""
        response = self.client_for(self.author).delete(f"/api/reviews/{self.review_id}")

        self.assertEqual(response.status_code, 204)
        self.assertFalse(Review.objects.filter(review_id=self.review_id).exists())
        item = self.item_json()
        self.assertEqual(item["avgRating"], 0.0)
        self.assertEqual(item["reviewCount"], 0)

    def test_admin_deletes_any_review(self):
        """Test that an administrator can delete someone else's review."""
        response = self.client_for(self.admin).delete(f"/api/reviews/{self.review_id}")

        self.assertEqual(response.status_code, 204)
        self.assertEqual(self.item_json()["reviewCount"], 0)

    def test_other_user_cannot_delete(self):
        """Test that a non-owner non-admin gets 403 and nothing changes."""
        response = self.client_for(self.user).delete(f"/api/reviews/{self.review_id}")

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["message"], "Cannot delete this review")
        self.assertTrue(Review.objects.filter(review_id=self.review_id).exists())
        self.assertEqual(self.item_json()["reviewCount"], 1)

    def test_anonymous_delete(self):
        """Test that anonymous deletes answer 401."""
        response = self.client.delete(f"/api/reviews/{self.review_id}")

        self.assertEqual(response.status_code, 401)

    def test_delete_missing_review(self):
        """Test that deleting an unknown review answers 404."""
        response = self.client_for(self.author).delete("/api/reviews/999999")

        self.assertEqual(response.status_code, 404)

    def test_delete_removes_exactly_one_review(self):
        """Test that other reviews of the item survive a delete."""
        self.submit(self.user, 4)

        self.client_for(self.author).delete(f"/api/reviews/{self.review_id}")

        self.assertEqual(Review.objects.count(), 1)
        menu_item = MenuItem.objects.get(menu_item_id=self.menu_item.menu_item_id)
        self.assertEqual(menu_item.review_count, 1)
        self.assertEqual(float(menu_item.avg_rating), 4.0)


class TestReviewImageEndpoint(ReviewEndpointTest):
    """Component tests for POST /api/reviews/<id>/image."""

    def setUp(self):
        """Set up test fixtures."""
        super().setUp()
        self.review_id = self.submit(self.user, 5).json()["review"]["id"]

    def test_author_attaches_image(self):
        """Test that the author can add a photo without touching the aggregate."""
        response = self.client_for(self.user).post(
            f"/api/reviews/{self.review_id}/image", {"image": image_upload()}
        )

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["review"]["imageUrl"].startswith("/uploads/"))
        self.assertEqual(self.item_json()["reviewCount"], 1)

    def test_admin_cannot_attach_by_default(self):
        """Test that administrators cannot modify someone else's review."""
        response = self.client_for(self.admin).post(
            f"/api/reviews/{self.review_id}/image", {"image": image_upload()}
        )

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["message"], "Cannot modify this review")

    def test_other_user_cannot_attach(self):
        """Test that a stranger gets 403."""
        stranger = create_user()

        response = self.client_for(stranger).post(
            f"/api/reviews/{self.review_id}/image", {"image": image_upload()}
        )

        self.assertEqual(response.status_code, 403)

    def test_missing_review(self):
        """Test that an unknown review answers 404."""
        response = self.client_for(self.user).post(
            "/api/reviews/999999/image", {"image": image_upload()}
        )

        self.assertEqual(response.status_code, 404)


@override_settings(REVIEW_IMAGE_ADMIN_OVERRIDE=True)
class TestReviewImageAdminOverride(ReviewEndpointTest):
    """Component tests for the administrator review image switch."""

    def test_switch_is_read_when_services_are_built(self):
        """Test that the switch is read when services are built."""
        from core.dependencies import build_service_registry  # noqa: PLC0415

        registry = build_service_registry()

        self.assertTrue(registry.reviews.policy.admin_may_attach_review_images)


class TestUserReviewsEndpoint(ReviewEndpointTest):
    """Component tests for GET /api/reviews/user/<id>."""

    def test_lists_only_that_users_reviews(self):
        """Test that the listing is scoped to one author."""
        other_item = create_menu_item()
        mine = [
            create_review(menu_item=self.menu_item, user=self.user),
            create_review(menu_item=other_item, user=self.user),
        ]
        create_review(menu_item=self.menu_item)

        response = self.client.get(f"/api/reviews/user/{self.user.user_id}")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(
            [r["id"] for r in data["data"]], [mine[1].review_id, mine[0].review_id]
        )
        self.assertEqual(data["pagination"]["total"], 2)
