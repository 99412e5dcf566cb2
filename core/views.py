"""API views for core application.

Each view receives the service it delegates to through ``as_view(**initkwargs)``;
see ``core.urls`` and ``core.dependencies``.
"""

import structlog
from pydantic import ValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.auth.authentication import OptionalJWTAuthentication
from core.exceptions import RequestValidationError
from core.schemas import (
    HealthCheckResponse,
    LoginRequest,
    MenuItemCreateRequest,
    MenuItemDetailResponse,
    MenuItemListQuery,
    MenuItemResponse,
    PaginationParams,
    PhotoItem,
    RecentReview,
    RegisterRequest,
    RestaurantCreateRequest,
    RestaurantListQuery,
    RestaurantResponse,
    ReviewCreateRequest,
    ReviewResponse,
    ReviewWithUserResponse,
    TopRatedItem,
    UserResponse,
)
from core.services import (
    AuthService,
    DiscoveryService,
    HealthService,
    MenuItemService,
    RestaurantService,
    ReviewService,
)

logger = structlog.get_logger(__name__)

IMAGE_FIELD = "image"


def parse_body(schema, request):
    """Validate a request body against a pydantic schema.

    Raises:
        RequestValidationError: With one entry per invalid field
    """
    try:
        return schema.model_validate(request.data)
    except ValidationError as e:
        logger.warning("Invalid request body", validation_errors=e.errors())
        raise RequestValidationError.from_pydantic(e) from e


def parse_query(schema, request):
    """Validate query parameters against a pydantic schema.

    Raises:
        RequestValidationError: With one entry per invalid parameter
    """
    try:
        return schema.model_validate(request.query_params.dict())
    except ValidationError as e:
        logger.warning("Invalid query parameters", validation_errors=e.errors())
        raise RequestValidationError.from_pydantic(e) from e


class PublicView(APIView):
    """Base for endpoints that never look at credentials."""

    authentication_classes = ()
    permission_classes = (AllowAny,)


class ReadOptionalWriteRequiredView(APIView):
    """Base for endpoints mixing anonymous reads and authenticated writes.

    A bad token on a read is ignored; on a write the caller is anonymous
    and gets 401.
    """

    authentication_classes = (OptionalJWTAuthentication,)

    def get_permissions(self):
        """Allow safe methods to anyone, require a user otherwise."""
        if self.request.method in ("GET", "HEAD", "OPTIONS"):
            return [AllowAny()]
        return [IsAuthenticated()]


# Health


class HealthCheckView(PublicView):
    """Overall service health, keyed on database connectivity.

    Returns 200 when the database is reachable and 503 otherwise.
    """

    service: HealthService = None

    def get(self, _request):
        """Handle GET request for the health check."""
        health: HealthCheckResponse = self.service.get_health_status()
        http_status = (
            status.HTTP_200_OK
            if health.status == "healthy"
            else status.HTTP_503_SERVICE_UNAVAILABLE
        )
        return Response(health.to_json(), status=http_status)


class LivenessCheckView(PublicView):
    """Liveness probe endpoint.

    Returns 200 if the service is alive and running.
    This should not check external dependencies.
    """

    service: HealthService = None

    def get(self, _request):
        """Handle GET request for liveness check."""
        liveness = self.service.get_liveness_status()
        return Response(liveness.to_json(), status=status.HTTP_200_OK)


class ReadinessCheckView(PublicView):
    """Readiness probe endpoint.

    Returns 503 when the database is unavailable. A cache outage is
    reported as degraded with 200, since the API keeps serving without it.
    """

    service: HealthService = None

    def get(self, _request):
        """Handle GET request for readiness check."""
        readiness = self.service.get_readiness_status()
        http_status = (
            status.HTTP_200_OK
            if readiness.ready
            else status.HTTP_503_SERVICE_UNAVAILABLE
        )
        return Response(readiness.to_json(), status=http_status)


# Authentication


class RegisterView(PublicView):
    """Create an account and return it with an access token."""

    service: AuthService = None

    def post(self, request):
        """Handle POST request to register a user.

        Returns:
            201 Created with ``{user, token}``
            400 Bad Request if a field is invalid
            409 Conflict if the email is already registered
        """
        payload = parse_body(RegisterRequest, request)
        user, token = self.service.register(
            payload.email, payload.password, payload.display_name
        )
        return Response(
            {"user": UserResponse.from_model(user).to_json(), "token": token},
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    """Exchange email and password for an access token."""

    authentication_classes = (OptionalJWTAuthentication,)
    permission_classes = (AllowAny,)
    service: AuthService = None

    def post(self, request):
        """Handle POST request to log in.

        Returns:
            200 OK with ``{user, token}``
            400 Bad Request if email or password is missing
            401 Unauthorized if the credentials are wrong
        """
        payload = parse_body(LoginRequest, request)
        user, token = self.service.login(payload.email, payload.password)
        return Response(
            {"user": UserResponse.from_model(user).to_json(), "token": token},
            status=status.HTTP_200_OK,
        )


class MeView(APIView):
    """The account behind the presented token."""

    permission_classes = (IsAuthenticated,)
    service: AuthService = None

    def get(self, request):
        """Handle GET request for the current user."""
        user = self.service.me(request.user)
        return Response({"user": UserResponse.from_model(user).to_json()})


# Restaurants


class RestaurantListView(ReadOptionalWriteRequiredView):
    """GET: paginated restaurants. POST: create a restaurant."""

    service: RestaurantService = None

    def get(self, request):
        """List restaurants, newest first.

        Query parameters:
        - page, limit: pagination
        - city, cuisine: case-insensitive substring filters
        - search: matches name or cuisine
        """
        query = parse_query(RestaurantListQuery, request)
        page = self.service.list(
            query.page,
            query.limit,
            city=query.city,
            cuisine=query.cuisine,
            search=query.search,
        )
        return Response(
            page.to_response(lambda r: RestaurantResponse.from_model(r).to_json())
        )

    def post(self, request):
        """Create a restaurant owned by the caller."""
        payload = parse_body(RestaurantCreateRequest, request)
        restaurant = self.service.create(request.user, payload)
        return Response(
            {"restaurant": RestaurantResponse.from_model(restaurant).to_json()},
            status=status.HTTP_201_CREATED,
        )


class RestaurantDetailView(APIView):
    """A single restaurant."""

    authentication_classes = (OptionalJWTAuthentication,)
    permission_classes = (AllowAny,)
    service: RestaurantService = None

    def get(self, _request, restaurant_id: int):
        """Handle GET request for one restaurant."""
        restaurant = self.service.get(restaurant_id)
        return Response(
            {"restaurant": RestaurantResponse.from_model(restaurant).to_json()}
        )


class RestaurantImageView(APIView):
    """Upload the photo of a restaurant (multipart field ``image``)."""

    permission_classes = (IsAuthenticated,)
    service: RestaurantService = None

    def post(self, request, restaurant_id: int):
        """Handle POST request with an image upload."""
        restaurant = self.service.attach_image(
            request.user, restaurant_id, request.FILES.get(IMAGE_FIELD)
        )
        return Response(
            {"restaurant": RestaurantResponse.from_model(restaurant).to_json()}
        )


class RestaurantMenuView(APIView):
    """A restaurant's menu, ordered by category then name."""

    authentication_classes = (OptionalJWTAuthentication,)
    permission_classes = (AllowAny,)
    service: MenuItemService = None

    def get(self, request, restaurant_id: int):
        """Handle GET request for a restaurant's menu items."""
        query = parse_query(MenuItemListQuery, request)
        page = self.service.list_for_restaurant(
            restaurant_id, query.page, query.limit, category=query.category
        )
        return Response(
            page.to_response(lambda m: MenuItemResponse.from_model(m).to_json())
        )


# Menu items


class MenuItemCreateView(APIView):
    """Add a dish to a restaurant's menu."""

    permission_classes = (IsAuthenticated,)
    service: MenuItemService = None

    def post(self, request):
        """Handle POST request to create a menu item.

        Rating aggregates are never taken from the body; new items start at
        an average of 0 over 0 reviews.
        """
        payload = parse_body(MenuItemCreateRequest, request)
        menu_item = self.service.create(request.user, payload)
        return Response(
            {"menuItem": MenuItemResponse.from_model(menu_item).to_json()},
            status=status.HTTP_201_CREATED,
        )


class MenuItemDetailView(APIView):
    """A single menu item with its restaurant."""

    authentication_classes = (OptionalJWTAuthentication,)
    permission_classes = (AllowAny,)
    service: MenuItemService = None

    def get(self, _request, menu_item_id: int):
        """Handle GET request for one menu item."""
        menu_item = self.service.get(menu_item_id)
        return Response(
            {"menuItem": MenuItemDetailResponse.from_model(menu_item).to_json()}
        )


class MenuItemImageView(APIView):
    """Upload the photo of a menu item (multipart field ``image``)."""

    permission_classes = (IsAuthenticated,)
    service: MenuItemService = None

    def post(self, request, menu_item_id: int):
        """Handle POST request with an image upload."""
        menu_item = self.service.attach_image(
            request.user, menu_item_id, request.FILES.get(IMAGE_FIELD)
        )
        return Response(
            {"menuItem": MenuItemResponse.from_model(menu_item).to_json()}
        )


class MenuItemReviewsView(APIView):
    """Reviews of one menu item, most recent first."""

    authentication_classes = (OptionalJWTAuthentication,)
    permission_classes = (AllowAny,)
    service: ReviewService = None

    def get(self, request, menu_item_id: int):
        """Handle GET request for a menu item's reviews."""
        query = parse_query(PaginationParams, request)
        page = self.service.list_reviews_for_item(menu_item_id, query.page, query.limit)
        return Response(
            page.to_response(lambda r: ReviewWithUserResponse.from_model(r).to_json())
        )


# Reviews


class ReviewCreateView(APIView):
    """Submit a review of a menu item."""

    permission_classes = (IsAuthenticated,)
    service: ReviewService = None

    def post(self, request):
        """Handle POST request to submit a review.

        Returns:
            201 Created with ``{review}``
            400 Bad Request if the rating is not an integer from 1 to 5
            401 Unauthorized if the caller is anonymous
            404 Not Found if the menu item does not exist
            409 Conflict if the caller already reviewed the item
            500 Internal Server Error if the rating aggregate could not be
                refreshed
        """
        payload = parse_body(ReviewCreateRequest, request)
        review = self.service.submit_review(
            request.user, payload.menu_item_id, payload.rating, payload.comment
        )
        logger.info(
            "Review submitted",
            review_id=review.review_id,
            menu_item_id=review.menu_item_id,
            user_id=review.user_id,
        )
        return Response(
            {"review": ReviewResponse.from_model(review).to_json()},
            status=status.HTTP_201_CREATED,
        )


class ReviewDetailView(ReadOptionalWriteRequiredView):
    """GET: one review with its author. DELETE: remove it."""

    service: ReviewService = None

    def get(self, _request, review_id: int):
        """Handle GET request for one review."""
        review = self.service.get_review(review_id)
        return Response(
            {"review": ReviewWithUserResponse.from_model(review).to_json()}
        )

    def delete(self, request, review_id: int):
        """Handle DELETE request.

        Returns:
            204 No Content on success
            401 Unauthorized if the caller is anonymous
            403 Forbidden if the caller is neither the author nor an admin
            404 Not Found if the review does not exist
        """
        self.service.delete_review(request.user, review_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ReviewImageView(APIView):
    """Upload the photo of a review (multipart field ``image``)."""

    permission_classes = (IsAuthenticated,)
    service: ReviewService = None

    def post(self, request, review_id: int):
        """Handle POST request with an image upload."""
        review = self.service.attach_review_image(
            request.user, review_id, request.FILES.get(IMAGE_FIELD)
        )
        return Response({"review": ReviewResponse.from_model(review).to_json()})


class UserReviewsView(APIView):
    """Reviews written by one user, most recent first."""

    authentication_classes = (OptionalJWTAuthentication,)
    permission_classes = (AllowAny,)
    service: ReviewService = None

    def get(self, request, user_id: int):
        """Handle GET request for a user's reviews."""
        query = parse_query(PaginationParams, request)
        page = self.service.list_reviews_for_user(user_id, query.page, query.limit)
        return Response(
            page.to_response(lambda r: ReviewWithUserResponse.from_model(r).to_json())
        )


# Discovery


class TopRatedView(PublicView):
    """Reviewed dishes by average rating, then review count."""

    service: DiscoveryService = None

    def get(self, request):
        """Handle GET request; ``limit`` defaults to 10, at most 50."""
        items = self.service.top_rated(request.query_params.get("limit"))
        return Response(
            {"items": [TopRatedItem.from_model(item).to_json() for item in items]}
        )


class RecentReviewsView(PublicView):
    """Newest reviews across the site."""

    service: DiscoveryService = None

    def get(self, request):
        """Handle GET request; ``limit`` defaults to 10, at most 50."""
        reviews = self.service.recent_reviews(request.query_params.get("limit"))
        return Response(
            {"reviews": [RecentReview.from_model(r).to_json() for r in reviews]}
        )


class RecentPhotosView(PublicView):
    """Newest review photos."""

    service: DiscoveryService = None

    def get(self, request):
        """Handle GET request; ``limit`` defaults to 12, at most 50."""
        reviews = self.service.recent_photos(request.query_params.get("limit"))
        return Response(
            {"photos": [PhotoItem.from_model(r).to_json() for r in reviews]}
        )
