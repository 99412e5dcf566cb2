"""Authorization rules for every API action.

``AccessPolicy.evaluate`` is a pure function of the actor, the action and
the owner of the targeted resource. It never touches the database, so the
same rules hold regardless of request ordering.
"""

from typing import Any

import structlog
from rest_framework import exceptions

from core.enums import AccessAction, AccessDecision

logger = structlog.get_logger(__name__)

AUTHENTICATED_ACTIONS = frozenset(
    {
        AccessAction.CREATE_RESTAURANT,
        AccessAction.CREATE_MENU_ITEM,
        AccessAction.CREATE_REVIEW,
        AccessAction.ATTACH_RESTAURANT_IMAGE,
        AccessAction.ATTACH_MENU_ITEM_IMAGE,
    }
)

_FORBIDDEN_MESSAGES = {
    AccessAction.DELETE_REVIEW: "Cannot delete this review",
    AccessAction.ATTACH_REVIEW_IMAGE: "Cannot modify this review",
}


def is_anonymous(actor: Any) -> bool:
    """Return True when the actor carries no authenticated identity."""
    return actor is None or not getattr(actor, "is_authenticated", False)


class AccessPolicy:
    """Decides whether an actor may perform an action.

    Deleting a review is allowed to its author and to administrators.
    Attaching an image to a review is reserved to its author; granting
    administrators the same right is an explicit switch,
    ``admin_may_attach_review_images``.
    """

    def __init__(self, admin_may_attach_review_images: bool = False):
        self.admin_may_attach_review_images = admin_may_attach_review_images

    def evaluate(
        self,
        actor: Any,
        action: AccessAction,
        owner_id: int | None = None,
    ) -> AccessDecision:
        """Evaluate an action for an actor.

        Args:
            actor: Authenticated user (with ``user_id`` and ``is_admin``),
                an anonymous user, or None
            action: The action being attempted
            owner_id: User id owning the targeted resource, for
                ownership-based actions

        Returns:
            ALLOW, UNAUTHENTICATED or FORBIDDEN
        """
        if action == AccessAction.READ:
            return AccessDecision.ALLOW

        if is_anonymous(actor):
            return AccessDecision.UNAUTHENTICATED

        if action in AUTHENTICATED_ACTIONS:
            return AccessDecision.ALLOW

        is_owner = owner_id is not None and actor.user_id == owner_id
        is_admin = bool(getattr(actor, "is_admin", False))

        if action == AccessAction.DELETE_REVIEW:
            allowed = is_owner or is_admin
        elif action == AccessAction.ATTACH_REVIEW_IMAGE:
            allowed = is_owner or (is_admin and self.admin_may_attach_review_images)
        else:
            allowed = False

        return AccessDecision.ALLOW if allowed else AccessDecision.FORBIDDEN

    def enforce(
        self,
        actor: Any,
        action: AccessAction,
        owner_id: int | None = None,
    ) -> None:
        """Evaluate an action and raise when it is denied.

        Raises:
            NotAuthenticated: If the actor is anonymous (401)
            PermissionDenied: If the actor lacks the privilege (403)
        """
        decision = self.evaluate(actor, action, owner_id)
        if decision == AccessDecision.ALLOW:
            return

        logger.warning(
            "Access denied",
            action=action.value,
            decision=decision.value,
            actor_id=getattr(actor, "user_id", None),
            owner_id=owner_id,
        )
        if decision == AccessDecision.UNAUTHENTICATED:
            raise exceptions.NotAuthenticated()
        raise exceptions.PermissionDenied(_FORBIDDEN_MESSAGES.get(action))
