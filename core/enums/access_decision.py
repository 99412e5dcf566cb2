"""Outcome of an access policy evaluation."""

from enum import Enum


class AccessDecision(str, Enum):
    """Result of evaluating an action for an actor.

    UNAUTHENTICATED and FORBIDDEN are kept apart so callers can answer
    401 (re-authenticating may help) or 403 (it will not).
    """

    ALLOW = "ALLOW"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    FORBIDDEN = "FORBIDDEN"
