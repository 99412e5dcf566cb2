"""Enumerations for the core app."""

from core.enums.access_action import AccessAction
from core.enums.access_decision import AccessDecision
from core.enums.health_status import HealthStatus
from core.enums.user_role import UserRole

__all__ = ["AccessAction", "AccessDecision", "HealthStatus", "UserRole"]
