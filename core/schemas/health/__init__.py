"""Health check schemas."""

from core.schemas.health.dependency_health import DependencyHealth
from core.schemas.health.response import (
    HealthCheckResponse,
    LivenessResponse,
    ReadinessResponse,
)

__all__ = [
    "DependencyHealth",
    "HealthCheckResponse",
    "LivenessResponse",
    "ReadinessResponse",
]
