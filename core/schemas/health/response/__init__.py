"""Health check response schemas."""

from core.schemas.health.response.health_check_response import HealthCheckResponse
from core.schemas.health.response.liveness_response import LivenessResponse
from core.schemas.health.response.readiness_response import ReadinessResponse

__all__ = ["HealthCheckResponse", "LivenessResponse", "ReadinessResponse"]
