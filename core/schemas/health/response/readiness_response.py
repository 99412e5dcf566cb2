"""Readiness response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.health.dependency_health import DependencyHealth


class ReadinessResponse(BaseSchemaModel):
    """Response model for readiness checks.

    The database is required; the cache only degrades the service, since
    rate limiting fails open without it.
    """

    ready: bool = Field(..., description="False when the database is unreachable")
    status: str = Field(..., description="'ready', 'degraded' or 'not ready'")
    degraded: bool = Field(..., description="True when an optional dependency is down")
    version: str = Field(..., description="Deployed service version")
    dependencies: dict[str, DependencyHealth] = Field(
        ..., description="Health of the database and the cache"
    )
