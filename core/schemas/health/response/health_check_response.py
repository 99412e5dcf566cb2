"""Overall health response schema."""

from datetime import datetime

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class HealthCheckResponse(BaseSchemaModel):
    """Response model for the combined health endpoint."""

    status: str = Field(..., description="'healthy' or 'unhealthy'")
    timestamp: datetime = Field(..., description="Time of the check (UTC)")
    database: str = Field(..., description="'connected' or 'disconnected'")
    version: str = Field(..., description="Deployed service version")
