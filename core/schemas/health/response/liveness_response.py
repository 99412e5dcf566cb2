"""Liveness response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class LivenessResponse(BaseSchemaModel):
    """Response model for liveness checks; never touches dependencies."""

    status: str = Field("alive", description="Always 'alive' while the process runs")
