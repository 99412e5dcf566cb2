"""Query parameter schemas for paginated and limited listings."""

from pydantic import Field

from core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from core.schemas.base_schema_model import BaseSchemaModel


class PaginationParams(BaseSchemaModel):
    """``page`` and ``limit`` query parameters."""

    page: int = Field(1, ge=1, description="1-based page number")
    limit: int = Field(
        DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Page size"
    )
