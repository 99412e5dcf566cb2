"""Review submission request schema."""

from typing import Any

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.common.validators import OptionalText


class ReviewCreateRequest(BaseSchemaModel):
    """Body of POST /reviews.

    ``rating`` is passed through untouched; the review service owns the
    1-5 integer rule.
    """

    menu_item_id: int = Field(..., gt=0)
    rating: Any = None
    comment: OptionalText = Field(None, max_length=5000)
