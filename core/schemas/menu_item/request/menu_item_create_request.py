"""Menu item creation request schema."""

from decimal import Decimal

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.common.validators import OptionalText, RequiredText


class MenuItemCreateRequest(BaseSchemaModel):
    """Body of POST /menu-items.

    Rating aggregate fields are not part of the schema, so clients cannot
    set them (unknown keys are ignored).
    """

    restaurant_id: int = Field(..., gt=0)
    name: RequiredText = Field(..., max_length=200)
    description: OptionalText = None
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    category: RequiredText = Field(..., max_length=100)
