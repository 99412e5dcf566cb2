"""Restaurant creation request schema."""

from pydantic import Field, StrictInt

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.common.validators import OptionalText, RequiredText


class RestaurantCreateRequest(BaseSchemaModel):
    """Body of POST /restaurants.

    Strings are trimmed and stripped of angle brackets.
    """

    name: RequiredText = Field(..., max_length=200)
    address: RequiredText = Field(..., max_length=300)
    city: RequiredText = Field(..., max_length=100)
    state: RequiredText = Field(..., max_length=50)
    zip_code: RequiredText = Field(..., max_length=20)
    phone: OptionalText = Field(None, max_length=30)
    website: OptionalText = Field(None, max_length=500)
    cuisine: RequiredText = Field(..., max_length=100)
    price_range: StrictInt = Field(..., ge=1, le=4, description="1 ($) to 4 ($$$$)")
