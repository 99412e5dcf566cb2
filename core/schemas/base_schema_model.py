"""Base pydantic model shared by every request and response schema."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchemaModel(BaseModel):
    """Base pydantic model for centralized configuration of schema definitions.

    Fields are exposed under camelCase aliases, which is what API clients
    send and receive; snake_case names are accepted on input as well.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
        str_strip_whitespace=True,
    )

    def to_json(self) -> dict[str, Any]:
        """Dump to a JSON-ready dict keyed by camelCase aliases."""
        return self.model_dump(by_alias=True, mode="json")
