"""Common Pydantic v2 schemas shared across the API.

All API payloads use camelCase keys on the wire and snake_case attributes
in Python.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serializing to camelCase and readable from ORM objects."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class SuccessResponse(CamelModel):
    """Envelope flag present on every successful response."""

    success: bool = Field(default=True, description="Always true for 2xx responses")


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error message")
    message: str | None = Field(default=None, description="Underlying failure message for 5xx errors")
