"""Core schemas for the application."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel
from typing_extensions import Annotated


class CamelModel(BaseModel):
    """Base schema exposing camelCase JSON field names."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class HealthCheck(BaseModel):
    """Schema for health check response."""
    service_name: str
    status: str


class ErrorMessage(BaseModel):
    """Schema for error responses."""
    message: str
    field: Optional[str] = None


# Required display name: surrounding whitespace is stripped, blank is rejected
NonEmptyName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)
]
