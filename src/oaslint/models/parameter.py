"""Models for OpenAPI parameters and their validation wrapper."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ParameterLocation(str, Enum):
    """Where a parameter is carried in the request (OpenAPI `in`)."""
    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    COOKIE = "cookie"


class Parameter(BaseModel):
    """A described input to an API operation."""
    name: str
    location: ParameterLocation = Field(alias="in")
    description: str | None = None
    required: bool = False
    deprecated: bool = False

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


@dataclass(frozen=True)
class ParameterWrapper:
    """Subject handed to parameter rules.

    `parameter` is None when the element could not be materialized (for
    example an unresolved $ref); rules treat that as not applicable.
    """
    parameter: Parameter | None
    path: str | None = None
    method: str | None = None

    @property
    def operation_label(self) -> str:
        if self.method and self.path:
            return f"{self.method.upper()} {self.path}"
        return self.path or ""
