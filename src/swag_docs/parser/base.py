"""Data models for extracted API documentation.

The raw specification stays a plain mapping; these models wrap the
pieces the document generator hands around.
"""

from pydantic import BaseModel, Field


class Param(BaseModel):
    """One row of the parameter table (query, path, header, cookie or formData)."""

    name: str = Field(exclude=True)
    param_type: str = Field(default="string", serialization_alias="type")
    required: bool = False
    location: str = Field(default="query", serialization_alias="in")
    description: str = ""


class Endpoint(BaseModel):
    """A single (path, method, operation) unit eligible for documentation."""

    path: str  # /api/users/{id}
    method: str  # GET / POST / PUT / PATCH / DELETE, upper case
    operation: dict

    @property
    def key(self) -> str:
        return f"{self.method}:{self.path}"

    @property
    def summary(self) -> str:
        return self.operation.get("summary") or ""

    @property
    def operation_id(self) -> str:
        return self.operation.get("operationId") or ""
