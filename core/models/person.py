# =============================================================================
# core/models/person.py - Person Schemas
# =============================================================================
# These models define the API contract for person operations:
# - PersonWrite: Request body for POST /users and PUT /users/{id}
# - Person: A stored person, as returned to clients
#
# The id is always assigned by the database and never taken from a body.
# =============================================================================

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field


class PersonWrite(BaseModel):
    """
    Schema for creating or fully replacing a person.

    Both fields are required and strictly typed: a string or bool age
    is rejected, as is a numeric name. Values are stored as-is: no check
    on empty names or age range. An `id` in the body is ignored.

    Example:
        {"name": "Ada", "age": 30}
    """

    name: str = Field(..., strict=True, description="Display name", examples=["Ada"])
    age: int = Field(..., strict=True, description="Age in years", examples=[30])

    model_config = ConfigDict(extra="ignore")


class Person(BaseModel):
    """A person record with its database-assigned id."""

    id: int = Field(..., description="Server-generated identifier", examples=[1])
    name: str
    age: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"id": 1, "name": "Ada", "age": 30}
        }
    )

    @classmethod
    def from_db_row(cls, row: Mapping[str, Any]) -> "Person":
        """Build from a result row mapping with id, name and age columns."""
        return cls(id=row["id"], name=row["name"], age=row["age"])
