"""Dog Schemas — Pydantic response models for the /dogs API boundary.

Invariants:
    - DogResponse mirrors the stored row: id plus the four DogField attributes
    - Whole-number ages serialize as JSON integers (3, not 3.0) even though
      the column is a float
    - Request bodies are NOT modelled here: POST/PATCH accept arbitrary JSON
      objects so unknown keys can be reported instead of silently dropped

Design Decisions:
    - from_attributes: routes validate ORM rows (or any DogLike) directly
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DogResponse(BaseModel):
    """Public-facing dog record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    breed: str
    age: int | float
    description: str

    @field_validator("age")
    @classmethod
    def integral_age_as_int(cls, v: int | float) -> int | float:
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v


class ErrorListResponse(BaseModel):
    """Body-level validation failures, one human-readable string each."""
    errors: list[str] = Field(examples=[["'color' is not a valid key"]])


class MessageResponse(BaseModel):
    """Single message body (greeting, invalid path id)."""
    message: str
