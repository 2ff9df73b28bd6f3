"""
Pydantic schemas for cat API request/response validation.

These schemas enforce input validation and define the API contract.
Field limits come from the domain constants so the HTTP layer and the
service reject exactly the same values. Wire names are camelCase.
No business logic belongs here.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StringConstraints,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from app.domain.cats import constants as c

EXAMPLE_ID = "123e4567-e89b-12d3-a456-426614174000"
EXAMPLE_TIMESTAMP = "2024-01-15T10:30:00Z"

CatName = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=c.NAME_MIN_LEN,
        max_length=c.NAME_MAX_LEN,
        pattern=c.NAME_PATTERN,
    ),
]
CatAge = Annotated[StrictInt, Field(ge=c.AGE_MIN, le=c.AGE_MAX)]
CatBreed = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True, min_length=c.BREED_MIN_LEN, max_length=c.BREED_MAX_LEN
    ),
]
CatColor = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True, min_length=c.COLOR_MIN_LEN, max_length=c.COLOR_MAX_LEN
    ),
]


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateCatRequest(CamelModel):
    """Request schema for creating a cat.

    Attributes:
        name: Unique cat name (1-50 letters, spaces, hyphens, apostrophes).
        age: Age in years (0-30).
        breed: Breed (1-30 chars).
        color: Coat color (1-20 chars).
        is_adopted: Adoption status, defaults to false.
    """

    name: CatName = Field(..., description="The name of the cat", examples=["Whiskers"])
    age: CatAge = Field(..., description="The age of the cat in years", examples=[3])
    breed: CatBreed = Field(..., description="The breed of the cat", examples=["Persian"])
    color: CatColor = Field(..., description="The color of the cat", examples=["White"])
    is_adopted: StrictBool = Field(
        default=False, description="Whether the cat has been adopted", examples=[False]
    )


class UpdateCatRequest(CamelModel):
    """Request schema for a partial cat update.

    Every field is optional; omitted fields keep their current value.
    Explicit nulls are rejected.
    """

    name: Optional[CatName] = Field(default=None, description="New name")
    age: Optional[CatAge] = Field(default=None, description="New age in years")
    breed: Optional[CatBreed] = Field(default=None, description="New breed")
    color: Optional[CatColor] = Field(default=None, description="New color")
    is_adopted: Optional[StrictBool] = Field(
        default=None, description="New adoption status"
    )

    @model_validator(mode="after")
    def reject_explicit_nulls(self) -> "UpdateCatRequest":
        declared = type(self).model_fields
        nulls = sorted(
            declared[name].alias or name
            for name in self.model_fields_set
            if getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self


class CatQueryParams(CamelModel):
    """Query parameters for listing cats.

    page and limit arrive as text and are coerced to integers.
    """

    page: int = Field(
        default=c.DEFAULT_PAGE, description="Page number for pagination (starts from 1)"
    )
    limit: int = Field(
        default=c.DEFAULT_LIMIT,
        description=f"Number of items per page (max {c.MAX_LIMIT})",
    )
    breed: Optional[str] = Field(
        default=None, description="Filter cats by breed", examples=["Persian"]
    )
    is_adopted: Optional[bool] = Field(
        default=None, description="Filter cats by adoption status"
    )

    @field_validator("page")
    @classmethod
    def page_must_be_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError(c.PAGE_NOT_POSITIVE)
        return value

    @field_validator("limit")
    @classmethod
    def limit_must_be_in_range(cls, value: int) -> int:
        if not 1 <= value <= c.MAX_LIMIT:
            raise ValueError(c.LIMIT_OUT_OF_RANGE)
        return value


class CatResponse(CamelModel):
    """A full cat entity."""

    id: str = Field(..., description="Unique identifier for the cat", examples=[EXAMPLE_ID])
    name: str = Field(..., examples=["Whiskers"])
    age: int = Field(..., examples=[3])
    breed: str = Field(..., examples=["Persian"])
    color: str = Field(..., examples=["White"])
    is_adopted: bool = Field(..., examples=[False])
    created_at: datetime = Field(
        ..., description="Timestamp when the cat was created", examples=[EXAMPLE_TIMESTAMP]
    )
    updated_at: datetime = Field(
        ...,
        description="Timestamp when the cat was last updated",
        examples=[EXAMPLE_TIMESTAMP],
    )


class PaginationSchema(CamelModel):
    """Pagination metadata for a cat list."""

    page: int = Field(..., gt=0)
    limit: int = Field(..., gt=0)
    total: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)


class CatListResponse(CamelModel):
    """Response schema for the cat list endpoint."""

    cats: list[CatResponse]
    pagination: PaginationSchema


class DeleteCatResponse(CamelModel):
    """Response schema for the delete endpoint."""

    success: bool
    message: str
    deleted_id: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    timestamp: datetime
    version: str


class ApiInfoResponse(BaseModel):
    """Response schema for the API information endpoint."""

    message: str
    version: str
    endpoints: list[str]


class FieldErrorItem(BaseModel):
    """A single offending field and the reason it was rejected."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
    fields: list[FieldErrorItem] | None = None
