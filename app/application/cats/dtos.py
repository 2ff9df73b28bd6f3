"""
Data Transfer Objects for the cats application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional

from app.domain.cats.constants import DEFAULT_LIMIT, DEFAULT_PAGE
from app.domain.cats.entities import Cat


@dataclass(frozen=True)
class CreateCatCommand:
    """Input DTO for creating a cat.

    Attributes:
        name: Display name, unique across live cats (case-insensitive).
        age: Age in whole years.
        breed: Breed name.
        color: Coat color.
        is_adopted: Adoption status. Defaults to False.
    """

    name: str
    age: int
    breed: str
    color: str
    is_adopted: bool = False


@dataclass(frozen=True)
class UpdateCatCommand:
    """Input DTO for a partial cat update.

    Attributes:
        cat_id: Id of the cat to update.
        name: New name, or None to keep the current one.
        age: New age, or None to keep the current one.
        breed: New breed, or None to keep the current one.
        color: New color, or None to keep the current one.
        is_adopted: New adoption status, or None to keep the current one.
    """

    cat_id: str
    name: Optional[str] = None
    age: Optional[int] = None
    breed: Optional[str] = None
    color: Optional[str] = None
    is_adopted: Optional[bool] = None


@dataclass(frozen=True)
class ListCatsQuery:
    """Input DTO for listing cats.

    Attributes:
        page: 1-based page number.
        limit: Page size (1-100).
        breed: Optional case-insensitive breed substring.
        is_adopted: Optional adoption status filter.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    breed: Optional[str] = None
    is_adopted: Optional[bool] = None


@dataclass(frozen=True)
class PaginationResult:
    """Output DTO describing the returned page.

    Attributes:
        page: The requested page number.
        limit: The requested page size.
        total: Number of cats matching the filters.
        total_pages: ceil(total / limit).
    """

    page: int
    limit: int
    total: int
    total_pages: int


@dataclass(frozen=True)
class CatListResult:
    """Output DTO for a page of cats plus pagination metadata."""

    cats: tuple[Cat, ...]
    pagination: PaginationResult
