"""
Domain entities for the cats bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
All entities are frozen: the repository hands out values that callers
can keep without affecting stored state.
"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Optional

from app.domain.cats.constants import DEFAULT_LIMIT, DEFAULT_PAGE


@dataclass(frozen=True)
class Cat:
    """A cat record with identity, attributes, and system timestamps."""

    id: str
    name: str
    age: int
    breed: str
    color: str
    is_adopted: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class NewCat:
    """Fields accepted when creating a cat (no id, no timestamps)."""

    name: str
    age: int
    breed: str
    color: str
    is_adopted: bool = False


@dataclass(frozen=True)
class CatChanges:
    """A partial update. ``None`` means the field is left untouched."""

    name: Optional[str] = None
    age: Optional[int] = None
    breed: Optional[str] = None
    color: Optional[str] = None
    is_adopted: Optional[bool] = None

    def as_dict(self) -> dict[str, Any]:
        """Return only the fields that are present in this update."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class CatQueryOptions:
    """Filter and page selection for listing cats.

    Attributes:
        page: 1-based page number.
        limit: Page size.
        breed: Case-insensitive substring matched against the breed.
        is_adopted: Exact adoption status to match.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    breed: Optional[str] = None
    is_adopted: Optional[bool] = None

    def matches(self, cat: Cat) -> bool:
        """Return True if the cat passes the breed and adoption filters."""
        if self.breed and self.breed.lower() not in cat.breed.lower():
            return False
        if self.is_adopted is not None and cat.is_adopted != self.is_adopted:
            return False
        return True
