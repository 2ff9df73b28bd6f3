"""
Port interfaces (ABCs) for the cats bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.cats.entities import Cat, CatChanges, CatQueryOptions, NewCat


class CatRepository(ABC):
    """Port for storing and retrieving cats.

    The repository is the sole owner of cat storage. Every value it
    returns is immutable, so no caller holds a reference into the store.
    """

    @abstractmethod
    def create(self, data: NewCat) -> Cat:
        """Assign a fresh id and timestamps, store the cat, and return it."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, cat_id: str) -> Optional[Cat]:
        """Return the cat with this id, or None if it does not exist."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self, options: Optional[CatQueryOptions] = None) -> list[Cat]:
        """Return one page of cats matching the filters.

        Args:
            options: Filters and page selection. Defaults to page 1,
                limit 10, no filters.

        Returns:
            Cats in insertion order. An out-of-range page is an empty list.
        """
        raise NotImplementedError

    @abstractmethod
    def count(self, options: Optional[CatQueryOptions] = None) -> int:
        """Return the number of cats matching the filters, ignoring paging."""
        raise NotImplementedError

    @abstractmethod
    def update(self, cat_id: str, changes: CatChanges) -> Optional[Cat]:
        """Merge the present fields into a stored cat.

        Returns:
            The updated cat, or None if the id does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, cat_id: str) -> bool:
        """Remove a cat. Returns whether a removal occurred."""
        raise NotImplementedError
