"""
Adapter: In-memory cat storage.

Implements the CatRepository port with a dict keyed by cat id.
The store is volatile and lives as long as the repository instance.
There is no locking: callers are expected to run one operation at a
time (the HTTP layer serves cat routes from the event loop).
"""

import dataclasses
import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

from app.domain.cats.entities import Cat, CatChanges, CatQueryOptions, NewCat
from app.domain.cats.ports import CatRepository

logger = logging.getLogger(__name__)

_TICK = timedelta(microseconds=1)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryCatRepository(CatRepository):
    """Concrete adapter keeping cats in process memory.

    Insertion order of the underlying dict defines listing order.
    Identifiers are never reused, even after deletion or ``clear()``.
    """

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        """Initialize an empty repository.

        Args:
            clock: Returns the current time. Injected for deterministic tests.
        """
        self._cats: dict[str, Cat] = {}
        self._issued_ids: set[str] = set()
        self._clock = clock

    def create(self, data: NewCat) -> Cat:
        """Store a new cat with a fresh id and matching timestamps."""
        now = self._clock()
        cat = Cat(
            id=self._next_id(),
            name=data.name,
            age=data.age,
            breed=data.breed,
            color=data.color,
            is_adopted=data.is_adopted,
            created_at=now,
            updated_at=now,
        )
        self._cats[cat.id] = cat
        logger.debug("Stored cat id=%s", cat.id)
        return cat

    def find_by_id(self, cat_id: str) -> Optional[Cat]:
        return self._cats.get(cat_id)

    def find_all(self, options: Optional[CatQueryOptions] = None) -> list[Cat]:
        """Return the requested page of filtered cats.

        Args:
            options: Filters and page selection.

        Returns:
            A contiguous slice of the filtered cats. A page past the end,
            or a page or limit below 1, is an empty list.
        """
        options = options or CatQueryOptions()
        if options.page < 1 or options.limit < 1:
            return []
        matching = self._filter(options)
        start = (options.page - 1) * options.limit
        end = start + options.limit
        return matching[start:end]

    def count(self, options: Optional[CatQueryOptions] = None) -> int:
        return len(self._filter(options or CatQueryOptions()))

    def update(self, cat_id: str, changes: CatChanges) -> Optional[Cat]:
        """Merge present fields into the stored cat and refresh updated_at.

        The id and created_at are never overwritten. updated_at always moves
        strictly forward, even when the clock has not advanced since the
        previous write.
        """
        existing = self._cats.get(cat_id)
        if existing is None:
            return None

        now = self._clock()
        if now <= existing.updated_at:
            now = existing.updated_at + _TICK

        updated = dataclasses.replace(existing, **changes.as_dict(), updated_at=now)
        self._cats[cat_id] = updated
        logger.debug("Updated cat id=%s fields=%s", cat_id, sorted(changes.as_dict()))
        return updated

    def delete(self, cat_id: str) -> bool:
        removed = self._cats.pop(cat_id, None) is not None
        if removed:
            logger.debug("Removed cat id=%s", cat_id)
        return removed

    def clear(self) -> None:
        """Remove every cat. Issued ids stay reserved."""
        self._cats.clear()

    def size(self) -> int:
        """Return the number of stored cats."""
        return len(self._cats)

    def _filter(self, options: CatQueryOptions) -> list[Cat]:
        return [cat for cat in self._cats.values() if options.matches(cat)]

    def _next_id(self) -> str:
        cat_id = str(uuid4())
        while cat_id in self._issued_ids:
            cat_id = str(uuid4())
        self._issued_ids.add(cat_id)
        return cat_id
