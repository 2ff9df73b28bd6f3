"""
Cat service: business rules for cat management.

Input: CreateCatCommand, UpdateCatCommand, ListCatsQuery, cat ids.
Output: Cat entities and CatListResult.
Side effects: Mutates the injected CatRepository.
Failure cases: CatValidationError, CatNotFoundError, CatConflictError.

This is the single place where rule violations become typed errors.
The name uniqueness check reads then writes without a lock; it is only
safe while calls are serialized (one request at a time on the event loop).
"""

import logging
import math
from typing import Optional

from app.application.cats.dtos import (
    CatListResult,
    CreateCatCommand,
    ListCatsQuery,
    PaginationResult,
    UpdateCatCommand,
)
from app.domain.cats.entities import Cat, CatChanges, CatQueryOptions, NewCat
from app.domain.cats.errors import CatConflictError, CatNotFoundError
from app.domain.cats.ports import CatRepository
from app.domain.cats.rules import (
    normalize_text,
    validate_changes,
    validate_new_cat,
    validate_paging,
)

logger = logging.getLogger(__name__)


class CatService:
    """Enforces cat business rules on top of a CatRepository.

    The service holds no state besides the repository reference and
    never caches entities between calls.
    """

    def __init__(self, repository: CatRepository) -> None:
        """Initialize the service.

        Args:
            repository: The store that owns all cat data.
        """
        self._repository = repository

    def create_cat(self, command: CreateCatCommand) -> Cat:
        """Create a cat after validating fields and name uniqueness.

        Args:
            command: The creation input.

        Returns:
            The stored cat with its generated id and timestamps.

        Raises:
            CatValidationError: If any field violates its constraints.
            CatConflictError: If another cat already has this name.
        """
        data = NewCat(
            name=normalize_text(command.name),
            age=command.age,
            breed=normalize_text(command.breed),
            color=normalize_text(command.color),
            is_adopted=command.is_adopted,
        )
        validate_new_cat(data)
        self._ensure_name_available(data.name)

        cat = self._repository.create(data)
        logger.info("Created cat id=%s", cat.id)
        return cat

    def get_cat_by_id(self, cat_id: str) -> Optional[Cat]:
        """Return the cat, or None if it does not exist."""
        return self._repository.find_by_id(cat_id)

    def get_all_cats(self, query: Optional[ListCatsQuery] = None) -> CatListResult:
        """Return one page of cats with pagination metadata.

        Args:
            query: Page selection and filters. Defaults to the first page.

        Returns:
            The page of cats and page/limit/total/total_pages.

        Raises:
            CatValidationError: If page or limit is out of range.
        """
        query = query or ListCatsQuery()
        validate_paging(query.page, query.limit)
        options = CatQueryOptions(
            page=query.page,
            limit=query.limit,
            breed=query.breed,
            is_adopted=query.is_adopted,
        )
        cats = self._repository.find_all(options)
        total = self._repository.count(options)

        logger.info(
            "Listed cats: page=%d, limit=%d, returned=%d, total=%d",
            query.page,
            query.limit,
            len(cats),
            total,
        )
        return CatListResult(
            cats=tuple(cats),
            pagination=PaginationResult(
                page=query.page,
                limit=query.limit,
                total=total,
                total_pages=math.ceil(total / query.limit),
            ),
        )

    def update_cat(self, command: UpdateCatCommand) -> Cat:
        """Apply a partial update after re-validating the present fields.

        Args:
            command: The cat id plus the fields to change.

        Returns:
            The updated cat.

        Raises:
            CatNotFoundError: If the cat does not exist.
            CatValidationError: If any present field violates its constraints.
            CatConflictError: If the new name belongs to another cat.
        """
        existing = self._repository.find_by_id(command.cat_id)
        if existing is None:
            raise CatNotFoundError(command.cat_id)

        changes = CatChanges(
            name=normalize_text(command.name),
            age=command.age,
            breed=normalize_text(command.breed),
            color=normalize_text(command.color),
            is_adopted=command.is_adopted,
        )
        validate_changes(changes)

        if changes.name is not None and changes.name != existing.name:
            self._ensure_name_available(changes.name, exclude_id=existing.id)

        updated = self._repository.update(command.cat_id, changes)
        if updated is None:
            raise CatNotFoundError(command.cat_id)

        logger.info(
            "Updated cat id=%s fields=%s",
            updated.id,
            ",".join(sorted(changes.as_dict())) or "-",
        )
        return updated

    def delete_cat(self, cat_id: str) -> bool:
        """Delete a cat.

        Returns:
            Whether the repository removed an entry.

        Raises:
            CatNotFoundError: If the cat does not exist.
        """
        if self._repository.find_by_id(cat_id) is None:
            raise CatNotFoundError(cat_id)

        removed = self._repository.delete(cat_id)
        logger.info("Deleted cat id=%s", cat_id)
        return removed

    def _ensure_name_available(
        self, name: str, exclude_id: Optional[str] = None
    ) -> None:
        wanted = name.lower()
        total = self._repository.count()
        if total == 0:
            return
        # Scan every live cat, not just the first page.
        everyone = self._repository.find_all(CatQueryOptions(page=1, limit=total))
        for cat in everyone:
            if cat.id != exclude_id and cat.name.lower() == wanted:
                raise CatConflictError(name)
