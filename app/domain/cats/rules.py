"""
Field rules for cat data.

Pure validation functions shared by create and update. Each check returns
a reason string or None, and the collectors gather every failure so callers
report all offending fields at once.
"""

from typing import Any, Optional

from app.domain.cats import constants as c
from app.domain.cats.entities import CatChanges, NewCat
from app.domain.cats.errors import CatValidationError


def check_name(name: Any) -> Optional[str]:
    if not isinstance(name, str) or not name.strip():
        return c.NAME_REQUIRED
    if len(name) > c.NAME_MAX_LEN:
        return c.NAME_TOO_LONG
    if not c.NAME_REGEX.fullmatch(name):
        return c.NAME_INVALID_CHARS
    return None


def check_age(age: Any) -> Optional[str]:
    # bool is an int subclass; True is not an age.
    if isinstance(age, bool) or not isinstance(age, int):
        return c.AGE_NOT_INTEGER
    if age < c.AGE_MIN:
        return c.AGE_NEGATIVE
    if age > c.AGE_MAX:
        return c.AGE_TOO_HIGH
    return None


def check_breed(breed: Any) -> Optional[str]:
    if not isinstance(breed, str) or not breed.strip():
        return c.BREED_REQUIRED
    if len(breed) > c.BREED_MAX_LEN:
        return c.BREED_TOO_LONG
    return None


def check_color(color: Any) -> Optional[str]:
    if not isinstance(color, str) or not color.strip():
        return c.COLOR_REQUIRED
    if len(color) > c.COLOR_MAX_LEN:
        return c.COLOR_TOO_LONG
    return None


def check_is_adopted(is_adopted: Any) -> Optional[str]:
    if not isinstance(is_adopted, bool):
        return c.ADOPTED_NOT_BOOLEAN
    return None


FIELD_CHECKS = {
    "name": check_name,
    "age": check_age,
    "breed": check_breed,
    "color": check_color,
    "is_adopted": check_is_adopted,
}


def collect_errors(values: dict[str, Any]) -> dict[str, str]:
    """Run the check for every field in ``values`` and gather failures."""
    errors: dict[str, str] = {}
    for field, value in values.items():
        check = FIELD_CHECKS.get(field)
        if check is None:
            continue
        reason = check(value)
        if reason is not None:
            errors[field] = reason
    return errors


def validate_new_cat(data: NewCat) -> None:
    """Validate every field of a creation input.

    Raises:
        CatValidationError: If any field violates its constraints.
    """
    errors = collect_errors(
        {
            "name": data.name,
            "age": data.age,
            "breed": data.breed,
            "color": data.color,
            "is_adopted": data.is_adopted,
        }
    )
    if errors:
        raise CatValidationError(errors)


def validate_changes(changes: CatChanges) -> None:
    """Validate only the fields present in a partial update.

    Raises:
        CatValidationError: If any present field violates its constraints.
    """
    errors = collect_errors(changes.as_dict())
    if errors:
        raise CatValidationError(errors)


def normalize_text(value: Optional[str]) -> Optional[str]:
    """Trim surrounding whitespace the same way the schema layer does."""
    return value.strip() if isinstance(value, str) else value


def validate_paging(page: Any, limit: Any) -> None:
    """Validate a page selection.

    Raises:
        CatValidationError: If page is not a positive integer or limit is
            outside 1..MAX_LIMIT.
    """
    errors = {}
    if isinstance(page, bool) or not isinstance(page, int) or page < 1:
        errors["page"] = c.PAGE_NOT_POSITIVE
    if isinstance(limit, bool) or not isinstance(limit, int) or not 1 <= limit <= c.MAX_LIMIT:
        errors["limit"] = c.LIMIT_OUT_OF_RANGE
    if errors:
        raise CatValidationError(errors)
