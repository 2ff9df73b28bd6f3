"""
Tests for the cats domain layer.

Tests entities, field rules and error classes in isolation.
No external dependencies or IO required.
"""

from datetime import datetime, timezone

import pytest

from app.domain.cats import constants as c
from app.domain.cats.entities import Cat, CatChanges, CatQueryOptions, NewCat
from app.domain.cats.errors import (
    CatConflictError,
    CatDomainError,
    CatNotFoundError,
    CatValidationError,
)
from app.domain.cats.rules import (
    check_age,
    check_breed,
    check_color,
    check_name,
    collect_errors,
    validate_changes,
    validate_new_cat,
    validate_paging,
)

NOW = datetime(2024, 1, 15, tzinfo=timezone.utc)


def _cat(breed: str = "Persian", is_adopted: bool = False) -> Cat:
    return Cat(
        id="c1",
        name="Whiskers",
        age=3,
        breed=breed,
        color="White",
        is_adopted=is_adopted,
        created_at=NOW,
        updated_at=NOW,
    )


class TestNameRule:
    """Tests for the cat name rule."""

    @pytest.mark.parametrize("name", ["Whiskers", "Mr Whiskers", "Jean-Luc", "O'Malley", "a" * 50])
    def test_valid_names(self, name: str) -> None:
        assert check_name(name) is None

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_is_required(self, name: str) -> None:
        assert check_name(name) == c.NAME_REQUIRED

    def test_name_of_51_chars_is_too_long(self) -> None:
        assert check_name("a" * 51) == c.NAME_TOO_LONG

    @pytest.mark.parametrize("name", ["Tom123", "Kitty!", "Café"])
    def test_invalid_characters(self, name: str) -> None:
        assert check_name(name) == c.NAME_INVALID_CHARS


class TestAgeRule:
    """Tests for the cat age rule."""

    @pytest.mark.parametrize("age", [0, 15, 30])
    def test_bounds_accepted(self, age: int) -> None:
        assert check_age(age) is None

    def test_negative_age(self) -> None:
        assert check_age(-1) == c.AGE_NEGATIVE

    def test_age_above_30(self) -> None:
        assert check_age(31) == c.AGE_TOO_HIGH

    @pytest.mark.parametrize("age", [2.5, "3", True])
    def test_non_integer_age(self, age: object) -> None:
        assert check_age(age) == c.AGE_NOT_INTEGER


class TestBreedAndColorRules:
    """Tests for breed and color length rules."""

    def test_breed_limits(self) -> None:
        assert check_breed("a" * 30) is None
        assert check_breed("a" * 31) == c.BREED_TOO_LONG
        assert check_breed("") == c.BREED_REQUIRED

    def test_color_limits(self) -> None:
        assert check_color("a" * 20) is None
        assert check_color("a" * 21) == c.COLOR_TOO_LONG
        assert check_color(" ") == c.COLOR_REQUIRED


class TestValidation:
    """Tests for the error collectors."""

    def test_all_failures_reported_at_once(self) -> None:
        data = NewCat(name="", age=31, breed="", color="a" * 21)
        with pytest.raises(CatValidationError) as exc_info:
            validate_new_cat(data)
        assert exc_info.value.errors == {
            "name": c.NAME_REQUIRED,
            "age": c.AGE_TOO_HIGH,
            "breed": c.BREED_REQUIRED,
            "color": c.COLOR_TOO_LONG,
        }

    def test_valid_new_cat_passes(self) -> None:
        validate_new_cat(NewCat(name="Whiskers", age=3, breed="Persian", color="White"))

    def test_changes_only_check_present_fields(self) -> None:
        validate_changes(CatChanges(is_adopted=True))
        with pytest.raises(CatValidationError) as exc_info:
            validate_changes(CatChanges(age=-1))
        assert exc_info.value.errors == {"age": c.AGE_NEGATIVE}

    def test_paging_bounds(self) -> None:
        validate_paging(1, 1)
        validate_paging(7, c.MAX_LIMIT)
        with pytest.raises(CatValidationError) as exc_info:
            validate_paging(0, True)
        assert exc_info.value.errors == {
            "page": c.PAGE_NOT_POSITIVE,
            "limit": c.LIMIT_OUT_OF_RANGE,
        }

    def test_unknown_fields_ignored(self) -> None:
        assert collect_errors({"nickname": ""}) == {}


class TestEntities:
    """Tests for entity helpers."""

    def test_cat_is_immutable(self) -> None:
        cat = _cat()
        with pytest.raises(AttributeError):
            cat.name = "Other"  # type: ignore[misc]

    def test_new_cat_defaults_to_not_adopted(self) -> None:
        assert NewCat(name="Tom", age=1, breed="Siamese", color="Grey").is_adopted is False

    def test_changes_as_dict_skips_absent_fields(self) -> None:
        changes = CatChanges(age=4, is_adopted=False)
        assert changes.as_dict() == {"age": 4, "is_adopted": False}

    def test_breed_filter_is_case_insensitive_substring(self) -> None:
        options = CatQueryOptions(breed="pers")
        assert options.matches(_cat(breed="Persian"))
        assert not options.matches(_cat(breed="Siamese"))

    def test_adopted_filter(self) -> None:
        assert CatQueryOptions(is_adopted=True).matches(_cat(is_adopted=True))
        assert not CatQueryOptions(is_adopted=True).matches(_cat(is_adopted=False))
        assert CatQueryOptions().matches(_cat(is_adopted=True))


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_not_found_error_message(self) -> None:
        err = CatNotFoundError("abc")
        assert err.cat_id == "abc"
        assert "abc" in err.message
        assert isinstance(err, CatDomainError)

    def test_conflict_error_message(self) -> None:
        err = CatConflictError("Whiskers")
        assert err.name == "Whiskers"
        assert "Whiskers" in str(err)

    def test_validation_error_lists_fields(self) -> None:
        err = CatValidationError({"name": c.NAME_REQUIRED, "age": c.AGE_NEGATIVE})
        assert "name" in err.message and "age" in err.message
        assert err.errors["age"] == c.AGE_NEGATIVE
