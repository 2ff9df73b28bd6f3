"""
Tests for the in-memory cat repository adapter.

Uses an injected clock so timestamps are deterministic.
"""

from app.domain.cats.entities import CatChanges, CatQueryOptions, NewCat
from app.infrastructure.cats.in_memory_cat_repository import InMemoryCatRepository


def _new(name: str, breed: str = "Persian", is_adopted: bool = False) -> NewCat:
    return NewCat(name=name, age=3, breed=breed, color="White", is_adopted=is_adopted)


class TestCreate:
    """Tests for InMemoryCatRepository.create."""

    def test_assigns_id_and_equal_timestamps(
        self, repository: InMemoryCatRepository, clock
    ) -> None:
        cat = repository.create(_new("Whiskers"))
        assert cat.id
        assert cat.created_at == cat.updated_at == clock.now
        assert repository.size() == 1

    def test_ids_are_unique(self, repository: InMemoryCatRepository) -> None:
        ids = {repository.create(_new(f"Cat {i}")).id for i in range(20)}
        assert len(ids) == 20

    def test_ids_not_reused_after_clear(self, repository: InMemoryCatRepository) -> None:
        first = repository.create(_new("Tom")).id
        repository.clear()
        assert repository.size() == 0
        assert repository.create(_new("Tom")).id != first


class TestFindAll:
    """Tests for filtering and pagination."""

    def test_pages_are_contiguous_slices(self, repository: InMemoryCatRepository) -> None:
        created = [repository.create(_new(f"Cat {i}")) for i in range(25)]

        page_one = repository.find_all(CatQueryOptions(page=1, limit=10))
        page_three = repository.find_all(CatQueryOptions(page=3, limit=10))

        assert [c.id for c in page_one] == [c.id for c in created[:10]]
        assert [c.id for c in page_three] == [c.id for c in created[20:]]

    def test_out_of_range_page_is_empty(self, repository: InMemoryCatRepository) -> None:
        for i in range(5):
            repository.create(_new(f"Cat {i}"))
        assert repository.find_all(CatQueryOptions(page=4, limit=10)) == []

    def test_page_below_one_is_empty(self, repository: InMemoryCatRepository) -> None:
        for i in range(25):
            repository.create(_new(f"Cat {i}"))
        assert repository.find_all(CatQueryOptions(page=-1, limit=10)) == []
        assert repository.find_all(CatQueryOptions(page=0, limit=10)) == []
        assert repository.find_all(CatQueryOptions(page=1, limit=0)) == []

    def test_defaults_to_first_ten(self, repository: InMemoryCatRepository) -> None:
        for i in range(12):
            repository.create(_new(f"Cat {i}"))
        assert len(repository.find_all()) == 10
        assert repository.count() == 12

    def test_filters_apply_before_pagination(self, repository: InMemoryCatRepository) -> None:
        repository.create(_new("Tom", breed="Siamese"))
        persian = repository.create(_new("Felix", breed="Persian", is_adopted=True))
        repository.create(_new("Luna", breed="Exotic Persian"))

        options = CatQueryOptions(breed="PERSIAN", is_adopted=True)
        assert repository.find_all(options) == [persian]
        assert repository.count(options) == 1
        assert repository.count(CatQueryOptions(breed="persian")) == 2


class TestUpdate:
    """Tests for InMemoryCatRepository.update."""

    def test_merges_present_fields_only(
        self, repository: InMemoryCatRepository, clock
    ) -> None:
        cat = repository.create(_new("Whiskers"))
        clock.advance(5)

        updated = repository.update(cat.id, CatChanges(is_adopted=True))

        assert updated is not None
        assert updated.is_adopted is True
        assert (updated.name, updated.age, updated.breed, updated.color) == (
            cat.name, cat.age, cat.breed, cat.color,
        )
        assert updated.id == cat.id
        assert updated.created_at == cat.created_at
        assert updated.updated_at == clock.now

    def test_updated_at_advances_with_stalled_clock(
        self, repository: InMemoryCatRepository
    ) -> None:
        cat = repository.create(_new("Whiskers"))
        first = repository.update(cat.id, CatChanges(age=4))
        second = repository.update(cat.id, CatChanges(age=5))
        assert cat.updated_at < first.updated_at < second.updated_at

    def test_previously_returned_values_are_unchanged(
        self, repository: InMemoryCatRepository
    ) -> None:
        cat = repository.create(_new("Whiskers"))
        repository.update(cat.id, CatChanges(name="Tom"))
        assert cat.name == "Whiskers"
        assert repository.find_by_id(cat.id).name == "Tom"

    def test_missing_id_returns_none(self, repository: InMemoryCatRepository) -> None:
        assert repository.update("missing", CatChanges(age=1)) is None


class TestDelete:
    """Tests for InMemoryCatRepository.delete."""

    def test_delete_is_idempotent(self, repository: InMemoryCatRepository) -> None:
        cat = repository.create(_new("Whiskers"))
        assert repository.delete(cat.id) is True
        assert repository.delete(cat.id) is False
        assert repository.find_by_id(cat.id) is None
