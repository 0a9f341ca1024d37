from __future__ import annotations

import pytest

from pokecatalog.domain.errors import ConflictError, InvalidTypeNameError
from pokecatalog.domain.model import TYPE_NAME_LENGTH, Type
from pokecatalog.domain.type_store import TypeStore, normalize_type_name
from tests.helpers.catalog import FakeTypeRepository, InMemoryCatalog


@pytest.fixture
def store(catalog: InMemoryCatalog) -> TypeStore:
    return TypeStore(FakeTypeRepository(catalog))


def test_normalize_type_name_strips_and_lowercases() -> None:
    assert normalize_type_name("  Fire ") == "fire"


@pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
def test_normalize_type_name_rejects_blank(blank: str) -> None:
    with pytest.raises(InvalidTypeNameError):
        normalize_type_name(blank)


def test_normalize_type_name_limits_length() -> None:
    assert normalize_type_name(" " + "A" * TYPE_NAME_LENGTH + " ") == "a" * TYPE_NAME_LENGTH
    with pytest.raises(InvalidTypeNameError, match="at most"):
        normalize_type_name("a" * (TYPE_NAME_LENGTH + 1))


def test_find_or_create_is_case_insensitive(store: TypeStore, catalog: InMemoryCatalog) -> None:
    first = store.find_or_create("Fire")
    second = store.find_or_create("FIRE")

    assert first.id == second.id
    assert [t.name for t in catalog.types.values()] == ["fire"]


def test_create_conflicts_with_existing_name_in_any_case(store: TypeStore) -> None:
    existing = store.create("water")

    with pytest.raises(ConflictError) as excinfo:
        store.create("Water")

    assert excinfo.value.name == "water"
    assert store.find_or_create("WATER").id == existing.id


def test_find_by_name_normalises_lookup(store: TypeStore) -> None:
    created = store.create("grass")

    assert store.find_by_name(" Grass ") is created
    assert store.find_by_id(created.persisted_id) is created
    assert store.find_by_id(999) is None


def test_find_all_is_ordered_by_id(store: TypeStore) -> None:
    store.create("poison")
    store.create("bug")

    assert [t.name for t in store.find_all()] == ["poison", "bug"]


class _RacingTypeRepository(FakeTypeRepository):
    """Simulates another writer inserting the same name right after the lookup."""

    def __init__(self, catalog: InMemoryCatalog) -> None:
        super().__init__(catalog)
        self.lookups = 0

    def get_by_name(self, name: str) -> Type | None:
        self.lookups += 1
        if self.lookups == 1:
            self.catalog.add_type(name)
            return None
        return super().get_by_name(name)


def test_find_or_create_recovers_from_concurrent_insert(catalog: InMemoryCatalog) -> None:
    repository = _RacingTypeRepository(catalog)
    store = TypeStore(repository)

    type_ = store.find_or_create("ghost")

    assert type_.name == "ghost"
    assert len(catalog.types) == 1
    assert repository.lookups == 2
