"""Reusable fakes and helpers for catalog tests."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from pokecatalog.domain.commands import PokemonDraft
from pokecatalog.domain.errors import ConflictError
from pokecatalog.domain.model import Pokemon, Type
from pokecatalog.domain.ports.unit_of_work import CatalogRepositories

if TYPE_CHECKING:
    from collections.abc import Iterable
    from types import TracebackType

    from pokecatalog.domain.notifier import ChangeEvent

SPRITE_URL = "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/25.png"


def make_draft(
    name: str = "pikachu",
    *,
    type_ids: list[int] | None = None,
    type_names: list[str] | None = None,
) -> PokemonDraft:
    """Create a draft with plausible scalar fields."""

    return PokemonDraft(
        name=name,
        height="0.40",
        weight="6.00",
        base_experience=112,
        sprite_url=SPRITE_URL,
        type_ids=type_ids,
        type_names=type_names,
    )


@dataclass
class InMemoryCatalog:
    """Shared state behind the fake repositories."""

    types: dict[int, Type] = field(default_factory=dict[int, Type])
    pokemon: dict[int, Pokemon] = field(default_factory=dict[int, Pokemon])
    commits: int = 0
    _type_ids: itertools.count[int] = field(default_factory=lambda: itertools.count(1))
    _pokemon_ids: itertools.count[int] = field(default_factory=lambda: itertools.count(1))

    def add_type(self, name: str) -> Type:
        type_ = Type(name=name)
        FakeTypeRepository(self).add(type_)
        return type_


class FakeTypeRepository:
    def __init__(self, catalog: InMemoryCatalog) -> None:
        self.catalog = catalog

    def add(self, entity: Type) -> None:
        if any(existing.name == entity.name for existing in self.catalog.types.values()):
            raise ConflictError(entity.name)
        entity.id = next(self.catalog._type_ids)  # noqa: SLF001
        self.catalog.types[entity.id] = entity

    def get(self, entity_id: int) -> Type | None:
        return self.catalog.types.get(entity_id)

    def get_by_name(self, name: str) -> Type | None:
        return next((t for t in self.catalog.types.values() if t.name == name), None)

    def get_many(self, type_ids: Iterable[int]) -> list[Type]:
        wanted = set(type_ids)
        return [self.catalog.types[i] for i in sorted(wanted) if i in self.catalog.types]

    def find_all(self) -> list[Type]:
        return [self.catalog.types[i] for i in sorted(self.catalog.types)]


class FakePokemonRepository:
    def __init__(self, catalog: InMemoryCatalog) -> None:
        self.catalog = catalog

    def add(self, entity: Pokemon) -> None:
        entity.id = next(self.catalog._pokemon_ids)  # noqa: SLF001
        self.catalog.pokemon[entity.id] = entity

    def update(self, entity: Pokemon) -> None:
        self.catalog.pokemon[entity.persisted_id] = entity

    def remove(self, entity: Pokemon) -> None:
        del self.catalog.pokemon[entity.persisted_id]

    def get(self, entity_id: int) -> Pokemon | None:
        return self.catalog.pokemon.get(entity_id)

    def find_all(self) -> list[Pokemon]:
        return [self.catalog.pokemon[i] for i in sorted(self.catalog.pokemon)]


class FakeUnitOfWork:
    """Unit of work over ``InMemoryCatalog``; commits can be made to fail."""

    def __init__(self, catalog: InMemoryCatalog, *, fail_on_commit: bool = False) -> None:
        self.catalog = catalog
        self.fail_on_commit = fail_on_commit
        self.committed = False
        self.rolled_back = False
        self._repositories = CatalogRepositories(
            types=FakeTypeRepository(catalog),
            pokemon=FakePokemonRepository(catalog),
        )

    @property
    def repositories(self) -> CatalogRepositories:
        return self._repositories

    def __enter__(self) -> FakeUnitOfWork:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        return False

    def commit(self) -> None:
        if self.fail_on_commit:
            raise RuntimeError("commit failed")
        self.committed = True
        self.catalog.commits += 1

    def rollback(self) -> None:
        self.rolled_back = True


class RecordingPublisher:
    """Change publisher that keeps every event it is handed."""

    def __init__(self) -> None:
        self.events: list[ChangeEvent] = []

    def publish(self, event: ChangeEvent) -> int:
        self.events.append(event)
        return 1


class RecordingSubscriber:
    """Notifier subscriber that keeps every event it receives."""

    def __init__(self) -> None:
        self.events: list[ChangeEvent] = []

    def __call__(self, event: ChangeEvent) -> None:
        self.events.append(event)
