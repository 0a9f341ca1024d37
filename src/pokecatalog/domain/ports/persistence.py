"""Ports for persisting catalog aggregates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pokecatalog.domain.model import Pokemon, Type

if TYPE_CHECKING:
    from collections.abc import Iterable


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...

    def get(self, entity_id: int) -> TEntity | None: ...

    def find_all(self) -> list[TEntity]: ...


@runtime_checkable
class TypeRepository(Repository[Type], Protocol):
    """Persistence contract for types.

    ``add`` must assign the id immediately and raise ``ConflictError`` when the
    storage-level uniqueness constraint on ``name`` rejects the row, leaving the
    surrounding transaction usable.
    """

    def get_by_name(self, name: str) -> Type | None: ...

    def get_many(self, type_ids: Iterable[int]) -> list[Type]: ...


@runtime_checkable
class PokemonRepository(Repository[Pokemon], Protocol):
    """Persistence contract for Pokémon, always loaded with their types."""

    def update(self, entity: Pokemon) -> None: ...

    def remove(self, entity: Pokemon) -> None: ...
