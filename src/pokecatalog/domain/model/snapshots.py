"""Immutable read models handed out of a unit of work.

Snapshots are what services return and what change events carry, so nothing
outside the persistence boundary ever holds a live, session-bound entity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime
    from decimal import Decimal

    from pokecatalog.domain.model.catalog import Pokemon, Type


@dataclass(frozen=True, slots=True)
class TypeSnapshot:
    id: int
    name: str

    @classmethod
    def from_entity(cls, type_: Type) -> TypeSnapshot:
        return cls(id=type_.persisted_id, name=type_.name)


@dataclass(frozen=True, slots=True)
class PokemonSnapshot:
    id: int
    name: str
    height: Decimal
    weight: Decimal
    base_experience: int
    sprite_url: str
    created_at: datetime
    types: tuple[TypeSnapshot, ...] = ()

    @classmethod
    def from_entity(cls, pokemon: Pokemon) -> PokemonSnapshot:
        return cls(
            id=pokemon.persisted_id,
            name=pokemon.name,
            height=pokemon.height,
            weight=pokemon.weight,
            base_experience=pokemon.base_experience,
            sprite_url=pokemon.sprite_url,
            created_at=pokemon.created_at,
            types=tuple(TypeSnapshot.from_entity(type_) for type_ in pokemon.types),
        )

    @property
    def type_ids(self) -> tuple[int, ...]:
        return tuple(type_.id for type_ in self.types)

    @property
    def type_names(self) -> tuple[str, ...]:
        return tuple(type_.name for type_ in self.types)
