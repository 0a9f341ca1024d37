"""Catalog entities.

Aggregate roots here:
- Pokemon owns its association to Types (many-to-many, no attributes)
- Type is shared; it never owns Pokémon and survives their deletion
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from pokecatalog.domain.model.entity import Entity

if TYPE_CHECKING:
    from collections.abc import Iterable
    from decimal import Decimal

    from pokecatalog.domain.model.primitives import PokemonProfile


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(eq=False, kw_only=True)
class Type(Entity):
    """Named category label. ``name`` is always stored lower-cased."""

    name: str

    # Inverse view (read-only); maintained through Pokemon._types
    _pokemons: list[Pokemon] = field(default_factory=list["Pokemon"], repr=False)

    @property
    def pokemons(self) -> tuple[Pokemon, ...]:
        return tuple(self._pokemons)


@dataclass(eq=False, kw_only=True)
class Pokemon(Entity):
    profile: PokemonProfile
    created_at: datetime = field(default_factory=utc_now)

    # Owned association
    _types: list[Type] = field(default_factory=list["Type"], repr=False)

    @property
    def name(self) -> str:
        return self.profile.name

    @property
    def height(self) -> Decimal:
        return self.profile.height

    @property
    def weight(self) -> Decimal:
        return self.profile.weight

    @property
    def base_experience(self) -> int:
        return self.profile.base_experience

    @property
    def sprite_url(self) -> str:
        return self.profile.sprite_url

    @property
    def types(self) -> tuple[Type, ...]:
        return tuple(self._types)

    def apply_profile(self, profile: PokemonProfile) -> None:
        """Swap in a new profile value; fields are never patched one by one."""
        self.profile = profile

    def replace_types(self, types: Iterable[Type]) -> None:
        """Replace the whole type set, keeping the first occurrence of each id."""
        unique: list[Type] = []
        seen: set[int] = set()
        for type_ in types:
            type_id = type_.persisted_id
            if type_id in seen:
                continue
            seen.add(type_id)
            unique.append(type_)
        self._types = unique
