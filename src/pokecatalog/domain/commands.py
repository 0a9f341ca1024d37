"""Write-path request DTOs (transport-agnostic)."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Final

from pokecatalog.domain.model import PokemonProfile

if TYPE_CHECKING:
    from pokecatalog.domain.model import Measurement

PROFILE_FIELDS: Final[tuple[str, ...]] = tuple(f.name for f in fields(PokemonProfile))


@dataclass(slots=True)
class PokemonDraft:
    """Everything needed to create a Pokémon. Both type lists are optional."""

    name: str
    height: Measurement
    weight: Measurement
    base_experience: int
    sprite_url: str
    type_ids: list[int] | None = None
    type_names: list[str] | None = None

    def to_profile(self) -> PokemonProfile:
        return PokemonProfile(
            name=self.name,
            height=self.height,  # pyright: ignore[reportArgumentType]
            weight=self.weight,  # pyright: ignore[reportArgumentType]
            base_experience=self.base_experience,
            sprite_url=self.sprite_url,
        )


@dataclass(slots=True)
class PokemonChanges:
    """Partial update. ``None`` means "not supplied" for every field.

    An empty type list is a supplied value: it clears the type set.
    """

    name: str | None = None
    height: Measurement | None = None
    weight: Measurement | None = None
    base_experience: int | None = None
    sprite_url: str | None = None
    type_ids: list[int] | None = None
    type_names: list[str] | None = None

    @property
    def replaces_types(self) -> bool:
        return self.type_ids is not None or self.type_names is not None

    def supplied_profile_fields(self) -> dict[str, object]:
        return {
            name: value for name in PROFILE_FIELDS if (value := getattr(self, name)) is not None
        }

    def merge_into(self, profile: PokemonProfile) -> PokemonProfile:
        """Build the profile that results from applying these changes to ``profile``."""
        supplied = self.supplied_profile_fields()
        if not supplied:
            return profile
        return replace(profile, **supplied)  # pyright: ignore[reportArgumentType]
