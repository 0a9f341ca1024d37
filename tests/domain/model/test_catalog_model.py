from __future__ import annotations

from decimal import Decimal

import pytest

from pokecatalog.domain.commands import PokemonChanges
from pokecatalog.domain.model import (
    Pokemon,
    PokemonProfile,
    PokemonSnapshot,
    Type,
    UnsavedEntityError,
    to_fixed_point,
)


def _profile(**overrides: object) -> PokemonProfile:
    values: dict[str, object] = {
        "name": "squirtle",
        "height": "0.5",
        "weight": 9,
        "base_experience": 63,
        "sprite_url": "https://example.com/7.png",
    }
    values.update(overrides)
    return PokemonProfile(**values)  # pyright: ignore[reportArgumentType]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("0.5", Decimal("0.50")), (6.9, Decimal("6.90")), (12, Decimal("12.00")), ("999.99", Decimal("999.99"))],
)
def test_to_fixed_point_quantizes(raw: object, expected: Decimal) -> None:
    assert to_fixed_point(raw) == expected  # pyright: ignore[reportArgumentType]


@pytest.mark.parametrize("raw", ["1000", "-1000.00", "abc", "NaN", "Infinity"])
def test_to_fixed_point_rejects_out_of_range_or_invalid(raw: str) -> None:
    with pytest.raises(ValueError, match="[Mm]easurement"):
        to_fixed_point(raw)


def test_profile_normalises_measurements() -> None:
    profile = _profile()

    assert profile.height == Decimal("0.50")
    assert profile.weight == Decimal("9.00")


def test_unsaved_type_has_no_persisted_id() -> None:
    with pytest.raises(UnsavedEntityError):
        _ = Type(name="fire").persisted_id


def test_replace_types_keeps_first_occurrence() -> None:
    fire, water = Type(id=1, name="fire"), Type(id=2, name="water")
    duplicate_fire = Type(id=1, name="fire")
    pokemon = Pokemon(profile=_profile())

    pokemon.replace_types([water, fire, duplicate_fire])

    assert pokemon.types == (water, fire)


def test_merge_into_only_touches_supplied_fields() -> None:
    profile = _profile()

    merged = PokemonChanges(height="1.0", sprite_url="https://example.com/8.png").merge_into(profile)

    assert merged.height == Decimal("1.00")
    assert merged.sprite_url == "https://example.com/8.png"
    assert merged.name == profile.name
    assert merged.weight == profile.weight
    assert PokemonChanges(type_names=[]).merge_into(profile) is profile
    assert PokemonChanges(type_names=[]).replaces_types
    assert not PokemonChanges(name="x").replaces_types


def test_snapshot_copies_entity_state() -> None:
    pokemon = Pokemon(id=4, profile=_profile())
    pokemon.replace_types([Type(id=3, name="water")])

    snapshot = PokemonSnapshot.from_entity(pokemon)
    pokemon.apply_profile(_profile(name="wartortle"))

    assert snapshot.name == "squirtle"
    assert snapshot.type_ids == (3,)
    assert snapshot.type_names == ("water",)
