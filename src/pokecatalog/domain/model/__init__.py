"""Domain model: catalog entities, value objects and read snapshots."""

from __future__ import annotations

from .catalog import Pokemon, Type, utc_now
from .entity import Entity, UnsavedEntityError
from .primitives import (
    MEASUREMENT_LIMIT,
    MEASUREMENT_PRECISION,
    MEASUREMENT_SCALE,
    TYPE_NAME_LENGTH,
    Measurement,
    PokemonProfile,
    to_fixed_point,
)
from .snapshots import PokemonSnapshot, TypeSnapshot

__all__ = [
    "MEASUREMENT_LIMIT",
    "MEASUREMENT_PRECISION",
    "MEASUREMENT_SCALE",
    "TYPE_NAME_LENGTH",
    "Entity",
    "Measurement",
    "Pokemon",
    "PokemonProfile",
    "PokemonSnapshot",
    "Type",
    "TypeSnapshot",
    "UnsavedEntityError",
    "to_fixed_point",
    "utc_now",
]
