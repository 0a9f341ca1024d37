"""Domain primitives: fixed-point measurements and the Pokémon profile value object."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Final

MEASUREMENT_PRECISION: Final[int] = 5
MEASUREMENT_SCALE: Final[int] = 2
MEASUREMENT_LIMIT: Final[Decimal] = Decimal(10) ** (MEASUREMENT_PRECISION - MEASUREMENT_SCALE)

TYPE_NAME_LENGTH: Final[int] = 50

_QUANTUM: Final[Decimal] = Decimal(1).scaleb(-MEASUREMENT_SCALE)

type Measurement = Decimal | int | float | str


def to_fixed_point(value: Measurement) -> Decimal:
    """Return ``value`` as a two-decimal ``Decimal`` below ``MEASUREMENT_LIMIT``."""

    try:
        raw = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
        quantized = raw.quantize(_QUANTUM, rounding=ROUND_HALF_EVEN)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid measurement: {value!r}") from exc
    if not quantized.is_finite() or abs(quantized) >= MEASUREMENT_LIMIT:
        raise ValueError(f"Measurement out of range: {value!r}")
    return quantized


@dataclass(frozen=True)
class PokemonProfile:
    """Scalar attributes of a Pokémon, replaced as a whole on update."""

    name: str
    height: Decimal
    weight: Decimal
    base_experience: int
    sprite_url: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "height", to_fixed_point(self.height))
        object.__setattr__(self, "weight", to_fixed_point(self.weight))

    def __composite_values__(self) -> tuple[str, Decimal, Decimal, int, str]:
        """For SQLAlchemy composite columns (adapter-side convenience)."""
        return (self.name, self.height, self.weight, self.base_experience, self.sprite_url)
