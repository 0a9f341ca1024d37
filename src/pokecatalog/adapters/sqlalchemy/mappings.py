"""SQLAlchemy mapping metadata for the catalog domain model."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from functools import cache
from typing import TYPE_CHECKING

from sqlalchemy import (
    Column,
    DateTime,
    Dialect,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Table,
    TypeDecorator,
    UniqueConstraint,
    orm,
)
from sqlalchemy.orm import composite, configure_mappers, relationship

from pokecatalog.domain.model import (
    MEASUREMENT_PRECISION,
    MEASUREMENT_SCALE,
    TYPE_NAME_LENGTH,
    Pokemon,
    PokemonProfile,
    Type,
)

if TYPE_CHECKING:
    from decimal import Decimal

    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


def _measurement() -> Numeric[Decimal]:
    return Numeric(precision=MEASUREMENT_PRECISION, scale=MEASUREMENT_SCALE, asdecimal=True)


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Core tables -----------------------------------------------------------------

type_table = Table(
    "types",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(TYPE_NAME_LENGTH), nullable=False),
    # names are stored lower-cased, so this is the case-insensitive uniqueness rule
    UniqueConstraint("name"),
)

# profile columns carry private keys; the public surface is the composite
pokemon_table = Table(
    "pokemons",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, key="_name", nullable=False),
    Column("height", _measurement(), key="_height", nullable=False),
    Column("weight", _measurement(), key="_weight", nullable=False),
    Column("base_experience", Integer, key="_base_experience", nullable=False),
    Column("sprite_url", String, key="_sprite_url", nullable=False),
    Column("created_at", UTCDateTime(), nullable=False),
)

# Association tables ----------------------------------------------------------

pokemon_type_table = Table(
    "pokemon_types",
    mapper_registry.metadata,
    Column(
        "pokemon_id",
        Integer,
        ForeignKey("pokemons.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "type_id",
        Integer,
        ForeignKey("types.id", ondelete="RESTRICT"),
        primary_key=True,
        index=True,
    ),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(
        Type,
        type_table,
        properties={
            "_pokemons": relationship(
                Pokemon,
                secondary=pokemon_type_table,
                back_populates="_types",
                order_by=pokemon_table.c.id,
            ),
        },
    )

    mapper_registry.map_imperatively(
        Pokemon,
        pokemon_table,
        properties={
            "profile": composite(
                PokemonProfile,
                pokemon_table.c._name,  # noqa: SLF001
                pokemon_table.c._height,  # noqa: SLF001
                pokemon_table.c._weight,  # noqa: SLF001
                pokemon_table.c._base_experience,  # noqa: SLF001
                pokemon_table.c._sprite_url,  # noqa: SLF001
            ),
            # every read returns the type set resolved
            "_types": relationship(
                Type,
                secondary=pokemon_type_table,
                back_populates="_pokemons",
                lazy="selectin",
                order_by=type_table.c.id,
            ),
        },
    )

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
