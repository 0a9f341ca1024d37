"""SQLAlchemy adapter for the catalog."""

from __future__ import annotations

from .mappings import create_all_tables, mapper_registry, start_mappers
from .repositories import SqlAlchemyPokemonRepository, SqlAlchemyTypeRepository
from .unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    StartupError,
    configured_engine,
    create_catalog_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyCatalogUnitOfWork",
    "SqlAlchemyPokemonRepository",
    "SqlAlchemyTypeRepository",
    "StartupError",
    "configured_engine",
    "create_all_tables",
    "create_catalog_engine",
    "is_started",
    "mapper_registry",
    "shutdown",
    "start_mappers",
]
