"""Domain port definitions for adapters."""

from __future__ import annotations

from .notifications import ChangePublisher
from .persistence import PokemonRepository, Repository, TypeRepository
from .unit_of_work import (
    CatalogRepositories,
    CatalogUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "CatalogRepositories",
    "CatalogUnitOfWork",
    "ChangePublisher",
    "PokemonRepository",
    "Repository",
    "RepositoryCollection",
    "TypeRepository",
    "UnitOfWork",
]
