"""Catalog error definitions."""

from __future__ import annotations


class CatalogError(RuntimeError):
    """Base class for errors surfaced by catalog services."""


class NotFoundError(CatalogError):
    """Raised when a Pokémon or Type id does not exist."""

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} with id {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(CatalogError):
    """Raised when an explicit Type creation collides with an existing name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Type '{name}' already exists")
        self.name = name


class InvalidTypeNameError(ValueError):
    """Raised when a type name is blank or too long after normalisation."""
