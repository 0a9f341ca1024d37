"""Type store: name normalisation, explicit creation and find-or-create."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pokecatalog.domain.errors import ConflictError, InvalidTypeNameError
from pokecatalog.domain.model import TYPE_NAME_LENGTH, Type

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pokecatalog.domain.ports.persistence import TypeRepository

log = getLogger(__name__)


def normalize_type_name(name: str) -> str:
    """Return the stored form of a type name (trimmed, lower-cased, length-checked)."""

    normalized = name.strip().lower()
    if not normalized:
        raise InvalidTypeNameError("Type name must not be blank")
    if len(normalized) > TYPE_NAME_LENGTH:
        raise InvalidTypeNameError(f"Type name must be at most {TYPE_NAME_LENGTH} characters")
    return normalized


class TypeStore:
    """Type operations on top of a repository bound to the current unit of work."""

    def __init__(self, repository: TypeRepository) -> None:
        self.repository = repository

    def find_all(self) -> list[Type]:
        return self.repository.find_all()

    def find_by_id(self, type_id: int) -> Type | None:
        return self.repository.get(type_id)

    def find_by_name(self, name: str) -> Type | None:
        return self.repository.get_by_name(normalize_type_name(name))

    def find_many(self, type_ids: Iterable[int]) -> list[Type]:
        return self.repository.get_many(type_ids)

    def create(self, name: str) -> Type:
        """Create a type, raising ``ConflictError`` if the name is taken in any case."""

        normalized = normalize_type_name(name)
        if self.repository.get_by_name(normalized) is not None:
            raise ConflictError(normalized)
        return self._insert(normalized)

    def find_or_create(self, name: str) -> Type:
        """Return the type with this name, creating it when absent. Never conflicts."""

        normalized = normalize_type_name(name)
        existing = self.repository.get_by_name(normalized)
        if existing is not None:
            return existing
        try:
            return self._insert(normalized)
        except ConflictError:
            # another writer inserted the same name between lookup and insert
            winner = self.repository.get_by_name(normalized)
            if winner is None:
                raise
            log.debug("Type %r created concurrently; reusing id %s", normalized, winner.id)
            return winner

    def _insert(self, normalized: str) -> Type:
        type_ = Type(name=normalized)
        self.repository.add(type_)
        log.info("Created type %r with id %s", normalized, type_.id)
        return type_
