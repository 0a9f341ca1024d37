"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from pokecatalog.adapters.sqlalchemy.mappings import pokemon_table, type_table
from pokecatalog.domain.errors import ConflictError
from pokecatalog.domain.model import Pokemon, Type

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlalchemy.orm import Session


class SqlAlchemyTypeRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Type) -> None:
        # a savepoint keeps the outer transaction alive when the unique index rejects the row
        try:
            with self.session.begin_nested():
                self.session.add(entity)
        except IntegrityError as exc:
            raise ConflictError(entity.name) from exc

    def get(self, entity_id: int) -> Type | None:
        return self.session.get(Type, entity_id)

    def get_by_name(self, name: str) -> Type | None:
        stmt = select(Type).where(type_table.c.name == name)
        return self.session.execute(stmt).scalar_one_or_none()

    def get_many(self, type_ids: Iterable[int]) -> list[Type]:
        wanted = set(type_ids)
        if not wanted:
            return []
        stmt = select(Type).where(type_table.c.id.in_(wanted)).order_by(type_table.c.id)
        return list(self.session.execute(stmt).scalars())

    def find_all(self) -> list[Type]:
        stmt = select(Type).order_by(type_table.c.id)
        return list(self.session.execute(stmt).scalars())


class SqlAlchemyPokemonRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Pokemon) -> None:
        self.session.add(entity)
        self.session.flush()

    def update(self, entity: Pokemon) -> None:
        self.session.add(entity)
        self.session.flush()

    def remove(self, entity: Pokemon) -> None:
        # the secondary relationship deletes association rows; types are left alone
        self.session.delete(entity)
        self.session.flush()

    def get(self, entity_id: int) -> Pokemon | None:
        return self.session.get(Pokemon, entity_id)

    def find_all(self) -> list[Pokemon]:
        stmt = select(Pokemon).order_by(pokemon_table.c.id)
        return list(self.session.execute(stmt).scalars())


if TYPE_CHECKING:
    from pokecatalog.domain.ports.persistence import PokemonRepository, TypeRepository

    _session_stub = cast("Session", object())
    _type_repo: TypeRepository = SqlAlchemyTypeRepository(_session_stub)
    _pokemon_repo: PokemonRepository = SqlAlchemyPokemonRepository(_session_stub)
