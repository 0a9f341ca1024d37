"""Application services for the Pokémon catalog.

Every write runs in one unit of work. Change events are published only after
the commit succeeds, while the per-id lock is still held, so subscribers see
the mutations of one Pokémon in commit order.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pokecatalog.domain.concurrency import KeyedLocks
from pokecatalog.domain.errors import NotFoundError
from pokecatalog.domain.model import Pokemon, PokemonSnapshot, TypeSnapshot
from pokecatalog.domain.notifier import ChangeEvent
from pokecatalog.domain.reconciliation import reconcile_types
from pokecatalog.domain.type_store import TypeStore

if TYPE_CHECKING:
    from collections.abc import Callable

    from pokecatalog.domain.commands import PokemonChanges, PokemonDraft
    from pokecatalog.domain.ports.notifications import ChangePublisher
    from pokecatalog.domain.ports.unit_of_work import CatalogUnitOfWork

    UnitOfWorkFactory = Callable[[], CatalogUnitOfWork]

log = getLogger(__name__)


class TypeService:
    """List, fetch and explicitly create types."""

    def __init__(self, *, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._unit_of_work_factory = unit_of_work_factory

    def find_all(self) -> list[TypeSnapshot]:
        with self._unit_of_work_factory() as uow:
            store = TypeStore(uow.repositories.types)
            return [TypeSnapshot.from_entity(type_) for type_ in store.find_all()]

    def find_one(self, type_id: int) -> TypeSnapshot:
        with self._unit_of_work_factory() as uow:
            type_ = TypeStore(uow.repositories.types).find_by_id(type_id)
            if type_ is None:
                raise NotFoundError("Type", type_id)
            return TypeSnapshot.from_entity(type_)

    def create(self, name: str) -> TypeSnapshot:
        with self._unit_of_work_factory() as uow:
            type_ = TypeStore(uow.repositories.types).create(name)
            uow.commit()
            return TypeSnapshot.from_entity(type_)

    def find_or_create(self, name: str) -> TypeSnapshot:
        with self._unit_of_work_factory() as uow:
            type_ = TypeStore(uow.repositories.types).find_or_create(name)
            uow.commit()
            return TypeSnapshot.from_entity(type_)


class PokemonService:
    """Create, update, delete and read Pokémon, announcing each committed write."""

    def __init__(
        self,
        *,
        unit_of_work_factory: UnitOfWorkFactory,
        publisher: ChangePublisher,
        locks: KeyedLocks[int] | None = None,
    ) -> None:
        self._unit_of_work_factory = unit_of_work_factory
        self._publisher = publisher
        self._locks: KeyedLocks[int] = locks if locks is not None else KeyedLocks()

    # Read path -----------------------------------------------------------------

    def find_all(self) -> list[PokemonSnapshot]:
        with self._unit_of_work_factory() as uow:
            return [PokemonSnapshot.from_entity(p) for p in uow.repositories.pokemon.find_all()]

    def find_one(self, pokemon_id: int) -> PokemonSnapshot:
        with self._unit_of_work_factory() as uow:
            pokemon = uow.repositories.pokemon.get(pokemon_id)
            if pokemon is None:
                raise NotFoundError("Pokemon", pokemon_id)
            return PokemonSnapshot.from_entity(pokemon)

    # Write path ----------------------------------------------------------------

    def create(self, draft: PokemonDraft) -> PokemonSnapshot:
        with self._unit_of_work_factory() as uow:
            store = TypeStore(uow.repositories.types)
            pokemon = Pokemon(profile=draft.to_profile())
            pokemon.replace_types(
                reconcile_types(store, type_ids=draft.type_ids, type_names=draft.type_names)
            )
            uow.repositories.pokemon.add(pokemon)
            # the id exists from the flush above; nobody else can see it before commit
            with self._locks.hold(pokemon.persisted_id):
                uow.commit()
                snapshot = PokemonSnapshot.from_entity(pokemon)
                log.info("Created pokemon %s (%s)", snapshot.id, snapshot.name)
                self._publisher.publish(ChangeEvent.created(snapshot))
        return snapshot

    def update(self, pokemon_id: int, changes: PokemonChanges) -> PokemonSnapshot:
        with self._unit_of_work_factory() as uow:
            pokemon = uow.repositories.pokemon.get(pokemon_id)
            if pokemon is None:
                raise NotFoundError("Pokemon", pokemon_id)
            # transaction first, then the id lock: the same order as create
            with self._locks.hold(pokemon_id):
                pokemon.apply_profile(changes.merge_into(pokemon.profile))
                if changes.replaces_types:
                    store = TypeStore(uow.repositories.types)
                    pokemon.replace_types(
                        reconcile_types(
                            store, type_ids=changes.type_ids, type_names=changes.type_names
                        )
                    )
                uow.repositories.pokemon.update(pokemon)
                uow.commit()
                snapshot = PokemonSnapshot.from_entity(pokemon)
                log.info("Updated pokemon %s (%s)", snapshot.id, snapshot.name)
                self._publisher.publish(ChangeEvent.updated(snapshot))
        return snapshot

    def delete(self, pokemon_id: int) -> None:
        with self._unit_of_work_factory() as uow:
            pokemon = uow.repositories.pokemon.get(pokemon_id)
            if pokemon is None:
                raise NotFoundError("Pokemon", pokemon_id)
            with self._locks.hold(pokemon_id):
                uow.repositories.pokemon.remove(pokemon)
                uow.commit()
                log.info("Deleted pokemon %s", pokemon_id)
                self._publisher.publish(ChangeEvent.deleted(pokemon_id))
