"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger

from pokecatalog.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    is_started,
    startup,
)
from pokecatalog.domain.notifier import ChangeNotifier
from pokecatalog.domain.ports.unit_of_work import CatalogUnitOfWork
from pokecatalog.domain.services import PokemonService, TypeService

UnitOfWorkFactory = Callable[[], CatalogUnitOfWork]


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Application:
    """The wired catalog components shared by every transport."""

    notifier: ChangeNotifier
    type_service: TypeService
    pokemon_service: PokemonService


def build_application(
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    notifier: ChangeNotifier | None = None,
    database_uri: str | None = None,
) -> Application:
    """Build the services once and wire them by constructor arguments.

    Without an explicit ``unit_of_work_factory`` the SQLAlchemy adapter is used
    and started (schema upgraded) if it is not running yet.
    """

    if unit_of_work_factory is None:
        if not is_started():
            startup(database_uri=database_uri)
        unit_of_work_factory = SqlAlchemyCatalogUnitOfWork
    effective_notifier = notifier or ChangeNotifier()

    log.info("Catalog application assembled")
    return Application(
        notifier=effective_notifier,
        type_service=TypeService(unit_of_work_factory=unit_of_work_factory),
        pokemon_service=PokemonService(
            unit_of_work_factory=unit_of_work_factory,
            publisher=effective_notifier,
        ),
    )
