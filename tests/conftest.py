from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from pokecatalog.adapters.sqlalchemy import start_mappers
from pokecatalog.adapters.sqlalchemy.migrations import upgrade_head
from pokecatalog.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    create_catalog_engine,
    shutdown,
    startup,
)
from pokecatalog.adapters.web import create_app
from pokecatalog.app import Application, build_application
from pokecatalog.domain.notifier import ChangeNotifier
from tests.helpers.catalog import InMemoryCatalog, RecordingSubscriber

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


@pytest.fixture
def sqlite_engine(tmp_path: Path) -> Iterator[Engine]:
    # a file, not :memory:, so worker threads share one database
    engine = create_catalog_engine(f"sqlite+pysqlite:///{tmp_path / 'catalog.db'}")
    start_mappers()
    upgrade_head(engine=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True, expire_on_commit=False)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyCatalogUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory() -> SqlAlchemyCatalogUnitOfWork:
        return SqlAlchemyCatalogUnitOfWork()

    try:
        yield factory
    finally:
        shutdown()


@pytest.fixture
def catalog() -> InMemoryCatalog:
    return InMemoryCatalog()


@pytest.fixture
def recorder() -> RecordingSubscriber:
    return RecordingSubscriber()


@pytest.fixture
def notifier(recorder: RecordingSubscriber) -> ChangeNotifier:
    change_notifier = ChangeNotifier()
    change_notifier.subscribe(recorder)
    return change_notifier


@pytest.fixture
def application(
    sqlite_unit_of_work: Callable[[], SqlAlchemyCatalogUnitOfWork],
    notifier: ChangeNotifier,
) -> Application:
    return build_application(unit_of_work_factory=sqlite_unit_of_work, notifier=notifier)


@pytest.fixture
def client(application: Application) -> Iterator[TestClient]:
    with TestClient(create_app(application)) as test_client:
        yield test_client
