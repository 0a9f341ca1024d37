"""Alembic environment for the catalog tables."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from alembic import context
from sqlalchemy import create_engine, pool

from pokecatalog.adapters.sqlalchemy.mappings import mapper_registry, start_mappers
from pokecatalog.config import get_database_config

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection

log = logging.getLogger("alembic.env")

config = context.config

start_mappers()


def _configure(**options: object) -> None:
    # batch mode lets SQLite rebuild tables for ALTERs it does not support
    context.configure(
        target_metadata=mapper_registry.metadata,
        render_as_batch=True,
        compare_type=True,
        compare_server_default=True,
        **options,
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_on(connection: Connection) -> None:
    log.debug("Running catalog migrations on %s", connection.engine.url.render_as_string())
    _configure(connection=connection)


def run_migrations() -> None:
    url = config.get_main_option("sqlalchemy.url") or get_database_config().uri
    if context.is_offline_mode():
        _configure(url=url, literal_binds=True)
        return

    shared = config.attributes.get("connection")
    if shared is not None:
        _run_on(shared)
        return

    engine = create_engine(url, poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            _run_on(connection)
    finally:
        engine.dispose()


run_migrations()
