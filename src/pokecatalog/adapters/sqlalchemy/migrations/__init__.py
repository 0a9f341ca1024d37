"""Alembic migrations for the catalog schema."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Final

from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from pokecatalog.config import get_database_config

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

MIGRATIONS_PATH: Final[Path] = Path(__file__).resolve().parent

log = logging.getLogger(__name__)


def alembic_config(database_uri: str | None = None) -> Config:
    """Return an Alembic config for the packaged scripts, optionally bound to a URL."""

    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_PATH))
    if database_uri is not None:
        # configparser interpolation would eat percent-encoded passwords
        config.set_main_option("sqlalchemy.url", database_uri.replace("%", "%%"))
    return config


def upgrade_head(*, engine: Engine | None = None, database_uri: str | None = None) -> None:
    """Bring the catalog schema to the newest revision.

    With ``engine`` the upgrade runs on one of its connections. Otherwise
    Alembic connects to ``database_uri`` or the configured database.
    """

    if engine is not None:
        config = alembic_config()
        log.info("Upgrading catalog schema on %s", engine.url.render_as_string())
        with engine.begin() as connection:
            config.attributes["connection"] = connection
            command.upgrade(config, "head")
        return

    uri = database_uri or get_database_config().uri
    log.info("Upgrading catalog schema on %s", make_url(uri).render_as_string())
    command.upgrade(alembic_config(uri), "head")
