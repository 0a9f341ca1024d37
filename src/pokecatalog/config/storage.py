"""Where the catalog keeps its data.

``DATABASE_URI`` wins when set. Otherwise the catalog uses a SQLite file in
``POKECATALOG_DATA_DIR``, falling back to the platform's per-user data
directory.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var

APP_DIR_NAME: Final[str] = "pokecatalog"
DEFAULT_DB_FILENAME: Final[str] = "pokecatalog.db"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def sqlite_uri(self) -> str:
        """Return the URI of the catalog file, creating its directory first."""

        data_dir = self.resolve_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite+pysqlite:///{data_dir / DEFAULT_DB_FILENAME}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def _user_data_root() -> Path:
    if sys.platform == "win32":
        return Path(os.getenv("LOCALAPPDATA") or Path.home() / "AppData" / "Local")
    return Path(os.getenv("XDG_DATA_HOME") or Path.home() / ".local" / "share")


def get_storage_config() -> StorageConfig:
    data_dir = optional_env_var("POKECATALOG_DATA_DIR", "")
    return StorageConfig(data_dir=Path(data_dir) if data_dir else _user_data_root() / APP_DIR_NAME)


def get_database_config() -> DatabaseConfig:
    uri = optional_env_var("DATABASE_URI", "")
    return DatabaseConfig(uri=uri or get_storage_config().sqlite_uri())
