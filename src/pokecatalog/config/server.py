"""HTTP server settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .env import int_env_var, optional_env_var
from .errors import ConfigurationError

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_CORS_ORIGINS = "*"
DEFAULT_LOG_LEVEL = "INFO"

# names both the logging module and uvicorn understand
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_LOG_LEVEL_ALIASES = {"FATAL": "CRITICAL", "WARN": "WARNING"}


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Bind address, allowed browser origins, and verbosity of the web server."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    cors_origins: tuple[str, ...] = (DEFAULT_CORS_ORIGINS,)
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]


def _parse_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or (DEFAULT_CORS_ORIGINS,)


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    level = _LOG_LEVEL_ALIASES.get(level, level)
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"POKECATALOG_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {raw!r}"
        )
    return level


def get_server_config() -> ServerConfig:
    return ServerConfig(
        host=optional_env_var("POKECATALOG_HOST", DEFAULT_HOST),
        port=int_env_var("POKECATALOG_PORT", DEFAULT_PORT, minimum=0, maximum=65535),
        cors_origins=_parse_origins(optional_env_var("POKECATALOG_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)),
        log_level=_parse_log_level(optional_env_var("POKECATALOG_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )
