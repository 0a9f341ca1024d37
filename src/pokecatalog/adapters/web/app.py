"""FastAPI application factory for the catalog."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pokecatalog import __version__
from pokecatalog.adapters.web.routes import (
    events_router,
    health_router,
    pokemon_router,
    types_router,
)
from pokecatalog.domain.errors import ConflictError, InvalidTypeNameError, NotFoundError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pokecatalog.app import Application

log = getLogger(__name__)


def _error_response(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


async def _not_found(request: Request, exc: Exception) -> JSONResponse:
    _ = request
    return _error_response(status.HTTP_404_NOT_FOUND, exc)


async def _conflict(request: Request, exc: Exception) -> JSONResponse:
    _ = request
    return _error_response(status.HTTP_409_CONFLICT, exc)


async def _invalid_type_name(request: Request, exc: Exception) -> JSONResponse:
    _ = request
    return _error_response(422, exc)


def create_app(application: Application, *, cors_origins: Sequence[str] = ("*",)) -> FastAPI:
    """Return a FastAPI app serving ``application`` over REST and WebSocket."""

    app = FastAPI(title="Pokémon Catalog", version=__version__)
    app.state.application = application

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(ConflictError, _conflict)
    app.add_exception_handler(InvalidTypeNameError, _invalid_type_name)

    app.include_router(health_router)
    app.include_router(pokemon_router)
    app.include_router(types_router)
    app.include_router(events_router)

    log.info("Web app created (CORS origins: %s)", ", ".join(cors_origins))
    return app
