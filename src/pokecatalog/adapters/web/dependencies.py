"""FastAPI dependencies resolving the wired application from app state."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from starlette.requests import HTTPConnection

from pokecatalog.app import Application
from pokecatalog.domain.services import PokemonService, TypeService


def get_application(connection: HTTPConnection) -> Application:
    return connection.app.state.application


def get_pokemon_service(
    application: Annotated[Application, Depends(get_application)],
) -> PokemonService:
    return application.pokemon_service


def get_type_service(
    application: Annotated[Application, Depends(get_application)],
) -> TypeService:
    return application.type_service


ApplicationDep = Annotated[Application, Depends(get_application)]
PokemonServiceDep = Annotated[PokemonService, Depends(get_pokemon_service)]
TypeServiceDep = Annotated[TypeService, Depends(get_type_service)]
