"""REST routes for Pokémon.

Handlers are plain ``def`` functions; FastAPI runs them in its worker pool,
which is where the blocking unit of work belongs.
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from pokecatalog.adapters.web.dependencies import PokemonServiceDep  # noqa: TC001
from pokecatalog.adapters.web.schemas import (
    CreatePokemonRequest,
    ErrorResponse,
    PokemonResponse,
    UpdatePokemonRequest,
)

router = APIRouter(prefix="/pokemon", tags=["pokemon"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get("")
def list_pokemon(service: PokemonServiceDep) -> list[PokemonResponse]:
    return [PokemonResponse.from_snapshot(snapshot) for snapshot in service.find_all()]


@router.get("/{pokemon_id}", responses=_NOT_FOUND)
def get_pokemon(pokemon_id: int, service: PokemonServiceDep) -> PokemonResponse:
    return PokemonResponse.from_snapshot(service.find_one(pokemon_id))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_pokemon(payload: CreatePokemonRequest, service: PokemonServiceDep) -> PokemonResponse:
    return PokemonResponse.from_snapshot(service.create(payload.to_draft()))


@router.put("/{pokemon_id}", responses=_NOT_FOUND)
def update_pokemon(
    pokemon_id: int,
    payload: UpdatePokemonRequest,
    service: PokemonServiceDep,
) -> PokemonResponse:
    return PokemonResponse.from_snapshot(service.update(pokemon_id, payload.to_changes()))


@router.delete("/{pokemon_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_NOT_FOUND)
def delete_pokemon(pokemon_id: int, service: PokemonServiceDep) -> Response:
    service.delete(pokemon_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
