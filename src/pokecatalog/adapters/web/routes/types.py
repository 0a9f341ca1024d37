"""REST routes for types."""

from __future__ import annotations

from fastapi import APIRouter, status

from pokecatalog.adapters.web.dependencies import TypeServiceDep  # noqa: TC001
from pokecatalog.adapters.web.schemas import CreateTypeRequest, ErrorResponse, TypeResponse

router = APIRouter(prefix="/type", tags=["type"])


@router.get("")
def list_types(service: TypeServiceDep) -> list[TypeResponse]:
    return [TypeResponse.from_snapshot(snapshot) for snapshot in service.find_all()]


@router.get("/{type_id}", responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}})
def get_type(type_id: int, service: TypeServiceDep) -> TypeResponse:
    return TypeResponse.from_snapshot(service.find_one(type_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_409_CONFLICT: {"model": ErrorResponse}},
)
def create_type(payload: CreateTypeRequest, service: TypeServiceDep) -> TypeResponse:
    return TypeResponse.from_snapshot(service.create(payload.name))
