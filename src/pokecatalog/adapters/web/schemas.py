"""Pydantic models describing the REST and event payloads."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, StringConstraints

from pokecatalog.domain.commands import PokemonChanges, PokemonDraft
from pokecatalog.domain.model import (
    MEASUREMENT_PRECISION,
    MEASUREMENT_SCALE,
    TYPE_NAME_LENGTH,
    PokemonSnapshot,
    TypeSnapshot,
)

MeasurementField = Annotated[
    Decimal,
    Field(max_digits=MEASUREMENT_PRECISION, decimal_places=MEASUREMENT_SCALE),
]

# blank names pass here and are rejected by the type store with its own message
TypeNameField = Annotated[
    str,
    StringConstraints(strip_whitespace=True, max_length=TYPE_NAME_LENGTH),
]


class CatalogRequestModel(BaseModel):
    # unknown keys are a client error, not something to ignore
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class CreateTypeRequest(CatalogRequestModel):
    name: TypeNameField


class CreatePokemonRequest(CatalogRequestModel):
    name: str = Field(min_length=1)
    height: MeasurementField
    weight: MeasurementField
    base_experience: int
    sprite_url: HttpUrl
    type_ids: list[int] | None = Field(default=None, alias="typeIds")
    type_names: list[TypeNameField] | None = Field(default=None, alias="typeNames")

    def to_draft(self) -> PokemonDraft:
        return PokemonDraft(
            name=self.name,
            height=self.height,
            weight=self.weight,
            base_experience=self.base_experience,
            sprite_url=str(self.sprite_url),
            type_ids=self.type_ids,
            type_names=self.type_names,
        )


class UpdatePokemonRequest(CatalogRequestModel):
    """Partial update. Omitted (or null) fields keep their stored value."""

    name: str | None = Field(default=None, min_length=1)
    height: MeasurementField | None = None
    weight: MeasurementField | None = None
    base_experience: int | None = None
    sprite_url: HttpUrl | None = None
    type_ids: list[int] | None = Field(default=None, alias="typeIds")
    type_names: list[TypeNameField] | None = Field(default=None, alias="typeNames")

    def to_changes(self) -> PokemonChanges:
        return PokemonChanges(
            name=self.name,
            height=self.height,
            weight=self.weight,
            base_experience=self.base_experience,
            sprite_url=None if self.sprite_url is None else str(self.sprite_url),
            type_ids=self.type_ids,
            type_names=self.type_names,
        )


class TypeResponse(BaseModel):
    id: int
    name: str

    @classmethod
    def from_snapshot(cls, snapshot: TypeSnapshot) -> TypeResponse:
        return cls(id=snapshot.id, name=snapshot.name)


class PokemonResponse(BaseModel):
    id: int
    name: str
    height: float
    weight: float
    base_experience: int
    sprite_url: str
    created_at: datetime
    types: list[TypeResponse]

    @classmethod
    def from_snapshot(cls, snapshot: PokemonSnapshot) -> PokemonResponse:
        return cls(
            id=snapshot.id,
            name=snapshot.name,
            height=float(snapshot.height),
            weight=float(snapshot.weight),
            base_experience=snapshot.base_experience,
            sprite_url=snapshot.sprite_url,
            created_at=snapshot.created_at,
            types=[TypeResponse.from_snapshot(type_) for type_ in snapshot.types],
        )


class ErrorResponse(BaseModel):
    detail: str
