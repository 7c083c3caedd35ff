"""Envoltorios genéricos de respuesta.

La API devuelve casi siempre una de tres formas; cada endpoint declara cuál
espera y extrae el único campo que le interesa.
"""

from __future__ import annotations

from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

T = TypeVar("T")

# Contador del cable: entero JSON no negativo; "42" o -5 no son contadores.
Count = Annotated[int, Field(strict=True, ge=0)]


class DataResponse(BaseModel, Generic[T]):
    """`{"data": [...]}`: lista ordenada de registros."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    data: list[T]


class CountResponse(BaseModel, Generic[T]):
    """`{"count": n}`: un único escalar."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    count: T


class EmptyResponse(BaseModel):
    """Marca de éxito sin payload; el cuerpo de la respuesta se ignora."""

    model_config = ConfigDict(frozen=True)
