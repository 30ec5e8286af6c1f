"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El descriptor es un valor inmutable: se construye una vez por llamada y se
  entrega al transporte.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class HttpMethod(str, Enum):
    """Métodos HTTP aceptados por el endpoint `_mget`."""

    GET = "GET"
    POST = "POST"

    @classmethod
    def for_body(cls, body: Any) -> "HttpMethod":
        """Método por defecto: POST si hay body, GET si no."""

        return cls.GET if body is None else cls.POST


class RequestDescriptor(BaseModel):
    """Request listo para el transporte.

    Por qué existe:
    - Separa la validación de parámetros (Core) del intercambio HTTP (adapters).
    - Es lo único que cruza el borde hacia `Transport.request`.
    """

    model_config = ConfigDict(frozen=True)

    method: HttpMethod = Field(
        ...,
        description="Método HTTP (GET o POST).",
    )
    path: str = Field(
        ...,
        min_length=1,
        description="Path del endpoint incluyendo el query string.",
    )
    body: Any = Field(
        default=None,
        description="Payload opaco; None si no hay body.",
    )
    ignore: frozenset[int] = Field(
        default_factory=frozenset,
        description="Status HTTP que el transporte no debe tratar como error.",
    )

    @field_validator("ignore", mode="before")
    @classmethod
    def _normalize_ignore(cls, value: Any) -> Any:
        if value is None:
            return frozenset()
        if isinstance(value, int):
            return frozenset({value})
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            return frozenset(value)
        return value
