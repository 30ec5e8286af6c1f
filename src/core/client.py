"""Fachada del cliente: agrupa los métodos de API sobre un transporte."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from core.api import mget as _mget
from core.interfaces.transport import Callback, Transport


class SearchClient:
    """Cliente de alto nivel.

    No abre conexiones por sí mismo: todo el I/O vive en `transport`.
    """

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def mget(self, params: Mapping[str, Any] | None = None, callback: Callback | None = None) -> Any:
        """Multi-get. Ver `core.api.mget.build_mget_request` para los parámetros."""

        return _mget(self.transport, params, callback)

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "SearchClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
