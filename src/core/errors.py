"""Errores del cliente.

Por qué una jerarquía propia:
- El builder falla rápido con un único tipo de error (`InvalidArgumentError`).
- El transporte distingue fallos de red de respuestas HTTP no aceptadas, y la
  CLI los traduce a códigos de salida distintos.
"""

from __future__ import annotations

from typing import Any


class ClientError(Exception):
    """Base de todos los errores del cliente."""


class InvalidArgumentError(ClientError, TypeError):
    """Parámetro mal formado detectado al construir el request.

    Hereda de `TypeError` porque describe un valor del tipo equivocado.
    """

    def __init__(self, message: str, *, param: str | None = None) -> None:
        super().__init__(message)
        self.param = param


class TransportError(ClientError):
    """Fallo durante el intercambio HTTP."""


class ConnectionFault(TransportError):
    """No se pudo completar la petición (DNS, timeout, conexión rechazada)."""


class ResponseError(TransportError):
    """El servidor respondió con un status de error no ignorado."""

    def __init__(self, status: int, body: Any = None) -> None:
        super().__init__(f"Request failed with status {status}")
        self.status = status
        self.body = body
