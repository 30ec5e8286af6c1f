"""Contrato del transporte HTTP.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el transporte real (httpx) y los dobles de test sean
  intercambiables sin acoplar el Core a una librería de red.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, runtime_checkable

from core.domain.models import RequestDescriptor

# callback(error, body, status)
Callback = Callable[[Optional[Exception], Any, Optional[int]], Any]


@runtime_checkable
class Transport(Protocol):
    """Contrato mínimo para ejecutar un `RequestDescriptor`.

    Reglas de diseño:
    - Con callback, el resultado (o el error) se entrega vía
      `callback(error, body, status)`.
    - Sin callback, devuelve el body o lanza el error.
    """

    def request(self, descriptor: RequestDescriptor, callback: Callback | None = None) -> Any:
        ...
