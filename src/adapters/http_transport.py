"""Transporte HTTP (httpx) para `RequestDescriptor`.

Responsabilidad:
- Ejecutar el descriptor contra un único host configurado.
- Normalizar la respuesta (JSON, texto o None).
- Traducir fallos a `ConnectionFault` / `ResponseError`, respetando `ignore`.

Fuera de alcance: reintentos, descubrimiento de nodos y balanceo.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from adapters.http_client import build_http_client
from core.config import ClientSettings
from core.domain.models import RequestDescriptor
from core.errors import ConnectionFault, ResponseError, TransportError
from core.interfaces.transport import Callback

logger = logging.getLogger(__name__)


def _encode_body(body: Any) -> tuple[bytes | None, dict[str, str]]:
    if body is None:
        return None, {}
    if isinstance(body, bytes):
        return body, {}
    if isinstance(body, str):
        return body.encode("utf-8"), {"Content-Type": "application/json"}
    payload = json.dumps(body, ensure_ascii=False).encode("utf-8")
    return payload, {"Content-Type": "application/json"}


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError:
            return response.text
    return response.text


class HttpTransport:
    """Implementación de `core.interfaces.transport.Transport` sobre httpx."""

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._client = client or build_http_client(self._settings)

    def _send(self, descriptor: RequestDescriptor) -> tuple[Any, int]:
        content, headers = _encode_body(descriptor.body)
        logger.debug("%s %s", descriptor.method.value, descriptor.path)
        try:
            response = self._client.request(
                descriptor.method.value,
                descriptor.path,
                content=content,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", descriptor.method.value, descriptor.path, exc)
            raise ConnectionFault(str(exc)) from exc

        status = response.status_code
        body = _decode_body(response)
        if status >= 400 and status not in descriptor.ignore:
            logger.warning("%s %s -> HTTP %s", descriptor.method.value, descriptor.path, status)
            raise ResponseError(status, body)
        return body, status

    def request(self, descriptor: RequestDescriptor, callback: Callback | None = None) -> Any:
        if callback is None:
            body, _ = self._send(descriptor)
            return body

        try:
            body, status = self._send(descriptor)
        except ResponseError as exc:
            callback(exc, exc.body, exc.status)
        except TransportError as exc:
            callback(exc, None, None)
        else:
            callback(None, body, status)
        return None

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
