"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers, auth y verificación TLS.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import ClientSettings


def build_http_client(
    settings: ClientSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` apuntando a `settings.host`.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los comandos se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or ClientSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)

    auth = None
    if settings.username:
        auth = httpx.BasicAuth(settings.username, settings.password or "")

    return httpx.Client(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        auth=auth,
        verify=settings.verify_tls,
        transport=transport,
    )
