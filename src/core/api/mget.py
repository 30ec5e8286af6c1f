"""Request builder para el endpoint multi-get (`_mget`).

Responsabilidad:
- Validar un mapping de parámetros poco tipado.
- Construir de forma determinista un `RequestDescriptor`.
- Delegar el intercambio HTTP al `Transport`.

No hace I/O, no guarda estado y no reintenta: un único pase síncrono.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from core.api.params import (
    body_param,
    encode_uri_component,
    flag_param,
    ignore_param,
    is_supplied,
    list_param,
    make_query_string,
    scalar_param,
    to_upper_string,
)
from core.domain.models import HttpMethod, RequestDescriptor
from core.errors import InvalidArgumentError
from core.interfaces.transport import Callback, Transport

logger = logging.getLogger(__name__)

_LIST_PARAMS_HEAD = ("fields",)
_FLAG_PARAMS = ("realtime", "refresh")
_LIST_PARAMS_TAIL = ("_source", "_source_exclude", "_source_include")


def _select_method(params: Mapping[str, Any], body: Any) -> HttpMethod:
    method = to_upper_string(params.get("method"))
    if not method:
        return HttpMethod.for_body(body)
    try:
        return HttpMethod(method)
    except ValueError:
        raise InvalidArgumentError(
            "Invalid method: should be one of GET, POST",
            param="method",
        ) from None


def _build_path(params: Mapping[str, Any]) -> str:
    parts: dict[str, str] = {}
    for name in ("index", "type"):
        if is_supplied(params, name):
            parts[name] = scalar_param(name, params[name])

    if "index" in parts and "type" in parts:
        return f"/{encode_uri_component(parts['index'])}/{encode_uri_component(parts['type'])}/_mget"
    if "index" in parts:
        return f"/{encode_uri_component(parts['index'])}/_mget"
    return "/_mget"


def _build_query(params: Mapping[str, Any]) -> dict[str, str | bool]:
    query: dict[str, str | bool] = {}

    for name in _LIST_PARAMS_HEAD:
        if is_supplied(params, name):
            query[name] = list_param(name, params[name])

    if is_supplied(params, "preference"):
        query["preference"] = scalar_param("preference", params["preference"])

    for name in _FLAG_PARAMS:
        if is_supplied(params, name):
            query[name] = flag_param(params[name])

    for name in _LIST_PARAMS_TAIL:
        if is_supplied(params, name):
            query[name] = list_param(name, params[name])

    return query


def build_mget_request(params: Mapping[str, Any] | None = None) -> RequestDescriptor:
    """Construye el descriptor de un `_mget` a partir de `params`.

    Parámetros reconocidos:
    - method: "GET" | "POST" (por defecto POST si hay body).
    - index, type: segmentos opcionales del path.
    - fields, _source, _source_exclude, _source_include: string, lista o bool.
    - preference: string.
    - realtime, refresh: bool; "no"/"off" equivalen a False.
    - body: se pasa tal cual; None, "", 0 y False cuentan como ausente.
    - ignore: status HTTP a ignorar (int o lista de ints).

    Lanza `InvalidArgumentError` en el primer parámetro inválido.
    """

    params = params or {}
    body = body_param(params.get("body"))

    method = _select_method(params, body)
    path = _build_path(params) + make_query_string(_build_query(params))
    ignore = ignore_param(params.get("ignore"))

    return RequestDescriptor(
        method=method,
        path=path,
        body=body,
        ignore=ignore,
    )


def mget(
    transport: Transport,
    params: Mapping[str, Any] | None = None,
    callback: Callback | None = None,
) -> Any:
    """Ejecuta un `_mget`: construye el descriptor y lo entrega al transporte."""

    request = build_mget_request(params)
    logger.debug("mget %s %s", request.method.value, request.path)
    return transport.request(request, callback)
