"""Helpers para validar y coercionar parámetros de la API.

Reglas comunes:
- Un parámetro ausente o `None` se considera "no suministrado".
- Los escalares son str, int, float y bool; cualquier otro objeto (dict, list,
  set, instancias arbitrarias) no es un escalar.
- Los errores se lanzan en el primer campo inválido (`InvalidArgumentError`).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote

from core.errors import InvalidArgumentError

_SCALAR_TYPES = (str, int, float, bool)
_FALSE_WORDS = ("no", "off")

# Caracteres que encodeURIComponent deja sin escapar.
_URI_COMPONENT_SAFE = "-_.!~*'()"
_QUERY_VALUE_SAFE = "," + _URI_COMPONENT_SAFE


def is_supplied(params: Mapping[str, Any], name: str) -> bool:
    return params.get(name) is not None


def to_upper_string(value: Any) -> str:
    if not value:
        return ""
    return stringify(value).upper()


def stringify(value: Any) -> str:
    """Forma textual de un escalar (`True` -> "true")."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def scalar_param(name: str, value: Any) -> str:
    """Valida un escalar truthy y lo devuelve como string."""

    if isinstance(value, _SCALAR_TYPES) and value:
        return stringify(value)
    raise InvalidArgumentError(
        f"Invalid {name}: {value!r} should be a string.",
        param=name,
    )


def list_param(name: str, value: Any) -> str | bool:
    """Parámetro tipo lista: string tal cual, list/tuple unida por comas, o flag."""

    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(item) for item in value)
    if isinstance(value, _SCALAR_TYPES):
        return bool(value)
    raise InvalidArgumentError(
        f"Invalid {name}: {value!r} should be a comma separated list, array, or boolean.",
        param=name,
    )


def flag_param(value: Any) -> bool:
    """Flag booleano; "no"/"off" (sin distinguir mayúsculas) equivalen a False."""

    if isinstance(value, str) and value.lower() in _FALSE_WORDS:
        return False
    return bool(value)


def make_query_string(query: Mapping[str, Any]) -> str:
    """Serializa el query en orden de inserción, con `?` si no está vacío.

    Los booleanos se escriben como `true`/`false`. Las comas quedan literales
    para que las listas sigan siendo legibles, igual que `!~*'()`.
    """

    if not query:
        return ""
    pairs = [
        f"{quote(key)}={quote(stringify(value), safe=_QUERY_VALUE_SAFE)}"
        for key, value in query.items()
    ]
    return "?" + "&".join(pairs)


def body_param(value: Any) -> Any:
    """Body del request; solo None, "", 0 y False cuentan como ausente.

    Un contenedor vacío (`{}`, `[]`) se conserva y se envía tal cual.
    """

    if isinstance(value, _SCALAR_TYPES) and not value:
        return None
    return value


def _is_status_code(item: Any) -> bool:
    return isinstance(item, int) and not isinstance(item, bool)


def ignore_param(value: Any) -> frozenset[int]:
    """Status HTTP a ignorar: un int o un iterable de ints."""

    if value is None:
        return frozenset()
    if _is_status_code(value):
        return frozenset({value})
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping)):
        codes = list(value)
        if all(_is_status_code(code) for code in codes):
            return frozenset(codes)
    raise InvalidArgumentError(
        f"Invalid ignore: {value!r} should be a status code or a list of status codes.",
        param="ignore",
    )
