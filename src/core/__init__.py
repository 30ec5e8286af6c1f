"""Core del cliente: dominio, builders de requests y configuración."""

from core.client import SearchClient
from core.errors import (
    ClientError,
    ConnectionFault,
    InvalidArgumentError,
    ResponseError,
    TransportError,
)

__all__ = [
    "ClientError",
    "ConnectionFault",
    "InvalidArgumentError",
    "ResponseError",
    "SearchClient",
    "TransportError",
]
