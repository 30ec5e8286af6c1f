"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP, CLI, ni SDKs: solo conceptos del request.
"""

from core.domain.models import HttpMethod, RequestDescriptor

__all__ = ["HttpMethod", "RequestDescriptor"]
