"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

import json
from typing import Any

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

_SOURCE_PREVIEW_CHARS = 80


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (se omite en modo `--json`)."""

    title = Text("es-mget", style="bold cyan")
    subtitle = Text("Multi-get client • Elasticsearch", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _preview(source: Any) -> str:
    if source is None:
        return ""
    text = json.dumps(source, ensure_ascii=False, sort_keys=True)
    if len(text) <= _SOURCE_PREVIEW_CHARS:
        return text
    return text[: _SOURCE_PREVIEW_CHARS - 1] + "…"


def build_docs_table(payload: Any) -> Table:
    """Tabla Rich con los documentos de una respuesta `_mget`."""

    table = Table(title="Documents")
    table.add_column("Index", style="cyan", no_wrap=True)
    table.add_column("ID", style="white", no_wrap=True)
    table.add_column("Found", style="green")
    table.add_column("Source", style="magenta")

    docs = payload.get("docs") if isinstance(payload, dict) else None
    for doc in docs or []:
        if not isinstance(doc, dict):
            continue
        if "error" in doc:
            found = Text("error", style="red")
        else:
            found = "yes" if doc.get("found") else "no"
        table.add_row(
            str(doc.get("_index", "")),
            str(doc.get("_id", "")),
            found,
            _preview(doc.get("_source", doc.get("fields"))),
        )
    return table
