"""Exportación JSON de respuestas.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines (jq, scripts).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def export_response_json(*, payload: Any, output_path: Path) -> Path:
    """Exporta `payload` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
