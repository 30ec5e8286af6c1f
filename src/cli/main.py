"""CLI principal (Typer).

Por qué la CLI es delgada:
- Solo traduce opciones a parámetros de API y presenta resultados.
- La validación vive en `core.api` y el I/O en `adapters`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.console import Console

from adapters.http_transport import HttpTransport
from adapters.json_exporter import export_response_json
from cli import doctor
from cli.ui_components import build_docs_table, print_banner
from core.client import SearchClient
from core.config import ClientSettings
from core.errors import InvalidArgumentError, ResponseError, TransportError
from core.logging import setup_logging

app = typer.Typer(no_args_is_help=True, help="Multi-get documents from an Elasticsearch cluster.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _given(value: Any) -> bool:
    if isinstance(value, (list, tuple)):
        return bool(value)
    return value is not None


def build_params(
    *,
    index: str | None = None,
    doc_type: str | None = None,
    ids: list[str] | None = None,
    body: str | None = None,
    fields: list[str] | None = None,
    source: list[str] | None = None,
    source_include: list[str] | None = None,
    source_exclude: list[str] | None = None,
    preference: str | None = None,
    realtime: bool | None = None,
    refresh: bool | None = None,
    method: str | None = None,
) -> dict[str, Any]:
    """Traduce opciones de la CLI al mapping que espera `SearchClient.mget`."""

    if ids and body:
        raise typer.BadParameter("--id and --body are mutually exclusive")

    params: dict[str, Any] = {}
    if ids:
        params["body"] = {"ids": list(ids)}
    elif body:
        try:
            params["body"] = json.loads(body)
        except json.JSONDecodeError as exc:
            raise typer.BadParameter(f"--body is not valid JSON: {exc}") from exc

    optional = {
        "method": method,
        "index": index,
        "type": doc_type,
        "fields": fields,
        "preference": preference,
        "realtime": realtime,
        "refresh": refresh,
        "_source": source,
        "_source_exclude": source_exclude,
        "_source_include": source_include,
    }
    params.update({k: v for k, v in optional.items() if _given(v)})
    return params


def _make_client(settings: ClientSettings) -> SearchClient:
    return SearchClient(HttpTransport(settings))


@app.command(name="mget")
def mget_command(
    index: Optional[str] = typer.Option(None, "--index", "-i", help="Default index for docs without _index."),
    doc_type: Optional[str] = typer.Option(None, "--type", "-t", help="Default type for docs without _type."),
    ids: Optional[List[str]] = typer.Option(None, "--id", help="Document id (repeatable)."),
    body: Optional[str] = typer.Option(None, "--body", help="Raw JSON request body."),
    fields: Optional[List[str]] = typer.Option(None, "--fields", help="Stored field to return (repeatable)."),
    source: Optional[List[str]] = typer.Option(None, "--source", help="_source field to return (repeatable)."),
    source_include: Optional[List[str]] = typer.Option(None, "--source-include", help="_source field to include."),
    source_exclude: Optional[List[str]] = typer.Option(None, "--source-exclude", help="_source field to exclude."),
    preference: Optional[str] = typer.Option(None, "--preference", help="Node or shard preference."),
    realtime: Optional[bool] = typer.Option(None, "--realtime/--no-realtime", help="Realtime or search mode."),
    refresh: Optional[bool] = typer.Option(None, "--refresh/--no-refresh", help="Refresh shards before reading."),
    method: Optional[str] = typer.Option(None, "--method", "-X", help="GET or POST."),
    host: Optional[str] = typer.Option(None, "--host", help="Override ES_MGET_HOST."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON response."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the response to a JSON file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging."),
) -> None:
    """Fetch several documents in a single request."""

    settings = ClientSettings()
    if host:
        settings = settings.model_copy(update={"host": host})
    setup_logging("DEBUG" if verbose else settings.log_level)

    params = build_params(
        index=index,
        doc_type=doc_type,
        ids=ids,
        body=body,
        fields=fields,
        source=source,
        source_include=source_include,
        source_exclude=source_exclude,
        preference=preference,
        realtime=realtime,
        refresh=refresh,
        method=method,
    )

    try:
        with _make_client(settings) as client:
            payload = client.mget(params)
    except InvalidArgumentError as exc:
        _err_console.print(f"[red]Invalid argument:[/red] {exc}")
        raise typer.Exit(code=2) from exc
    except ResponseError as exc:
        _err_console.print(f"[red]HTTP {exc.status}:[/red] {json.dumps(exc.body, ensure_ascii=False)}")
        raise typer.Exit(code=1) from exc
    except TransportError as exc:
        _err_console.print(f"[red]Transport error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if output:
        path = export_response_json(payload=payload, output_path=output)
        _err_console.print(f"[green]Saved response to:[/green] {path}")

    if as_json:
        _console.print_json(data=payload)
        return

    print_banner(_console)
    _console.print(build_docs_table(payload))


def run() -> None:
    app()
