"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_transport import HttpTransport
from core.config import ClientSettings, get_user_env_file, write_user_env_vars
from core.domain.models import HttpMethod, RequestDescriptor
from core.errors import TransportError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_cluster(settings: ClientSettings) -> tuple[bool, str]:
    try:
        with HttpTransport(settings) as transport:
            info = transport.request(RequestDescriptor(method=HttpMethod.GET, path="/"))
    except TransportError as exc:
        return False, str(exc)
    if isinstance(info, dict):
        version = (info.get("version") or {}).get("number")
        name = info.get("cluster_name")
        if version or name:
            return True, f"{name or '?'} (version {version or '?'})"
    return True, "reachable"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = ClientSettings()

    table = Table(title="es-mget Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Host", "OK", settings.base_url)
    if settings.username:
        table.add_row("Auth", "OK", f"basic auth as {settings.username}")
    else:
        table.add_row("Auth", "OPTIONAL", "No credentials set")
    table.add_row("TLS verify", "OK" if settings.verify_tls else "OFF", str(settings.verify_tls))
    table.add_row("User config", "OK" if get_user_env_file().exists() else "MISSING", str(get_user_env_file()))

    ok, detail = _check_cluster(settings)
    table.add_row("Cluster", "OK" if ok else "FAIL", detail)

    _console.print(table)

    if not ok:
        _console.print("\n[yellow]Note:[/yellow] run `es-mget doctor setup` to point the client at another host.")
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive host setup (stores config in the user config .env)."""

    current = ClientSettings()
    host = typer.prompt("Host URL", default=current.host, show_default=True).strip()
    username = typer.prompt("Username (blank for none)", default="", show_default=False).strip()
    password = ""
    if username:
        password = typer.prompt("Password", hide_input=True, confirmation_prompt=False).strip()

    if not host:
        raise typer.BadParameter("host is required")

    env_path = write_user_env_vars(
        {
            "ES_MGET_HOST": host,
            "ES_MGET_USERNAME": username or None,
            "ES_MGET_PASSWORD": password or None,
        }
    )

    _console.print(f"[green]Saved client config to:[/green] {env_path}")
