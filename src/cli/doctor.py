"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_client
from cli.ui_components import print_error
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.errors import ConfigError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = client.get(settings.base_url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    try:
        settings = AppSettings.load()
    except ConfigError as exc:
        print_error(Console(stderr=True), str(exc))
        raise typer.Exit(code=1) from exc

    table = Table(title="aoc-similarity Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white", no_wrap=True)
    table.add_column("Details", style="dim")

    if settings.session and settings.session.get_secret_value().strip():
        table.add_row("Session cookie", "OK", "Configured")
    else:
        table.add_row("Session cookie", "MISSING", "Run `aoc-similarity doctor setup-session`")
    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("User env file", "OK" if get_user_env_file().exists() else "ABSENT", str(get_user_env_file()))

    # Connectivity (best-effort)
    ok_http, detail_http = _check_http(settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="setup-session")
def setup_session() -> None:
    """Interactive session setup (stores the cookie in the user config .env)."""

    token = typer.prompt("Session cookie", hide_input=True, confirmation_prompt=False).strip()
    if not token:
        raise typer.BadParameter("session cookie is required")

    env_path = write_user_env_vars({"AOC_SESSION": token})

    _console.print(f"[green]Saved session to:[/green] {env_path}")
