"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from robolt.adapters.http_client import build_async_client
from robolt.client import Robolt
from robolt.core.config import AppSettings, write_user_env_vars
from robolt.core.errors import RoboltError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


async def _check_session(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with Robolt.authenticated(settings=settings) as client:
            account = await client.fetch_my_user()
        return True, f"Signed in as {account.username} ({account.id})"
    except RoboltError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="robolt Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    for name, url in settings.endpoints.model_dump().items():
        table.add_row(f"Endpoint: {name}", "OK", url)

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings.endpoints.users, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    # Session
    if settings.roblosecurity is None:
        table.add_row("Session cookie", "OPTIONAL", "Not set -> anonymous endpoints only")
    else:
        ok_auth, detail_auth = asyncio.run(_check_session(settings))
        table.add_row("Session cookie", "OK" if ok_auth else "FAIL", detail_auth)

    _console.print(table)


@app.command(name="setup-auth")
def setup_auth() -> None:
    """Interactive session setup (stores the cookie in the user config .env)."""

    cookie = typer.prompt(".ROBLOSECURITY cookie", hide_input=True).strip()
    if not cookie:
        raise typer.BadParameter("cookie is required")

    env_path = write_user_env_vars({"ROBOLT_ROBLOSECURITY": cookie})
    _console.print(f"[green]Saved session cookie to:[/green] {env_path}")
