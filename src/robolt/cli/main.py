"""CLI principal.

Cada comando abre un cliente, ejecuta una única operación y muestra el
resultado como tabla (Rich) o JSON. Los errores de la librería se muestran
en rojo y terminan con código 1; la CLI no reintenta.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable, Coroutine
from pathlib import Path
from typing import Any, TypeVar

import typer
from rich.console import Console

from robolt.adapters.json_exporter import export_json, to_json_data
from robolt.cli.doctor import app as doctor_app
from robolt.cli.ui_components import (
    build_badges_table,
    build_presence_table,
    build_user_panel,
    build_users_table,
    print_banner,
)
from robolt.client import Robolt
from robolt.core.client import Anonymous, Authenticated
from robolt.core.config import AppSettings
from robolt.core.errors import RoboltError
from robolt.core.logging_config import configure_logging

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Typed client for the Roblox web APIs.")
app.add_typer(doctor_app, name="doctor")

_console = Console()

_JSON_OPTION = typer.Option(False, "--json", help="Print raw JSON instead of tables.")
_OUTPUT_OPTION = typer.Option(None, "--output", "-o", help="Also write the result to a JSON file.")


def _anonymous_client() -> Robolt[Anonymous]:
    return Robolt.anonymous()


def _authenticated_client() -> Robolt[Authenticated]:
    return Robolt.authenticated()


def _run(coro: Coroutine[Any, Any, T]) -> T:
    try:
        return asyncio.run(coro)
    except RoboltError as exc:
        _console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _public(action: Callable[[Robolt[Anonymous]], Awaitable[T]]) -> T:
    async def runner() -> T:
        async with _anonymous_client() as client:
            return await action(client)

    return _run(runner())


def _private(action: Callable[[Robolt[Authenticated]], Awaitable[T]]) -> T:
    async def runner() -> T:
        async with _authenticated_client() as client:
            return await action(client)

    return _run(runner())


def _emit(value: Any, *, as_json: bool, output: Path | None, render: Callable[[], Any]) -> None:
    if output is not None:
        path = export_json(value=value, output_path=output)
        _console.print(f"[green]Saved JSON to:[/green] {path}")
    if as_json:
        _console.print_json(json.dumps(to_json_data(value)))
    else:
        _console.print(render())


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request (DEBUG)."),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON lines."),
    banner: bool = typer.Option(False, "--banner", help="Show the welcome banner."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level, json_output=json_logs)
    if banner:
        print_banner(_console)


@app.command()
def user(
    user_id: int = typer.Argument(..., help="Numeric user id."),
    as_json: bool = _JSON_OPTION,
    output: Path | None = _OUTPUT_OPTION,
) -> None:
    """Fetch a user's public profile."""

    profile = _public(lambda c: c.fetch_user(user_id))
    _emit(profile, as_json=as_json, output=output, render=lambda: build_user_panel(profile))


@app.command()
def find(
    username: str = typer.Argument(..., help="Username to resolve."),
    as_json: bool = _JSON_OPTION,
) -> None:
    """Resolve a username to its id."""

    found = _public(lambda c: c.find_user(username))
    _emit(found, as_json=as_json, output=None, render=lambda: build_users_table([found]))


@app.command()
def friends(
    user_id: int = typer.Argument(..., help="Numeric user id."),
    count: bool = typer.Option(False, "--count", help="Only print the number of friends."),
    as_json: bool = _JSON_OPTION,
    output: Path | None = _OUTPUT_OPTION,
) -> None:
    """List a user's friends."""

    if count:
        _console.print(_public(lambda c: c.fetch_friend_count(user_id)))
        return
    users = _public(lambda c: c.fetch_friends(user_id))
    _emit(users, as_json=as_json, output=output, render=lambda: build_users_table(users, title="Friends"))


@app.command()
def followers(
    user_id: int = typer.Argument(..., help="Numeric user id."),
    limit: int = typer.Option(10, "--limit", min=1, max=100),
    count: bool = typer.Option(False, "--count", help="Only print the number of followers."),
    as_json: bool = _JSON_OPTION,
) -> None:
    """List a user's followers."""

    if count:
        _console.print(_public(lambda c: c.fetch_follower_count(user_id)))
        return
    users = _public(lambda c: c.fetch_followers(user_id, limit))
    _emit(users, as_json=as_json, output=None, render=lambda: build_users_table(users, title="Followers"))


@app.command()
def followings(
    user_id: int = typer.Argument(..., help="Numeric user id."),
    limit: int = typer.Option(10, "--limit", min=1, max=100),
    count: bool = typer.Option(False, "--count", help="Only print the number of followings."),
    as_json: bool = _JSON_OPTION,
) -> None:
    """List the users someone follows."""

    if count:
        _console.print(_public(lambda c: c.fetch_following_count(user_id)))
        return
    users = _public(lambda c: c.fetch_followings(user_id, limit))
    _emit(users, as_json=as_json, output=None, render=lambda: build_users_table(users, title="Followings"))


@app.command()
def badges(
    target_id: int = typer.Argument(..., help="User id (or universe id with --game)."),
    game: bool = typer.Option(False, "--game", help="Treat the id as a universe id."),
    limit: int = typer.Option(100, "--limit", min=1, max=100),
    as_json: bool = _JSON_OPTION,
    output: Path | None = _OUTPUT_OPTION,
) -> None:
    """List experience badges owned by a user or offered by a game."""

    if game:
        found = _public(lambda c: c.fetch_game_badges(target_id, limit))
    else:
        found = _public(lambda c: c.fetch_user_badges(target_id, limit))
    _emit(found, as_json=as_json, output=output, render=lambda: build_badges_table(found))


@app.command(name="roblox-badges")
def roblox_badges(user_id: int = typer.Argument(..., help="Numeric user id.")) -> None:
    """List platform badges held by a user."""

    for badge in _public(lambda c: c.fetch_roblox_badges(user_id)):
        _console.print(f"- {badge.value}")


@app.command()
def points(
    user_id: int = typer.Argument(..., help="Numeric user id."),
    universe_id: int = typer.Argument(..., help="Universe (game) id."),
) -> None:
    """Print a user's all-time points in a universe."""

    _console.print(_public(lambda c: c.points(user_id, universe_id)))


@app.command()
def presence(
    user_ids: list[int] = typer.Argument(..., help="One or more user ids."),
    as_json: bool = _JSON_OPTION,
) -> None:
    """Show online / in-game status for users."""

    found = _public(lambda c: c.fetch_presences(user_ids))
    _emit(found, as_json=as_json, output=None, render=lambda: build_presence_table(found))


@app.command()
def me(as_json: bool = _JSON_OPTION) -> None:
    """Show the account behind the configured session cookie."""

    async def summary(client: Robolt[Authenticated]) -> dict[str, Any]:
        account = await client.fetch_my_user()
        return {
            "id": account.id,
            "username": account.username,
            "display_name": account.display_name,
            "friends": await client.my_friend_count(),
            "friend_requests": await client.my_friend_request_count(),
        }

    data = _private(summary)
    if as_json:
        _console.print_json(json.dumps(data))
        return
    for key, value in data.items():
        _console.print(f"[bright_green]{key}[/bright_green]: {value}")


def run() -> None:
    app()
