"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from robolt.core.domain.models import Badge, PartialUser, User, UserPresence


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo en modo interactivo)."""

    title = Text("robolt", style="bold cyan")
    subtitle = Text("Usuarios • Amigos • Insignias • Puntos", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_user_panel(user: User) -> Panel:
    body = Text()
    body.append(f"{user.display_name}", style="bold")
    body.append(f" (@{user.username})\n", style="dim")
    body.append(f"Id: {user.id}\n")
    body.append(f"Creado: {user.created:%Y-%m-%d}\n")
    if user.has_verified_badge:
        body.append("Verificado\n", style="green")
    if user.is_banned:
        body.append("Baneado\n", style="red")
    if user.description:
        body.append("\n" + user.description.strip())
    return Panel(body, title=Text("Usuario", style="bold yellow"), border_style="yellow")


def build_users_table(users: Iterable[User | PartialUser], *, title: str = "Users") -> Table:
    table = Table(title=title)
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Username", style="white")
    table.add_column("Display name", style="magenta")
    for user in users:
        display_name = getattr(user, "display_name", "")
        table.add_row(str(user.id), user.username, display_name)
    return table


def build_badges_table(badges: Iterable[Badge]) -> Table:
    table = Table(title="Badges")
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Enabled", style="green")
    table.add_column("Awarded", style="magenta", justify="right")
    table.add_column("Win rate", style="dim", justify="right")
    for badge in badges:
        table.add_row(
            str(badge.id),
            badge.display_name,
            "yes" if badge.enabled else "no",
            str(badge.statistics.awarded_count),
            f"{badge.statistics.win_rate_percentage:.2%}",
        )
    return table


def build_presence_table(presences: Iterable[UserPresence]) -> Table:
    table = Table(title="Presence")
    table.add_column("User", style="cyan", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Location", style="dim")
    for presence in presences:
        status = presence.user_presence_type.name.replace("_", " ").title()
        table.add_row(str(presence.user_id), status, presence.last_location or "")
    return table
