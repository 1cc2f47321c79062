"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) out of the command
definitions; this module knows nothing about use cases.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from filelu_rclone.domain.models.command import RenderedCommand

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "FileLu Rclone") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {escape(message)}[/]")


def warning_message(message: str) -> None:
    """Print a yellow warning line."""
    console.print(f"[bold yellow]⚠️  {escape(message)}[/]")


# ---------------------------------------------------------------------------
# JSON rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Active Command Catalog") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def commands_table(commands: Sequence[RenderedCommand], title: str = "📋 Rclone Commands") -> None:
    """Print rendered commands as a numbered table."""
    table = Table(title=title, show_header=True, border_style="blue")
    table.add_column("#", style="dim", width=3, justify="right")
    table.add_column("Command", style="cyan")
    table.add_column("rclone", style="green", overflow="fold")

    for index, cmd in enumerate(commands, start=1):
        table.add_row(str(index), escape(cmd.title), escape(cmd.command))

    console.print(table)


def setup_panel(config_command: str, hint: str, credential: str, warning: str) -> None:
    """Print the remote configuration instructions."""
    body = (
        f"[bold]1.[/] Run: [green]{escape(config_command)}[/]\n\n"
        f"{escape(hint)}\n\n"
        f"FileLu Rclone Key: [cyan]{escape(credential)}[/]"
    )
    if warning:
        body += f"\n[dim]{escape(warning)}[/]"
    console.print(Panel(body, title="🔧 Rclone Configuration Setup", border_style="blue"))
