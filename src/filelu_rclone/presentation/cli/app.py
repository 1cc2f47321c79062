"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All domain logic is accessed through the Container (bootstrap.py).
No direct imports from infrastructure/ here.
"""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from filelu_rclone.presentation.cli.formatters import (
    commands_table,
    console,
    error_message,
    json_panel,
    setup_panel,
    success_panel,
    warning_message,
)

app = typer.Typer(
    name="filelu-rclone",
    help="🗂️  Build and copy rclone commands for a FileLu remote",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for catalog commands
catalog_app = typer.Typer(
    name="catalog",
    help="⚙️  Manage the command catalog",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(catalog_app, name="catalog")


# ---------------------------------------------------------------------------
# Shared options
# ---------------------------------------------------------------------------

RemoteOption = Annotated[
    Optional[str], typer.Option("--remote", "-r", help="Remote name used in rclone config")
]
LocalOption = Annotated[
    Optional[str], typer.Option("--local", "-l", help="Local folder path (source)")
]
RemotePathOption = Annotated[
    Optional[str], typer.Option("--remote-path", "-p", help="FileLu remote path (destination)")
]
CatalogOption = Annotated[
    Optional[str], typer.Option("--catalog", "-c", help="Path to a JSON command catalog")
]


def _build(
    catalog: Optional[str],
    remote: Optional[str] = None,
    local: Optional[str] = None,
    remote_path: Optional[str] = None,
    key: Optional[str] = None,
):
    """Create the container and a parameter store with CLI overrides applied."""
    from filelu_rclone.bootstrap import Container
    from filelu_rclone.domain.errors import ConfigurationError

    try:
        container = Container(catalog_path=catalog, prefer_qt_clipboard=False)
    except (FileNotFoundError, ConfigurationError) as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    params = container.new_parameters()
    if remote is not None:
        params.set_remote_alias(remote)
    if local is not None:
        params.set_local_path(local)
    if remote_path is not None:
        params.set_remote_path(remote_path)
    if key is not None:
        params.set_credential_placeholder(key)
    return container, params


def _find(container, params, selector: str):
    from filelu_rclone.domain.errors import CommandNotFoundError

    try:
        return container.render_commands().find(selector, params)
    except CommandNotFoundError as e:
        error_message(str(e))
        raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
) -> None:
    """FileLu Rclone helper — nothing is executed, commands are only generated."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


# ---------------------------------------------------------------------------
# filelu-rclone list
# ---------------------------------------------------------------------------


@app.command("list")
def list_commands(
    remote: RemoteOption = None,
    local: LocalOption = None,
    remote_path: RemotePathOption = None,
    section: Annotated[
        Optional[str], typer.Option("--section", "-s", help="Only 'setup' or 'examples'")
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a table")] = False,
    catalog: CatalogOption = None,
) -> None:
    """List all rclone commands filled in with the given parameters."""
    from filelu_rclone.domain.models.command import CatalogSection

    container, params = _build(catalog, remote, local, remote_path)

    selected: Optional[CatalogSection] = None
    if section is not None:
        try:
            selected = CatalogSection(section)
        except ValueError:
            error_message(f"Unknown section: {section} (use 'setup' or 'examples')")
            raise typer.Exit(code=1)

    commands = container.render_commands().execute(params, selected)

    if as_json:
        payload = [cmd.model_dump(mode="json") for cmd in commands]
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    commands_table(commands)
    if not params.remote_alias:
        warning_message("Remote name is empty; commands will not target a remote.")


# ---------------------------------------------------------------------------
# filelu-rclone show / copy
# ---------------------------------------------------------------------------


@app.command()
def show(
    selector: Annotated[str, typer.Argument(help="Command number, key or title")],
    remote: RemoteOption = None,
    local: LocalOption = None,
    remote_path: RemotePathOption = None,
    catalog: CatalogOption = None,
) -> None:
    """Print one command as plain text (suitable for shell substitution)."""
    container, params = _build(catalog, remote, local, remote_path)
    cmd = _find(container, params, selector)
    typer.echo(cmd.command)


@app.command()
def copy(
    selector: Annotated[str, typer.Argument(help="Command number, key or title")],
    remote: RemoteOption = None,
    local: LocalOption = None,
    remote_path: RemotePathOption = None,
    catalog: CatalogOption = None,
) -> None:
    """Copy one command to the system clipboard."""
    from filelu_rclone.domain.errors import ClipboardError

    container, params = _build(catalog, remote, local, remote_path)
    cmd = _find(container, params, selector)

    try:
        container.clipboard.copy(cmd.command)
    except ClipboardError as e:
        error_message(f"Copy failed: {e}")
        typer.echo(cmd.command)
        raise typer.Exit(code=1)

    success_panel(
        f"✅ Command copied to clipboard!\n\n[green]{escape(cmd.command)}[/]",
        title=f"📋 {escape(cmd.title)}",
    )


# ---------------------------------------------------------------------------
# filelu-rclone setup
# ---------------------------------------------------------------------------


@app.command()
def setup(
    remote: RemoteOption = None,
    key: Annotated[
        Optional[str], typer.Option("--key", "-k", help="FileLu rclone key (display only)")
    ] = None,
    catalog: CatalogOption = None,
) -> None:
    """Show how to configure the FileLu remote with 'rclone config'."""
    from filelu_rclone.domain.models.command import CatalogSection

    container, params = _build(catalog, remote=remote, key=key)
    setup_commands = container.render_commands().execute(params, CatalogSection.SETUP)
    notes = container.config.notes

    for cmd in setup_commands:
        setup_panel(
            cmd.command,
            notes.setup_hint_for(params.remote_alias),
            params.credential_placeholder,
            notes.credential_warning,
        )


# ---------------------------------------------------------------------------
# filelu-rclone gui
# ---------------------------------------------------------------------------


@app.command()
def gui(catalog: CatalogOption = None) -> None:
    """Open the desktop window."""
    from filelu_rclone.presentation.gui import launch

    launch(catalog)


# ---------------------------------------------------------------------------
# filelu-rclone catalog show / init / validate
# ---------------------------------------------------------------------------


@catalog_app.command("show")
def catalog_show(catalog: CatalogOption = None) -> None:
    """Show the active command catalog (formatted)."""
    container, _params = _build(catalog)
    json_panel(container.config.model_dump_json(indent=2))


@catalog_app.command("init")
def catalog_init(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Destination file name")
    ] = "filelu_catalog.json",
) -> None:
    """Copy the built-in catalog to the current directory for customization."""
    from filelu_rclone.config.loader import DEFAULT_CATALOG_PATH

    dest = Path(output)
    if dest.exists():
        console.print(f"[bold yellow]⚠️  File already exists:[/] {dest}")
        overwrite = typer.confirm("Overwrite it?")
        if not overwrite:
            raise typer.Abort()

    shutil.copy2(DEFAULT_CATALOG_PATH, dest)
    success_panel(
        f"✅ Catalog copied to: [bold green]{dest}[/]\n\n"
        "Edit this file and use it with [bold]--catalog[/]:\n"
        f'  filelu-rclone list --catalog "{dest}"',
        title="⚙️  Catalog Init",
    )


@catalog_app.command("validate")
def catalog_validate(
    catalog_file: Annotated[str, typer.Argument(help="Path to the JSON catalog to validate")],
) -> None:
    """Validate a JSON command catalog."""
    from filelu_rclone.config import load_catalog
    from filelu_rclone.domain.errors import ConfigurationError

    path = Path(catalog_file)
    if not path.exists():
        error_message(f"File not found: {path}")
        raise typer.Exit(code=1)

    try:
        cfg = load_catalog(path)
    except ConfigurationError as e:
        console.print(f"[bold red]❌ Validation error:[/]\n\n{escape(str(e))}")
        raise typer.Exit(code=1)

    success_panel(
        f"✅ Valid catalog\n\n"
        f"  Name: [cyan]{escape(cfg.metadata.name)}[/]\n"
        f"  Setup commands: [cyan]{len(cfg.setup)}[/]\n"
        f"  Example commands: [cyan]{len(cfg.examples)}[/]",
        title="✅ Validation",
    )


if __name__ == "__main__":
    app()
