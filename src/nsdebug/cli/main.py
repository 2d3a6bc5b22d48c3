"""nsdebug CLI: thin Typer wrapper for inspecting and trying out logger configuration."""

from __future__ import annotations

import logging
import os
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.style import Style
from rich.table import Table
from rich.text import Text

from nsdebug import __version__
from nsdebug.errors import NsDebugError

app = typer.Typer(
    name="nsdebug",
    help="Namespaced debug logging controlled by DEBUG, DEBUG_LEVEL and DEBUG_COLOR.",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show nsdebug's internal log"),
) -> None:
    """Namespaced debug logging controlled by DEBUG, DEBUG_LEVEL and DEBUG_COLOR."""
    if verbose:
        from nsdebug.utils.logging import enable_diagnostics

        enable_diagnostics(logging.DEBUG)


@app.command()
def version() -> None:
    """Show nsdebug version."""
    console.print(f"nsdebug {__version__}")


@app.command()
def match(
    namespace: str = typer.Argument(..., help="Namespace to test"),
    pattern: Optional[str] = typer.Argument(None, help="Pattern (default: $DEBUG or '*')"),
) -> None:
    """Check whether a namespace is admitted by a pattern."""
    from nsdebug.config import DEFAULT_PATTERN, ENV_PATTERN
    from nsdebug.matching import matches

    if pattern is None:
        pattern = os.environ.get(ENV_PATTERN) or DEFAULT_PATTERN

    try:
        admitted = matches(namespace, pattern)
    except NsDebugError as e:
        console.print(f"[red]Invalid pattern:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    if admitted:
        console.print(f"[green]admitted[/green] {escape(namespace)} by {escape(pattern)}")
    else:
        console.print(f"[red]not admitted[/red] {escape(namespace)} by {escape(pattern)}")
        raise typer.Exit(1)


@app.command()
def color(namespace: str = typer.Argument(..., help="Namespace to color")) -> None:
    """Show the color a namespace is rendered in when DEBUG_COLOR is set."""
    from nsdebug.colors import color_for

    rgb = color_for(namespace)
    red, green, blue = rgb.get_truecolor()
    console.print(f"rgb({red}, {green}, {blue})")
    console.print(Text(namespace, style=Style(color=rgb)))


@app.command()
def env() -> None:
    """Show the settings a logger built now would use."""
    from nsdebug.config import ENV_COLOR, ENV_LEVEL, ENV_PATTERN, DebugSettings

    try:
        settings = DebugSettings.from_env()
    except NsDebugError as e:
        console.print(f"[red]Invalid environment:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(title="nsdebug settings")
    table.add_column("Variable")
    table.add_column("Setting")
    table.add_column("Value")
    table.add_row(ENV_PATTERN, "pattern", escape(settings.pattern))
    table.add_row(ENV_LEVEL, "threshold", str(settings.level))
    table.add_row(ENV_COLOR, "color", "on" if settings.color else "off")
    console.print(table)


@app.command()
def emit(
    namespace: str = typer.Argument(..., help="Logger namespace"),
    message: str = typer.Argument(..., help="Message to emit"),
    level: str = typer.Option("WARN", "--level", "-l", help="DEBUG, INFO, WARN or ERROR"),
) -> None:
    """Emit one record to stdout through a logger configured from the environment."""
    from nsdebug.logger import Logger
    from nsdebug.models.enums import parse_level

    try:
        log_level = parse_level(level)
        log = Logger(namespace)
    except NsDebugError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    log.emit(log_level, message)
    if log.is_enabled_for(log_level):
        typer.echo()
