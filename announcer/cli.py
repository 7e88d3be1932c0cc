"""
Announcer: leveled console messages from named actions

This module provides the command-line interface: announce a severity or a
configured action by name, and list the available severities and actions.
"""

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from announcer.core.context import AppContext
from announcer.core.exceptions import ConfigurationError, FatalActionError
from announcer.core.severity import Severity

# Global AppContext instance - will be initialized on first use
_app_context: Optional[AppContext] = None
_config_path: Optional[Path] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        try:
            _app_context = AppContext(_config_path)
        except ConfigurationError as e:
            print(f"Configuration error: {e}")
            sys.exit(1)
    return _app_context


app = typer.Typer(
    name="announcer",
    help="Announce leveled console messages from named actions.",
    no_args_is_help=True,
)


@app.callback()
def main(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (defaults to announcer.toml when present).",
    ),
):
    """
    Announce leveled console messages from named actions.
    """
    global _config_path
    _config_path = config


@app.command("run")
def run_action(
    name: str = typer.Argument(
        ..., help="A severity name (e.g. WARN) or a configured action name."
    ),
    args: Optional[List[str]] = typer.Argument(
        None, help="Arguments passed to the action, or printed as-is for a severity."
    ),
):
    """
    Announce a severity or run a configured action.

    Names are case-insensitive. Unknown names are reported as UNDEFINED.
    An ERROR, direct or from a failing action, exits with code 1.
    """
    ctx = get_app_context()
    try:
        ctx.announcer.run(name, *(args or []))
    except FatalActionError as e:
        Console(stderr=True).print(e.message, style="bold red", markup=False, highlight=False)
        raise typer.Exit(code=1)


@app.command("severities")
def list_severities():
    """
    List the severities with their icons and output channels.
    """
    ctx = get_app_context()
    console = Console()

    table = Table(title="Severities")
    table.add_column("Name", style="cyan")
    table.add_column("Icon", justify="center")
    table.add_column("Channel", style="yellow")

    for severity in Severity:
        table.add_row(
            severity.name, ctx.announcer.icon_for(severity), severity.channel.value
        )

    console.print(table)


@app.command("actions")
def list_actions():
    """
    List the actions loaded from configuration.
    """
    ctx = get_app_context()
    console = Console()

    if not len(ctx.announcer.actions):
        ctx.logger.warning("No actions configured")
        console.print("No actions configured.")
        return

    table = Table(title="Actions")
    table.add_column("Name", style="cyan")
    table.add_column("Severity", style="yellow")
    table.add_column("Icon", justify="center")
    table.add_column("Method", style="green")

    for action in ctx.announcer.actions:
        severity = action.effective_severity
        method = action.method
        method_name = f"{getattr(method, '__module__', '?')}.{getattr(method, '__qualname__', repr(method))}"
        table.add_row(
            action.name,
            severity.name,
            action.icon or ctx.announcer.icon_for(severity),
            method_name,
        )

    console.print(table)


if __name__ == "__main__":
    app()
