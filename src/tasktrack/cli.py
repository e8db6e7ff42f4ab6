"""CLI interface for tasktrack."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tasktrack import __version__
from tasktrack.config import CONFIG_FILE, TrackerConfig
from tasktrack.logging_setup import setup_logging

console = Console()
logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="tasktrack")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Configuration file (default: {CONFIG_FILE})",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging on stderr")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """tasktrack - a personal task tracker.

    Tasks live in memory for the length of the session.

    \b
    Usage:
      tasktrack              # Start the interactive menu
      tasktrack config       # Show the effective configuration
    """
    ctx.ensure_object(dict)

    try:
        config = TrackerConfig.load(config_path)
    except (ValidationError, json.JSONDecodeError) as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        ctx.exit(1)

    setup_logging("DEBUG" if verbose else config.logging.level, config.logging.file)
    logger.debug("Loaded configuration from %s", config_path or CONFIG_FILE)
    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        _run_menu(ctx)


@main.command()
@click.pass_context
def menu(ctx: click.Context) -> None:
    """Start the interactive task menu."""
    _run_menu(ctx)


def _run_menu(ctx: click.Context) -> None:
    from tasktrack.console import ConsoleDriver
    from tasktrack.store import TaskStore

    config: TrackerConfig = ctx.obj["config"]
    store = TaskStore(require_unique_prefix=config.lookup.require_unique_prefix)
    driver = ConsoleDriver(store, config=config, console=console)

    ctx.exit(driver.run())


@main.command("config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show the effective configuration."""
    config: TrackerConfig = ctx.obj["config"]

    display_table = Table(title="Display", show_header=True)
    display_table.add_column("Setting", style="cyan")
    display_table.add_column("Value", style="white")
    verbose_icon = "[green]✓[/green]" if config.display.verbose_errors else "[dim]✗[/dim]"
    display_table.add_row("Style", config.display.style)
    display_table.add_row("Id length", str(config.display.id_length))
    display_table.add_row("Verbose errors", verbose_icon)

    console.print(display_table)
    console.print()

    lookup_table = Table(title="Lookup", show_header=True)
    lookup_table.add_column("Setting", style="cyan")
    lookup_table.add_column("Value", style="white")
    unique_icon = "[green]✓[/green]" if config.lookup.require_unique_prefix else "[dim]✗[/dim]"
    lookup_table.add_row("Unique prefix", unique_icon)

    console.print(lookup_table)
    console.print()

    logging_table = Table(title="Logging", show_header=True)
    logging_table.add_column("Setting", style="cyan")
    logging_table.add_column("Value", style="white")
    logging_table.add_row("Level", config.logging.level)
    logging_table.add_row("File", config.logging.file or "[dim]none[/dim]")

    console.print(logging_table)
