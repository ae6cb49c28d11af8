"""CLI interface for taskdash."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from jinja2 import TemplateError
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from taskdash import __version__
from taskdash.config import CONFIG_FILE, TaskdashConfig

console = Console()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="taskdash")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Config file (default: {CONFIG_FILE})",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, debug: bool) -> None:
    """taskdash - track a list of tasks from the console.

    \b
    Usage:
      taskdash               # Start the interactive dashboard
      taskdash init          # Write a default config file
      taskdash config        # Show the effective configuration
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path or CONFIG_FILE

    # No subcommand starts the dashboard
    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


def _load_config(ctx: click.Context) -> TaskdashConfig:
    """Load the config for a command, exiting with code 1 if it is invalid."""
    path: Path = ctx.obj["config_path"]
    try:
        return TaskdashConfig.load(path)
    except (json.JSONDecodeError, ValidationError) as e:
        console.print(f"[red]Invalid config file[/red] {escape(str(path))}:\n{escape(str(e))}")
        ctx.exit(1)


@main.command()
@click.pass_context
def run(ctx: click.Context) -> None:
    """Start the interactive dashboard."""
    from taskdash.dashboard import Dashboard
    from taskdash.menu import render_menu
    from taskdash.registry import TaskRegistry

    config = _load_config(ctx)
    try:
        render_menu(config)
    except (OSError, TemplateError) as e:
        console.print(f"[red]Invalid menu template:[/red] {escape(str(e))}")
        ctx.exit(1)

    dashboard = Dashboard(TaskRegistry(), console, input, config)

    try:
        exit_code = dashboard.run()
    except KeyboardInterrupt:
        console.print()
        ctx.exit(130)

    ctx.exit(exit_code)


@main.command()
@click.option("--force", "-f", is_flag=True, help="Overwrite existing config")
@click.pass_context
def init(ctx: click.Context, force: bool) -> None:
    """Write a default configuration file."""
    path: Path = ctx.obj["config_path"]

    if path.exists() and not force:
        console.print(
            f"[yellow]Config already exists:[/yellow] {escape(str(path))}. "
            "Use --force to overwrite."
        )
        return

    TaskdashConfig().save(path)
    shown = escape(str(path))

    console.print(
        Panel.fit(
            "[green]Configuration saved![/green]\n\n"
            f"Config: [cyan]{shown}[/cyan]\n\n"
            "Next steps:\n"
            f"  1. Review config: [cyan]cat {shown}[/cyan]\n"
            "  2. Start the dashboard: [cyan]taskdash[/cyan]",
            title="taskdash",
        )
    )


@main.command("config")
@click.pass_context
def config_command(ctx: click.Context) -> None:
    """Show the effective configuration."""
    config = _load_config(ctx)

    display_table = Table(title="Display", show_header=True)
    display_table.add_column("Setting", style="cyan")
    display_table.add_column("Value", style="white")
    banner_icon = "[green]✓[/green]" if config.display.show_banner else "[dim]✗[/dim]"
    display_table.add_row("Banner", banner_icon)
    display_table.add_row("Title", escape(config.display.title))
    author = escape(config.display.author) if config.display.author else "[dim]none[/dim]"
    display_table.add_row("Author", author)
    display_table.add_row("Style", config.display.style)

    console.print(display_table)
    console.print()

    menu_table = Table(title="Menu", show_header=True)
    menu_table.add_column("Setting", style="cyan")
    menu_table.add_column("Value", style="white")
    menu_table.add_row("Template", config.menu.template)
    custom_path = escape(config.menu.custom_path) if config.menu.custom_path else "[dim]none[/dim]"
    menu_table.add_row("Custom path", custom_path)

    console.print(menu_table)


if __name__ == "__main__":
    main()
