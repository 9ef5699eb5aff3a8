"""CLI interface for circletodo."""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from circletodo import __version__
from circletodo.config import CONFIG_FILE, AppConfig
from circletodo.logging_setup import setup_logging
from circletodo.palette import DELETE_COLOR, PALETTE, ColorPicker

console = Console()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="circletodo")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Config file (default: {CONFIG_FILE})",
)
@click.pass_context
def main(ctx: click.Context, config_path: Path | None) -> None:
    """circletodo - a to-do list of colored circles.

    \b
    Usage:
      circletodo run             # Open the to-do screen
      circletodo run --seed 7    # Reproducible task colors
      circletodo palette         # Show the task colors
    """
    ctx.ensure_object(dict)
    try:
        config = AppConfig.load(config_path)
    except (ValidationError, json.JSONDecodeError) as e:
        console.print(f"[red]Invalid config:[/red] {config_path or CONFIG_FILE}")
        console.print(str(e), style="dim", markup=False)
        ctx.exit(1)

    setup_logging(config.logging.level, config.logging.file)
    ctx.obj["config"] = config
    ctx.obj["config_path"] = config_path

    # If no subcommand, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.option("--seed", type=int, default=None, help="Seed for task colors")
@click.option("--rows", type=click.IntRange(3, 31), default=None, help="Circle height in rows")
@click.option("--no-clear", is_flag=True, help="Do not clear the terminal between redraws")
@click.pass_context
def run(ctx: click.Context, seed: int | None, rows: int | None, no_clear: bool) -> None:
    """Open the to-do screen.

    Type text to fill the new task field, then /add. Each task is drawn as a
    colored circle with Edit and Delete buttons. Tasks last for the session.

    \b
    Example:
      circletodo run
      > Buy milk
      > /add
      > /edit 0
      > /done 0 Buy oat milk
    """
    from circletodo.app import TaskApp
    from circletodo.screen import TaskScreen

    config: AppConfig = ctx.obj["config"]

    display = config.display
    if rows is not None:
        display = display.model_copy(update={"circle_rows": rows})

    picker = ColorPicker.seeded(seed if seed is not None else config.colors.seed)
    screen = TaskScreen(picker=picker, display=display)
    app = TaskApp(
        screen,
        console=console,
        clear_screen=display.clear_screen and not no_clear,
    )
    app.run()


@main.command()
def palette() -> None:
    """Show the task palette and the Delete accent."""
    table = Table(title="Task palette")
    table.add_column("Color")
    table.add_column("Hex", style="cyan")
    table.add_column("Swatch")

    for color in PALETTE:
        table.add_row(color.label, color.hex, Text(" " * 8, style=f"on {color.hex}"))
    table.add_section()
    table.add_row("[dim]Delete accent[/dim]", DELETE_COLOR, Text(" " * 8, style=f"on {DELETE_COLOR}"))

    console.print(table)


@main.command()
@click.option("--count", "-c", type=click.IntRange(min=1), default=1000, help="Colors to draw")
@click.option("--seed", type=int, default=None, help="Seed for the generator")
def pick(count: int, seed: int | None) -> None:
    """Draw colors and show how often each came up."""
    picker = ColorPicker.seeded(seed)
    tally = Counter(picker.pick() for _ in range(count))

    table = Table(title=f"{count} picks")
    table.add_column("Color")
    table.add_column("Count", justify="right")
    table.add_column("Share", justify="right")
    table.add_column("")

    for color in PALETTE:
        hits = tally.get(color, 0)
        share = hits / count
        bar = Text("█" * round(share * 40), style=color.hex)
        table.add_row(color.label, str(hits), f"{share:.1%}", bar)

    console.print(table)


@main.group()
def config() -> None:
    """Manage configuration."""
    pass


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Print the effective configuration."""
    cfg: AppConfig = ctx.obj["config"]
    console.print_json(data=cfg.model_dump())


@config.command("init")
@click.option("--force", "-f", is_flag=True, help="Overwrite existing config")
@click.pass_context
def config_init(ctx: click.Context, force: bool) -> None:
    """Write the default configuration file."""
    path: Path = ctx.obj["config_path"] or CONFIG_FILE

    if path.exists() and not force:
        console.print(
            f"[yellow]Config already exists:[/yellow] {path}. Use --force to overwrite."
        )
        return

    AppConfig().save(path)
    console.print(Panel.fit(f"[green]Configuration saved:[/green] {path}", title="circletodo"))
