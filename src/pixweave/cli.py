"""CLI interface for pixweave."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from pixweave import __version__
from pixweave.core.calculator import InvalidInputError, run_calculation
from pixweave.core.errors import ImageDataError
from pixweave.core.pipeline import combine as run_combine
from pixweave.schemas.config import DEFAULT_CONFIG_PATH, PixweaveConfig
from pixweave.schemas.status import PipelineStage

console = Console()
err_console = Console(stderr=True)


def _configure_logging(cfg: PixweaveConfig) -> None:
    """Route log records through rich at the configured level."""
    logging.basicConfig(
        level=cfg.logging.level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                rich_tracebacks=cfg.logging.rich_tracebacks,
                show_path=False,
            )
        ],
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """pixweave: pixel-interleaving image combiner and calculator."""
    pass


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("first")
@click.argument("operator")
@click.argument("second")
def calc(first: str, operator: str, second: str) -> None:
    """Evaluate FIRST OPERATOR SECOND.

    OPERATOR is one of + - * x X /. Quote * to keep the shell from
    expanding it.
    """
    try:
        line = run_calculation(first, operator, second)
    except InvalidInputError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        sys.exit(1)

    click.echo(line)


@main.command()
@click.argument("image1", type=click.Path(dir_okay=False))
@click.argument("image2", type=click.Path(dir_okay=False))
@click.argument("output", type=click.Path(dir_okay=False))
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to config file (.pixweave.yaml)",
)
@click.option("--quiet", "-q", is_flag=True, help="Only report errors")
def combine(image1: str, image2: str, output: str, config: str | None, quiet: bool) -> None:
    """Combine IMAGE1 and IMAGE2 into OUTPUT by alternating pixels.

    Both inputs must be in the same format; the larger one is resized to
    the smaller one's dimensions and OUTPUT is written in that format.
    """
    config_path = Path(config) if config else DEFAULT_CONFIG_PATH
    cfg = PixweaveConfig.load(config_path)
    _configure_logging(cfg)

    def report_stage(stage: PipelineStage) -> None:
        if cfg.report.show_stages and not quiet:
            console.print(f"[dim]stage:[/dim] {stage.value}")

    try:
        result = run_combine(image1, image2, output, on_stage=report_stage)
    except ImageDataError as e:
        stage = e.stage.value if e.stage else PipelineStage.START.value
        err_console.print(
            f"[red bold]Failed at {e.step}[/red bold] (after {stage}): {escape(e.message)}",
            highlight=False,
        )
        sys.exit(e.exit_code)

    if quiet:
        return

    if cfg.report.show_dimensions:
        console.print(f"Width: {result.width}, Height: {result.height}")

    table = Table(title="Combined image")
    table.add_column("Output", style="cyan")
    table.add_column("Format", style="magenta")
    table.add_column("Size")
    table.add_column("Resized", style="dim")
    table.add_row(
        result.output,
        result.format,
        f"{result.width}x{result.height}",
        result.resized or "-",
    )
    console.print(table)


@main.command()
@click.argument("output", type=click.Path(), default=str(DEFAULT_CONFIG_PATH))
def init(output: str) -> None:
    """Initialize a new configuration file."""
    output_path = Path(output)

    if output_path.exists():
        if not click.confirm(f"{output} already exists. Overwrite?"):
            return

    config = PixweaveConfig()
    config.save(output_path)
    console.print(f"[green]Created:[/green] {output}")


@main.command()
def version() -> None:
    """Show version information."""
    console.print(f"pixweave v{__version__}")


if __name__ == "__main__":
    main()
