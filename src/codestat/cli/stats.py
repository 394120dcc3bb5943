"""Statistics command: walk a directory and print the report."""

from pathlib import Path
from typing import Optional

import click
import typer
from rich.markup import escape

from .. import __version__
from ..core import StatisticCollector
from ..exceptions import CodestatError
from ..formatters import get_formatter
from ..logging_config import get_logger, setup_logging
from . import app
from ._common import console, resolve_config

logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"codestat version {__version__}")
        raise typer.Exit(0)


@app.command()
def stats(
    root: Path = typer.Argument(
        ...,
        help="Directory to scan recursively for source files",
        show_default=False,
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Report format: text (default) or json",
        click_type=click.Choice(["text", "json"], case_sensitive=False),
    ),
    count_classes: Optional[str] = typer.Option(
        None,
        "--count-classes",
        help="Count every class declaration, or one class per file",
        click_type=click.Choice(["declaration", "file"], case_sensitive=False),
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also write log records to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Report class, method and field statistics for a source tree.

    Prints a project summary (totals, average method length, average
    fields per class) followed by one block per file (average method
    length, average field name length). Files that cannot be parsed are
    left out.

    [bold cyan]Examples:[/bold cyan]

      codestat src/main/java

      codestat . --format json

      codestat . --count-classes file
    """
    try:
        settings = resolve_config(
            config=config,
            output_format=output_format.lower() if output_format else None,
            class_count_mode=count_classes.lower() if count_classes else None,
            verbose=verbose,
            quiet=quiet,
        )
        setup_logging(
            verbose=settings.verbosity == "verbose",
            quiet=settings.verbosity == "quiet",
            log_file=str(log_file) if log_file else None,
        )

        report = StatisticCollector(root, config=settings).collect()
        get_formatter(settings.output_format).render(report)

    except CodestatError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)
