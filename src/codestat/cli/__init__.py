"""CLI entry point."""

import typer

app = typer.Typer(
    name="codestat",
    help="codestat - Structural statistics for Java source trees",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command to register it
from .stats import stats as _stats  # noqa: F401, E402


def main() -> None:
    app()
