"""Base formatter interface for codestat output rendering."""

from abc import ABC, abstractmethod

import typer

from ..statistics.models import ProjectReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters.

    Formatters only read the report; rendering twice gives the same text.
    """

    def render(self, report: ProjectReport) -> None:
        """Write the formatted report to stdout."""
        typer.echo(self.format(report), nl=False)

    @abstractmethod
    def format(self, report: ProjectReport) -> str:
        """Return formatted string representation of the report."""
