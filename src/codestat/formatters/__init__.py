"""Output formatters for codestat."""

from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .text_formatter import NO_CLASSES, NO_FIELDS, NO_METHODS, SEPARATOR, TextFormatter


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "text", "json"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "text": TextFormatter,
        "json": JsonFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "JsonFormatter",
    "get_formatter",
    "SEPARATOR",
    "NO_METHODS",
    "NO_CLASSES",
    "NO_FIELDS",
]
