"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import StatisticConfig, load_config

# Diagnostics only; the report itself goes to stdout
console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    output_format: Optional[str] = None,
    class_count_mode: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> StatisticConfig:
    """Build configuration from CLI options."""
    return load_config(
        config_file=config,
        output_format=output_format,
        class_count_mode=class_count_mode,
        verbose=verbose,
        quiet=quiet,
    )
