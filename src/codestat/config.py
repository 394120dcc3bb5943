"""Configuration loading and management for codestat.

Configuration sources are merged in priority order:
    1. Defaults (defined in StatisticConfig)
    2. Project config (./codestat.toml)
    3. Explicit config file (--config)
    4. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(class_count_mode="file")
    >>> config.class_count_mode
    'file'
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional

from .exceptions import ConfigurationError, InvalidConfigError

# Type aliases for clarity
Verbosity = Literal["quiet", "normal", "verbose"]
ClassCountMode = Literal["declaration", "file"]
OutputFormat = Literal["text", "json"]

PROJECT_CONFIG_NAME = "codestat.toml"

_CLASS_COUNT_MODES = ("declaration", "file")
_OUTPUT_FORMATS = ("text", "json")
_VERBOSITIES = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class StatisticConfig:
    """Configuration for one statistics run.

    Attributes:
        File discovery:
            extensions: File suffixes treated as source files
            exclude_dirs: Directory names pruned anywhere in the tree
            exclude_patterns: Globs matched against the root-relative POSIX path
            allow_hidden_files: Include dot-prefixed files and directories
            follow_symlinks: Descend into symlinked directories
            max_file_size_mb: Larger files are not analyzed

        Reading:
            encoding: Text encoding; undecodable bytes are replaced

        Counting:
            class_count_mode: "declaration" counts every class-like
                declaration, "file" counts one class per parsed file

        Output control:
            output_format: "text" or "json"
            verbosity: Logging verbosity level
    """

    # File discovery
    extensions: list[str] = field(default_factory=lambda: [".java"])
    exclude_dirs: list[str] = field(
        default_factory=lambda: [
            ".git",
            ".gradle",
            ".idea",
            ".mvn",
            "build",
            "out",
            "target",
            "node_modules",
        ]
    )
    exclude_patterns: list[str] = field(default_factory=list)
    allow_hidden_files: bool = False
    follow_symlinks: bool = False
    max_file_size_mb: float = 10.0

    # Reading
    encoding: str = "utf-8"

    # Counting
    class_count_mode: ClassCountMode = "declaration"

    # Output control
    output_format: OutputFormat = "text"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for name in ("extensions", "exclude_dirs", "exclude_patterns"):
            value = getattr(self, name)
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise InvalidConfigError(name, value, "must be a list of strings")

        if not self.extensions:
            raise InvalidConfigError("extensions", self.extensions, "must not be empty")
        for ext in self.extensions:
            if not ext.startswith("."):
                raise InvalidConfigError("extensions", ext, "must start with '.'")

        if self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")

        if self.class_count_mode not in _CLASS_COUNT_MODES:
            raise InvalidConfigError(
                "class_count_mode", self.class_count_mode, f"expected {' or '.join(_CLASS_COUNT_MODES)}"
            )
        if self.output_format not in _OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format", self.output_format, f"expected {' or '.join(_OUTPUT_FORMATS)}"
            )
        if self.verbosity not in _VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(_VERBOSITIES)}"
            )

        try:
            "".encode(self.encoding)
        except LookupError:
            raise InvalidConfigError("encoding", self.encoding, "unknown codec")

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


def load_config(config_file: Optional[Path] = None, **overrides) -> StatisticConfig:
    """Load configuration with project discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep file values.

    Returns:
        Validated StatisticConfig instance

    Raises:
        ConfigurationError: If a config file is missing, unreadable or has
            unknown keys
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    # Convert verbosity boolean flags to string
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return StatisticConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file and return its top-level table."""
    with open(path, "rb") as f:
        return tomllib.load(f)


# Default configuration (singleton)
default_config = StatisticConfig()
