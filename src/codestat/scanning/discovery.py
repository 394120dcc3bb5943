"""Source file discovery.

Walks the analysis root once, up front, and returns the files to analyze in
a stable order: directories and files are visited sorted by name, the files
of a directory before those of its subdirectories.
"""

from __future__ import annotations

import os
from fnmatch import fnmatch
from pathlib import Path

from ..config import StatisticConfig
from ..exceptions import InvalidPathError
from ..logging_config import get_logger

logger = get_logger(__name__)


def validate_root(root: Path) -> Path:
    """Check that root is an existing, readable directory.

    Raises:
        InvalidPathError: If root is missing, not a directory or unreadable
    """
    if not root.exists():
        raise InvalidPathError(root, "does not exist")
    if not root.is_dir():
        raise InvalidPathError(root, "not a directory")
    if not os.access(root, os.R_OK | os.X_OK):
        raise InvalidPathError(root, "permission denied")
    try:
        with os.scandir(root):
            pass
    except OSError as e:
        raise InvalidPathError(root, e.strerror or str(e))
    return root


def discover_files(root: Path, config: StatisticConfig) -> list[Path]:
    """List the source files under root.

    Args:
        root: Analysis root directory
        config: Discovery settings (extensions, exclusions, limits)

    Returns:
        File paths in discovery order

    Raises:
        InvalidPathError: If root is missing, not a directory or unreadable
    """
    root = validate_root(Path(root))
    extensions = {ext.lower() for ext in config.extensions}
    excluded_dirs = set(config.exclude_dirs)
    files: list[Path] = []
    seen_dirs: set[str] = set()

    def _on_walk_error(error: OSError) -> None:
        logger.warning(f"Skipping unreadable directory {error.filename}: {error.strerror}")

    for dirpath, dirnames, filenames in os.walk(
        root, onerror=_on_walk_error, followlinks=config.follow_symlinks
    ):
        if config.follow_symlinks:
            # Symlink cycles
            real = os.path.realpath(dirpath)
            if real in seen_dirs:
                dirnames[:] = []
                continue
            seen_dirs.add(real)

        # Prune in place so os.walk does not descend
        dirnames[:] = sorted(
            d for d in dirnames if d not in excluded_dirs and _visible(d, config)
        )

        current = Path(dirpath)
        for filename in sorted(filenames):
            if not _visible(filename, config):
                continue
            filepath = current / filename
            if filepath.suffix.lower() not in extensions:
                continue
            if _should_skip(filepath, root, config):
                continue
            files.append(filepath)

    logger.debug(f"Discovered {len(files)} source files under {root}")
    return files


def relative_name(filepath: Path, root: Path) -> str:
    """Root-relative POSIX path used to identify a file in reports."""
    return filepath.relative_to(root).as_posix()


def _visible(name: str, config: StatisticConfig) -> bool:
    return config.allow_hidden_files or not name.startswith(".")


def _should_skip(filepath: Path, root: Path, config: StatisticConfig) -> bool:
    rel_path = relative_name(filepath, root)
    if any(fnmatch(rel_path, pattern) for pattern in config.exclude_patterns):
        logger.debug(f"Excluded by pattern: {rel_path}")
        return True

    try:
        size = filepath.stat().st_size
    except OSError:
        # Left for the extractor to report as unreadable
        return False
    if size > config.max_file_size_bytes:
        logger.info(f"Skipping {rel_path}: {size} bytes exceeds max_file_size_mb")
        return True
    return False
