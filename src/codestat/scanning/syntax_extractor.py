"""SyntaxExtractor: produces FileSyntax for discovered files.

Reads each file, picks the visitor for its language and returns the
declaration events. Files that cannot be read or parsed yield None and are
counted as skipped; they never raise.

Usage:
    extractor = SyntaxExtractor()
    syntax = extractor.extract(file_path, root_dir)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..exceptions import AnalysisError, FileAccessError, UnsupportedLanguageError
from ..logging_config import get_logger
from .discovery import relative_name
from .languages import LANGUAGES, detect_language
from .syntax import FileSyntax
from .treesitter_parser import TreeSitterParser
from .visitor import SyntaxVisitor

logger = get_logger(__name__)


class SyntaxExtractor:
    """Extracts FileSyntax from source files.

    Attributes:
        parsed_count: Files turned into FileSyntax
        skipped_count: Files that could not be read or parsed
        total_count: Total files processed
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize extractor with one shared tree-sitter parser.

        Args:
            encoding: Source file encoding; undecodable bytes are replaced
        """
        self.encoding = encoding
        parser = TreeSitterParser()
        self._visitors = {
            name: SyntaxVisitor(language=cfg, parser=parser)
            for name, cfg in LANGUAGES.items()
            if parser.is_language_supported(name)
        }
        self.parsed_count = 0
        self.skipped_count = 0
        self.total_count = 0

    def extract(self, file_path: Path, root_dir: Path) -> Optional[FileSyntax]:
        """Extract FileSyntax from a single file.

        Args:
            file_path: Path to the file
            root_dir: Root directory for relative path calculation

        Returns:
            FileSyntax, or None if the file cannot be read or parsed
        """
        self.total_count += 1
        rel_path = relative_name(file_path, root_dir)

        try:
            syntax = self._extract(file_path, rel_path)
        except AnalysisError as e:
            self.skipped_count += 1
            logger.warning(f"Skipping {rel_path}: {e}")
            return None

        self.parsed_count += 1
        logger.debug(
            f"{rel_path}: {len(syntax.classes)} classes, "
            f"{len(syntax.methods)} methods, {len(syntax.fields)} fields"
        )
        return syntax

    def _extract(self, file_path: Path, rel_path: str) -> FileSyntax:
        language = detect_language(file_path)
        visitor = self._visitors.get(language)
        if visitor is None:
            raise UnsupportedLanguageError(language, sorted(self._visitors))

        try:
            content = file_path.read_text(encoding=self.encoding, errors="replace")
        except OSError as e:
            raise FileAccessError(file_path, e.strerror or str(e))

        events = visitor.parse(content, rel_path)
        return FileSyntax(path=rel_path, language=language, events=events)

    @property
    def skip_rate(self) -> float:
        """Get current skip rate (0.0 to 1.0)."""
        if self.total_count == 0:
            return 0.0
        return self.skipped_count / self.total_count

    def reset_stats(self) -> None:
        """Reset extraction statistics."""
        self.parsed_count = 0
        self.skipped_count = 0
        self.total_count = 0
