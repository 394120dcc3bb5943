"""Tree-sitter parser wrapper.

Provides a single parsing interface over the registered grammars.

Usage:
    parser = TreeSitterParser()
    tree = parser.parse(code_bytes, "java")
"""

from __future__ import annotations

from types import ModuleType
from typing import Any

import tree_sitter
import tree_sitter_java

from ..exceptions import UnsupportedLanguageError
from ..logging_config import get_logger

logger = get_logger(__name__)

# Language name -> grammar module
_LANGUAGE_MODULES: dict[str, ModuleType] = {
    "java": tree_sitter_java,
}


def get_supported_languages() -> list[str]:
    """Get list of languages with installed grammars."""
    return list(_LANGUAGE_MODULES.keys())


class TreeSitterParser:
    """Wrapper around tree-sitter for multi-language parsing."""

    def __init__(self) -> None:
        """Initialize one parser per registered grammar."""
        self._parsers: dict[str, tree_sitter.Parser] = {}
        self._languages: dict[str, tree_sitter.Language] = {}

        for lang_name, lang_module in _LANGUAGE_MODULES.items():
            # Some modules use language_<name>() instead of language()
            lang_fn = getattr(lang_module, f"language_{lang_name}", None)
            if lang_fn is None:
                lang_fn = lang_module.language

            # tree-sitter >= 0.23 returns PyCapsule; wrap in Language()
            lang_obj = tree_sitter.Language(lang_fn())
            self._parsers[lang_name] = tree_sitter.Parser(lang_obj)
            self._languages[lang_name] = lang_obj
            logger.debug(f"Loaded tree-sitter grammar for {lang_name}")

    def parse(self, code: bytes, language: str) -> Any:
        """Parse code and return syntax tree.

        Args:
            code: Source code as bytes
            language: Language name (e.g., "java")

        Returns:
            tree_sitter.Tree. The tree may contain ERROR or MISSING nodes;
            check ``tree.root_node.has_error``.

        Raises:
            UnsupportedLanguageError: If no grammar is registered for language
        """
        parser = self._parsers.get(language)
        if parser is None:
            raise UnsupportedLanguageError(language, get_supported_languages())
        return parser.parse(code)

    def is_language_supported(self, language: str) -> bool:
        """Check if a language is supported."""
        return language in self._parsers
