"""Source discovery, parsing and declaration visiting."""

from .discovery import discover_files, relative_name, validate_root
from .languages import JAVA, LANGUAGES, LanguageConfig, detect_language, get_language_config
from .syntax import ClassSeen, FieldSeen, FileSyntax, MethodSeen, NodeKind, SyntaxEvent
from .syntax_extractor import SyntaxExtractor
from .treesitter_parser import TreeSitterParser, get_supported_languages
from .visitor import SyntaxVisitor

__all__ = [
    # Discovery
    "discover_files",
    "relative_name",
    "validate_root",
    # Language config
    "LanguageConfig",
    "LANGUAGES",
    "JAVA",
    "get_language_config",
    "detect_language",
    # Events
    "NodeKind",
    "ClassSeen",
    "MethodSeen",
    "FieldSeen",
    "SyntaxEvent",
    "FileSyntax",
    # Parsing
    "TreeSitterParser",
    "get_supported_languages",
    "SyntaxVisitor",
    "SyntaxExtractor",
]
