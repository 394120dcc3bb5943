"""Language registry.

Each LanguageConfig names the file extensions of a language and maps its
tree-sitter node types onto the declaration kinds the visitor counts.
Adding a language is a matter of adding a grammar to the parser and an
entry here.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class LanguageConfig:
    """Node-type tables for one language.

    Attributes:
        name: Language name, also the grammar key in TreeSitterParser
        extensions: File suffixes (lowercase, with dot)
        class_node_types: Class-like declarations
        method_node_types: Method-like declarations, counted with their full text
        field_node_types: Field declarations. A node holding
            ``declarator_node_type`` children yields one field per declarator,
            otherwise the node itself is a single field named by its
            ``name`` child.
        declarator_node_type: Child node carrying one field name
        comment_node_types: Comments. A run of them directly in front of a
            method belongs to that method's text.
    """

    name: str
    extensions: tuple[str, ...]
    class_node_types: frozenset[str]
    method_node_types: frozenset[str]
    field_node_types: frozenset[str]
    declarator_node_type: str = "variable_declarator"
    comment_node_types: frozenset[str] = frozenset()


JAVA = LanguageConfig(
    name="java",
    extensions=(".java",),
    class_node_types=frozenset(
        {
            "class_declaration",
            "interface_declaration",
            "enum_declaration",
            "record_declaration",
            "annotation_type_declaration",
        }
    ),
    method_node_types=frozenset(
        {
            "method_declaration",
            "constructor_declaration",
            "compact_constructor_declaration",
            "annotation_type_element_declaration",
        }
    ),
    field_node_types=frozenset(
        {
            "field_declaration",
            "constant_declaration",  # interface constants
            "enum_constant",
        }
    ),
    comment_node_types=frozenset({"line_comment", "block_comment"}),
)


LANGUAGES: dict[str, LanguageConfig] = {
    JAVA.name: JAVA,
}

_EXTENSION_TO_LANGUAGE: dict[str, str] = {
    ext: cfg.name for cfg in LANGUAGES.values() for ext in cfg.extensions
}


def get_language_config(name: str) -> LanguageConfig:
    """Look up a language by name.

    Raises:
        KeyError: If the language is not registered
    """
    return LANGUAGES[name]


def detect_language(filepath: Union[Path, str]) -> str:
    """Detect language from file extension.

    Returns:
        Language name (e.g., "java") or "unknown"
    """
    ext = Path(filepath).suffix.lower()
    return _EXTENSION_TO_LANGUAGE.get(ext, "unknown")
