"""Declaration visitor over tree-sitter syntax trees.

Every node is classified into a NodeKind through the language's node-type
tables, then the tree is walked with an explicit worklist in pre-order.
Members of nested, local and anonymous classes are reached like any other
node, so each declaration is reported exactly once.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from ..exceptions import ParsingError
from ..logging_config import get_logger
from .languages import JAVA, LanguageConfig
from .syntax import ClassSeen, FieldSeen, MethodSeen, NodeKind, SyntaxEvent
from .treesitter_parser import TreeSitterParser

logger = get_logger(__name__)


def _node_text(node: Any) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


class SyntaxVisitor:
    """Turns source text into ClassSeen / MethodSeen / FieldSeen events.

    Usage:
        visitor = SyntaxVisitor()
        events = visitor.visit(source)   # [] if the source does not parse
    """

    def __init__(
        self,
        language: LanguageConfig = JAVA,
        parser: Optional[TreeSitterParser] = None,
    ) -> None:
        self.language = language
        self._parser = parser or TreeSitterParser()

    def classify(self, node: Any) -> NodeKind:
        """Map a syntax node to its declaration kind."""
        node_type = node.type
        if node_type in self.language.class_node_types:
            return NodeKind.CLASS
        if node_type in self.language.method_node_types:
            return NodeKind.METHOD
        if node_type in self.language.field_node_types:
            return NodeKind.FIELD
        return NodeKind.OTHER

    def parse(self, content: str, path: str = "<source>") -> list[SyntaxEvent]:
        """Parse source text and return its declaration events.

        Raises:
            ParsingError: If the tree contains ERROR or MISSING nodes
        """
        tree = self._parser.parse(content.encode("utf-8"), self.language.name)
        root = tree.root_node
        if root.has_error:
            raise ParsingError(path, self.language.name, _describe_error(root))
        return list(self.walk(root))

    def visit(self, content: str) -> list[SyntaxEvent]:
        """Like parse(), but malformed input yields no events instead of raising."""
        try:
            return self.parse(content)
        except ParsingError as e:
            logger.debug(str(e))
            return []

    def walk(self, root: Any) -> Iterator[SyntaxEvent]:
        """Yield events for every declaration under root, in pre-order."""
        source = root.text or b""
        worklist = [root]
        while worklist:
            node = worklist.pop()
            kind = self.classify(node)

            if kind is NodeKind.CLASS:
                yield ClassSeen(name=_node_text(node.child_by_field_name("name")))
            elif kind is NodeKind.METHOD:
                name = _node_text(node.child_by_field_name("name"))
                yield MethodSeen(
                    name=name,
                    name_length=len(name),
                    body_length=len(self._method_text(source, node)),
                )
            elif kind is NodeKind.FIELD:
                yield from self._fields(node)

            # Initializers and bodies may hold anonymous or local classes
            worklist.extend(reversed(node.named_children))

    def _method_text(self, source: bytes, node: Any) -> str:
        """Declaration text, including the comments directly in front of it.

        A comment that shares a line with the preceding code trails that
        code and is left out, as is anything behind it.
        """
        first = node
        prev = node.prev_named_sibling
        while prev is not None and prev.type in self.language.comment_node_types:
            before = prev.prev_sibling
            if before is not None and before.end_point[0] == prev.start_point[0]:
                break
            first = prev
            prev = prev.prev_named_sibling
        return source[first.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def _fields(self, node: Any) -> Iterator[FieldSeen]:
        declarators = [
            child
            for child in node.named_children
            if child.type == self.language.declarator_node_type
        ]
        if not declarators:
            declarators = [node]
        for declarator in declarators:
            name = _node_text(declarator.child_by_field_name("name"))
            yield FieldSeen(name=name, name_length=len(name))


def _describe_error(root: Any) -> str:
    """Locate the first ERROR or MISSING node for the diagnostic."""
    worklist = [root]
    while worklist:
        node = worklist.pop()
        if node.type == "ERROR" or node.is_missing:
            line, column = node.start_point
            what = f"missing {node.type}" if node.is_missing else "syntax error"
            return f"{what} at line {line + 1}, column {column + 1}"
        worklist.extend(reversed([c for c in node.children if c.has_error or c.is_missing]))
    return "syntax error"
