"""Syntax models for parsed source files.

The visitor reduces a syntax tree to a flat sequence of declaration events:
    - ClassSeen: a class-like declaration
    - MethodSeen: a method or constructor, with its name and text length
    - FieldSeen: a single field, with its name length

FileSyntax bundles the events of one file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class NodeKind(Enum):
    """Declaration kind of a syntax node."""

    CLASS = "class"
    METHOD = "method"
    FIELD = "field"
    OTHER = "other"


@dataclass(frozen=True)
class ClassSeen:
    """A class, interface, enum, record or annotation type declaration."""

    name: str


@dataclass(frozen=True)
class MethodSeen:
    """A method-like declaration.

    Attributes:
        name: Method name
        name_length: Length of the name in characters
        body_length: Length of the whole declaration text in characters
            (modifiers, signature and body)
    """

    name: str
    name_length: int
    body_length: int


@dataclass(frozen=True)
class FieldSeen:
    """A single field; ``int a, b;`` produces two."""

    name: str
    name_length: int


SyntaxEvent = Union[ClassSeen, MethodSeen, FieldSeen]


@dataclass
class FileSyntax:
    """Declaration events extracted from one file.

    Attributes:
        path: File path (relative to the analysis root, POSIX separators)
        language: Detected language
        events: Events in pre-order of the syntax tree
    """

    path: str
    language: str
    events: list[SyntaxEvent] = field(default_factory=list)

    @property
    def classes(self) -> list[ClassSeen]:
        return [e for e in self.events if isinstance(e, ClassSeen)]

    @property
    def methods(self) -> list[MethodSeen]:
        return [e for e in self.events if isinstance(e, MethodSeen)]

    @property
    def fields(self) -> list[FieldSeen]:
        return [e for e in self.events if isinstance(e, FieldSeen)]
