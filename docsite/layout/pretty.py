"""A small Wadler-style document algebra with a flat-if-fits layout algorithm.

Documents are immutable trees built from text, breaks, nesting, groups and
concatenation.  ``format`` renders a document into text no wider than the
requested limit where possible: each group is laid out flat when its own
contents fit in the space left on the current line, otherwise every break
directly inside it becomes a newline.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Iterable, List, Tuple, Union


class Mode(Enum):
    BROKEN = "broken"
    UNBROKEN = "unbroken"


class Document:
    """Base class for layout nodes with fluent combinators."""

    def append(self, other: Union["Document", str]) -> "Document":
        return Concat((self, to_doc(other)))

    def group(self) -> "Document":
        return Group(self)

    def nest(self, indent: int) -> "Document":
        return Nest(indent, self)


@dataclass(frozen=True)
class Text(Document):
    text: str


@dataclass(frozen=True)
class Break(Document):
    """Renders ``unbroken`` when flat, or ``broken`` followed by a newline."""

    broken: str
    unbroken: str


@dataclass(frozen=True)
class Nest(Document):
    indent: int
    doc: Document


@dataclass(frozen=True)
class Group(Document):
    doc: Document


@dataclass(frozen=True)
class Concat(Document):
    docs: Tuple[Document, ...]


def to_doc(value: Union[Document, str]) -> Document:
    if isinstance(value, Document):
        return value
    return Text(value)


def nil() -> Document:
    return Concat(())


def line() -> Document:
    """A space when flat, a newline when broken."""
    return Break("", " ")


def break_(broken: str, unbroken: str) -> Document:
    return Break(broken, unbroken)


def concat(docs: Iterable[Union[Document, str]]) -> Document:
    return Concat(tuple(to_doc(doc) for doc in docs))


def join(docs: Iterable[Union[Document, str]], separator: Document) -> Document:
    parts: List[Document] = []
    for index, doc in enumerate(docs):
        if index:
            parts.append(separator)
        parts.append(to_doc(doc))
    return Concat(tuple(parts))


def format(limit: int, doc: Document) -> str:  # noqa: A001 - mirrors the layout engine API
    """Render ``doc`` into text, breaking groups that do not fit in ``limit`` columns."""
    buffer: List[str] = []
    width = 0
    pending: Deque[Tuple[int, Mode, Document]] = deque([(0, Mode.BROKEN, doc)])

    while pending:
        indent, mode, node = pending.popleft()
        if isinstance(node, Text):
            buffer.append(node.text)
            width += len(node.text)
        elif isinstance(node, Break):
            if mode is Mode.UNBROKEN:
                buffer.append(node.unbroken)
                width += len(node.unbroken)
            else:
                buffer.append(node.broken)
                buffer.append("\n")
                buffer.append(" " * indent)
                width = indent
        elif isinstance(node, Nest):
            pending.appendleft((indent + node.indent, mode, node.doc))
        elif isinstance(node, Group):
            if mode is Mode.UNBROKEN or _fits(limit - width, indent, node.doc):
                pending.appendleft((indent, Mode.UNBROKEN, node.doc))
            else:
                pending.appendleft((indent, Mode.BROKEN, node.doc))
        elif isinstance(node, Concat):
            for child in reversed(node.docs):
                pending.appendleft((indent, mode, child))
        else:  # pragma: no cover - closed set of node types
            raise TypeError(f"Unknown document node: {node!r}")

    return "".join(buffer)


def _fits(limit: int, indent: int, doc: Document) -> bool:
    pending: Deque[Tuple[int, Mode, Document]] = deque([(indent, Mode.UNBROKEN, doc)])
    while True:
        if limit < 0:
            return False
        if not pending:
            return True
        indent, mode, node = pending.popleft()
        if isinstance(node, Text):
            limit -= len(node.text)
        elif isinstance(node, Break):
            if mode is Mode.BROKEN:
                return True
            limit -= len(node.unbroken)
        elif isinstance(node, Nest):
            pending.appendleft((indent + node.indent, mode, node.doc))
        elif isinstance(node, Group):
            pending.appendleft((indent, Mode.UNBROKEN, node.doc))
        elif isinstance(node, Concat):
            for child in reversed(node.docs):
                pending.appendleft((indent, mode, child))


__all__ = [
    "Break",
    "Concat",
    "Document",
    "Group",
    "Mode",
    "Nest",
    "Text",
    "break_",
    "concat",
    "format",
    "join",
    "line",
    "nil",
    "to_doc",
]
