"""Document layout engine and source renderers built on it."""

from .pretty import Document, break_, concat, format, join, line, nil, to_doc
from .source import INDENT, type_doc, wrap_args

__all__ = [
    "Document",
    "INDENT",
    "break_",
    "concat",
    "format",
    "join",
    "line",
    "nil",
    "to_doc",
    "type_doc",
    "wrap_args",
]
