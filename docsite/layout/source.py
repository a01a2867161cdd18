"""Source-like layout for argument lists and type expressions."""

from __future__ import annotations

from typing import Iterable, List

from ..ast import ConstructorType, FunctionType, HoleType, TupleType, TypeExpr, VarType
from .pretty import Document, break_, join, nil, to_doc

INDENT = 2


def wrap_args(args: Iterable[Document], indent: int = INDENT) -> Document:
    """Parenthesised, comma-separated arguments: all inline or one per line.

    When broken, each argument sits on its own line ``indent`` columns deeper
    and is followed by a comma; the closing paren returns to the outer indent.
    """
    items: List[Document] = list(args)
    if not items:
        return to_doc("()")
    return (
        break_("(", "(")
        .append(join(items, break_(",", ", ")))
        .nest(indent)
        .append(break_(",", ""))
        .append(")")
        .group()
    )


def type_doc(expr: TypeExpr, indent: int = INDENT) -> Document:
    """Layout for a type expression as it would be written in source."""
    if isinstance(expr, ConstructorType):
        head = f"{expr.module}.{expr.name}" if expr.module else expr.name
        if not expr.args:
            return to_doc(head)
        return to_doc(head).append(
            wrap_args((type_doc(arg, indent) for arg in expr.args), indent)
        )
    if isinstance(expr, FunctionType):
        return (
            to_doc("fn")
            .append(wrap_args((type_doc(arg, indent) for arg in expr.args), indent))
            .append(" -> ")
            .append(type_doc(expr.return_type, indent))
        )
    if isinstance(expr, TupleType):
        return to_doc("#").append(
            wrap_args((type_doc(element, indent) for element in expr.elements), indent)
        )
    if isinstance(expr, (VarType, HoleType)):
        return to_doc(expr.name)
    raise TypeError(f"Unsupported type expression: {expr!r}")


def params_doc(params: Iterable[str], indent: int = INDENT) -> Document:
    """Type-parameter list, or nothing when there are no parameters."""
    items = [to_doc(param) for param in params]
    if not items:
        return nil()
    return wrap_args(items, indent)


__all__ = ["INDENT", "params_doc", "type_doc", "wrap_args"]
