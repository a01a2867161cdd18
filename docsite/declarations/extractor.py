"""Pick the exported declarations out of a module's statements."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..ast import (
    CustomTypeStatement,
    ExternalFunctionStatement,
    ExternalTypeStatement,
    FunctionStatement,
    Statement,
    TypeAliasStatement,
)
from ..models import CustomType, Declaration, ExternalType, Function, TypeAlias


def extract(statements: Iterable[Statement]) -> List[Declaration]:
    """Return public declarations in source order."""
    declarations: List[Declaration] = []
    for statement in statements:
        declaration = _declaration(statement)
        if declaration is not None:
            declarations.append(declaration)
    return declarations


def functions(declarations: Iterable[Declaration]) -> List[Function]:
    return [decl for decl in declarations if isinstance(decl, Function)]


def types(declarations: Iterable[Declaration]) -> List[Declaration]:
    return [
        decl
        for decl in declarations
        if isinstance(decl, (ExternalType, CustomType, TypeAlias))
    ]


def _declaration(statement: Statement) -> Optional[Declaration]:
    if not getattr(statement, "public", False):
        return None
    if isinstance(statement, (FunctionStatement, ExternalFunctionStatement)):
        return Function(name=statement.name, doc=statement.doc)
    if isinstance(statement, ExternalTypeStatement):
        return ExternalType(
            name=statement.name, doc=statement.doc, type_params=tuple(statement.args)
        )
    if isinstance(statement, CustomTypeStatement):
        return CustomType(name=statement.name, doc=statement.doc)
    if isinstance(statement, TypeAliasStatement):
        return TypeAlias(
            name=statement.alias,
            aliased_type=statement.resolved_type,
            doc=statement.doc,
            type_params=tuple(statement.args),
        )
    return None


__all__ = ["extract", "functions", "types"]
