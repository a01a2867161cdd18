"""Typed top-level statements and type expressions handed over by the analyzer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class ConstructorType:
    """A named type, optionally qualified by module and applied to arguments."""

    name: str
    module: Optional[str] = None
    args: Tuple["TypeExpr", ...] = ()


@dataclass(frozen=True)
class FunctionType:
    """A function type such as ``fn(Int, String) -> Bool``."""

    args: Tuple["TypeExpr", ...]
    return_type: "TypeExpr"


@dataclass(frozen=True)
class VarType:
    """A type variable."""

    name: str


@dataclass(frozen=True)
class TupleType:
    elements: Tuple["TypeExpr", ...]


@dataclass(frozen=True)
class HoleType:
    """A discarded type position, written as its name (usually ``_``)."""

    name: str = "_"


TypeExpr = Union[ConstructorType, FunctionType, VarType, TupleType, HoleType]


@dataclass(frozen=True)
class FunctionStatement:
    name: str
    public: bool = False
    doc: Optional[str] = None


@dataclass(frozen=True)
class ExternalFunctionStatement:
    """A function implemented in the host runtime."""

    name: str
    public: bool = False
    doc: Optional[str] = None
    module: str = ""
    function: str = ""


@dataclass(frozen=True)
class ExternalTypeStatement:
    """An opaque type whose representation lives outside the language."""

    name: str
    public: bool = False
    doc: Optional[str] = None
    args: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CustomTypeStatement:
    name: str
    public: bool = False
    doc: Optional[str] = None
    args: Tuple[str, ...] = ()
    constructors: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TypeAliasStatement:
    alias: str
    resolved_type: TypeExpr
    public: bool = False
    doc: Optional[str] = None
    args: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ImportStatement:
    module: Tuple[str, ...]


@dataclass(frozen=True)
class ConstantStatement:
    name: str
    public: bool = False
    doc: Optional[str] = None


Statement = Union[
    FunctionStatement,
    ExternalFunctionStatement,
    ExternalTypeStatement,
    CustomTypeStatement,
    TypeAliasStatement,
    ImportStatement,
    ConstantStatement,
]


__all__ = [
    "ConstantStatement",
    "ConstructorType",
    "CustomTypeStatement",
    "ExternalFunctionStatement",
    "ExternalTypeStatement",
    "FunctionStatement",
    "FunctionType",
    "HoleType",
    "ImportStatement",
    "Statement",
    "TupleType",
    "TypeAliasStatement",
    "TypeExpr",
    "VarType",
]
