"""Sample analysed modules shared across tests."""

from __future__ import annotations

from typing import List

from docsite.ast import (
    ConstantStatement,
    ConstructorType,
    CustomTypeStatement,
    ExternalTypeStatement,
    FunctionStatement,
    ImportStatement,
    TupleType,
    TypeAliasStatement,
    VarType,
)
from docsite.models import ModuleArtifact, ModuleOrigin


def shapes_modules() -> List[ModuleArtifact]:
    """Two source modules, ``shapes`` and ``shapes/util``, plus a dependency."""
    shapes = ModuleArtifact(
        name=("shapes",),
        statements=(
            ImportStatement(module=("gleam", "float")),
            CustomTypeStatement(
                name="Circle",
                public=True,
                doc="A circle with a *radius*.",
                constructors=("Circle",),
            ),
            ExternalTypeStatement(name="Opaque", public=True, args=("a",)),
            CustomTypeStatement(name="Hidden", public=False),
        ),
    )
    util = ModuleArtifact(
        name=("shapes", "util"),
        statements=(
            FunctionStatement(name="area", public=True, doc="Area of a shape."),
            FunctionStatement(name="helper", public=False),
            ConstantStatement(name="pi", public=True),
        ),
    )
    dependency = ModuleArtifact(
        name=("gleam", "float"),
        origin=ModuleOrigin.DEPENDENCY,
        statements=(FunctionStatement(name="floor", public=True),),
    )
    return [shapes, dependency, util]


def pair_alias() -> TypeAliasStatement:
    return TypeAliasStatement(
        alias="Pair",
        resolved_type=TupleType((VarType("a"), VarType("b"))),
        public=True,
        args=("a", "b"),
    )


def result_alias() -> TypeAliasStatement:
    return TypeAliasStatement(
        alias="Outcome",
        resolved_type=ConstructorType(
            name="Result", args=(VarType("a"), ConstructorType(name="String"))
        ),
        public=True,
        args=("a",),
    )


__all__ = ["pair_alias", "result_alias", "shapes_modules"]
