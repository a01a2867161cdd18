"""Core data models shared across docsite components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import ClassVar, List, Optional, Tuple, Union

from .ast import Statement, TypeExpr


class ModuleOrigin(str, Enum):
    """Where a module comes from; only project sources are documented."""

    SRC = "src"
    DEPENDENCY = "dependency"


@dataclass(frozen=True)
class ModuleArtifact:
    """An analysed module as produced by the type checker."""

    name: Tuple[str, ...]
    origin: ModuleOrigin = ModuleOrigin.SRC
    statements: Tuple[Statement, ...] = ()
    doc: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Module name must contain at least one segment")

    @property
    def qualified_name(self) -> str:
        return "/".join(self.name)


@dataclass(frozen=True)
class Function:
    name: str
    doc: Optional[str] = None


@dataclass(frozen=True)
class ExternalType:
    name: str
    doc: Optional[str] = None
    type_params: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CustomType:
    name: str
    doc: Optional[str] = None


@dataclass(frozen=True)
class TypeAlias:
    name: str
    aliased_type: TypeExpr
    doc: Optional[str] = None
    type_params: Tuple[str, ...] = ()


Declaration = Union[Function, ExternalType, CustomType, TypeAlias]


@dataclass(frozen=True)
class RenderedDeclaration:
    """A declaration ready for the page template."""

    name: str
    signature_text: str
    documentation_html: str


@dataclass(frozen=True)
class Link:
    """Navigation entry; ``path`` is relative to the site root, ``""`` is the index."""

    name: str
    path: str


@dataclass(frozen=True)
class OutputFile:
    path: Path
    text: str


@dataclass
class PageContext:
    """Fields shared by every rendered page."""

    template_name: ClassVar[str] = ""

    unnest: str
    page_title: str
    project_name: str
    project_version: str
    pages: List[Link]
    links: List[Link]
    modules: List[Link]


@dataclass
class IndexPageContext(PageContext):
    template_name: ClassVar[str] = "documentation_page.html"

    content: str = ""


@dataclass
class ModulePageContext(PageContext):
    template_name: ClassVar[str] = "documentation_module.html"

    module_name: str = ""
    documentation: str = ""
    functions: List[RenderedDeclaration] = field(default_factory=list)
    types: List[RenderedDeclaration] = field(default_factory=list)


__all__ = [
    "CustomType",
    "Declaration",
    "ExternalType",
    "Function",
    "IndexPageContext",
    "Link",
    "ModuleArtifact",
    "ModuleOrigin",
    "ModulePageContext",
    "OutputFile",
    "PageContext",
    "RenderedDeclaration",
    "TypeAlias",
]
