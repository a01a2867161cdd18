"""Canonical, width-bounded signatures for type-level declarations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..layout import pretty
from ..layout.source import params_doc, type_doc
from ..models import CustomType, Declaration, ExternalType, Function, TypeAlias

MAX_COLUMNS = 65
INDENT = 2


@dataclass(frozen=True)
class SignatureSettings:
    """Layout limits applied to every signature in a run."""

    width: int = MAX_COLUMNS
    indent: int = INDENT


def format_signature(
    decl: Union[ExternalType, TypeAlias],
    width: int = MAX_COLUMNS,
    indent: int = INDENT,
) -> str:
    """Render ``decl`` as source, wrapping argument lists that exceed ``width``."""
    if isinstance(decl, ExternalType):
        doc = (
            pretty.to_doc("pub external type ")
            .append(decl.name)
            .append(params_doc(decl.type_params, indent))
        )
    elif isinstance(decl, TypeAlias):
        doc = (
            pretty.to_doc("pub type ")
            .append(decl.name)
            .append(params_doc(decl.type_params, indent))
            .append(" =")
            .append(
                pretty.line()
                .append(type_doc(decl.aliased_type, indent))
                .group()
                .nest(indent)
            )
        )
    else:
        raise TypeError(f"No signature layout for {type(decl).__name__}")
    return pretty.format(width, doc)


def signature_for(decl: Declaration, settings: SignatureSettings | None = None) -> str:
    """Signature text for any declaration; functions and custom types have none yet."""
    settings = settings or SignatureSettings()
    if isinstance(decl, (Function, CustomType)):
        return ""
    return format_signature(decl, width=settings.width, indent=settings.indent)


__all__ = ["INDENT", "MAX_COLUMNS", "SignatureSettings", "format_signature", "signature_for"]
