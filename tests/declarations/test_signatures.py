"""Tests for canonical signature formatting."""

from __future__ import annotations

import pytest

from docsite.ast import ConstructorType, FunctionType, TupleType, VarType
from docsite.declarations import SignatureSettings, format_signature, signature_for
from docsite.models import CustomType, ExternalType, Function, TypeAlias

PAIR = TypeAlias(
    name="Pair",
    aliased_type=TupleType((VarType("a"), VarType("b"))),
    type_params=("a", "b"),
)

CONNECTION = ExternalType(
    name="Connection",
    type_params=("request_identifier", "response_identifier", "session_identifier"),
)


def test_type_alias_fits_on_one_line() -> None:
    assert format_signature(PAIR) == "pub type Pair(a, b) = #(a, b)"


def test_external_type_with_params_fits_on_one_line() -> None:
    decl = ExternalType(name="Opaque", type_params=("a",))
    assert format_signature(decl) == "pub external type Opaque(a)"


def test_external_type_without_params() -> None:
    assert format_signature(ExternalType(name="Socket")) == "pub external type Socket"


def test_over_width_external_type_puts_one_param_per_line() -> None:
    assert format_signature(CONNECTION) == (
        "pub external type Connection(\n"
        "  request_identifier,\n"
        "  response_identifier,\n"
        "  session_identifier,\n"
        ")"
    )


def test_over_width_external_type_uses_given_indent() -> None:
    assert format_signature(CONNECTION, indent=4) == (
        "pub external type Connection(\n"
        "    request_identifier,\n"
        "    response_identifier,\n"
        "    session_identifier,\n"
        ")"
    )


def test_type_alias_breaks_before_aliased_type_when_narrow() -> None:
    assert format_signature(PAIR, width=20) == "pub type Pair(a, b) =\n  #(a, b)"
    assert format_signature(PAIR, width=20, indent=4) == "pub type Pair(a, b) =\n    #(a, b)"


def test_long_type_alias_moves_aliased_type_to_next_line() -> None:
    decl = TypeAlias(
        name="Handler",
        aliased_type=FunctionType(
            args=(ConstructorType("Request"), ConstructorType("Response")),
            return_type=ConstructorType(
                "Result", args=(ConstructorType("Nil"), ConstructorType("HandlerError"))
            ),
        ),
    )
    assert format_signature(decl) == (
        "pub type Handler =\n  fn(Request, Response) -> Result(Nil, HandlerError)"
    )


def test_type_alias_with_constructor() -> None:
    decl = TypeAlias(
        name="Outcome",
        aliased_type=ConstructorType("Result", args=(VarType("a"), ConstructorType("String"))),
        type_params=("a",),
    )
    assert format_signature(decl) == "pub type Outcome(a) = Result(a, String)"


def test_signature_is_deterministic() -> None:
    assert format_signature(CONNECTION) == format_signature(CONNECTION)
    assert format_signature(PAIR, width=20) == format_signature(PAIR, width=20)


def test_format_signature_rejects_other_declarations() -> None:
    with pytest.raises(TypeError):
        format_signature(CustomType(name="Circle"))  # type: ignore[arg-type]


def test_signature_for_functions_and_custom_types_is_empty() -> None:
    assert signature_for(Function(name="area")) == ""
    assert signature_for(CustomType(name="Circle")) == ""


def test_signature_for_uses_settings() -> None:
    assert signature_for(PAIR, SignatureSettings(width=20)) == "pub type Pair(a, b) =\n  #(a, b)"
    assert signature_for(PAIR) == "pub type Pair(a, b) = #(a, b)"
