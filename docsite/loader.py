"""Load analysed modules from a YAML or JSON manifest."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import yaml

from .ast import (
    ConstantStatement,
    ConstructorType,
    CustomTypeStatement,
    ExternalFunctionStatement,
    ExternalTypeStatement,
    FunctionStatement,
    FunctionType,
    HoleType,
    ImportStatement,
    Statement,
    TupleType,
    TypeAliasStatement,
    TypeExpr,
    VarType,
)
from .logging import get_logger
from .models import ModuleArtifact, ModuleOrigin

logger = get_logger("loader")


class ManifestError(RuntimeError):
    """Raised when the module manifest is malformed."""


def load_manifest(path: Path) -> List[ModuleArtifact]:
    """Read ``path`` and return its modules in manifest order."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Module manifest not found: {path}")
    text = path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text) if text.strip() else {}
    except yaml.YAMLError as exc:
        raise ManifestError(f"Failed to parse {path.name}: {exc}") from exc
    modules = parse_manifest(data)
    logger.debug("Loaded %d modules from %s", len(modules), path)
    return modules


def parse_manifest(data: Any) -> List[ModuleArtifact]:
    if data is None:
        return []
    if isinstance(data, list):
        entries = data
    elif isinstance(data, dict):
        entries = data.get("modules") or []
    else:
        raise ManifestError("Manifest must contain a mapping or a list of modules")
    if not isinstance(entries, list):
        raise ManifestError("`modules` must be a list")
    return [_module(entry, index) for index, entry in enumerate(entries)]


def _module(entry: Any, index: int) -> ModuleArtifact:
    if not isinstance(entry, dict):
        raise ManifestError(f"Module #{index} must be a mapping")
    name = _module_name(entry.get("name"))
    if not name:
        raise ManifestError(f"Module #{index} is missing a name")
    label = "/".join(name)

    origin_value = str(entry.get("origin") or ModuleOrigin.SRC.value).lower()
    try:
        origin = ModuleOrigin(origin_value)
    except ValueError as exc:
        raise ManifestError(f"Module {label}: unknown origin {origin_value!r}") from exc

    raw_statements = entry.get("statements") or []
    if not isinstance(raw_statements, list):
        raise ManifestError(f"Module {label}: `statements` must be a list")
    statements = tuple(
        _statement(raw, f"{label} statement #{position}")
        for position, raw in enumerate(raw_statements)
    )
    return ModuleArtifact(
        name=name,
        origin=origin,
        statements=statements,
        doc=_as_optional_str(entry.get("doc")),
    )


def _module_name(value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        return tuple(segment for segment in value.split("/") if segment)
    if isinstance(value, list):
        return tuple(str(segment) for segment in value if str(segment))
    return ()


def _statement(raw: Any, label: str) -> Statement:
    if not isinstance(raw, dict):
        raise ManifestError(f"{label} must be a mapping")
    kind = raw.get("kind")
    builder = _STATEMENT_BUILDERS.get(str(kind))
    if builder is None:
        raise ManifestError(f"{label}: unknown statement kind {kind!r}")
    return builder(raw, label)


def _require_name(raw: Dict[str, Any], label: str, *keys: str) -> str:
    for key in keys:
        value = raw.get(key)
        if isinstance(value, str) and value:
            return value
    raise ManifestError(f"{label}: missing `{keys[0]}`")


def _fn(raw: Dict[str, Any], label: str) -> Statement:
    return FunctionStatement(
        name=_require_name(raw, label, "name"),
        public=_public(raw, label),
        doc=_as_optional_str(raw.get("doc")),
    )


def _external_fn(raw: Dict[str, Any], label: str) -> Statement:
    return ExternalFunctionStatement(
        name=_require_name(raw, label, "name"),
        public=_public(raw, label),
        doc=_as_optional_str(raw.get("doc")),
        module=str(raw.get("module") or ""),
        function=str(raw.get("function") or ""),
    )


def _external_type(raw: Dict[str, Any], label: str) -> Statement:
    return ExternalTypeStatement(
        name=_require_name(raw, label, "name"),
        public=_public(raw, label),
        doc=_as_optional_str(raw.get("doc")),
        args=_as_str_tuple(raw.get("params")),
    )


def _custom_type(raw: Dict[str, Any], label: str) -> Statement:
    return CustomTypeStatement(
        name=_require_name(raw, label, "name"),
        public=_public(raw, label),
        doc=_as_optional_str(raw.get("doc")),
        args=_as_str_tuple(raw.get("params")),
        constructors=_as_str_tuple(raw.get("constructors")),
    )


def _type_alias(raw: Dict[str, Any], label: str) -> Statement:
    if "type" not in raw:
        raise ManifestError(f"{label}: type alias is missing `type`")
    return TypeAliasStatement(
        alias=_require_name(raw, label, "alias", "name"),
        resolved_type=_type_expr(raw["type"], label),
        public=_public(raw, label),
        doc=_as_optional_str(raw.get("doc")),
        args=_as_str_tuple(raw.get("params")),
    )


def _import(raw: Dict[str, Any], label: str) -> Statement:
    return ImportStatement(module=_module_name(raw.get("module")))


def _const(raw: Dict[str, Any], label: str) -> Statement:
    return ConstantStatement(
        name=_require_name(raw, label, "name"),
        public=_public(raw, label),
        doc=_as_optional_str(raw.get("doc")),
    )


_STATEMENT_BUILDERS: Dict[str, Callable[[Dict[str, Any], str], Statement]] = {
    "fn": _fn,
    "external_fn": _external_fn,
    "external_type": _external_type,
    "custom_type": _custom_type,
    "type_alias": _type_alias,
    "import": _import,
    "const": _const,
}


def _type_expr(raw: Any, label: str) -> TypeExpr:
    if not isinstance(raw, dict):
        raise ManifestError(f"{label}: type expressions must be mappings")
    kind = raw.get("kind")
    if kind == "constructor":
        return ConstructorType(
            name=_require_name(raw, label, "name"),
            module=_as_optional_str(raw.get("module")),
            args=_type_list(raw.get("args"), label),
        )
    if kind == "fn":
        if "return" not in raw:
            raise ManifestError(f"{label}: function type is missing `return`")
        return FunctionType(
            args=_type_list(raw.get("args"), label),
            return_type=_type_expr(raw["return"], label),
        )
    if kind == "var":
        return VarType(name=_require_name(raw, label, "name"))
    if kind == "tuple":
        return TupleType(elements=_type_list(raw.get("elements"), label))
    if kind == "hole":
        return HoleType(name=_as_optional_str(raw.get("name")) or "_")
    raise ManifestError(f"{label}: unknown type kind {kind!r}")


def _type_list(value: Any, label: str) -> Tuple[TypeExpr, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ManifestError(f"{label}: type arguments must be a list")
    return tuple(_type_expr(item, label) for item in value)


_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0"})


def _public(raw: Dict[str, Any], label: str) -> bool:
    value = raw.get("public")
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
    elif isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
    raise ManifestError(f"{label}: cannot read `public` value {value!r} as a boolean")


def _as_optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _as_str_tuple(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list):
        return tuple(str(item) for item in value if isinstance(item, (str, int)))
    return ()


__all__ = ["ManifestError", "load_manifest", "parse_manifest"]
