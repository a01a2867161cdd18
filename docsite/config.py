"""Configuration loading for docsite (.docsite.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

CONFIG_FILENAME = ".docsite.yml"
DEFAULT_MANIFEST = Path("build") / "modules.yml"
DEFAULT_OUTPUT_DIR = Path("build") / "docs"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ProjectConfig:
    """Project identity shown in page headers."""

    name: str
    version: str = ""


@dataclass
class RenderConfig:
    """Rendering switches for doc-comments and templates."""

    sanitize_html: bool = False
    templates_dir: Optional[Path] = None


@dataclass
class LinkConfig:
    """Extra sidebar link."""

    name: str
    path: str


@dataclass
class DocSiteConfig:
    """Represents the settings defined in .docsite.yml."""

    root: Path
    project: ProjectConfig
    manifest: Path
    output_dir: Path
    readme: Optional[Path] = None
    render: RenderConfig = field(default_factory=RenderConfig)
    links: List[LinkConfig] = field(default_factory=list)


def load_config(config_path: Path) -> DocSiteConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()
    defaults = DocSiteConfig(
        root=root,
        project=ProjectConfig(name=root.name or "project"),
        manifest=root / DEFAULT_MANIFEST,
        output_dir=root / DEFAULT_OUTPUT_DIR,
    )

    if not config_file.exists():
        return defaults

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    project_data = _as_dict(data.get("project"))
    project = ProjectConfig(
        name=_as_str(project_data.get("name")) or defaults.project.name,
        version=_version(project_data.get("version")),
    )

    manifest_str = _as_str(data.get("manifest"))
    output_str = _as_str(data.get("output_dir"))
    readme_str = _as_str(data.get("readme"))

    render_data = _as_dict(data.get("render"))
    render = RenderConfig()
    if render_data:
        render.sanitize_html = _as_bool(render_data.get("sanitize_html")) or False
        templates_dir_str = _as_str(render_data.get("templates_dir"))
        render.templates_dir = root / templates_dir_str if templates_dir_str else None

    links: List[LinkConfig] = []
    raw_links = data.get("links")
    if raw_links is not None and not isinstance(raw_links, list):
        raise ConfigError("`links` must be a list of {name, path} mappings")
    for raw in raw_links or []:
        link_data = _as_dict(raw)
        name = _as_str(link_data.get("name"))
        path = _as_str(link_data.get("path"))
        if not name or not path:
            raise ConfigError("Each entry in `links` needs a name and a path")
        links.append(LinkConfig(name=name, path=path))

    return DocSiteConfig(
        root=root,
        project=project,
        manifest=root / manifest_str if manifest_str else defaults.manifest,
        output_dir=root / output_str if output_str else defaults.output_dir,
        readme=root / readme_str if readme_str else None,
        render=render,
        links=links,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _version(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise ConfigError(
        f"`project.version` must be a string; quote it in {CONFIG_FILENAME} "
        f"(got {value!r})"
    )


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DocSiteConfig",
    "LinkConfig",
    "ProjectConfig",
    "RenderConfig",
    "load_config",
]
