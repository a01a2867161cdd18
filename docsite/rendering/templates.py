"""Page rendering through Jinja2 templates shipped with the package."""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import Dict, List

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    select_autoescape,
)

from ..models import PageContext

TEMPLATES_DIR = Path(__file__).with_name("templates")
STYLESHEET_NAME = "index.css"


class TemplateRenderError(RuntimeError):
    """Raised when a page template cannot be rendered."""


class PageRenderer:
    """Renders page contexts into HTML documents."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env()

    def render(self, context: PageContext) -> str:
        template_name = context.template_name
        variables = template_variables(context)
        try:
            template = self._env.get_template(template_name)
            return template.render(**variables)
        except TemplateError as exc:
            raise TemplateRenderError(
                f"Failed to render {template_name} for {context.page_title!r}: {exc}"
            ) from exc

    def stylesheet(self) -> str:
        """Return the shared stylesheet, honouring template directory overrides."""
        for directory in self._search_path():
            candidate = Path(directory) / STYLESHEET_NAME
            if candidate.is_file():
                return candidate.read_text(encoding="utf-8")
        raise FileNotFoundError(f"Stylesheet {STYLESHEET_NAME} not found")

    def _search_path(self) -> List[str]:
        directories = []
        if self.templates_dir:
            directories.append(str(self.templates_dir))
        directories.append(str(TEMPLATES_DIR))
        # ensure uniqueness preserving order
        return list(dict.fromkeys(directories))

    def _create_env(self) -> Environment:
        loader = FileSystemLoader(self._search_path())
        env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.filters["link_href"] = _link_href
        return env


def _link_href(path: str, unnest: str) -> str:
    return f"{unnest}/{path}/" if path else f"{unnest}/"


def template_variables(context: PageContext) -> Dict[str, object]:
    return {item.name: getattr(context, item.name) for item in fields(context)}


__all__ = ["PageRenderer", "STYLESHEET_NAME", "TEMPLATES_DIR", "TemplateRenderError"]
