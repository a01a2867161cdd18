"""Relative paths and link lists for navigating the generated site."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

from .models import Link, ModuleArtifact, ModuleOrigin

ROOT_UNNEST = "."
PAGE_FILENAME = "index.html"


def unnest_prefix(module_name: Sequence[str]) -> str:
    """Relative prefix from a module page back to the site root.

    Each module page lives at ``<root>/<seg1>/.../<segN>/index.html`` so one
    ``..`` is needed per name segment.
    """
    if not module_name:
        raise ValueError("Module name must contain at least one segment")
    return "/".join(".." for _ in module_name)


def build_links(modules: Iterable[ModuleArtifact]) -> List[Link]:
    links: List[Link] = []
    for module in modules:
        if module.origin != ModuleOrigin.SRC:
            continue
        name = "/".join(module.name)
        links.append(Link(name=name, path=name))
    return links


def default_pages() -> List[Link]:
    return [Link(name="README", path="")]


def module_page_path(output_dir: Path, module_name: Sequence[str]) -> Path:
    if not module_name:
        raise ValueError("Module name must contain at least one segment")
    path = Path(output_dir)
    for segment in module_name:
        path = path / segment
    return path / PAGE_FILENAME


__all__ = [
    "PAGE_FILENAME",
    "ROOT_UNNEST",
    "build_links",
    "default_pages",
    "module_page_path",
    "unnest_prefix",
]
