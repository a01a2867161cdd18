"""Assembles rendered pages and static assets into the site's output files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set

from .declarations import SignatureSettings, extract, functions, signature_for, types
from .logging import get_logger
from .models import (
    Declaration,
    IndexPageContext,
    Link,
    ModuleArtifact,
    ModuleOrigin,
    ModulePageContext,
    OutputFile,
    RenderedDeclaration,
)
from .navigation import (
    PAGE_FILENAME,
    ROOT_UNNEST,
    build_links,
    default_pages,
    module_page_path,
    unnest_prefix,
)
from .rendering.markdown import DocRenderer
from .rendering.templates import STYLESHEET_NAME, PageRenderer


class SiteAssembler:
    """Builds every page of a documentation site in memory.

    The assembler performs no I/O on the output directory; callers persist the
    returned files.  Any template failure aborts the whole run.
    """

    def __init__(
        self,
        page_renderer: PageRenderer | None = None,
        doc_renderer: DocRenderer | None = None,
        settings: SignatureSettings | None = None,
    ) -> None:
        self.page_renderer = page_renderer or PageRenderer()
        self.doc_renderer = doc_renderer or DocRenderer()
        self.settings = settings or SignatureSettings()
        self.logger = get_logger("assembler")

    def assemble(
        self,
        project_name: str,
        modules: Iterable[ModuleArtifact],
        *,
        output_dir: Path = Path("."),
        project_version: str = "",
        root_content: str = "",
        links: Sequence[Link] = (),
    ) -> List[OutputFile]:
        """Return the index page, one page per source module and the stylesheet."""
        output_dir = Path(output_dir)
        sources = [module for module in modules if module.origin == ModuleOrigin.SRC]
        self.logger.info("Assembling documentation for %d modules", len(sources))

        module_links = build_links(sources)
        pages = default_pages()
        extra_links = list(links)

        files: List[OutputFile] = []
        index = IndexPageContext(
            unnest=ROOT_UNNEST,
            page_title=project_name,
            project_name=project_name,
            project_version=project_version,
            pages=pages,
            links=extra_links,
            modules=module_links,
            content=root_content,
        )
        files.append(
            OutputFile(
                path=output_dir / PAGE_FILENAME,
                text=self.page_renderer.render(index),
            )
        )

        for module in sources:
            declarations = extract(module.statements)
            context = ModulePageContext(
                unnest=unnest_prefix(module.name),
                page_title=project_name,
                project_name=project_name,
                project_version=project_version,
                pages=pages,
                links=extra_links,
                modules=module_links,
                module_name=module.qualified_name,
                documentation=self.doc_renderer.render(module.doc),
                functions=[self.render_declaration(decl) for decl in functions(declarations)],
                types=[self.render_declaration(decl) for decl in types(declarations)],
            )
            self.logger.debug(
                "Module %s: %d functions, %d types",
                context.module_name,
                len(context.functions),
                len(context.types),
            )
            files.append(
                OutputFile(
                    path=module_page_path(output_dir, module.name),
                    text=self.page_renderer.render(context),
                )
            )

        files.append(
            OutputFile(
                path=output_dir / STYLESHEET_NAME,
                text=self.page_renderer.stylesheet(),
            )
        )
        _ensure_unique_paths(files)
        return files

    def render_declaration(self, decl: Declaration) -> RenderedDeclaration:
        return RenderedDeclaration(
            name=decl.name,
            signature_text=signature_for(decl, self.settings),
            documentation_html=self.doc_renderer.render(decl.doc),
        )


def _ensure_unique_paths(files: Sequence[OutputFile]) -> None:
    seen: Set[Path] = set()
    for item in files:
        if item.path in seen:
            raise ValueError(f"Duplicate output path: {item.path}")
        seen.add(item.path)


def assemble(
    project_name: str,
    modules: Iterable[ModuleArtifact],
    *,
    output_dir: Path = Path("."),
    root_content: Optional[str] = None,
) -> List[OutputFile]:
    """Assemble a site with the default renderers and layout settings."""
    return SiteAssembler().assemble(
        project_name,
        modules,
        output_dir=output_dir,
        root_content=root_content or "",
    )


__all__ = ["SiteAssembler", "assemble"]
