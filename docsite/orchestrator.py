"""Pipeline orchestration for documentation site builds."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .assembler import SiteAssembler
from .config import DocSiteConfig, load_config
from .loader import load_manifest
from .logging import get_logger
from .models import Link, ModuleArtifact, OutputFile
from .rendering.markdown import DocRenderer
from .rendering.templates import PageRenderer
from .writer import write_output_files


@dataclass
class BuildOutcome:
    """Result of a site build."""

    output_dir: Path
    files: List[OutputFile]
    dry_run: bool

    @property
    def paths(self) -> List[Path]:
        return [item.path for item in self.files]


class Orchestrator:
    """Coordinates config, manifest loading, assembly and writing."""

    def __init__(
        self,
        manifest_loader: Callable[[Path], Sequence[ModuleArtifact]] | None = None,
        writer: Callable[[Sequence[OutputFile]], object] | None = None,
    ) -> None:
        self.manifest_loader = manifest_loader or load_manifest
        self.writer = writer or write_output_files
        self.logger = get_logger("orchestrator")

    def run_build(
        self,
        path: str,
        *,
        manifest: Optional[str] = None,
        output_dir: Optional[str] = None,
        dry_run: bool = False,
    ) -> BuildOutcome:
        """Build the documentation site for the project at ``path``."""
        project_path = Path(path).expanduser().resolve()
        self.logger.info("Starting build for %s", project_path)
        config = load_config(project_path)

        manifest_path = Path(manifest).expanduser().resolve() if manifest else config.manifest
        target_dir = Path(output_dir).expanduser().resolve() if output_dir else config.output_dir
        self.logger.debug("Manifest: %s, output: %s", manifest_path, target_dir)

        modules = list(self.manifest_loader(manifest_path))
        assembler = self._build_assembler(config)
        files = assembler.assemble(
            config.project.name,
            modules,
            output_dir=target_dir,
            project_version=config.project.version,
            root_content=self._root_content(config, assembler.doc_renderer),
            links=[Link(name=link.name, path=link.path) for link in config.links],
        )

        if dry_run:
            self.logger.info("Dry run: %d files not written", len(files))
        else:
            self.writer(files)
            self.logger.info("Wrote %d files to %s", len(files), target_dir)
        return BuildOutcome(output_dir=target_dir, files=files, dry_run=dry_run)

    @staticmethod
    def _build_assembler(config: DocSiteConfig) -> SiteAssembler:
        return SiteAssembler(
            page_renderer=PageRenderer(config.render.templates_dir),
            doc_renderer=DocRenderer(sanitize=config.render.sanitize_html),
        )

    def _root_content(self, config: DocSiteConfig, renderer: DocRenderer) -> str:
        if config.readme is None:
            return ""
        if not config.readme.exists():
            raise FileNotFoundError(f"README not found: {config.readme}")
        self.logger.debug("Rendering root page from %s", config.readme)
        return renderer.render(config.readme.read_text(encoding="utf-8"))


__all__ = ["BuildOutcome", "Orchestrator"]
