"""Persist assembled output files to disk."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from .logging import get_logger
from .models import OutputFile

logger = get_logger("writer")


def write_output_files(files: Iterable[OutputFile]) -> List[Path]:
    """Write each file, creating parent directories; I/O errors propagate."""
    written: List[Path] = []
    for item in files:
        item.path.parent.mkdir(parents=True, exist_ok=True)
        item.path.write_text(item.text, encoding="utf-8")
        logger.debug("Wrote %s", item.path)
        written.append(item.path)
    return written


__all__ = ["write_output_files"]
