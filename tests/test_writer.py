"""Tests for docsite.writer."""

from __future__ import annotations

from pathlib import Path

from docsite.models import OutputFile
from docsite.writer import write_output_files


def test_write_output_files_creates_directories(tmp_path: Path) -> None:
    files = [
        OutputFile(path=tmp_path / "site" / "index.html", text="<html></html>"),
        OutputFile(path=tmp_path / "site" / "a" / "b" / "index.html", text="nested"),
    ]

    written = write_output_files(files)

    assert written == [item.path for item in files]
    assert (tmp_path / "site" / "a" / "b" / "index.html").read_text(encoding="utf-8") == "nested"


def test_write_output_files_overwrites_existing(tmp_path: Path) -> None:
    target = tmp_path / "index.css"
    target.write_text("old", encoding="utf-8")
    write_output_files([OutputFile(path=target, text="new")])
    assert target.read_text(encoding="utf-8") == "new"
