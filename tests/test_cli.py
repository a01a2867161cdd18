"""CLI parser and entrypoint tests."""

from __future__ import annotations

import logging

import pytest

from docsite.cli import _build_parser, main
from docsite.logging import configure_logging


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "build"])
    assert args.verbose is True
    assert args.command == "build"
    assert args.path == "."


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["build", "--verbose"])
    assert args.verbose is True


def test_cli_build_options() -> None:
    parser = _build_parser()
    args = parser.parse_args(
        ["build", "proj", "--manifest", "m.yml", "--out", "site", "--dry-run"]
    )
    assert args.path == "proj"
    assert args.manifest == "m.yml"
    assert args.output_dir == "site"
    assert args.dry_run is True


def test_cli_serve_options() -> None:
    args = _build_parser().parse_args(["serve", "--port", "9000"])
    assert args.command == "serve"
    assert args.port == 9000
    assert args.host == "127.0.0.1"


def test_main_build_dry_run_lists_files(project_builder, capsys) -> None:
    project_builder.write_sample()
    main(["build", str(project_builder.root), "--dry-run"])
    output = capsys.readouterr().out
    assert "Files that would be written (dry-run):" in output
    assert "shapes/util/index.html" in output.replace("\\", "/")
    assert not (project_builder.root / "site").exists()


def test_main_build_writes_files(project_builder, capsys) -> None:
    project_builder.write_sample()
    main(["build", str(project_builder.root)])
    assert "Wrote 4 files" in capsys.readouterr().out
    assert (project_builder.root / "site" / "index.css").exists()


def test_main_build_exits_on_missing_manifest(tmp_path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["build", str(tmp_path)])
    assert excinfo.value.code == 1


def test_cli_log_file_option() -> None:
    args = _build_parser().parse_args(["--log-file", "build.log", "build"])
    assert args.log_file == "build.log"
    assert _build_parser().parse_args(["build"]).log_file is None


def test_main_build_writes_log_file(project_builder, tmp_path) -> None:
    project_builder.write_sample()
    log_path = tmp_path / "logs" / "docsite.log"
    try:
        main(["--log-file", str(log_path), "build", str(project_builder.root), "--dry-run"])
    finally:
        configure_logging()

    contents = log_path.read_text(encoding="utf-8")
    assert "Starting build" in contents
    assert "Dry run: 4 files not written" in contents
    assert not any(
        isinstance(handler, logging.FileHandler)
        for handler in logging.getLogger("docsite").handlers
    )
