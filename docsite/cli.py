"""CLI entrypoints for docsite commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError
from .loader import ManifestError
from .logging import configure_logging
from .orchestrator import Orchestrator
from .rendering.templates import TemplateRenderError


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsite",
        description="Generate static HTML documentation from analysed modules.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Render the documentation site for a project.",
    )
    _add_verbose_option(build_parser, suppress_default=True)
    build_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    build_parser.add_argument(
        "--manifest",
        default=None,
        help="Module manifest to document (overrides .docsite.yml).",
    )
    build_parser.add_argument(
        "--out",
        dest="output_dir",
        default=None,
        help="Directory to write the site into (overrides .docsite.yml).",
    )
    build_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the files that would be written without writing them.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP build service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docsite commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    if args.command == "build":
        orchestrator = Orchestrator()
        dry_run = bool(getattr(args, "dry_run", False))
        try:
            outcome = orchestrator.run_build(
                args.path,
                manifest=args.manifest,
                output_dir=args.output_dir,
                dry_run=dry_run,
            )
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        except (ConfigError, ManifestError, TemplateRenderError, ValueError) as exc:
            parser.exit(1, f"docsite build failed: {exc}\nRun with --verbose for more details.\n")
        if dry_run:
            print("Files that would be written (dry-run):")
            for path in outcome.paths:
                print(f"  {_relativize(path)}")
        else:
            print(f"Wrote {len(outcome.files)} files to {_relativize(outcome.output_dir)}")
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
