"""CLI entrypoints for appdocs commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict

from .config import ConfigError, load_config
from .logging import configure_logging
from .models import Language
from .pipeline import (
    Pipeline,
    UnknownDocumentKindError,
    analyze_components,
    analyze_stores,
    analyze_types,
)
from .rendering import RenderError

Analysis = Callable[[str], Dict[str, Any]]

_ANALYSES: Dict[str, Analysis] = {
    "components": analyze_components,
    "stores": analyze_stores,
    "types": analyze_types,
}

_DESCRIPTIONS = {
    "components": "Extract React components and their props as JSON.",
    "stores": "Extract Zustand stores (state, actions, persistence) as JSON.",
    "types": "Extract interfaces, type aliases, enums and constant tables as JSON.",
    "html": "Generate a self-contained HTML documentation page.",
    "pdf": "Generate a paginated PDF document with headless Chromium.",
    "serve": "Run the documentation HTTP service.",
}


def _add_logging_options(
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
    parser.add_argument(
        "--log-file",
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also write diagnostics, with timestamps, to this file.",
    )


def _add_analysis_arguments(parser: argparse.ArgumentParser, command: str) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        metavar="path" if command == "types" else "directory",
        help="File or directory to analyse." if command == "types" else "Directory to analyse.",
    )
    parser.add_argument(
        "--output",
        help="Write the JSON report to this file instead of standard output.",
    )


def _add_document_arguments(parser: argparse.ArgumentParser, command: str) -> None:
    parser.add_argument("--project", help="Path to the application project root (required).")
    parser.add_argument("--output", help="Destination file for the generated document (required).")
    if command == "html":
        parser.add_argument(
            "--type",
            default="all",
            help="Document kind: all, components, types, architecture or developer (default: all).",
        )
    else:
        parser.add_argument(
            "--type",
            help="Document kind: components, types, architecture or developer (required).",
        )
    parser.add_argument("--name", help="Project name shown on the cover (default from .appdocs.yml).")
    parser.add_argument("--lang", help="Output language: fr or en (default from .appdocs.yml, else fr).")


def _add_serve_arguments(parser: argparse.ArgumentParser, command: str) -> None:
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind (default: 127.0.0.1).")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on (default: 8000).")


_ARGUMENTS = {
    "components": _add_analysis_arguments,
    "stores": _add_analysis_arguments,
    "types": _add_analysis_arguments,
    "html": _add_document_arguments,
    "pdf": _add_document_arguments,
    "serve": _add_serve_arguments,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appdocs",
        description="Generate technical documentation for a React/TypeScript application.",
    )
    _add_logging_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)
    for command, add_arguments in _ARGUMENTS.items():
        subparser = subparsers.add_parser(command, help=_DESCRIPTIONS[command])
        _add_logging_options(subparser, suppress_default=True)
        add_arguments(subparser, command)
    return parser


def _build_tool_parser(command: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=f"appdocs-{command}", description=_DESCRIPTIONS[command])
    _add_logging_options(parser)
    _ARGUMENTS[command](parser, command)
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    log_file = Path(args.log_file).expanduser() if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)


def _usage_error(parser: argparse.ArgumentParser, message: str) -> None:
    parser.exit(1, f"{parser.format_usage()}{parser.prog}: error: {message}\n")


def _run_analysis(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if not args.path:
        _usage_error(parser, "a path to analyse is required")
    try:
        report = _ANALYSES[args.command](args.path)
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")

    text = json.dumps(report, indent=2, ensure_ascii=False)
    if not args.output:
        print(text)
        return
    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    print(f"Found {report['total']} {args.command}")
    print(f"Report written to {_relativize(output)}")


def _run_generate(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    required = ["--project", "--output"] if args.command == "html" else ["--type", "--project", "--output"]
    missing = [flag for flag in required if not getattr(args, flag.lstrip("-"))]
    if missing:
        _usage_error(parser, f"the following arguments are required: {', '.join(missing)}")

    project = Path(args.project).expanduser()
    if not project.is_dir():
        parser.exit(1, f"Project path not found: {args.project}\n")
    if args.lang and args.lang not in {language.value for language in Language}:
        _usage_error(parser, f"unsupported language '{args.lang}' (expected fr or en)")

    try:
        config = load_config(project)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")
    if args.name:
        config.project_name = args.name

    pipeline = Pipeline(config, language=args.lang)
    generate = pipeline.generate_html if args.command == "html" else pipeline.generate_pdf
    try:
        generate(args.type, args.output)
    except UnknownDocumentKindError as exc:
        parser.exit(1, f"{exc}\n")
    except (RenderError, OSError) as exc:
        parser.exit(1, f"appdocs {args.command} failed: {exc}\nRun with --verbose for more details.\n")


def _run_serve(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    from .service.app import run_service

    run_service(host=args.host, port=args.port)


_HANDLERS = {
    "components": _run_analysis,
    "stores": _run_analysis,
    "types": _run_analysis,
    "html": _run_generate,
    "pdf": _run_generate,
    "serve": _run_serve,
}


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for appdocs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)
    _HANDLERS[args.command](parser, args)


def _run_tool(command: str, argv: list[str] | None) -> None:
    parser = _build_tool_parser(command)
    args = parser.parse_args(argv)
    args.command = command
    _configure_logging(args)
    _HANDLERS[command](parser, args)


def components_main(argv: list[str] | None = None) -> None:
    _run_tool("components", argv)


def stores_main(argv: list[str] | None = None) -> None:
    _run_tool("stores", argv)


def types_main(argv: list[str] | None = None) -> None:
    _run_tool("types", argv)


def html_main(argv: list[str] | None = None) -> None:
    _run_tool("html", argv)


def pdf_main(argv: list[str] | None = None) -> None:
    _run_tool("pdf", argv)


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
