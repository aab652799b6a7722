"""CLI entrypoints for doctag commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

from .comments import read_comments
from .config import ConfigError, DocTagConfig, load_config
from .errors import RegistryError
from .logging import configure_logging, get_logger
from .models import ProcessedComment
from .processor import DocCommentProcessor
from .registry import TagRegistry, build_registry

logger = get_logger("cli")


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


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .doctag.yml or the directory containing it (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doctag",
        description="Extract structured metadata from @tag annotations in doc comments.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse the doc comments of the given files and print JSON metadata.",
    )
    _add_verbose_option(parse_parser, suppress_default=True)
    _add_config_option(parse_parser)
    parse_parser.add_argument("files", nargs="+", help="Source files to read.")
    parse_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any diagnostic is reported.",
    )
    parse_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (defaults to 2).",
    )

    tags_parser = subparsers.add_parser(
        "tags",
        help="List the registered tag patterns.",
    )
    _add_verbose_option(tags_parser, suppress_default=True)
    _add_config_option(tags_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP parsing service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    _add_config_option(serve_parser)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to bind.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for doctag commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=args.command == "parse")

    try:
        config = load_config(Path(args.config))
        registry = build_registry(config.tags)
    except (ConfigError, RegistryError, RuntimeError, ValueError, TypeError) as exc:
        # Plugin load failures arrive as RuntimeError, malformed plugins as TypeError.
        parser.exit(1, f"doctag configuration error: {exc}\n")

    if args.command == "parse":
        results = _parse_files(args.files, registry, config, parser)
        print(json.dumps([result.to_dict() for result in results], indent=args.indent))
        strict = bool(args.strict) or config.diagnostics.strict
        if strict and any(not result.ok for result in results):
            parser.exit(1)
    elif args.command == "tags":
        for definition in registry.definitions():
            fields = ", ".join(definition.fields)
            print(f"@{definition.pattern}\tkey={definition.key}\tfields={fields}")
    elif args.command == "serve":
        try:
            from .service import run_service
        except ModuleNotFoundError as exc:
            parser.exit(1, f"Service mode needs the service extra (pip install doctag[service]): {exc}\n")
        try:
            run_service(host=args.host, port=args.port, config=config)
        except RuntimeError as exc:
            parser.exit(1, f"{exc}\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _parse_files(
    files: List[str],
    registry: TagRegistry,
    config: DocTagConfig,
    parser: argparse.ArgumentParser,
) -> List[ProcessedComment]:
    processor = DocCommentProcessor(registry, ignore_unknown=config.diagnostics.ignore)
    results: List[ProcessedComment] = []
    for name in files:
        path = Path(name)
        try:
            comments = read_comments(path)
        except OSError as exc:
            parser.exit(1, f"Cannot read {name}: {exc}\n")
        logger.debug("Found %d doc comments in %s", len(comments), name)
        results.extend(processor.process_all(comments))
    return results


if __name__ == "__main__":
    main(sys.argv[1:])
