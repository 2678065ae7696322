#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for the mdbreaks line-break transform.

Reads a document tree as JSON (the mdast shape remark-style hosts produce),
turns line endings inside text into hard breaks, and writes the tree back as
JSON.

Examples
--------
Transform a tree file::

    $ mdbreaks tree.json --out tree.breaks.json

Read from stdin, keep line endings inside code and HTML::

    $ cat tree.json | mdbreaks --ignore code --ignore html

Apply an additional registered transform::

    $ mdbreaks tree.json --transform my-transform

Use a configuration file::

    $ mdbreaks tree.json --config .mdbreaks.toml

"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional

from mdbreaks import __version__
from mdbreaks.ast.serialization import ast_to_json, json_to_ast
from mdbreaks.config import (
    indent_from_config,
    load_config_with_priority,
    options_from_config,
    transforms_from_config,
)
from mdbreaks.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_JSON_INDENT,
    DEFAULT_LOG_LEVEL,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from mdbreaks.exceptions import ConfigError, SerializationError, TransformError
from mdbreaks.logging_utils import configure_logging
from mdbreaks.options import BreaksOptions
from mdbreaks.transforms import Pipeline, remark_breaks, transform_registry

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the mdbreaks CLI."""
    parser = argparse.ArgumentParser(
        prog="mdbreaks",
        description="Turn line endings in a JSON document tree into hard break nodes.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Input JSON tree file, or '-' for stdin (default)")
    parser.add_argument("--out", "-o", help="Output file (default: stdout)")
    parser.add_argument(
        "--ignore",
        action="append",
        metavar="TYPE",
        help="Node type whose text keeps its line endings (repeatable)",
    )
    parser.add_argument("--break-type", help="Type of the inserted break nodes (default: break)")
    parser.add_argument(
        "--transform",
        "-t",
        action="append",
        default=[],
        metavar="NAME",
        help="Additional registered transform to apply after breaks (repeatable)",
    )
    parser.add_argument("--list-transforms", action="store_true", help="List registered transforms and exit")
    parser.add_argument("--indent", type=int, help=f"JSON indentation (default: {DEFAULT_JSON_INDENT})")
    parser.add_argument("--config", help=f"Configuration file (default: ${CONFIG_ENV_VAR} or discovered)")
    parser.add_argument("--no-config", action="store_true", help="Do not load any configuration file")
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _load_config(parsed_args: argparse.Namespace) -> dict[str, Any]:
    if parsed_args.no_config:
        return {}
    return load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))


def _build_options(parsed_args: argparse.Namespace, config: dict[str, Any]) -> BreaksOptions:
    """Combine config file values with CLI flags (flags win)."""
    options = options_from_config(config)
    if parsed_args.ignore:
        options = options.create_updated(ignore=tuple(parsed_args.ignore))
    if parsed_args.break_type:
        options = options.create_updated(break_type=parsed_args.break_type)
    return options


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _write_output(content: str, destination: Optional[str]) -> None:
    if destination:
        Path(destination).write_text(content + "\n", encoding="utf-8")
        logger.info(f"Wrote {destination}")
    else:
        sys.stdout.write(content + "\n")


def _list_transforms() -> int:
    for name in transform_registry.list_transforms():
        print(f"{name}: {transform_registry.get_metadata(name).description}")
    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return the process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    if parsed_args.list_transforms:
        return _list_transforms()

    try:
        config = _load_config(parsed_args)
        options = _build_options(parsed_args, config)
        transform_names = transforms_from_config(config) + parsed_args.transform
        indent = indent_from_config(config, DEFAULT_JSON_INDENT)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except ValueError as e:
        print(f"Error: Invalid option: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    for name in transform_names:
        if not transform_registry.has_transform(name):
            print(f"Error: Unknown transform: {name}", file=sys.stderr)
            return EXIT_VALIDATION_ERROR

    if parsed_args.indent is not None:
        indent = parsed_args.indent

    try:
        tree = json_to_ast(_read_input(parsed_args.input))
    except OSError as e:
        print(f"Error: Cannot read input {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except UnicodeDecodeError as e:
        print(f"Error: Input {parsed_args.input} is not valid UTF-8: {e}", file=sys.stderr)
        return EXIT_PARSING_ERROR
    except SerializationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_PARSING_ERROR

    pipeline = Pipeline([(remark_breaks, options), *transform_registry.order_by_priority(transform_names)])
    try:
        tree = pipeline.run(tree)
    except TransformError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        _write_output(ast_to_json(tree, indent=indent), parsed_args.out)
    except OSError as e:
        print(f"Error: Cannot write output {parsed_args.out}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
