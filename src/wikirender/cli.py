#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for wikirender.

Usage
-----
    wikirender --to redmine document.json -o page.textile
    some-frontend --dump-json page.md | wikirender --to tiddlywiki -

The input is a document tree serialized with
:func:`wikirender.ast.ast_to_json`. Renderer options come from a config file
(see :mod:`wikirender.config`) and are overridden by command line flags.

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import MISSING, fields
from pathlib import Path
from typing import Any, Dict, Optional

from wikirender import __version__
from wikirender.api import render_json
from wikirender.config import CONFIG_ENV_VAR, load_config_with_priority, options_from_config
from wikirender.constants import (
    DEFAULT_LOG_LEVEL,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_FORMAT_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from wikirender.exceptions import (
    ConfigurationError,
    FileError,
    FormatError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
    WikiRenderError,
)
from wikirender.logging_utils import configure_logging
from wikirender.options.base import BaseRendererOptions
from wikirender.registry import registry

logger = logging.getLogger(__name__)

DEFAULT_DIALECT = "redmine"


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code."""
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, FormatError):
        return EXIT_FORMAT_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def _option_fields() -> Dict[str, Any]:
    """Collect option fields from every registered dialect, keyed by field name."""
    collected: Dict[str, Any] = {}
    for dialect_name in registry.list_formats():
        for option_field in fields(registry.get_options_class(dialect_name)):
            collected.setdefault(option_field.name, option_field)
    return collected


def _add_option_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one flag per renderer option field, driven by the field metadata."""
    group = parser.add_argument_group("renderer options")
    for name, option_field in _option_fields().items():
        metadata = option_field.metadata
        flag = "--" + metadata.get("cli_name", name.replace("_", "-"))
        kwargs: Dict[str, Any] = {"dest": name, "default": argparse.SUPPRESS, "help": metadata.get("help")}

        default = option_field.default if option_field.default is not MISSING else None
        if isinstance(default, bool):
            kwargs["action"] = "store_false" if default else "store_true"
        elif isinstance(default, tuple):
            kwargs["nargs"] = "+"
            kwargs["metavar"] = name.upper().rstrip("S")
        else:
            if "choices" in metadata:
                kwargs["choices"] = metadata["choices"]
            kwargs["metavar"] = name.upper()
        group.add_argument(flag, **kwargs)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wikirender",
        description="Render a JSON document tree to Redmine or TiddlyWiki markup.",
    )
    parser.add_argument("input", nargs="?", help="JSON document tree file, or '-' for stdin")
    parser.add_argument("--to", "-t", help=f"Target dialect (default: {DEFAULT_DIALECT})")
    parser.add_argument("--out", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help=f"Configuration file (default: ${CONFIG_ENV_VAR} or auto-discovered)")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Keep unknown node types as empty output instead of failing",
    )
    parser.add_argument("--list-formats", action="store_true", help="List available dialects and exit")
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument("--log-file", help="Also write log records to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"wikirender {__version__}")
    _add_option_arguments(parser)
    return parser


def _read_input(source: str) -> str:
    """Read the serialized tree from a file or, for ``-``, from stdin."""
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileError(f"Cannot read input file: {path}", file_path=str(path), original_error=e) from e
    except UnicodeDecodeError as e:
        raise FileError(f"Input file is not valid UTF-8: {path}", file_path=str(path), original_error=e) from e


def _build_options(
    dialect_name: str, config: Dict[str, Any], parsed_args: argparse.Namespace
) -> BaseRendererOptions:
    """Create options for ``dialect_name`` from config values and command line flags.

    Raises
    ------
    ConfigurationError
        If a value is rejected by the options class

    """
    options_class = registry.get_options_class(dialect_name)
    option_names = {option_field.name for option_field in fields(options_class)}
    values = options_from_config(config, dialect_name, option_names)

    for name in _option_fields():
        if not hasattr(parsed_args, name):
            continue
        if name in option_names:
            values[name] = getattr(parsed_args, name)
        else:
            logger.warning(f"Option '{name}' does not apply to {dialect_name} and is ignored")

    try:
        return options_class(**values)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid {dialect_name} options: {e}", original_error=e) from e


def _run(parsed_args: argparse.Namespace) -> int:
    config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
    dialect_name = parsed_args.to or config.get("to") or DEFAULT_DIALECT
    lenient = parsed_args.lenient or bool(config.get("lenient", False))

    options = _build_options(dialect_name, config, parsed_args)
    source = _read_input(parsed_args.input)

    if parsed_args.out:
        output_path = Path(parsed_args.out)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        render_json(source, to=dialect_name, output=output_path, options=options, strict_mode=not lenient)
        logger.info(f"Rendered {parsed_args.input} -> {output_path}")
    else:
        sys.stdout.write(render_json(source, to=dialect_name, options=options, strict_mode=not lenient) or "")
    return EXIT_SUCCESS


def main(args: Optional[list[str]] = None) -> int:
    """Run the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    if parsed_args.list_formats:
        for dialect_name in registry.list_formats():
            info = registry.get_format_info(dialect_name)
            description = info.description if info else ""
            print(f"{dialect_name:<12} {description}")
        return EXIT_SUCCESS

    if not parsed_args.input:
        print("Error: Input file is required", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        return _run(parsed_args)
    except WikiRenderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)


if __name__ == "__main__":
    sys.exit(main())
