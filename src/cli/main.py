"""mddkit CLI entry points.
This module exposes the editor commands as argparse subcommands.
Each command reads one selection and prints its replacement text.
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import Any, Sequence, cast

from core.config import TransformOptions, load_options_file
from core.constants import (
    SUPPORTED_ANNOTATION_STYLES,
    SUPPORTED_DUPLICATE_FIELDS,
    SUPPORTED_PARSE_MODES,
)
from core.errors import MddkitError, MddkitInputError
from core.types import SelectionCommand, TransformResult
from pipeline.selection_pipeline import process_selection


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="mddkit", description="Survey metadata text tools")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_values_command(subparsers)
    _add_check_duplicates_command(subparsers)
    _add_swap_label_code_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the mddkit CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        options = _build_options(args)
        raw_text = _read_selection(args.input)
    except MddkitError as error:
        print(f"error={error}")
        return 1
    result = process_selection(raw_text, cast(SelectionCommand, args.command), options)
    _print_result(raw_text, result)
    return 0


def _build_options(args: argparse.Namespace) -> TransformOptions:
    """Layer env, options file, and CLI flags into transform options.

    Args:
        args: Parsed CLI args.

    Returns:
        Validated options.
    """
    options = TransformOptions.from_env()
    config_path = getattr(args, "config", None)
    if config_path:
        options = load_options_file(config_path, base=options)
    return options.with_overrides(
        {
            "parse_mode": getattr(args, "mode", None),
            "duplicate_fields": getattr(args, "fields", None),
            "annotation_style": getattr(args, "style", None),
            "escape_ampersands": getattr(args, "escape_ampersands", None),
        }
    )


def _read_selection(input_path: str | None) -> str:
    """Read selection text from a file or stdin.

    Raises:
        MddkitInputError: If the file cannot be read.
    """
    if not input_path or input_path == "-":
        try:
            return sys.stdin.read()
        except UnicodeDecodeError as error:
            raise MddkitInputError(
                f"Failed to decode selection from stdin: {error}. Pipe UTF-8 text."
            ) from error
    selection_file = Path(input_path).expanduser()
    try:
        return selection_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise MddkitInputError(
            f"Failed to read selection at {selection_file}: {error}. "
            "Provide an existing readable UTF-8 text file."
        ) from error


def _print_result(raw_text: str, result: TransformResult) -> None:
    """Print replacement text to stdout and warnings to stderr."""
    for warning in result.warnings:
        print(f"warning={warning}", file=sys.stderr)
    if result.replacement is None:
        sys.stdout.write(raw_text)
        return
    print(result.replacement)


def _add_input_argument(parser: Any) -> None:
    parser.add_argument("--input", help="Selection text file, stdin when omitted or '-'")


def _add_duplicate_arguments(parser: Any) -> None:
    parser.add_argument(
        "--fields",
        choices=SUPPORTED_DUPLICATE_FIELDS,
        help="Duplicate check fields: code (_N \"text\") or label (label=\"x\">text<)",
    )
    parser.add_argument(
        "--style",
        choices=SUPPORTED_ANNOTATION_STYLES,
        help="Duplicate diagnostic format",
    )
    parser.add_argument("--config", help="Optional YAML options file")


def _add_values_command(subparsers: Any) -> None:
    """Register values subcommand."""
    parser = subparsers.add_parser("values", help="Build category metadata from a list")
    _add_input_argument(parser)
    parser.add_argument(
        "--mode",
        choices=SUPPORTED_PARSE_MODES,
        help="Take codes from a numeric prefix (ordinal) or line position (index)",
    )
    _add_duplicate_arguments(parser)
    parser.add_argument(
        "--escape-ampersands",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Emit & as &amp; in the output (default on)",
    )


def _add_check_duplicates_command(subparsers: Any) -> None:
    """Register check-duplicates subcommand."""
    parser = subparsers.add_parser(
        "check-duplicates",
        help="Append duplicate code/text diagnostics to formatted metadata",
    )
    _add_input_argument(parser)
    _add_duplicate_arguments(parser)


def _add_swap_label_code_command(subparsers: Any) -> None:
    """Register swap-label-code subcommand."""
    parser = subparsers.add_parser(
        "swap-label-code",
        help="Move trailing numeric codes to the front of each line",
    )
    _add_input_argument(parser)
