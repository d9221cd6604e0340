"""Selection orchestration for editor commands.

This module coordinates line normalization, record building, and
duplicate checking for one selection at a time. It converts every
anomaly into a warning so callers always get a result back.
"""

from __future__ import annotations

from typing import Iterable

from core.config import TransformOptions
from core.constants import EMPTY_SELECTION_WARNING, NO_VALID_LINES_WARNING
from core.logging_config import get_logger
from core.types import SelectionCommand, TransformResult
from transforms.duplicate_checker import build_duplicate_checker
from transforms.label_code_swap import swap_label_code
from transforms.line_normalizer import normalize_lines
from transforms.record_builder import build_records, join_serialized

_LOGGER = get_logger(__name__)


def build_value_list(raw_text: str, options: TransformOptions | None = None) -> TransformResult:
    """Turn a pasted response list into a category metadata block.

    Args:
        raw_text: Selection text.
        options: Per-invocation options, defaults when omitted.

    Returns:
        Replacement text with duplicate diagnostics appended, or an
        unchanged result with warnings when nothing could be built.
    """
    resolved_options = options or TransformOptions()
    lines = normalize_lines(raw_text)
    if not lines:
        return _empty_selection_result("values")
    build_result = build_records(lines, resolved_options.parse_mode)
    if not build_result.records:
        _LOGGER.warning("no_valid_lines", line_count=len(lines))
        return TransformResult(
            replacement=None,
            warnings=build_result.warnings + (NO_VALID_LINES_WARNING,),
        )
    checker = build_duplicate_checker(
        resolved_options.duplicate_fields,
        resolved_options.annotation_style,
    )
    annotated_text, report = checker.check(join_serialized(build_result.records))
    if resolved_options.escape_ampersands:
        annotated_text = annotated_text.replace("&", "&amp;")
    _LOGGER.info(
        "selection_processed",
        command="values",
        record_count=len(build_result.records),
        skipped_count=len(build_result.warnings),
    )
    return TransformResult(
        replacement=annotated_text,
        warnings=build_result.warnings,
        records=build_result.records,
        report=report,
    )


def check_selection_duplicates(
    raw_text: str,
    options: TransformOptions | None = None,
) -> TransformResult:
    """Append duplicate diagnostics to an already formatted selection."""
    resolved_options = options or TransformOptions()
    if not raw_text.strip():
        return _empty_selection_result("check-duplicates")
    checker = build_duplicate_checker(
        resolved_options.duplicate_fields,
        resolved_options.annotation_style,
    )
    annotated_text, report = checker.check(raw_text)
    _LOGGER.info("selection_processed", command="check-duplicates")
    return TransformResult(replacement=annotated_text, report=report)


def swap_selection_label_code(raw_text: str) -> TransformResult:
    """Move trailing numeric codes to the front of each selected line."""
    swapped_lines = swap_label_code(raw_text)
    if swapped_lines is None:
        return _empty_selection_result("swap-label-code")
    _LOGGER.info("selection_processed", command="swap-label-code", line_count=len(swapped_lines))
    return TransformResult(replacement="\n".join(swapped_lines))


def process_selection(
    raw_text: str,
    command: SelectionCommand,
    options: TransformOptions | None = None,
) -> TransformResult:
    """Dispatch one selection to the handler for an editor command.

    Raises:
        ValueError: If the command name is unknown.
    """
    if command == "values":
        return build_value_list(raw_text, options)
    if command == "check-duplicates":
        return check_selection_duplicates(raw_text, options)
    if command == "swap-label-code":
        return swap_selection_label_code(raw_text)
    raise ValueError(f"Unsupported selection command: {command}")


def process_selections(
    raw_texts: Iterable[str],
    command: SelectionCommand,
    options: TransformOptions | None = None,
) -> list[TransformResult]:
    """Process several selections independently, in order."""
    return [process_selection(raw_text, command, options) for raw_text in raw_texts]


def _empty_selection_result(command: SelectionCommand) -> TransformResult:
    _LOGGER.warning("empty_selection", command=command)
    return TransformResult(replacement=None, warnings=(EMPTY_SELECTION_WARNING,))
