"""Public SDK surface for mddkit.

This module provides a stable import path for scripts and editor glue.
It re-exports the selection commands, transforms, and typed models.
"""

from __future__ import annotations

from core.config import TransformOptions, load_options_file
from core.types import DuplicateReport, ParsedRecord, RecordBuildResult, TransformResult
from pipeline.selection_pipeline import (
    build_value_list,
    check_selection_duplicates,
    process_selection,
    process_selections,
    swap_selection_label_code,
)
from transforms.duplicate_checker import (
    DuplicateChecker,
    build_duplicate_checker,
    find_duplicates,
)
from transforms.line_normalizer import normalize_lines
from transforms.record_builder import (
    build_records,
    escape_content,
    is_other_specify,
    join_serialized,
    serialize_record,
    unescape_content,
)

__all__ = [
    "DuplicateChecker",
    "DuplicateReport",
    "ParsedRecord",
    "RecordBuildResult",
    "TransformOptions",
    "TransformResult",
    "build_duplicate_checker",
    "build_records",
    "build_value_list",
    "check_selection_duplicates",
    "escape_content",
    "find_duplicates",
    "is_other_specify",
    "join_serialized",
    "load_options_file",
    "normalize_lines",
    "process_selection",
    "process_selections",
    "serialize_record",
    "swap_selection_label_code",
    "unescape_content",
]
