"""Category record builder.

This module parses logical lines into category records and renders
them as tab-indented metadata lines such as ``_1 "Red"``.
"""

from __future__ import annotations

import re
from typing import Iterable

from core.constants import (
    INVALID_LINE_WARNING_TEMPLATE,
    LOCALIZED_OTHER_TOKEN,
    LOCALIZED_SPECIFY_TOKEN,
    OTHER_SPECIFY_KEYWORD,
    OTHER_SPECIFY_SUFFIX_TEMPLATE,
    RECORD_LINE_TEMPLATE,
    RECORD_SEPARATOR,
    SPECIFY_KEYWORDS,
)
from core.logging_config import get_logger
from core.types import ParsedRecord, ParseMode, RecordBuildResult

_LOGGER = get_logger(__name__)
_ORDINAL_LINE_PATTERN = re.compile(r"^(\d+)[.)]?\s+(.*)$", re.ASCII)


def build_records(lines: Iterable[str], mode: ParseMode = "ordinal") -> RecordBuildResult:
    """Parse logical lines into category records.

    In ``index`` mode every line becomes a record numbered by its 1-based
    position. In ``ordinal`` mode each line must start with a number,
    optionally followed by ``.`` or ``)``; lines that do not are skipped
    and reported as warnings.

    Args:
        lines: Normalized logical lines.
        mode: Identifier source, ``ordinal`` or ``index``.

    Returns:
        Built records and warnings for skipped lines.
    """
    if mode == "index":
        records = tuple(
            _build_record(str(position), line) for position, line in enumerate(lines, 1)
        )
        return RecordBuildResult(records=records)
    built_records: list[ParsedRecord] = []
    warnings: list[str] = []
    for line in lines:
        match = _ORDINAL_LINE_PATTERN.match(line)
        if match is None:
            _LOGGER.warning("invalid_line_skipped", line=line)
            warnings.append(INVALID_LINE_WARNING_TEMPLATE.format(line=line))
            continue
        built_records.append(_build_record(match.group(1).strip(), match.group(2).strip()))
    return RecordBuildResult(records=tuple(built_records), warnings=tuple(warnings))


def serialize_record(record: ParsedRecord) -> str:
    """Render one record as a tab-indented metadata line.

    Args:
        record: Parsed category record.

    Returns:
        Serialized line, with an other-text suffix when flagged.
    """
    suffix = ""
    if record.is_other_specify:
        suffix = OTHER_SPECIFY_SUFFIX_TEMPLATE.format(identifier=record.identifier)
    return RECORD_LINE_TEMPLATE.format(
        identifier=record.identifier,
        content=record.content,
        suffix=suffix,
    )


def join_serialized(records: Iterable[ParsedRecord]) -> str:
    """Serialize records and join them into one category block."""
    return RECORD_SEPARATOR.join(serialize_record(record) for record in records)


def is_other_specify(content: str) -> bool:
    """Detect categories that ask the respondent to specify an answer.

    Args:
        content: Category text.

    Returns:
        True for "other ... specify/specific" text, case-insensitive,
        or text holding both localized other/specify tokens.
    """
    lowered = content.lower()
    if OTHER_SPECIFY_KEYWORD in lowered and any(
        keyword in lowered for keyword in SPECIFY_KEYWORDS
    ):
        return True
    return LOCALIZED_OTHER_TOKEN in content and LOCALIZED_SPECIFY_TOKEN in content


def escape_content(text: str) -> str:
    """Double every double quote for embedding in a quoted literal."""
    return text.replace('"', '""')


def unescape_content(text: str) -> str:
    """Reverse ``escape_content``."""
    return text.replace('""', '"')


def _build_record(identifier: str, content: str) -> ParsedRecord:
    return ParsedRecord(
        identifier=identifier,
        content=escape_content(content),
        is_other_specify=is_other_specify(content),
    )
