"""Shared typed models.

This module defines immutable data models passed between the
normalizer, record builder, duplicate checker, and pipeline layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ParseMode = Literal["ordinal", "index"]
DuplicateFields = Literal["code", "label"]
AnnotationStyle = Literal["comment", "note"]
SelectionCommand = Literal["values", "check-duplicates", "swap-label-code"]


@dataclass(frozen=True)
class ParsedRecord:
    """One response category parsed from a logical line.

    Attributes:
        identifier: Numeric ordinal or 1-based line position.
        content: Category text with double quotes doubled.
        is_other_specify: Whether the category asks for free text.
    """

    identifier: str
    content: str
    is_other_specify: bool


@dataclass(frozen=True)
class RecordBuildResult:
    """Records built from one selection plus skipped-line warnings."""

    records: tuple[ParsedRecord, ...]
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class DuplicateReport:
    """Duplicate values found while scanning serialized text.

    Attributes:
        duplicate_identifiers: Repeated codes or labels, first detection order.
        duplicate_texts: Repeated normalized texts, first detection order.
    """

    duplicate_identifiers: tuple[str, ...] = ()
    duplicate_texts: tuple[str, ...] = ()

    @property
    def has_duplicates(self) -> bool:
        """Return whether either duplicate set is non-empty."""
        return bool(self.duplicate_identifiers or self.duplicate_texts)


@dataclass(frozen=True)
class TransformResult:
    """Outcome of processing one editor selection.

    Attributes:
        replacement: Text that replaces the selection, or None to keep it.
        warnings: Non-fatal messages to surface to the user.
        records: Records built for value-list commands.
        report: Duplicate report when a duplicate check ran.
    """

    replacement: str | None
    warnings: tuple[str, ...] = ()
    records: tuple[ParsedRecord, ...] = ()
    report: DuplicateReport | None = None

    @property
    def changed(self) -> bool:
        """Return whether the selection should be replaced."""
        return self.replacement is not None
