"""Duplicate code and text checker.

This module scans serialized category text for repeated identifiers
and repeated normalized texts. Findings are appended to the text as
diagnostic lines; the original content is never altered or rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Callable, Iterable

from core.constants import (
    CODE_IDENTIFIER_LABEL,
    COMMENT_ANNOTATION_TEMPLATE,
    DUPLICATE_ERROR_MARKER,
    DUPLICATE_TEXT_LABEL,
    DUPLICATE_VALUE_SEPARATOR,
    LABEL_IDENTIFIER_LABEL,
    NOTE_ANNOTATION_TEMPLATE,
)
from core.logging_config import get_logger
from core.types import AnnotationStyle, DuplicateFields, DuplicateReport

_LOGGER = get_logger(__name__)

FieldExtractor = Callable[[str], str | None]

_CODE_TOKEN_PATTERN = re.compile(r"_\d+", re.ASCII)
_QUOTED_TEXT_PATTERN = re.compile(r'"([^"]*)"')
_LABEL_ATTRIBUTE_PATTERN = re.compile(r'label="([^"]+)"')
_ELEMENT_TEXT_PATTERN = re.compile(r">([^<]+)<")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_ANNOTATION_TEMPLATES = {
    "comment": COMMENT_ANNOTATION_TEMPLATE,
    "note": NOTE_ANNOTATION_TEMPLATE,
}


def extract_code_token(line: str) -> str | None:
    """Return the first ``_<digits>`` token on a line."""
    match = _CODE_TOKEN_PATTERN.search(line)
    return match.group(0) if match else None


def extract_first_quoted(line: str) -> str | None:
    """Return text inside the first pair of double quotes on a line.

    Only one quoted region is read; doubled quotes inside category text
    end the region early.
    """
    match = _QUOTED_TEXT_PATTERN.search(line)
    return match.group(1) if match else None


def extract_label_attribute(line: str) -> str | None:
    """Return the first ``label="..."`` attribute value on a line."""
    match = _LABEL_ATTRIBUTE_PATTERN.search(line)
    return match.group(1) if match else None


def extract_element_text(line: str) -> str | None:
    """Return the first ``>text<`` element body on a line."""
    match = _ELEMENT_TEXT_PATTERN.search(line)
    return match.group(1) if match else None


def normalize_compare_text(text: str) -> str:
    """Remove all whitespace and upper-case text for comparison."""
    return _WHITESPACE_PATTERN.sub("", text).upper()


def find_duplicates(items: Iterable[str]) -> list[str]:
    """Return values occurring more than once.

    Args:
        items: Values in scan order.

    Returns:
        Each repeated value once, ordered by where it first repeats.
    """
    seen: set[str] = set()
    duplicates: dict[str, None] = {}
    for item in items:
        if item in seen:
            duplicates[item] = None
        else:
            seen.add(item)
    return list(duplicates)


@dataclass(frozen=True)
class DuplicateChecker:
    """Configurable duplicate checker over line-oriented text.

    Attributes:
        identifier_extractor: Reads the code or label from one line.
        text_extractor: Reads the display text from one line.
        identifier_label: Human name for identifiers in diagnostics.
        text_label: Human name for texts in diagnostics.
        annotation_style: ``comment`` or ``note`` diagnostic format.
    """

    identifier_extractor: FieldExtractor
    text_extractor: FieldExtractor
    identifier_label: str = CODE_IDENTIFIER_LABEL
    text_label: str = DUPLICATE_TEXT_LABEL
    annotation_style: AnnotationStyle = "comment"

    def scan(self, text: str) -> DuplicateReport:
        """Collect duplicate identifiers and normalized texts.

        Args:
            text: Serialized category block.

        Returns:
            Duplicate report, empty when all values are unique.
        """
        identifiers: list[str] = []
        texts: list[str] = []
        for line in text.split("\n"):
            if not line.strip():
                continue
            identifier = self.identifier_extractor(line)
            if identifier is not None:
                identifiers.append(identifier)
            display_text = self.text_extractor(line)
            if display_text is not None:
                texts.append(normalize_compare_text(display_text))
        return DuplicateReport(
            duplicate_identifiers=tuple(find_duplicates(identifiers)),
            duplicate_texts=tuple(find_duplicates(texts)),
        )

    def annotate(self, text: str, report: DuplicateReport) -> str:
        """Append diagnostic lines for a report to the original text."""
        if not report.has_duplicates:
            return text
        annotations: list[str] = []
        if report.duplicate_identifiers:
            annotations.append(
                self._format_annotation(self.identifier_label, report.duplicate_identifiers)
            )
        if report.duplicate_texts:
            annotations.append(self._format_annotation(self.text_label, report.duplicate_texts))
        separator = "" if not text or text.endswith("\n") else "\n"
        return text + separator + "\n".join(annotations)

    def check(self, text: str) -> tuple[str, DuplicateReport]:
        """Scan text and append diagnostics for any duplicates found."""
        report = self.scan(text)
        if report.has_duplicates:
            _LOGGER.info(
                "duplicates_found",
                identifiers=list(report.duplicate_identifiers),
                texts=list(report.duplicate_texts),
            )
        return self.annotate(text, report), report

    def _format_annotation(self, label: str, values: tuple[str, ...]) -> str:
        template = _ANNOTATION_TEMPLATES[self.annotation_style]
        return template.format(
            marker=DUPLICATE_ERROR_MARKER,
            label=label,
            values=DUPLICATE_VALUE_SEPARATOR.join(values),
        )


def build_duplicate_checker(
    fields: DuplicateFields = "code",
    style: AnnotationStyle = "comment",
) -> DuplicateChecker:
    """Build a checker for one of the field presets.

    Args:
        fields: ``code`` for ``_N "text"`` lines, ``label`` for
            ``label="x">text<`` markup.
        style: Diagnostic line format.

    Returns:
        Configured duplicate checker.
    """
    if fields == "label":
        return DuplicateChecker(
            identifier_extractor=extract_label_attribute,
            text_extractor=_extract_trimmed_element_text,
            identifier_label=LABEL_IDENTIFIER_LABEL,
            annotation_style=style,
        )
    return DuplicateChecker(
        identifier_extractor=extract_code_token,
        text_extractor=extract_first_quoted,
        identifier_label=CODE_IDENTIFIER_LABEL,
        annotation_style=style,
    )


def _extract_trimmed_element_text(line: str) -> str | None:
    element_text = extract_element_text(line)
    return element_text.strip() if element_text is not None else None
