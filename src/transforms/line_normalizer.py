"""Line normalization transform.

This module cleans a raw editor selection into logical lines.
It is the first stage of every value-list command.
"""

from __future__ import annotations

import re

_LINE_ENDING_PATTERN = re.compile(r"\r\n?")
_TAB_RUN_PATTERN = re.compile(r"\t+")
_BLANK_SPACE_LINE_PATTERN = re.compile(r"\n +\n")
_NEWLINE_RUN_PATTERN = re.compile(r"\n{2,}")


def normalize_lines(raw_text: str) -> list[str]:
    """Split a raw selection into trimmed, non-blank logical lines.

    Args:
        raw_text: Selection text as provided by the editor.

    Returns:
        Ordered logical lines. Empty for blank input.
    """
    text = _LINE_ENDING_PATTERN.sub("\n", raw_text)
    text = _TAB_RUN_PATTERN.sub(" ", text)
    text = _BLANK_SPACE_LINE_PATTERN.sub("\n\n", text)
    text = _NEWLINE_RUN_PATTERN.sub("\n", text)
    text = text.strip()
    if not text:
        return []
    lines = [line.strip() for line in text.split("\n")]
    # overlapping whitespace-only runs survive the substitutions above
    return [line for line in lines if line]
