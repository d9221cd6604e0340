"""Label/code swap transform.

This module moves a trailing numeric code to the front of each line,
turning ``Red 1`` into ``1<TAB>Red``.
"""

from __future__ import annotations


def swap_label_code(raw_text: str) -> list[str] | None:
    """Move trailing codes to the start of each non-blank line.

    The split point is the last tab on the line, or the last space when
    the line has no tab. Lines whose trailing token is not all digits
    are returned unchanged.

    Args:
        raw_text: Selection text.

    Returns:
        Swapped lines, or None when the selection is blank.
    """
    if not raw_text.strip():
        return None
    lines = [line.strip() for line in raw_text.strip().split("\n")]
    return [_swap_line(line) for line in lines if line]


def _swap_line(line: str) -> str:
    separator = "\t" if "\t" in line else " "
    split_index = line.rfind(separator)
    if split_index == -1:
        return line
    content = line[:split_index].strip()
    code = line[split_index + 1 :].strip()
    if code.isascii() and code.isdigit():
        return f"{code}\t{content}"
    return line
