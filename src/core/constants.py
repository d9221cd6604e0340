"""Core constants used across mddkit modules.

This module centralizes metadata templates and option defaults.
Keeping values here avoids magic literals in transform logic.
"""

from __future__ import annotations

DEFAULT_PARSE_MODE = "ordinal"
SUPPORTED_PARSE_MODES = ("ordinal", "index")
DEFAULT_DUPLICATE_FIELDS = "code"
SUPPORTED_DUPLICATE_FIELDS = ("code", "label")
DEFAULT_ANNOTATION_STYLE = "comment"
SUPPORTED_ANNOTATION_STYLES = ("comment", "note")
DEFAULT_ESCAPE_AMPERSANDS = True

RECORD_SEPARATOR = ",\n"
RECORD_LINE_TEMPLATE = '\t_{identifier} "{content}"{suffix}'
OTHER_SPECIFY_SUFFIX_TEMPLATE = " (_{identifier} other text [1..])"
OTHER_SPECIFY_KEYWORD = "other"
SPECIFY_KEYWORDS = ("specify", "specific")
LOCALIZED_OTHER_TOKEN = "기타"
LOCALIZED_SPECIFY_TOKEN = "구체적"

DUPLICATE_ERROR_MARKER = "❌ ERROR"
DUPLICATE_VALUE_SEPARATOR = ", "
CODE_IDENTIFIER_LABEL = "Code"
LABEL_IDENTIFIER_LABEL = "Label"
DUPLICATE_TEXT_LABEL = "Text"
COMMENT_ANNOTATION_TEMPLATE = "' {marker} Duplicate {label}: {values}"
NOTE_ANNOTATION_TEMPLATE = "<note>{marker} Duplicate {label}: {values}</note>"

EMPTY_SELECTION_WARNING = "No text selected."
NO_VALID_LINES_WARNING = "No valid lines found."
INVALID_LINE_WARNING_TEMPLATE = "Invalid format in line: {line}"

ENV_PARSE_MODE = "MDDKIT_PARSE_MODE"
ENV_DUPLICATE_FIELDS = "MDDKIT_DUPLICATE_FIELDS"
ENV_ANNOTATION_STYLE = "MDDKIT_ANNOTATION_STYLE"
ENV_ESCAPE_AMPERSANDS = "MDDKIT_ESCAPE_AMPERSANDS"
TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")
