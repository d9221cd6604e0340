"""Transform configuration model for mddkit.

This module owns all environment variable and options-file parsing.
Every command receives a typed options object instead of reading
process-wide state, so two invocations never share a write mode.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Mapping, cast

from core.constants import (
    DEFAULT_ANNOTATION_STYLE,
    DEFAULT_DUPLICATE_FIELDS,
    DEFAULT_ESCAPE_AMPERSANDS,
    DEFAULT_PARSE_MODE,
    ENV_ANNOTATION_STYLE,
    ENV_DUPLICATE_FIELDS,
    ENV_ESCAPE_AMPERSANDS,
    ENV_PARSE_MODE,
    FALSE_VALUES,
    SUPPORTED_ANNOTATION_STYLES,
    SUPPORTED_DUPLICATE_FIELDS,
    SUPPORTED_PARSE_MODES,
    TRUE_VALUES,
)
from core.errors import MddkitConfigError, MddkitDependencyError
from core.types import AnnotationStyle, DuplicateFields, ParseMode

_OPTION_KEYS = ("parse_mode", "duplicate_fields", "annotation_style", "escape_ampersands")


@dataclass(frozen=True)
class TransformOptions:
    """Validated per-invocation transform options.

    Attributes:
        parse_mode: Record identifier source, ordinal prefix or line index.
        duplicate_fields: Field preset used by the duplicate checker.
        annotation_style: Output format of duplicate diagnostics.
        escape_ampersands: Whether to emit ``&`` as ``&amp;``.
    """

    parse_mode: ParseMode = cast(ParseMode, DEFAULT_PARSE_MODE)
    duplicate_fields: DuplicateFields = cast(DuplicateFields, DEFAULT_DUPLICATE_FIELDS)
    annotation_style: AnnotationStyle = cast(AnnotationStyle, DEFAULT_ANNOTATION_STYLE)
    escape_ampersands: bool = DEFAULT_ESCAPE_AMPERSANDS

    @classmethod
    def from_env(cls) -> "TransformOptions":
        """Build options from process environment variables.

        Returns:
            A validated options object.

        Raises:
            MddkitConfigError: If environment values are invalid.
        """
        return cls(
            parse_mode=_parse_parse_mode(os.getenv(ENV_PARSE_MODE, DEFAULT_PARSE_MODE)),
            duplicate_fields=_parse_duplicate_fields(
                os.getenv(ENV_DUPLICATE_FIELDS, DEFAULT_DUPLICATE_FIELDS)
            ),
            annotation_style=_parse_annotation_style(
                os.getenv(ENV_ANNOTATION_STYLE, DEFAULT_ANNOTATION_STYLE)
            ),
            escape_ampersands=_parse_bool(
                ENV_ESCAPE_AMPERSANDS,
                os.getenv(ENV_ESCAPE_AMPERSANDS, str(DEFAULT_ESCAPE_AMPERSANDS)),
            ),
        )

    def with_overrides(self, values: Mapping[str, object]) -> "TransformOptions":
        """Return a copy with validated option overrides applied.

        Args:
            values: Option names mapped to raw values. None values are ignored.

        Returns:
            A new validated options object.

        Raises:
            MddkitConfigError: If a key is unknown or a value is invalid.
        """
        unknown_keys = sorted(set(values) - set(_OPTION_KEYS))
        if unknown_keys:
            raise MddkitConfigError(
                f"Unknown option(s): {', '.join(unknown_keys)}. "
                f"Supported options: {', '.join(_OPTION_KEYS)}."
            )
        options = self
        if values.get("parse_mode") is not None:
            options = replace(options, parse_mode=_parse_parse_mode(str(values["parse_mode"])))
        if values.get("duplicate_fields") is not None:
            options = replace(
                options,
                duplicate_fields=_parse_duplicate_fields(str(values["duplicate_fields"])),
            )
        if values.get("annotation_style") is not None:
            options = replace(
                options,
                annotation_style=_parse_annotation_style(str(values["annotation_style"])),
            )
        if values.get("escape_ampersands") is not None:
            options = replace(
                options,
                escape_ampersands=_parse_bool(
                    "escape_ampersands", values["escape_ampersands"]
                ),
            )
        return options


def load_options_file(options_path: str, base: TransformOptions | None = None) -> TransformOptions:
    """Load options from a YAML mapping layered over base options.

    Args:
        options_path: File path to a YAML options file.
        base: Options to override, defaults to environment options.

    Returns:
        Validated options object.

    Raises:
        MddkitDependencyError: If PyYAML is unavailable.
        MddkitConfigError: If file is missing, unparsable, or invalid.
    """
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise MddkitDependencyError(
            "Options files require PyYAML. Install with 'pip install pyyaml'."
        ) from error
    options_file = Path(options_path).expanduser().resolve()
    if not options_file.exists():
        raise MddkitConfigError(
            f"Options file does not exist at {options_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(options_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise MddkitConfigError(
            f"Failed to read options file at {options_file}: {error}."
        ) from error
    except yaml.YAMLError as error:
        raise MddkitConfigError(
            f"Failed to parse YAML options at {options_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise MddkitConfigError(
            f"Invalid options file at {options_file}: expected a mapping, "
            f"got {type(payload).__name__}."
        )
    base_options = base if base is not None else TransformOptions.from_env()
    return base_options.with_overrides({str(key): value for key, value in payload.items()})


def _parse_parse_mode(raw_value: str) -> ParseMode:
    return cast(ParseMode, _parse_choice("parse_mode", raw_value, SUPPORTED_PARSE_MODES))


def _parse_duplicate_fields(raw_value: str) -> DuplicateFields:
    return cast(
        DuplicateFields,
        _parse_choice("duplicate_fields", raw_value, SUPPORTED_DUPLICATE_FIELDS),
    )


def _parse_annotation_style(raw_value: str) -> AnnotationStyle:
    return cast(
        AnnotationStyle,
        _parse_choice("annotation_style", raw_value, SUPPORTED_ANNOTATION_STYLES),
    )


def _parse_choice(option_name: str, raw_value: str, choices: tuple[str, ...]) -> str:
    """Validate one enumerated option value.

    Args:
        option_name: Option name used in error messages.
        raw_value: Raw string value.
        choices: Accepted lowercase values.

    Returns:
        Normalized option value.

    Raises:
        MddkitConfigError: If value is not one of the choices.
    """
    normalized_value = raw_value.strip().lower()
    if normalized_value not in choices:
        raise MddkitConfigError(
            f"Invalid {option_name} value: expected one of {', '.join(choices)}, "
            f"got '{raw_value}'."
        )
    return normalized_value


def _parse_bool(option_name: str, raw_value: object) -> bool:
    """Parse a boolean option from YAML or environment text.

    Raises:
        MddkitConfigError: If value is not a recognized boolean.
    """
    if isinstance(raw_value, bool):
        return raw_value
    normalized_value = str(raw_value).strip().lower()
    if normalized_value in TRUE_VALUES:
        return True
    if normalized_value in FALSE_VALUES:
        return False
    raise MddkitConfigError(
        f"Invalid {option_name} value: expected true or false, got '{raw_value}'."
    )
