"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_OPTION_ENV_NAMES = (
    "MDDKIT_PARSE_MODE",
    "MDDKIT_DUPLICATE_FIELDS",
    "MDDKIT_ANNOTATION_STYLE",
    "MDDKIT_ESCAPE_AMPERSANDS",
)


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolate_option_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer MDDKIT_* variables out of test runs."""
    for name in _OPTION_ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
