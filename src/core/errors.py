"""mddkit exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Text transforms never raise; only configuration and input loading do.
"""

from __future__ import annotations


class MddkitError(Exception):
    """Base exception for all mddkit failures."""


class MddkitConfigError(MddkitError):
    """Raised for invalid transform configuration."""


class MddkitInputError(MddkitError):
    """Raised when a selection source cannot be read."""


class MddkitDependencyError(MddkitError):
    """Raised when an optional runtime dependency is missing."""
