"""Baiwen exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Configuration errors are recoverable at the CLI edge, while ingest
errors abort the run.
"""

from __future__ import annotations


class BaiwenError(Exception):
    """Base exception for all Baiwen failures."""


class BaiwenConfigError(BaiwenError):
    """Raised for invalid user-supplied options.

    Attributes:
        value: The rejected option value, when one is known.
    """

    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value


class BaiwenIngestError(BaiwenError):
    """Raised when the asset map cannot be read or parsed."""
