"""Runtime configuration model for Baiwen.

This module owns validation of user-supplied options.
Other modules consume typed values instead of raw CLI strings.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import DEFAULT_LOG_LEVEL, SUPPORTED_LOG_LEVELS, TYPE_LABEL_SEPARATOR
from core.errors import BaiwenConfigError
from core.types import TypeLabel, supported_type_labels


@dataclass(frozen=True)
class BaiwenConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum level for structured log events.
    """

    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_args(cls, log_level: str | None = None) -> "BaiwenConfig":
        """Build config from parsed CLI values.

        Args:
            log_level: Optional log level name.

        Returns:
            A validated config object.

        Raises:
            BaiwenConfigError: If the log level is not supported.
        """
        return cls(log_level=_parse_log_level(log_level or DEFAULT_LOG_LEVEL))


def parse_type_labels(raw_value: str) -> frozenset[TypeLabel]:
    """Parse a comma-separated type label list.

    Args:
        raw_value: Raw ``--type`` value, e.g. ``Mesh,Texture2D``.

    Returns:
        Non-empty set of recognized labels.

    Raises:
        BaiwenConfigError: If any label is outside the recognized vocabulary.
    """
    labels: set[TypeLabel] = set()
    for raw_label in raw_value.split(TYPE_LABEL_SEPARATOR):
        if raw_label not in supported_type_labels():
            supported_rows = ", ".join(supported_type_labels())
            raise BaiwenConfigError(
                f"'{raw_label}' is not a recognized type. Use one of: {supported_rows}.",
                value=raw_label,
            )
        labels.add(TypeLabel(raw_label))
    return frozenset(labels)


def _parse_log_level(raw_value: str) -> str:
    """Normalize and validate a log level name.

    Args:
        raw_value: Raw level name.

    Returns:
        Lowercase level name.

    Raises:
        BaiwenConfigError: If the level is unknown.
    """
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise BaiwenConfigError(
            f"Invalid log level '{raw_value}'. Use one of: {', '.join(SUPPORTED_LOG_LEVELS)}.",
            value=raw_value,
        )
    return level
