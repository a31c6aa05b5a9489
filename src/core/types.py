"""Shared typed models.

This module defines immutable data models used by ingest, transforms,
reporting, and the CLI to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class TypeLabel(str, Enum):
    """Closed vocabulary of asset type labels accepted on the command line."""

    GAME_OBJECT = "GameObject"
    MESH = "Mesh"
    TEXTURE_2D = "Texture2D"
    ANIMATOR = "Animator"
    MATERIAL = "Material"


def supported_type_labels() -> tuple[str, ...]:
    """Return recognized type label strings in declaration order."""
    return tuple(label.value for label in TypeLabel)


@dataclass(frozen=True)
class AssetRecord:
    """One asset entry from an asset map document.

    Attributes:
        name: Display label, not unique.
        container: Container the asset belongs to.
        source: File path or identifier the asset originates from.
        path_id: Numeric asset identifier.
        type_label: Type tag of the asset, e.g. ``Mesh``.
    """

    name: str
    container: str
    source: str
    path_id: int
    type_label: str


@dataclass(frozen=True)
class SourceMatchRequest:
    """Validated source match request.

    Attributes:
        input_path: Asset map JSON file to scan.
        pattern: Case-sensitive substring matched against record names.
        type_labels: Non-empty set of allowed type labels.
    """

    input_path: Path
    pattern: str
    type_labels: frozenset[TypeLabel]


@dataclass(frozen=True)
class SourceMatchResult:
    """Outcome of one source match run.

    Attributes:
        sources: Unique sources holding at least one matching record.
        record_count: Number of records parsed from the input.
        elapsed_seconds: Wall-clock time spent reading, parsing, and filtering.
    """

    sources: frozenset[str]
    record_count: int
    elapsed_seconds: float
