"""Source matching transform.

This module selects the unique sources that hold at least one record
whose name contains a pattern and whose type is in an allowed set.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable

from core.types import AssetRecord


def match_sources(
    records: Iterable[AssetRecord],
    pattern: str,
    allowed_types: AbstractSet[str],
) -> frozenset[str]:
    """Collect unique sources of records matching name and type.

    Args:
        records: Parsed asset records.
        pattern: Case-sensitive substring; empty matches every name.
        allowed_types: Validated type labels to accept.

    Returns:
        Unique matching sources, empty when nothing matches.
    """
    unique_sources: set[str] = set()
    for record in records:
        if record_matches(record, pattern, allowed_types):
            unique_sources.add(record.source)
    return frozenset(unique_sources)


def record_matches(record: AssetRecord, pattern: str, allowed_types: AbstractSet[str]) -> bool:
    """Return whether one record satisfies the match predicate."""
    return record.type_label in allowed_types and pattern in record.name
