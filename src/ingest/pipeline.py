"""Source match orchestration.

This module reads an asset map, applies the source matching transform,
and times the read, parse, and filter stages as one unit.
"""

from __future__ import annotations

import time

from core.logging_config import get_logger
from core.types import SourceMatchRequest, SourceMatchResult
from ingest.record_reader import read_asset_records
from transforms.source_matching import match_sources

_LOGGER = get_logger(__name__)


def run_source_match(request: SourceMatchRequest) -> SourceMatchResult:
    """Execute one source match run.

    Args:
        request: Validated match request.

    Returns:
        Matched sources with record count and elapsed time.

    Raises:
        BaiwenIngestError: If the asset map cannot be read or parsed.
    """
    started_at = time.perf_counter()
    records = read_asset_records(request.input_path)
    _LOGGER.info(
        "asset_records_loaded",
        path=str(request.input_path),
        record_count=len(records),
    )
    allowed_types = frozenset(label.value for label in request.type_labels)
    sources = match_sources(records, request.pattern, allowed_types)
    elapsed_seconds = time.perf_counter() - started_at
    _LOGGER.info(
        "sources_matched",
        record_count=len(records),
        source_count=len(sources),
        type_labels=sorted(allowed_types),
        elapsed_seconds=elapsed_seconds,
    )
    return SourceMatchResult(
        sources=sources,
        record_count=len(records),
        elapsed_seconds=elapsed_seconds,
    )
