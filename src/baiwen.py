"""Public SDK surface for Baiwen.

This module provides a stable import path for library users.
It re-exports the record reader, matcher, and typed models.
"""

from __future__ import annotations

from core.config import parse_type_labels
from core.errors import BaiwenConfigError, BaiwenError, BaiwenIngestError
from core.types import AssetRecord, SourceMatchRequest, SourceMatchResult, TypeLabel
from ingest.pipeline import run_source_match
from ingest.record_reader import parse_asset_records, read_asset_records
from report.source_report import display_name
from transforms.source_matching import match_sources, record_matches

__all__ = [
    "AssetRecord",
    "BaiwenConfigError",
    "BaiwenError",
    "BaiwenIngestError",
    "SourceMatchRequest",
    "SourceMatchResult",
    "TypeLabel",
    "display_name",
    "match_sources",
    "parse_asset_records",
    "parse_type_labels",
    "read_asset_records",
    "record_matches",
    "run_source_match",
]
