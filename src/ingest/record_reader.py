"""Asset map readers.

This module loads an asset map JSON document from disk.
It normalizes the top-level array into typed asset records.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from core.constants import (
    INPUT_ENCODING,
    PATH_ID_MAX,
    PATH_ID_MIN,
    RECORD_CONTAINER_FIELD,
    RECORD_NAME_FIELD,
    RECORD_PATH_ID_FIELD,
    RECORD_SOURCE_FIELD,
    RECORD_TYPE_FIELD,
    REQUIRED_RECORD_FIELDS,
)
from core.errors import BaiwenIngestError
from core.types import AssetRecord


def read_asset_records(input_path: Path) -> list[AssetRecord]:
    """Load every asset record from a JSON file.

    Args:
        input_path: Path to a UTF-8 JSON asset map.

    Returns:
        Records in document order.

    Raises:
        BaiwenIngestError: If the file cannot be read or parsed.
    """
    source_path = Path(input_path).expanduser()
    if not source_path.exists():
        raise BaiwenIngestError(
            f"Failed to read asset map at {source_path}: path does not exist. "
            "Provide an existing JSON file."
        )
    if not source_path.is_file():
        raise BaiwenIngestError(
            f"Failed to read asset map at {source_path}: path is not a file."
        )
    try:
        text = source_path.read_text(encoding=INPUT_ENCODING)
    except (OSError, UnicodeDecodeError) as error:
        raise BaiwenIngestError(
            f"Failed to read asset map at {source_path}: {error}. "
            "Check file permissions and encoding."
        ) from error
    return parse_asset_records(text, origin=str(source_path))


def parse_asset_records(text: str, origin: str = "<string>") -> list[AssetRecord]:
    """Parse asset map JSON text into records.

    Args:
        text: JSON document holding one array of objects.
        origin: Label used in error messages.

    Returns:
        Records in document order.

    Raises:
        BaiwenIngestError: If the document is invalid or any element is malformed.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as error:
        raise BaiwenIngestError(
            f"Failed to parse asset map at {origin}: {error.msg} "
            f"(line {error.lineno}, column {error.colno})."
        ) from error
    if not isinstance(payload, list):
        raise BaiwenIngestError(
            f"Invalid asset map at {origin}: expected a top-level array, "
            f"got {type(payload).__name__}."
        )
    return [_parse_record(element, origin, index) for index, element in enumerate(payload)]


def _parse_record(element: object, origin: str, index: int) -> AssetRecord:
    context = f"{origin} element #{index}"
    if not isinstance(element, Mapping):
        raise BaiwenIngestError(
            f"Invalid asset record at {context}: expected object, got {type(element).__name__}."
        )
    missing_fields = [name for name in REQUIRED_RECORD_FIELDS if name not in element]
    if missing_fields:
        raise BaiwenIngestError(
            f"Invalid asset record at {context}: missing field(s) {', '.join(missing_fields)}."
        )
    return AssetRecord(
        name=_expect_string(element, RECORD_NAME_FIELD, context),
        container=_expect_string(element, RECORD_CONTAINER_FIELD, context),
        source=_expect_string(element, RECORD_SOURCE_FIELD, context),
        path_id=_expect_path_id(element, context),
        type_label=_expect_string(element, RECORD_TYPE_FIELD, context),
    )


def _expect_string(element: Mapping[str, object], field_name: str, context: str) -> str:
    value = element[field_name]
    if not isinstance(value, str):
        raise BaiwenIngestError(
            f"Invalid asset record at {context}: field '{field_name}' must be a string, "
            f"got {type(value).__name__}."
        )
    return value


def _expect_path_id(element: Mapping[str, object], context: str) -> int:
    value = element[RECORD_PATH_ID_FIELD]
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise BaiwenIngestError(
            f"Invalid asset record at {context}: field '{RECORD_PATH_ID_FIELD}' must be an "
            f"integer, got {type(value).__name__}."
        )
    if not PATH_ID_MIN <= value <= PATH_ID_MAX:
        raise BaiwenIngestError(
            f"Invalid asset record at {context}: field '{RECORD_PATH_ID_FIELD}' value {value} "
            "is outside the signed 64-bit range."
        )
    return value
