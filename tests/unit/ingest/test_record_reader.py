"""Unit tests for asset map record reader."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from core.errors import BaiwenIngestError
from core.types import AssetRecord
from ingest.record_reader import parse_asset_records, read_asset_records
from tests.fixture_paths import fixture_path


def _row(**overrides: object) -> dict[str, object]:
    row: dict[str, object] = {
        "Name": "Tree_01",
        "Container": "c",
        "Source": "assets/forest.json",
        "PathID": 1,
        "Type": "Mesh",
    }
    row.update(overrides)
    return row


def test_read_asset_records_parses_fixture() -> None:
    """Reader should return typed records in document order."""
    records = read_asset_records(fixture_path("asset_maps/forest.json"))

    assert records[0] == AssetRecord(
        name="Tree_01",
        container="c",
        source="assets/forest.json",
        path_id=1,
        type_label="Mesh",
    )
    assert [record.name for record in records] == ["Tree_01", "Tree_02", "Rock_01"]


def test_read_asset_records_ignores_extra_fields_and_accepts_i64_bounds() -> None:
    """Extra fields are ignored and 64-bit path ids are accepted."""
    records = read_asset_records(fixture_path("asset_maps/scene_export.json"))

    path_ids = {record.path_id for record in records}
    assert len(records) == 6
    assert -(2**63) in path_ids and 2**63 - 1 in path_ids


def test_read_asset_records_raises_for_missing_path(tmp_path: Path) -> None:
    """Reader should fail when the input file is missing."""
    missing_path = tmp_path / "does-not-exist.json"

    with pytest.raises(BaiwenIngestError, match="does not exist"):
        read_asset_records(missing_path)


def test_read_asset_records_raises_for_directory(tmp_path: Path) -> None:
    """Reader should refuse a directory path."""
    with pytest.raises(BaiwenIngestError, match="not a file"):
        read_asset_records(tmp_path)


def test_read_asset_records_raises_for_invalid_utf8(tmp_path: Path) -> None:
    """Undecodable bytes should surface as an ingest error."""
    input_path = tmp_path / "binary.json"
    input_path.write_bytes(b"[\xff\xfe]")

    with pytest.raises(BaiwenIngestError) as error_info:
        read_asset_records(input_path)

    assert isinstance(error_info.value.__cause__, UnicodeDecodeError)


def test_read_asset_records_raises_for_truncated_json() -> None:
    """Malformed JSON should fail without a partial result."""
    with pytest.raises(BaiwenIngestError, match="Failed to parse"):
        read_asset_records(fixture_path("asset_maps/truncated.json"))


def test_parse_asset_records_accepts_empty_array() -> None:
    """An empty array is a valid document with no records."""
    assert parse_asset_records("[]") == []


def test_parse_asset_records_rejects_non_array_root() -> None:
    """Top-level objects should be rejected."""
    with pytest.raises(BaiwenIngestError, match="top-level array"):
        parse_asset_records(json.dumps(_row()))


def test_parse_asset_records_rejects_non_object_element() -> None:
    """Array elements must be objects."""
    with pytest.raises(BaiwenIngestError, match="element #1"):
        parse_asset_records(json.dumps([_row(), "Tree_02"]))


def test_parse_asset_records_rejects_missing_field() -> None:
    """Every required field must be present."""
    row = _row()
    del row["Source"]

    with pytest.raises(BaiwenIngestError, match="missing field"):
        parse_asset_records(json.dumps([row]))


def test_parse_asset_records_field_names_are_case_sensitive() -> None:
    """Lowercase field names should not satisfy the schema."""
    row = _row()
    row["name"] = row.pop("Name")

    with pytest.raises(BaiwenIngestError, match="Name"):
        parse_asset_records(json.dumps([row]))


@pytest.mark.parametrize(
    "overrides",
    [
        {"Name": 5},
        {"Type": None},
        {"PathID": "1"},
        {"PathID": 1.5},
        {"PathID": True},
        {"PathID": 2**63},
    ],
)
def test_parse_asset_records_rejects_wrong_field_shape(overrides: dict[str, object]) -> None:
    """Fields with the wrong JSON type should be rejected."""
    with pytest.raises(BaiwenIngestError, match="field"):
        parse_asset_records(json.dumps([_row(**overrides)]))
