"""Core constants used across Baiwen modules.

This module centralizes tool metadata and input schema names.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

TOOL_NAME = "Baiwen"
TOOL_VERSION = "0.1.0"
TOOL_DESCRIPTION = (
    "Parses the JSON maps a certain program builds and matches a string and type to a source file"
)
BANNER_TEXT = f"--  {TOOL_NAME} [v{TOOL_VERSION}]  --"
DEFAULT_TYPE_LABEL = "GameObject"
TYPE_LABEL_SEPARATOR = ","
RECORD_NAME_FIELD = "Name"
RECORD_CONTAINER_FIELD = "Container"
RECORD_SOURCE_FIELD = "Source"
RECORD_PATH_ID_FIELD = "PathID"
RECORD_TYPE_FIELD = "Type"
REQUIRED_RECORD_FIELDS = (
    RECORD_NAME_FIELD,
    RECORD_CONTAINER_FIELD,
    RECORD_SOURCE_FIELD,
    RECORD_PATH_ID_FIELD,
    RECORD_TYPE_FIELD,
)
PATH_ID_MIN = -(2**63)
PATH_ID_MAX = 2**63 - 1
INPUT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
