"""Console rendering for source match runs.

This module turns requests and results into the human-readable lines
printed by the CLI. All functions are pure and return strings.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Iterable

from core.constants import BANNER_TEXT, TYPE_LABEL_SEPARATOR
from core.types import SourceMatchRequest, TypeLabel, supported_type_labels

SOURCE_HEADER_TEXT = "> Unique sources that contain a matching name and type:"
_DURATION_UNITS = (
    (1.0, "s"),
    (1e-3, "ms"),
    (1e-6, "µs"),
)


def display_name(source: str) -> str:
    """Return the final path segment of a source, or the source itself.

    Args:
        source: Source identifier, usually a ``/`` or ``\\`` separated path.

    Returns:
        File name when one can be derived, otherwise ``source`` verbatim.
    """
    name = PurePosixPath(source.replace("\\", "/")).name
    if not name or name == "..":
        return source
    return name


def render_banner() -> str:
    """Return the startup banner line."""
    return BANNER_TEXT


def render_request_line(request: SourceMatchRequest) -> str:
    """Render the status line echoing a parsed request."""
    type_text = format_type_labels(request.type_labels)
    input_name = display_name(str(request.input_path))
    return f"> Trying to match [ {request.pattern} ] with type [ {type_text} ] in [ {input_name} ]"


def render_completion_line(elapsed_seconds: float) -> str:
    """Render the completion line with elapsed wall-clock time."""
    return f"> Done! ({format_duration(elapsed_seconds)})"


def render_source_lines(sources: Iterable[str]) -> list[str]:
    """Render the result header and one indented line per source.

    Args:
        sources: Unique matched sources, in any order.

    Returns:
        Header line followed by display lines in iteration order.
    """
    lines = [SOURCE_HEADER_TEXT]
    for source in sources:
        lines.append(f"  > {display_name(source)}")
    return lines


def render_unknown_type_message(label: str) -> list[str]:
    """Render guidance for an unrecognized type label.

    Args:
        label: Rejected label text.

    Returns:
        Error line followed by one line per valid label.
    """
    lines = [
        f"Error: '{label}' is not a recognized type. "
        "Please use one of the following valid types:"
    ]
    for valid_label in supported_type_labels():
        lines.append(f"> {valid_label}")
    return lines


def format_type_labels(type_labels: Iterable[TypeLabel]) -> str:
    """Join labels in vocabulary order for display."""
    requested = {TypeLabel(label).value for label in type_labels}
    return TYPE_LABEL_SEPARATOR.join(
        label for label in supported_type_labels() if label in requested
    )


def format_duration(elapsed_seconds: float) -> str:
    """Format a duration using the largest unit that keeps it above one.

    Args:
        elapsed_seconds: Duration in seconds.

    Returns:
        Text such as ``1.250ms`` or ``980ns``.
    """
    for scale, unit in _DURATION_UNITS:
        if elapsed_seconds >= scale:
            return f"{elapsed_seconds / scale:.3f}{unit}"
    return f"{round(elapsed_seconds * 1e9)}ns"
