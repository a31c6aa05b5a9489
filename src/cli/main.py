"""Baiwen CLI entry point.

This module exposes the single source match command.
It maps argparse options onto the match pipeline and report renderers.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from core.config import BaiwenConfig, parse_type_labels
from core.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_TYPE_LABEL,
    SUPPORTED_LOG_LEVELS,
    TOOL_DESCRIPTION,
    TOOL_VERSION,
)
from core.errors import BaiwenConfigError, BaiwenIngestError
from core.logging_config import configure_logging, get_logger
from core.types import SourceMatchRequest
from ingest.pipeline import run_source_match
from report.source_report import (
    render_banner,
    render_completion_line,
    render_request_line,
    render_source_lines,
    render_unknown_type_message,
)

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="baiwen", description=TOOL_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {TOOL_VERSION}")
    parser.add_argument(
        "--path",
        required=True,
        metavar="FILE",
        help="Sets the input file to use",
    )
    parser.add_argument(
        "--string",
        required=True,
        metavar="STRING",
        help="Sets the string to match",
    )
    parser.add_argument(
        "--type",
        default=DEFAULT_TYPE_LABEL,
        metavar="TYPE",
        help="Sets the type(s) to match, comma separated",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=SUPPORTED_LOG_LEVELS,
        help="Structured log level written to stderr",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Baiwen CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    print(render_banner())
    parser = build_parser()
    args = parser.parse_args(argv)
    config = BaiwenConfig.from_args(args.log_level)
    configure_logging(config.log_level)
    try:
        type_labels = parse_type_labels(args.type)
    except BaiwenConfigError as error:
        rejected_label = error.value if error.value is not None else args.type
        _LOGGER.warning("type_label_rejected", label=rejected_label)
        for line in render_unknown_type_message(rejected_label):
            print(line)
        return 0
    request = SourceMatchRequest(
        input_path=Path(args.path),
        pattern=args.string,
        type_labels=type_labels,
    )
    return _run_match_command(request)


def _run_match_command(request: SourceMatchRequest) -> int:
    """Handle a validated match request.

    Args:
        request: Validated match request.

    Returns:
        Exit code.
    """
    print(render_request_line(request))
    try:
        result = run_source_match(request)
    except BaiwenIngestError as error:
        _LOGGER.error("source_match_failed", error=str(error))
        print(f"error={error}", file=sys.stderr)
        return 1
    print(render_completion_line(result.elapsed_seconds))
    print()
    for line in render_source_lines(result.sources):
        print(line)
    return 0
