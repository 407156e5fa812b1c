"""
Command line entry point for ``weekreport``.

1. Parses the command line with ``argparse``. Every ``--assignment-files``
   occurrence is validated into a ``Group`` while arguments are parsed, so a
   malformed path list stops the run before any file is touched.
2. Builds the ``ReportConfig`` via ``build_report_config``, optionally
   extending the language table from a YAML file.
3. Runs the ``ReportWriter`` and reports the outcome as a structured log line.
"""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional, Sequence

from weekreport.core.config import MAX_WEEK
from weekreport.core.configuration import build_report_config
from weekreport.core.errors import ReportError
from weekreport.core.paths import argparse_path_list
from weekreport.reporting.writer import ReportWriter
from weekreport.utils.logging import configure_logging, structured_log

DIST_NAME = "weekreport"

logger = logging.getLogger(__name__)


def package_version() -> str:
    """Installed distribution version, or ``unknown`` when running from a checkout."""

    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "unknown"


def _unsigned_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{raw!r} is not an integer") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"{raw!r} must not be negative")
    return value


def _week_number(raw: str) -> int:
    value = _unsigned_int(raw)
    if value > MAX_WEEK:
        raise argparse.ArgumentTypeError(f"{raw!r} must be at most {MAX_WEEK}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weekreport",
        description="Assemble source files into a Markdown assignment or tutorial report",
    )
    parser.add_argument("-n", "--name", required=True, help="Student display name")
    parser.add_argument("-c", "--class", dest="class_name", required=True, help="Class identifier")
    parser.add_argument("-s", "--student-number", type=_unsigned_int, required=True, help="Student number")
    parser.add_argument(
        "-a",
        "--assignment-files",
        type=argparse_path_list,
        action="append",
        required=True,
        help="Space separated file paths; repeat once per assignment",
    )
    parser.add_argument("-t", "--tutorial", action="store_true", help="Use 'Tutorial' instead of 'Assignment'")
    parser.add_argument("-w", "--week", type=_week_number, required=True, help="Week number (0-255)")
    parser.add_argument("-o", "--output-file", type=Path, default=None, help="Output path (default: week<N>.md)")
    parser.add_argument("--languages", type=Path, default=None, help="YAML file with extra extension tags")
    parser.add_argument("--log-level", default="WARNING", help="Logging verbosity")
    parser.add_argument("--version", action="version", version=f"%(prog)s {package_version()}")
    return parser


def parse_args(args: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(args)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = build_report_config(args)
        summary = ReportWriter(config).write()
    except ReportError as exc:
        structured_log(logging.DEBUG, event="report_failed", error=type(exc).__name__, message=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1

    structured_log(
        logging.INFO,
        event="report_written",
        output=str(summary.output_path),
        groups=summary.groups,
        files=summary.files,
        bytes_copied=summary.bytes_copied,
    )
    return 0


def run() -> None:  # pragma: no cover - console script entry point
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    run()
