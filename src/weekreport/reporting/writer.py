"""Markdown report emission.

``ReportWriter`` turns a :class:`~weekreport.core.config.ReportConfig` into a
single Markdown document: a header with the student metadata followed by one
numbered section per group and one fenced code block per file. Lines end with
two spaces (a Markdown hard line break) except the fence openings and the
copied file contents.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from weekreport.core.config import Group, ReportConfig
from weekreport.core.errors import IoError
from weekreport.core.languages import DEFAULT_LANGUAGES, LanguageTable
from weekreport.core.paths import extract_file_name
from weekreport.utils.io import open_output, read_source_bytes

logger = logging.getLogger(__name__)

LINE_BREAK = "  \n"
DATE_FORMAT = "%d/%m/%Y"
FENCE = "```"


@dataclass(slots=True)
class ReportSummary:
    """Counters describing a finished report."""

    output_path: Path
    groups: int = 0
    files: int = 0
    bytes_copied: int = 0


class ReportWriter:
    """Write the weekly report described by ``config`` to its output path."""

    def __init__(self, config: ReportConfig) -> None:
        self._config = config
        self._languages: LanguageTable = config.languages or DEFAULT_LANGUAGES

    def write(self) -> ReportSummary:
        """Create or truncate the output file and emit the full document.

        Any failure propagates immediately; the output file is then left as
        far as it was written.
        """

        output_path = self._config.output_path
        summary = ReportSummary(output_path=output_path)
        try:
            with open_output(output_path) as sink:
                self._write_header(sink)
                for number, group in enumerate(self._config.groups, start=1):
                    self._write_group(sink, number, group, summary)
                    summary.groups += 1
        except OSError as exc:
            raise IoError(output_path, f"Cannot write output file ({exc.strerror or exc})") from exc
        logger.info("Report written to %s", self._config.output_path)
        return summary

    def render_header(self) -> str:
        config = self._config
        lines = [
            f"# {config.kind} week {config.week}",
            "",
            f"Name: {config.name}",
            f"Student number: {config.student_number}",
            f"Class: {config.class_name}",
            f"Date: {config.report_date.strftime(DATE_FORMAT)}",
            "",
        ]
        return "".join(line + LINE_BREAK for line in lines)

    def _write_header(self, sink: BinaryIO) -> None:
        _emit(sink, self.render_header())

    def _write_group(self, sink: BinaryIO, number: int, group: Group, summary: ReportSummary) -> None:
        _emit(sink, f"## {self._config.kind} {number}{LINE_BREAK}{LINE_BREAK}")
        for path in group:
            file_name = extract_file_name(path)
            tag = self._languages.resolve(file_name, path)
            content = read_source_bytes(Path(path))
            logger.debug("Copying %s (%d bytes) as %s", path, len(content), tag)

            _emit(sink, f"### File: {file_name}{LINE_BREAK}{LINE_BREAK}")
            _emit(sink, f"{FENCE}{tag}\n")
            sink.write(content)
            if content and not content.endswith(b"\n"):
                sink.write(b"\n")
            _emit(sink, f"{FENCE}{LINE_BREAK}")

            summary.files += 1
            summary.bytes_copied += len(content)


def _emit(sink: BinaryIO, text: str) -> None:
    sink.write(text.encode("utf-8"))


def write_report(config: ReportConfig) -> ReportSummary:
    """Convenience wrapper around :class:`ReportWriter`."""

    return ReportWriter(config).write()


__all__ = ["ReportSummary", "ReportWriter", "write_report"]
