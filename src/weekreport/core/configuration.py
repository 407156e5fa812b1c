"""Configuration loading utilities for report runs."""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path
from typing import Any, Mapping, Optional

from weekreport.core.config import ReportConfig, default_output_path
from weekreport.core.errors import ValidationError
from weekreport.core.languages import DEFAULT_LANGUAGES, LanguageTable
from weekreport.utils.io import load_yaml_mapping


def build_language_table(payload: Mapping[str, Any], base: LanguageTable = DEFAULT_LANGUAGES) -> LanguageTable:
    """Layer a ``languages`` section from ``payload`` over ``base``."""

    languages = payload.get("languages", {}) or {}
    if not isinstance(languages, Mapping):
        raise ValidationError("The 'languages' section must map extensions to tags")
    max_length = payload.get("max_extension_length")
    if max_length is not None:
        try:
            max_length = int(max_length)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"max_extension_length must be an integer, got {max_length!r}") from exc
    return base.merged({str(key): str(value) for key, value in languages.items()}, max_extension_length=max_length)


def load_language_table(path: Optional[Path]) -> LanguageTable:
    """Return the built-in table, extended by the YAML file at ``path`` if given."""

    if path is None:
        return DEFAULT_LANGUAGES
    return build_language_table(load_yaml_mapping(Path(path)))


def build_report_config(args: argparse.Namespace, *, today: Optional[date] = None) -> ReportConfig:
    # The CLI values are authoritative; only the language table comes from a file.
    output_path = Path(args.output_file) if getattr(args, "output_file", None) else default_output_path(args.week)
    languages = load_language_table(getattr(args, "languages", None))

    return ReportConfig(
        name=args.name,
        class_name=args.class_name,
        student_number=int(args.student_number),
        week=int(args.week),
        groups=list(args.assignment_files),
        output_path=output_path,
        tutorial=bool(getattr(args, "tutorial", False)),
        report_date=today or date.today(),
        languages=languages,
    )


__all__ = ["build_language_table", "build_report_config", "load_language_table"]
