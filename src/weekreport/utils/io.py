"""File I/O helpers that translate OS failures into report errors."""

from __future__ import annotations

from pathlib import Path
from typing import Any, BinaryIO, Dict

import yaml

from weekreport.core.errors import IoError, ValidationError


def read_source_bytes(path: Path) -> bytes:
    """Read ``path`` fully into memory."""

    try:
        return path.read_bytes()
    except FileNotFoundError as exc:
        raise IoError(path, "Input file not found") from exc
    except IsADirectoryError as exc:
        raise IoError(path, "Input path is a directory") from exc
    except OSError as exc:
        raise IoError(path, f"Cannot read input file ({exc.strerror or exc})") from exc


def open_output(path: Path) -> BinaryIO:
    """Create or truncate ``path`` for binary writing."""

    try:
        return path.open("wb")
    except OSError as exc:
        raise IoError(path, f"Cannot open output file ({exc.strerror or exc})") from exc


def load_yaml_mapping(path: Path) -> Dict[str, Any]:
    """
    - Opens and safely parses a YAML file into a Python dictionary.
    - An empty document yields an empty dict.
    - Raises ``IoError`` when the file cannot be read and ``ValidationError``
      when the document is not a mapping.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.safe_load(handle) or {}
    except OSError as exc:
        raise IoError(path, f"Cannot read configuration file ({exc.strerror or exc})") from exc
    except yaml.YAMLError as exc:
        raise ValidationError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValidationError(f"Invalid YAML config structure at {path}")
    return payload
