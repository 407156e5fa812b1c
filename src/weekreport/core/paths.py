"""Path list parsing and file name extraction."""

from __future__ import annotations

import argparse
import re

from weekreport.core.config import Group
from weekreport.core.errors import ValidationError

PATH_PATTERN = re.compile(r"(?:/?[^:/\0]+)+")
SEGMENT_PATTERN = re.compile(r"[^:/\0]+")


def parse_path_list(raw: str) -> Group:
    """Split ``raw`` on spaces and validate every token as a path."""

    tokens = [token for token in raw.split(" ") if token]
    if not tokens:
        raise ValidationError("No file paths have been supplied.")
    for token in tokens:
        if PATH_PATTERN.fullmatch(token) is None:
            raise ValidationError(f"{token} is not a valid path.")
    return Group(paths=tuple(tokens))


def argparse_path_list(raw: str) -> Group:
    """``argparse`` ``type=`` adapter around :func:`parse_path_list`."""

    try:
        return parse_path_list(raw)
    except ValidationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def extract_file_name(path: str) -> str:
    """Return the last path segment of ``path``."""

    segments = SEGMENT_PATTERN.findall(path)
    if not segments:
        raise ValidationError(f"No file name could be derived from path '{path}'.")
    return segments[-1]


__all__ = ["argparse_path_list", "extract_file_name", "parse_path_list"]
