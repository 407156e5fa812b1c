"""Exception hierarchy for report generation."""

from __future__ import annotations

from pathlib import Path


class ReportError(Exception):
    """Base class for every error that aborts a report run."""


class ValidationError(ReportError, ValueError):
    """Raised when user supplied input is malformed."""


class MissingExtensionError(ReportError):
    """Raised when a file name carries no extension at all."""

    def __init__(self, file_name: str, path: str) -> None:
        self.file_name = file_name
        self.path = path
        super().__init__(f"No extension was found for file with name '{file_name}' on path '{path}'.")


class UnsupportedExtensionError(ReportError):
    """Raised when an extension has no fenced code block tag."""

    def __init__(self, extension: str, message: str | None = None) -> None:
        self.extension = extension
        super().__init__(message or f"Unsupported extension {extension}.")


class IoError(ReportError):
    """Raised when the output or an input file cannot be opened, read or written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"{reason}: {path}")


__all__ = [
    "IoError",
    "MissingExtensionError",
    "ReportError",
    "UnsupportedExtensionError",
    "ValidationError",
]
