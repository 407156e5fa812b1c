"""Mapping from source file extensions to fenced code block tags."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from weekreport.core.errors import MissingExtensionError, UnsupportedExtensionError, ValidationError

logger = logging.getLogger(__name__)

EXTENSION_PATTERN = re.compile(r"\.[^.:/\0]+$")

DEFAULT_MAX_EXTENSION_LENGTH = 3

BUILTIN_LANGUAGES: Mapping[str, str] = MappingProxyType(
    {
        ".c": "c",
        ".h": "c",
        ".cpp": "cpp",
        ".hpp": "cpp",
    }
)


def find_extension(file_name: str) -> str | None:
    """Return the trailing ``.ext`` of ``file_name`` or ``None``."""

    match = EXTENSION_PATTERN.search(file_name)
    return match.group(0) if match else None


@dataclass(frozen=True, slots=True)
class LanguageTable:
    """Closed lookup table of extension to language tag."""

    entries: Mapping[str, str] = field(default_factory=lambda: BUILTIN_LANGUAGES)
    max_extension_length: int = DEFAULT_MAX_EXTENSION_LENGTH

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, str],
        *,
        max_extension_length: int = DEFAULT_MAX_EXTENSION_LENGTH,
    ) -> "LanguageTable":
        """Build a table from a plain mapping, validating each key."""

        if max_extension_length < 1:
            raise ValidationError(f"max_extension_length must be positive, got {max_extension_length}")
        entries: dict[str, str] = {}
        for extension, tag in mapping.items():
            extension = str(extension)
            if find_extension(extension) != extension:
                raise ValidationError(f"Invalid extension key {extension!r}; expected '.<ext>'")
            if len(extension) - 1 > max_extension_length:
                raise ValidationError(
                    f"Extension key {extension} exceeds max_extension_length ({max_extension_length}); "
                    "raise the limit to use it"
                )
            if not str(tag).strip():
                raise ValidationError(f"Empty language tag for extension {extension}")
            entries[extension] = str(tag).strip()
        return cls(entries=MappingProxyType(entries), max_extension_length=max_extension_length)

    def merged(self, extra: Mapping[str, str], *, max_extension_length: int | None = None) -> "LanguageTable":
        """Return a new table with ``extra`` layered over the current entries."""

        combined = dict(self.entries)
        combined.update(extra)
        length = self.max_extension_length if max_extension_length is None else max_extension_length
        return LanguageTable.from_mapping(combined, max_extension_length=length)

    def resolve(self, file_name: str, path: str) -> str:
        """Return the code block tag for ``file_name``.

        ``path`` only feeds the error message when no extension is present.
        """

        extension = find_extension(file_name)
        if extension is None:
            raise MissingExtensionError(file_name, path)
        if len(extension) - 1 > self.max_extension_length:
            raise UnsupportedExtensionError(
                extension,
                f"Unsupported extension {extension}: extensions are limited to "
                f"{self.max_extension_length} characters after the dot.",
            )
        try:
            tag = self.entries[extension]
        except KeyError:
            raise UnsupportedExtensionError(extension) from None
        logger.debug("Resolved %s to language tag %s", file_name, tag)
        return tag


DEFAULT_LANGUAGES = LanguageTable()


def resolve_language_tag(file_name: str, path: str, table: LanguageTable = DEFAULT_LANGUAGES) -> str:
    """Resolve a file's language tag against ``table``."""

    return table.resolve(file_name, path)


__all__ = [
    "BUILTIN_LANGUAGES",
    "DEFAULT_LANGUAGES",
    "LanguageTable",
    "find_extension",
    "resolve_language_tag",
]
