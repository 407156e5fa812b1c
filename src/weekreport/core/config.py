"""Configuration dataclasses for a report run."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Iterator, Sequence, TYPE_CHECKING

from weekreport.core.errors import ValidationError

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from weekreport.core.languages import LanguageTable

MAX_WEEK = 255


@dataclass(frozen=True, slots=True)
class Group:
    """Ordered file paths making up one assignment or tutorial submission."""

    paths: tuple[str, ...]

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)


@dataclass(slots=True)
class ReportConfig:
    """Everything the writer needs to render one weekly report."""

    name: str
    class_name: str
    student_number: int
    week: int
    groups: Sequence[Group]
    output_path: Path
    tutorial: bool = False
    report_date: date = field(default_factory=date.today)
    languages: "LanguageTable | None" = None

    def __post_init__(self) -> None:
        if not self.groups:
            raise ValidationError("At least one group of files is required.")
        for position, group in enumerate(self.groups, start=1):
            if not len(group):
                raise ValidationError(f"Group {position} contains no file paths.")
        if self.student_number < 0:
            raise ValidationError(f"Student number must be unsigned, got {self.student_number}.")
        if not 0 <= self.week <= MAX_WEEK:
            raise ValidationError(f"Week must be between 0 and {MAX_WEEK}, got {self.week}.")
        _require_utf8("Name", self.name)
        _require_utf8("Class", self.class_name)
        for group in self.groups:
            for path in group:
                _require_utf8("Path", path)
        self.groups = tuple(self.groups)
        self.output_path = Path(self.output_path)

    @property
    def kind(self) -> str:
        """Section wording used in every heading."""

        return "Tutorial" if self.tutorial else "Assignment"


def _require_utf8(label: str, value: str) -> None:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise ValidationError(f"{label} is not valid UTF-8 text: {value!a}") from None


def default_output_path(week: int) -> Path:
    """Return ``week<N>.md`` relative to the working directory."""

    return Path(f"week{week}.md")


__all__ = ["Group", "MAX_WEEK", "ReportConfig", "default_output_path"]
