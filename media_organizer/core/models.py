"""Domain models - immutable data classes."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from .errors import InvalidDateError


MIN_YEAR = 1839
MAX_YEAR = 3000

MONTH_LABELS = {
    1: "01 - January", 2: "02 - February", 3: "03 - March",
    4: "04 - April", 5: "05 - May", 6: "06 - June",
    7: "07 - July", 8: "08 - August", 9: "09 - September",
    10: "10 - October", 11: "11 - November", 12: "12 - December",
}


def month_label(month: int) -> str:
    """Return the ``MM - Name`` directory label, or "" for an invalid month."""
    return MONTH_LABELS.get(month, "")


@dataclass(frozen=True, slots=True)
class CaptureDate:
    """Year and month a media file was captured.

    Both fields are validated on construction, so an instance is always
    within range. Prefer ``CaptureDate.create``.
    """
    year: int
    month: int

    def __post_init__(self) -> None:
        if isinstance(self.month, bool) or not 1 <= self.month <= 12:
            raise InvalidDateError(
                f"invalid month, should be between 1 and 12 got {self.month}"
            )
        if isinstance(self.year, bool) or not MIN_YEAR <= self.year <= MAX_YEAR:
            raise InvalidDateError(
                f"invalid year, should be between {MIN_YEAR} and {MAX_YEAR} got {self.year}"
            )

    @classmethod
    def create(cls, year: int, month: int) -> "CaptureDate":
        return cls(year=int(year), month=int(month))

    @property
    def year_label(self) -> str:
        return str(self.year)

    @property
    def month_label(self) -> str:
        return month_label(self.month)


class MoveOutcome(Enum):
    """What happened to a single enumerated file."""
    MOVED = "moved"
    SKIPPED = "skipped"  # no classifier wanted it
    FAILED = "failed"    # accepted but never relocated


@dataclass(frozen=True, slots=True)
class FileResult:
    """Result of dispatching a single file."""
    path: Path
    outcome: MoveOutcome
    target_path: Optional[Path] = None
    classifier: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.outcome != MoveOutcome.FAILED


@dataclass(slots=True)
class OrganizeStats:
    """Mutable statistics for an organize run.

    Diagnostic only; per-file failures never turn a run into an error.
    """
    files_scanned: int = 0
    moved: int = 0
    skipped: int = 0
    failed: int = 0
    elapsed_seconds: float = 0.0

    def record(self, result: FileResult) -> None:
        self.files_scanned += 1
        match result.outcome:
            case MoveOutcome.MOVED:
                self.moved += 1
            case MoveOutcome.SKIPPED:
                self.skipped += 1
            case MoveOutcome.FAILED:
                self.failed += 1

    def summary(self) -> dict[str, int]:
        return {
            "scanned": self.files_scanned,
            "moved": self.moved,
            "skipped": self.skipped,
            "failed": self.failed,
        }
