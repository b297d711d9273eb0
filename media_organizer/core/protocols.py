"""Protocol definitions (interfaces) for dependency injection."""
from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import Protocol

from .models import CaptureDate, OrganizeStats


class Classifier(Protocol):
    """Decides whether a file belongs to a media type and where it goes.

    Implementations:
    - PhotoClassifier: JPEG photos, EXIF date then WhatsApp-style filename
    - VideoClassifier: MP4 videos, date from filename only
    """

    @abstractmethod
    def should_organize(self, path: Path) -> bool:
        """Whether this classifier handles the file."""
        ...

    @abstractmethod
    def destination_dir(self, path: Path) -> Path:
        """Directory the file should be moved into.

        Only called for paths where ``should_organize`` returned True.

        Raises:
            ClassificationError: No destination could be derived.
        """
        ...


class MetadataReader(Protocol):
    """Reads the capture date embedded in a media file."""

    @abstractmethod
    def read_capture_date(self, path: Path) -> CaptureDate:
        """Return the embedded capture date.

        Raises:
            MetadataError: File unreadable, field missing or malformed.
            InvalidDateError: Field parsed but out of range.
        """
        ...


class ProgressReporter(Protocol):
    """Interface for console reporting."""

    @abstractmethod
    def info(self, message: str) -> None:
        ...

    @abstractmethod
    def success(self, message: str) -> None:
        ...

    @abstractmethod
    def warning(self, message: str) -> None:
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        ...

    @abstractmethod
    def print_header(self, title: str) -> None:
        ...

    @abstractmethod
    def print_config(self, config_items: dict) -> None:
        ...

    @abstractmethod
    def print_stats(self, stats: OrganizeStats) -> None:
        ...
