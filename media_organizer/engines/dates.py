"""Capture date resolution shared by the classifiers.

Embedded metadata is tried first; the filename pattern is the fallback.
When both fail the error keeps both reasons.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from ..core.errors import (
    DateResolutionError,
    FilenamePatternError,
    OrganizerError,
)
from ..core.models import CaptureDate
from ..core.protocols import MetadataReader


def date_from_filename(path: Path, pattern: re.Pattern[str]) -> CaptureDate:
    """Build a CaptureDate from the file name.

    The pattern must capture the year as group 1 and the month as group 2.

    Raises:
        FilenamePatternError: Name does not match the pattern.
        InvalidDateError: Captured values are out of range.
    """
    name = path.name
    if not name:
        raise FilenamePatternError("failed to retrieve file name")
    match = pattern.match(name)
    if match is None:
        raise FilenamePatternError(f"file name {name!r} doesn't have date format")
    try:
        year, month = int(match.group(1)), int(match.group(2))
    except (IndexError, TypeError, ValueError) as e:
        raise FilenamePatternError(
            f"failed to retrieve year and month from {name!r}", cause=e
        ) from e
    return CaptureDate.create(year, month)


class DateResolver:
    """Derives a CaptureDate for a file.

    Args:
        pattern: Compiled filename pattern (group 1 year, group 2 month).
        metadata_reader: Optional reader for the embedded capture date.
            Without one, resolution is filename only.
    """

    def __init__(
        self,
        pattern: re.Pattern[str],
        metadata_reader: Optional[MetadataReader] = None,
    ):
        self._pattern = pattern
        self._metadata_reader = metadata_reader

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    def resolve(self, path: Path) -> CaptureDate:
        """Resolve the capture date of ``path``.

        Raises:
            DateResolutionError: Every source failed.
        """
        metadata_error: Optional[OrganizerError] = None
        if self._metadata_reader is not None:
            try:
                return self._metadata_reader.read_capture_date(path)
            except OrganizerError as e:
                metadata_error = OrganizerError(
                    "failed to get date from exif", kind=e.kind, cause=e
                )

        try:
            return date_from_filename(path, self._pattern)
        except OrganizerError as e:
            filename_error = OrganizerError(
                "failed to get date from filename", kind=e.kind, cause=e
            )
            raise DateResolutionError(
                f"no date for {path.name}",
                filename_error=filename_error,
                metadata_error=metadata_error,
            ) from e
