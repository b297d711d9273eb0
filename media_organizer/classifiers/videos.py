"""Video classifier.

Organizes videos in directories by year. The year is taken from the file
name only, matching ``VID-YYYYMMDD-whatever.mp4`` where ``VID-`` is optional
and ``-`` may be ``_``. Container metadata is never inspected.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from ..core.errors import ClassificationError, DateResolutionError
from ..core.models import CaptureDate
from ..engines.dates import DateResolver
from .base import is_supported


VIDEO_FILENAME_RE = re.compile(r"^(?:VID[-_])?(\d{4})(\d{2})\d{2}[_-].+\.mp4$")


@dataclass(frozen=True, slots=True)
class VideoClassifier:
    dst_dir: Path
    pattern: re.Pattern[str] = VIDEO_FILENAME_RE
    _resolver: DateResolver = field(init=False, repr=False, compare=False)

    SUPPORTED: ClassVar[frozenset[str]] = frozenset({"mp4"})
    name: ClassVar[str] = "videos"

    def __post_init__(self) -> None:
        object.__setattr__(self, "_resolver", DateResolver(self.pattern))

    def should_organize(self, path: Path) -> bool:
        return is_supported(path, self.SUPPORTED)

    def capture_date(self, path: Path) -> CaptureDate:
        return self._resolver.resolve(path)

    def destination_dir(self, path: Path) -> Path:
        try:
            date = self.capture_date(path)
        except DateResolutionError as e:
            raise ClassificationError(
                f"failed to generate destination dir for {path}", cause=e
            ) from e
        return self.dst_dir / date.year_label
