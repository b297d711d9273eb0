"""Photo classifier.

Organizes JPEG photos into ``<root>/<year>/<MM - Month>``. The date comes
from the EXIF DateTimeOriginal tag, or from WhatsApp-style file names such
as ``IMG-20200407-WA0004.jpg`` when the tag is unusable.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, Optional

from ..core.errors import ClassificationError, DateResolutionError
from ..core.models import CaptureDate
from ..core.protocols import MetadataReader
from ..engines.dates import DateResolver
from ..engines.metadata import ExifDateReader
from .base import is_supported


WHATSAPP_FILENAME_RE = re.compile(r"^IMG-(\d{4})(\d{2})\d{2}-WA\d+\..*$")


@dataclass(frozen=True, slots=True)
class PhotoClassifier:
    """Handles ``jpeg``, ``jpg`` and ``JPG`` files.

    The extension match is case sensitive, so ``JPEG`` or ``Jpg`` files are
    left alone.
    """
    dst_dir: Path
    metadata_reader: Optional[MetadataReader] = field(default_factory=ExifDateReader)
    pattern: re.Pattern[str] = WHATSAPP_FILENAME_RE
    _resolver: DateResolver = field(init=False, repr=False, compare=False)

    SUPPORTED: ClassVar[frozenset[str]] = frozenset({"jpeg", "jpg", "JPG"})
    name: ClassVar[str] = "photos"

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_resolver", DateResolver(self.pattern, self.metadata_reader)
        )

    def should_organize(self, path: Path) -> bool:
        return is_supported(path, self.SUPPORTED)

    def capture_date(self, path: Path) -> CaptureDate:
        return self._resolver.resolve(path)

    def destination_dir(self, path: Path) -> Path:
        try:
            date = self.capture_date(path)
        except DateResolutionError as e:
            raise ClassificationError(
                f"failed to get destination dir from {path}", cause=e
            ) from e
        return self.dst_dir / date.year_label / date.month_label
