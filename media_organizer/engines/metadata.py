"""Embedded metadata extraction."""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

from PIL import ExifTags, Image

from ..core.errors import MetadataError
from ..core.models import CaptureDate

logger = logging.getLogger(__name__)


# EXIF ASCII date-time, e.g. "2019:01:15 10:30:45"
EXIF_DATETIME_RE = re.compile(
    r"^(?P<year>\d{4}):(?P<month>\d{2}):(?P<day>\d{2}) \d{2}:\d{2}:\d{2}"
)


def parse_exif_datetime(value: object) -> CaptureDate:
    """Extract year and month from an EXIF date-time value.

    Raises:
        MetadataError: Value is not a well formed EXIF date-time.
        InvalidDateError: Year or month out of range.
    """
    if isinstance(value, bytes):
        value = value.decode("ascii", errors="replace")
    if not isinstance(value, str):
        raise MetadataError("exif date value is broken")
    match = EXIF_DATETIME_RE.match(value.strip("\x00 "))
    if not match:
        raise MetadataError(f"exif date value is broken: {value!r}")
    return CaptureDate.create(int(match["year"]), int(match["month"]))


class ExifDateReader:
    """Reads the DateTimeOriginal tag with Pillow.

    The tag normally lives in the Exif sub-IFD; some writers put it in the
    primary IFD, which is checked second.
    """

    def read_raw(self, path: Path) -> Optional[object]:
        """Return the raw DateTimeOriginal value, or None when absent.

        Raises:
            MetadataError: The file could not be opened or decoded.
        """
        try:
            with Image.open(path) as image:
                exif = image.getexif()
                value = exif.get_ifd(ExifTags.IFD.Exif).get(ExifTags.Base.DateTimeOriginal)
                if value is None:
                    value = exif.get(ExifTags.Base.DateTimeOriginal)
                return value
        except Exception as e:
            # Pillow raises a range of errors for truncated or foreign files
            raise MetadataError(f"failed to read the file {path.name}", cause=e) from e

    def read_capture_date(self, path: Path) -> CaptureDate:
        value = self.read_raw(path)
        if value is None:
            raise MetadataError("exif DateTimeOriginal tag is missing")
        date = parse_exif_datetime(value)
        logger.debug("EXIF date for %s: %s-%02d", path, date.year, date.month)
        return date
