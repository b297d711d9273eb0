"""Test fixtures for integration tests.

This module provides fixture classes that generate test media,
write it to disk, and know their expected destination.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional

from PIL import ExifTags, Image


def write_jpeg(path: Path, date_taken: Optional[datetime] = None, color: str = "red") -> Path:
    """Write a small JPEG, with EXIF DateTimeOriginal when a date is given."""
    path.parent.mkdir(parents=True, exist_ok=True)
    img = Image.new("RGB", (16, 16), color=color)
    if date_taken is None:
        img.save(path, "JPEG")
        return path

    exif = Image.Exif()
    exif[ExifTags.IFD.Exif] = {
        ExifTags.Base.DateTimeOriginal: date_taken.strftime("%Y:%m:%d %H:%M:%S"),
    }
    img.save(path, "JPEG", exif=exif)
    return path


def write_jpeg_with_raw_date(path: Path, raw_value: str) -> Path:
    """Write a JPEG whose DateTimeOriginal holds an arbitrary string."""
    path.parent.mkdir(parents=True, exist_ok=True)
    exif = Image.Exif()
    exif[ExifTags.IFD.Exif] = {ExifTags.Base.DateTimeOriginal: raw_value}
    Image.new("RGB", (16, 16), color="white").save(path, "JPEG", exif=exif)
    return path


@dataclass
class MediaFixture(ABC):
    """Base class for test media fixtures.

    Each fixture knows:
    - How to create its source file
    - Which destination directory it should end up in
    """
    name: str
    parent_folder: Optional[str] = None  # relative to the source root

    def folder(self, base_path: Path) -> Path:
        folder = base_path / (self.parent_folder or "")
        folder.mkdir(parents=True, exist_ok=True)
        return folder

    @abstractmethod
    def create(self, base_path: Path) -> Path:
        """Create the fixture file and return its path."""

    @abstractmethod
    def expected_destination(self, dst_root: Path) -> Path:
        """Directory the file should be moved into."""


@dataclass
class PhotoWithExifDate(MediaFixture):
    """JPEG with the capture date embedded in EXIF."""
    date_taken: datetime = field(default_factory=lambda: datetime(2019, 1, 15, 10, 30, 45))

    def create(self, base_path: Path) -> Path:
        return write_jpeg(self.folder(base_path) / self.name, self.date_taken)

    def expected_destination(self, dst_root: Path) -> Path:
        month_names = ["January", "February", "March", "April", "May", "June", "July",
                       "August", "September", "October", "November", "December"]
        month = f"{self.date_taken.month:02d} - {month_names[self.date_taken.month - 1]}"
        return dst_root / str(self.date_taken.year) / month


@dataclass
class WhatsAppPhoto(MediaFixture):
    """JPEG without EXIF named like ``IMG-YYYYMMDD-WA0001.jpg``."""
    expected_subdir: str = "2020/04 - April"

    def create(self, base_path: Path) -> Path:
        return write_jpeg(self.folder(base_path) / self.name, color="green")

    def expected_destination(self, dst_root: Path) -> Path:
        return dst_root / self.expected_subdir


@dataclass
class VideoFile(MediaFixture):
    """MP4 placeholder dated by its file name."""
    expected_year: str = "2020"

    def create(self, base_path: Path) -> Path:
        path = self.folder(base_path) / self.name
        path.write_bytes(b"\x00\x00\x00\x18ftypmp42")
        return path

    def expected_destination(self, dst_root: Path) -> Path:
        return dst_root / self.expected_year


@dataclass
class OtherFile(MediaFixture):
    """File no classifier handles; it should stay put."""
    content: str = "hello"

    def create(self, base_path: Path) -> Path:
        path = self.folder(base_path) / self.name
        path.write_text(self.content)
        return path

    def expected_destination(self, dst_root: Path) -> Path:
        raise AssertionError(f"{self.name} should not be moved")


def create_camera_roll(source: Path) -> list[tuple[MediaFixture, Path]]:
    """Create an EXIF photo, a nested WhatsApp photo and a deeper video."""
    fixtures: list[MediaFixture] = [
        PhotoWithExifDate(name="camera.jpg"),
        WhatsAppPhoto(name="IMG-20200407-WA0004.jpg", parent_folder="sub_dir"),
        VideoFile(name="20200829_205420.mp4", parent_folder="sub_dir/sub_dir"),
    ]
    return [(fixture, fixture.create(source)) for fixture in fixtures]
