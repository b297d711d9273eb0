"""Integration tests for the full organize pipeline."""
import logging
import pytest
from pathlib import Path

from media_organizer.classifiers import PhotoClassifier, VideoClassifier
from media_organizer.services.organizer import Organizer

from .fixtures import (
    OtherFile,
    PhotoWithExifDate,
    WhatsAppPhoto,
    create_camera_roll,
    write_jpeg,
)


class TestOrganize:
    """End-to-end runs over real files."""

    def test_organize(self, source_dir: Path, dst_dir: Path):
        """Photos and videos from nested folders land in their dated dirs."""
        created = create_camera_roll(source_dir)

        stats = Organizer([
            PhotoClassifier(dst_dir),
            VideoClassifier(dst_dir),
        ]).organize(source_dir)

        for fixture, source in created:
            assert not source.exists()
            assert (fixture.expected_destination(dst_dir) / source.name).is_file()

        assert (dst_dir / "2019" / "01 - January" / "camera.jpg").is_file()
        assert (dst_dir / "2020" / "04 - April" / "IMG-20200407-WA0004.jpg").is_file()
        assert (dst_dir / "2020" / "20200829_205420.mp4").is_file()
        assert stats.moved == 3
        assert stats.failed == 0

    def test_separate_destinations(self, source_dir: Path, tmp_path: Path):
        """Photos and videos may go to different roots."""
        photos = tmp_path / "photos"
        videos = tmp_path / "videos"
        photos.mkdir()
        videos.mkdir()
        create_camera_roll(source_dir)

        Organizer([PhotoClassifier(photos), VideoClassifier(videos)]).organize(source_dir)

        assert (photos / "2019" / "01 - January" / "camera.jpg").is_file()
        assert (photos / "2020" / "04 - April" / "IMG-20200407-WA0004.jpg").is_file()
        assert (videos / "2020" / "20200829_205420.mp4").is_file()

    def test_only_photos_enabled(self, source_dir: Path, dst_dir: Path):
        """Without a video classifier videos stay in the source tree."""
        created = dict((source.name, source) for _, source in create_camera_roll(source_dir))

        stats = Organizer([PhotoClassifier(dst_dir)]).organize(source_dir)

        assert created["20200829_205420.mp4"].exists()
        assert stats.moved == 2
        assert stats.skipped == 1

    def test_partial_failure(self, source_dir: Path, dst_dir: Path, caplog):
        """Undatable and conflicting files stay put, the rest is moved."""
        undated = write_jpeg(source_dir / "holiday.jpg")
        conflicting = PhotoWithExifDate(name="camera.jpg", parent_folder="a").create(source_dir)
        existing_dir = dst_dir / "2019" / "01 - January"
        existing_dir.mkdir(parents=True)
        (existing_dir / "camera.jpg").write_bytes(b"existing")
        whatsapp = WhatsAppPhoto(name="IMG-20200407-WA0004.jpg", parent_folder="b").create(source_dir)
        other = OtherFile(name="readme.txt").create(source_dir)

        with caplog.at_level(logging.WARNING, logger="media_organizer"):
            stats = Organizer([PhotoClassifier(dst_dir)]).organize(source_dir)

        assert undated.exists()
        assert conflicting.exists()
        assert (existing_dir / "camera.jpg").read_bytes() == b"existing"
        assert not whatsapp.exists()
        assert other.exists()
        assert stats.summary() == {"scanned": 4, "moved": 1, "skipped": 1, "failed": 2}
        assert "holiday.jpg" in caplog.text
        assert "failed to get date from exif" in caplog.text
        assert "failed to get date from filename" in caplog.text

    def test_rerun_is_noop(self, source_dir: Path, dst_dir: Path):
        """A second run over an emptied source moves nothing."""
        create_camera_roll(source_dir)
        organizer = Organizer([PhotoClassifier(dst_dir), VideoClassifier(dst_dir)])
        organizer.organize(source_dir)

        stats = organizer.organize(source_dir)

        assert stats.files_scanned == 0
