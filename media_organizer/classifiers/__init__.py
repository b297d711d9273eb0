"""Media type classifiers.

Each classifier decides whether a file is its media type and, if so, the
directory the file belongs in:
- PhotoClassifier: JPEG photos by year and month
- VideoClassifier: MP4 videos by year
"""
from __future__ import annotations

from ..core.config import OrganizerConfig
from ..core.protocols import Classifier
from .photos import PhotoClassifier, WHATSAPP_FILENAME_RE
from .videos import VideoClassifier, VIDEO_FILENAME_RE


def build_classifiers(config: OrganizerConfig) -> list[Classifier]:
    """Classifiers for every enabled destination, photos first."""
    classifiers: list[Classifier] = []
    if config.photos_enabled:
        classifiers.append(PhotoClassifier(config.photos_dst))
    if config.videos_enabled:
        classifiers.append(VideoClassifier(config.videos_dst))
    return classifiers


__all__ = [
    "PhotoClassifier",
    "VideoClassifier",
    "WHATSAPP_FILENAME_RE",
    "VIDEO_FILENAME_RE",
    "build_classifiers",
]
