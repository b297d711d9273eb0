"""Media organizer package.

Moves photos and videos from a source tree into destination directories
keyed by capture date.
"""

__version__ = "1.0.0"

# Core exports
from .core.config import OrganizerConfig, load_config
from .core.errors import (
    ErrorKind,
    OrganizerError,
    ConfigurationError,
    DateResolutionError,
    ClassificationError,
    MoveError,
    DestinationConflict,
    DirectoryCreateFailed,
    RenameFailed,
)
from .core.models import CaptureDate, OrganizeStats, month_label
from .core.protocols import Classifier, MetadataReader

# Engine exports
from .engines.dates import DateResolver
from .engines.metadata import ExifDateReader

# Classifier exports
from .classifiers import PhotoClassifier, VideoClassifier, build_classifiers

# Service exports
from .services.scanner import FileEnumerator
from .services.file_ops import Mover
from .services.organizer import Organizer

__all__ = [
    # Core
    "OrganizerConfig",
    "load_config",
    "ErrorKind",
    "OrganizerError",
    "ConfigurationError",
    "DateResolutionError",
    "ClassificationError",
    "MoveError",
    "DestinationConflict",
    "DirectoryCreateFailed",
    "RenameFailed",
    "CaptureDate",
    "OrganizeStats",
    "month_label",
    "Classifier",
    "MetadataReader",
    # Engines
    "DateResolver",
    "ExifDateReader",
    # Classifiers
    "PhotoClassifier",
    "VideoClassifier",
    "build_classifiers",
    # Services
    "FileEnumerator",
    "Mover",
    "Organizer",
]
