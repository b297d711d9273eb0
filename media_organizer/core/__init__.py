"""Core domain models, errors and protocols."""
from .protocols import Classifier, MetadataReader, ProgressReporter
from .models import (
    CaptureDate,
    FileResult,
    MoveOutcome,
    OrganizeStats,
    month_label,
)
from .errors import (
    ErrorKind,
    OrganizerError,
    ConfigurationError,
    InvalidDateError,
    MetadataError,
    FilenamePatternError,
    DateResolutionError,
    ClassificationError,
    MoveError,
    DestinationConflict,
    DirectoryCreateFailed,
    RenameFailed,
)
from .config import OrganizerConfig, load_config

__all__ = [
    # Protocols
    "Classifier",
    "MetadataReader",
    "ProgressReporter",
    # Models
    "CaptureDate",
    "FileResult",
    "MoveOutcome",
    "OrganizeStats",
    "month_label",
    # Errors
    "ErrorKind",
    "OrganizerError",
    "ConfigurationError",
    "InvalidDateError",
    "MetadataError",
    "FilenamePatternError",
    "DateResolutionError",
    "ClassificationError",
    "MoveError",
    "DestinationConflict",
    "DirectoryCreateFailed",
    "RenameFailed",
    # Config
    "OrganizerConfig",
    "load_config",
]
