"""Structured errors raised across the organizer.

Every error carries an ``ErrorKind`` and an optional wrapped cause, so callers
inspect failures by kind instead of by exception class.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional


class ErrorKind(Enum):
    """What went wrong."""
    CONFIGURATION = "configuration"
    INVALID_DATE = "invalid_date"
    METADATA = "metadata"
    FILENAME_PATTERN = "filename_pattern"
    DATE_RESOLUTION = "date_resolution"
    CLASSIFICATION = "classification"
    DESTINATION_CONFLICT = "destination_conflict"
    DIRECTORY_CREATE_FAILED = "directory_create_failed"
    RENAME_FAILED = "rename_failed"
    ENUMERATION = "enumeration"  # absorbed by the enumerator, never raised


class OrganizerError(Exception):
    """Base error for the project.

    Args:
        message: Human readable description of this layer of the failure.
        kind: Category used by callers to inspect the error.
        cause: Lower level error wrapped by this one, if any.
    """

    default_kind = ErrorKind.CLASSIFICATION

    def __init__(
        self,
        message: str,
        kind: Optional[ErrorKind] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind or self.default_kind
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def causes(self) -> tuple[BaseException, ...]:
        """Directly wrapped errors."""
        return (self.cause,) if self.cause is not None else ()

    def chain(self) -> Iterator[BaseException]:
        """Walk this error and every wrapped cause, depth first."""
        yield self
        for cause in self.causes:
            if isinstance(cause, OrganizerError):
                yield from cause.chain()
            else:
                yield cause

    def has_kind(self, kind: ErrorKind) -> bool:
        return any(
            isinstance(err, OrganizerError) and err.kind == kind
            for err in self.chain()
        )

    def describe(self) -> str:
        """Flatten the chain into ``outer: inner: innermost`` form."""
        parts = []
        for err in self.chain():
            text = err.message if isinstance(err, OrganizerError) else str(err)
            if text and text not in parts:
                parts.append(text)
        return ": ".join(parts)

    def __str__(self) -> str:
        return self.message


class ConfigurationError(OrganizerError):
    """Invalid or missing configuration; fatal."""
    default_kind = ErrorKind.CONFIGURATION


class InvalidDateError(OrganizerError):
    default_kind = ErrorKind.INVALID_DATE


class MetadataError(OrganizerError):
    default_kind = ErrorKind.METADATA


class FilenamePatternError(OrganizerError):
    default_kind = ErrorKind.FILENAME_PATTERN


class DateResolutionError(OrganizerError):
    """Neither embedded metadata nor the filename produced a date.

    Keeps both failures: ``metadata_error`` (None for filename-only
    resolution) and ``filename_error``.
    """

    default_kind = ErrorKind.DATE_RESOLUTION

    def __init__(
        self,
        message: str,
        filename_error: BaseException,
        metadata_error: Optional[BaseException] = None,
    ):
        super().__init__(message, cause=filename_error)
        self.filename_error = filename_error
        self.metadata_error = metadata_error

    @property
    def causes(self) -> tuple[BaseException, ...]:
        if self.metadata_error is None:
            return (self.filename_error,)
        return (self.metadata_error, self.filename_error)


class ClassificationError(OrganizerError):
    default_kind = ErrorKind.CLASSIFICATION


class MoveError(OrganizerError):
    """A relocation failed; the source file was left in place."""
    default_kind = ErrorKind.RENAME_FAILED


class DestinationConflict(MoveError):
    default_kind = ErrorKind.DESTINATION_CONFLICT


class DirectoryCreateFailed(MoveError):
    default_kind = ErrorKind.DIRECTORY_CREATE_FAILED


class RenameFailed(MoveError):
    default_kind = ErrorKind.RENAME_FAILED
