"""Main organizer - dispatches enumerated files to the classifiers."""
from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional, Sequence

from ..core.errors import OrganizerError
from ..core.models import FileResult, MoveOutcome, OrganizeStats
from ..core.protocols import Classifier, ProgressReporter
from .file_ops import Mover
from .scanner import FileEnumerator

logger = logging.getLogger(__name__)


def _describe(error: BaseException) -> str:
    if isinstance(error, OrganizerError):
        return error.describe()
    return str(error)


def _classifier_name(classifier: Classifier) -> str:
    return getattr(classifier, "name", type(classifier).__name__)


class Organizer:
    """Organizes files by applying classifiers in registration order.

    For each file every classifier is asked in turn whether it wants the
    file. The first classifier that both yields a destination directory and
    whose move succeeds handles the file; failures are logged and the next
    classifier is tried. Classifiers may accept overlapping extensions,
    order decides.
    """

    def __init__(
        self,
        classifiers: Sequence[Classifier],
        mover: Optional[Mover] = None,
        reporter: Optional[ProgressReporter] = None,
    ):
        """Initialize organizer.

        Args:
            classifiers: Classifiers to try, in order.
            mover: File mover (default: Mover()).
            reporter: Warned about every file that could not be organized.
        """
        self._classifiers = tuple(classifiers)
        self._mover = mover or Mover()
        self._reporter = reporter

    @property
    def classifiers(self) -> tuple[Classifier, ...]:
        return self._classifiers

    def organize(self, media_src: Path) -> OrganizeStats:
        """Organize every file below ``media_src``.

        Always runs to the end of the enumeration. Per-file failures are
        logged, never raised; the returned stats are for display only.
        """
        stats = OrganizeStats()
        start = time.monotonic()

        for file in FileEnumerator(media_src):
            try:
                result = self.dispatch(file)
            except Exception:
                logger.exception("Unexpected error organizing %s", file)
                result = FileResult(path=file, outcome=MoveOutcome.FAILED)
            if not result.is_success and self._reporter is not None:
                self._reporter.warning(f"Could not organize {file}, it stays in place")
            stats.record(result)

        stats.elapsed_seconds = time.monotonic() - start
        logger.info(
            "Organized %s: %d moved, %d skipped, %d failed",
            media_src, stats.moved, stats.skipped, stats.failed,
        )
        return stats

    def dispatch(self, file: Path) -> FileResult:
        """Offer a single file to the classifiers and move it on acceptance."""
        accepted = False
        for classifier in self._classifiers:
            if not classifier.should_organize(file):
                continue
            accepted = True
            name = _classifier_name(classifier)

            try:
                dst_dir = classifier.destination_dir(file)
            except (OrganizerError, OSError) as e:
                logger.warning(
                    "[%s] failed to get destination dir from %s: %s",
                    name, file, _describe(e),
                )
                continue

            try:
                target = self._mover.move(file, dst_dir)
            except (OrganizerError, OSError) as e:
                logger.warning(
                    "[%s] failed to move file %s to destination dir %s: %s",
                    name, file, dst_dir, _describe(e),
                )
                continue

            logger.info("Moved %s -> %s", file, target)
            return FileResult(
                path=file,
                outcome=MoveOutcome.MOVED,
                target_path=target,
                classifier=name,
            )

        if not accepted:
            logger.debug("No classifier for %s", file)
            return FileResult(path=file, outcome=MoveOutcome.SKIPPED)
        return FileResult(path=file, outcome=MoveOutcome.FAILED)
