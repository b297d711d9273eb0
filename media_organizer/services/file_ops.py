"""File operations service."""
from __future__ import annotations

import logging
import os
from pathlib import Path

from ..core.errors import DestinationConflict, DirectoryCreateFailed, RenameFailed

logger = logging.getLogger(__name__)


class Mover:
    """Moves files into destination directories without overwriting.

    The existence check and the rename are two separate steps, so a file
    created at the target by another process in between can still be
    replaced. No locking is attempted.
    """

    def ensure_directory(self, path: Path) -> None:
        """Create ``path`` and its parents if needed.

        Raises:
            DirectoryCreateFailed: The directory could not be created.
        """
        if path.is_dir():
            return
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateFailed(
                f"failed to create destination dir {path}", cause=e
            ) from e
        logger.debug("Created directory %s", path)

    def move(self, source: Path, destination_dir: Path) -> Path:
        """Move ``source`` into ``destination_dir`` keeping its name.

        A single rename is performed; moving across filesystems fails rather
        than falling back to copy and delete.

        Args:
            source: File to move.
            destination_dir: Directory to move it into.

        Returns:
            The new path of the file.

        Raises:
            DirectoryCreateFailed: Destination could not be created.
            DestinationConflict: A file with the same name already exists.
            RenameFailed: The rename itself failed.
        """
        self.ensure_directory(destination_dir)

        target = destination_dir / source.name
        if target.exists() or target.is_symlink():
            raise DestinationConflict(
                f"a file with the same name already exists in the destination path: {target}"
            )

        try:
            os.rename(source, target)
        except OSError as e:
            raise RenameFailed(
                f"failed to move file to destination dir {destination_dir}", cause=e
            ) from e
        return target
