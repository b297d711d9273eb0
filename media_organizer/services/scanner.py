"""Directory scanning service."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


class FileEnumerator:
    """Iterator over the files below a root directory.

    Pending directories are kept on an explicit stack and discovered files
    in a buffer, so deep trees never grow the call stack. Expansion is LIFO;
    the exact order of yielded files is not part of the contract.

    Symbolic links are skipped entirely: they are neither yielded nor
    traversed. Directories that cannot be read are skipped silently.

    The iterator is one-shot: once exhausted it stays exhausted.
    """

    def __init__(self, root: Path):
        """Initialize the enumerator.

        Args:
            root: Directory to traverse.
        """
        self._dirs: list[Path] = [Path(root)]
        self._files: list[Path] = []

    def __iter__(self) -> Iterator[Path]:
        return self

    def __next__(self) -> Path:
        if self._files:
            return self._files.pop()

        while self._dirs:
            self._expand(self._dirs.pop())
            if self._files:
                return self._files.pop()

        raise StopIteration

    def _expand(self, directory: Path) -> None:
        """Push subdirectories and buffer regular files of ``directory``."""
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    try:
                        if entry.is_symlink():
                            logger.debug("Skipping symlink %s", entry.path)
                            continue
                        if entry.is_dir(follow_symlinks=False):
                            self._dirs.append(Path(entry.path))
                        elif entry.is_file(follow_symlinks=False):
                            self._files.append(Path(entry.path))
                    except OSError:
                        continue
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", directory, e)
