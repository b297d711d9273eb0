"""Shared pytest fixtures."""
import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo logging configuration done by CLI runs."""
    yield
    logger = logging.getLogger("media_organizer")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    path = tmp_path / "src"
    path.mkdir()
    return path


@pytest.fixture
def dst_dir(tmp_path: Path) -> Path:
    path = tmp_path / "dst"
    path.mkdir()
    return path
