"""Helpers shared by the classifiers."""
from __future__ import annotations

from pathlib import Path


def extension_of(path: Path) -> str:
    """Extension without the leading dot, case preserved ("" when none)."""
    return path.suffix[1:]


def is_supported(path: Path, supported: frozenset[str]) -> bool:
    """Case-sensitive extension check."""
    extension = extension_of(path)
    return bool(extension) and extension in supported
