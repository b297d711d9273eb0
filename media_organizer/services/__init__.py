"""Service layer: enumeration, moving and dispatch."""
from .scanner import FileEnumerator
from .file_ops import Mover
from .organizer import Organizer

__all__ = ["FileEnumerator", "Mover", "Organizer"]
