"""Date resolution engines."""
from .dates import DateResolver, date_from_filename
from .metadata import ExifDateReader, parse_exif_datetime

__all__ = ["DateResolver", "date_from_filename", "ExifDateReader", "parse_exif_datetime"]
