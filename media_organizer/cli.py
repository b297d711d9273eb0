"""Command line entry point."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .classifiers import build_classifiers
from .core.config import OrganizerConfig, get_default_config_path, load_config
from .core.errors import ConfigurationError
from .logging.rich_logger import (
    QuietProgressReporter,
    RichProgressReporter,
    configure_logging,
)
from .services.organizer import Organizer

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="media-organizer",
        description="Move photos and videos into directories by capture date.",
    )
    parser.add_argument(
        "-c", "--config-file",
        type=Path,
        default=None,
        metavar="FILE",
        help=f"File to load configuration from (default: {get_default_config_path()})",
    )
    parser.add_argument(
        "-m", "--media-src",
        default=None,
        metavar="DIRECTORY",
        help="Source directory with media files to organize",
    )
    parser.add_argument(
        "-p", "--photos-dst",
        default=None,
        metavar="DIRECTORY",
        help="Directory where photos will be moved and organized",
    )
    parser.add_argument(
        "-v", "--videos-dst",
        default=None,
        metavar="DIRECTORY",
        help="Directory where videos will be moved and organized",
    )
    parser.add_argument(
        "--no-load-default-config-file",
        action="store_true",
        help="Do not load the config file from the default location",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress non-essential output",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> OrganizerConfig:
    """Build the validated config from parsed arguments and config files."""
    return load_config(
        config_file=args.config_file,
        media_src=args.media_src,
        photos_dst=args.photos_dst,
        videos_dst=args.videos_dst,
        load_default=not args.no_load_default_config_file,
    )


def _disabled(path: Optional[Path]) -> str:
    return str(path) if path is not None else "disabled"


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point.

    Returns 0 once the run completes, even if some files could not be
    organized; those are reported in the log. Returns 1 for configuration
    errors.
    """
    args = parse_args(argv)

    if args.quiet:
        reporter = QuietProgressReporter()
        configure_logging(quiet=True)
    else:
        reporter = RichProgressReporter()
        configure_logging(verbose=args.verbose, console=reporter.console)

    try:
        config = build_config(args)
    except ConfigurationError as e:
        reporter.error(f"error getting config: {e.describe()}")
        return 1

    reporter.print_header("Media Organizer")
    reporter.print_config({
        "Media Source": config.media_src,
        "Photos Destination": _disabled(config.photos_dst),
        "Videos Destination": _disabled(config.videos_dst),
    })

    organizer = Organizer(build_classifiers(config), reporter=reporter)
    reporter.info(f"Organizing {config.media_src}")
    try:
        stats = organizer.organize(config.media_src)
    except KeyboardInterrupt:
        reporter.warning("Interrupted, files moved so far stay in place.")
        return 130

    reporter.print_stats(stats)
    if stats.failed:
        reporter.warning(f"{stats.failed} file(s) could not be organized, see the log above")
    else:
        reporter.success(f"Organized {stats.moved} file(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
