"""Configuration loading and validation.

Configuration is merged with the following precedence (highest to lowest):
1. Command line arguments
2. Config file given with ``--config-file``, or else the default config file
   (skipped with ``--no-load-default-config-file``)

Default config file location:
- $MEDIA_ORGANIZER_CONFIG when set
- $XDG_CONFIG_HOME/media-organizer/config.toml
- ~/.config/media-organizer/config.toml
"""
from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

APP_NAME = "media-organizer"
CONFIG_ENV_VAR = "MEDIA_ORGANIZER_CONFIG"
CONFIG_FILENAME = "config.toml"


class ConfigFile(BaseModel):
    """Schema of the TOML config file.

    Every key is optional; missing values may come from the command line.
    An empty destination disables that media type.
    """
    model_config = ConfigDict(extra="forbid")

    media_src: Optional[str] = Field(
        default=None,
        description="Source directory with media files to organize",
    )
    photos_dst: Optional[str] = Field(
        default=None,
        description="Directory where photos will be moved and organized",
    )
    videos_dst: Optional[str] = Field(
        default=None,
        description="Directory where videos will be moved and organized",
    )

    @field_validator("media_src", "photos_dst", "videos_dst")
    @classmethod
    def strip_value(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip()


def get_default_config_path() -> Path:
    """Get the default config file path.

    Can be overridden by the MEDIA_ORGANIZER_CONFIG environment variable.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_home).expanduser() if xdg_home else Path.home() / ".config"
    return base / APP_NAME / CONFIG_FILENAME


def read_config_file(path: Path) -> ConfigFile:
    """Parse and validate a TOML config file.

    Raises:
        ConfigurationError: File unreadable, not TOML, or with unknown keys.
    """
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
        return ConfigFile.model_validate(data)
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
        raise ConfigurationError(
            f"failed to load config file '{path}': {e}", cause=e
        ) from e


def _destination(value: Optional[str], label: str) -> Optional[Path]:
    if not value:
        return None
    path = Path(value).expanduser()
    if not path.is_dir():
        raise ConfigurationError(f"{label} destination dir doesn't exist")
    return path


@dataclass(frozen=True, slots=True)
class OrganizerConfig:
    """Validated configuration for a run.

    A destination of None means that media type is disabled.
    """
    media_src: Path
    photos_dst: Optional[Path] = None
    videos_dst: Optional[Path] = None

    def __post_init__(self) -> None:
        if not self.media_src.is_dir():
            raise ConfigurationError("media source dir doesn't exist")
        if self.photos_dst is None and self.videos_dst is None:
            raise ConfigurationError(
                "at least one of photos_dst or videos_dst shouldn't be empty"
            )

    @classmethod
    def create(
        cls,
        media_src: Optional[str],
        photos_dst: Optional[str] = "",
        videos_dst: Optional[str] = "",
    ) -> "OrganizerConfig":
        """Build a config from raw string values.

        Raises:
            ConfigurationError: Missing source, no destination, or a path
                that is not an existing directory.
        """
        if not media_src:
            raise ConfigurationError("media source is required")
        source = Path(media_src).expanduser()
        if not source.is_dir():
            raise ConfigurationError("media source dir doesn't exist")
        if not photos_dst and not videos_dst:
            raise ConfigurationError(
                "at least one of photos_dst or videos_dst shouldn't be empty"
            )
        return cls(
            media_src=source,
            photos_dst=_destination(photos_dst, "photos"),
            videos_dst=_destination(videos_dst, "videos"),
        )

    @property
    def photos_enabled(self) -> bool:
        return self.photos_dst is not None

    @property
    def videos_enabled(self) -> bool:
        return self.videos_dst is not None


def load_config(
    *,
    config_file: Optional[Path] = None,
    media_src: Optional[str] = None,
    photos_dst: Optional[str] = None,
    videos_dst: Optional[str] = None,
    load_default: bool = True,
) -> OrganizerConfig:
    """Merge command line values over the config file and validate.

    Args:
        config_file: Explicit config file; failing to load it is fatal.
        media_src: Source directory from the command line.
        photos_dst: Photos destination from the command line.
        videos_dst: Videos destination from the command line.
        load_default: Whether to look for the default config file when no
            explicit file is given.

    Raises:
        ConfigurationError: Any loading or validation failure.
    """
    file_values = ConfigFile()
    if config_file is not None:
        file_values = read_config_file(config_file)
        logger.debug("Loaded config file %s", config_file)
    elif load_default:
        default_path = get_default_config_path()
        if default_path.is_file():
            file_values = read_config_file(default_path)
            logger.debug("Loaded default config file %s", default_path)

    def pick(cli_value: Optional[str], file_value: Optional[str]) -> Optional[str]:
        return cli_value if cli_value is not None else file_value

    return OrganizerConfig.create(
        media_src=pick(media_src, file_values.media_src),
        photos_dst=pick(photos_dst, file_values.photos_dst),
        videos_dst=pick(videos_dst, file_values.videos_dst),
    )
