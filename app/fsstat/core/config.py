"""fsstat configuration and settings.

Configuration is stored in ~/.config/fsstat/config.toml and covers the
callback executor size and the CLI defaults.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fsstat.core.errors import ConfigError, ConfigNotFoundError, ConfigParseError
from fsstat.core.paths import get_config_path

logger = logging.getLogger(__name__)

OutputFormatName = Literal["table", "json"]

DEFAULT_MAX_WORKERS = 4


class FsStatConfig(BaseModel):
    """Configuration for fsstat.

    Attributes:
        max_workers: Worker threads used to run callback-style queries.
        output_format: Default output format of ``fsstat show``.
    """

    model_config = ConfigDict(extra="forbid")

    max_workers: Annotated[
        int,
        Field(ge=1, le=64, description="Callback executor size (1-64)"),
    ] = DEFAULT_MAX_WORKERS
    output_format: Annotated[
        OutputFormatName,
        Field(description="Default CLI output format"),
    ] = "table"


def load_config(path: Path | None = None) -> FsStatConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated FsStatConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return FsStatConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> FsStatConfig:
    """Load configuration, falling back to defaults when no file exists."""
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return get_default_config()


def save_config(config: FsStatConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The FsStatConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def get_default_config() -> FsStatConfig:
    """Create a default FsStatConfig."""
    return FsStatConfig()
