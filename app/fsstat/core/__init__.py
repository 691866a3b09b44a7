"""Core infrastructure for fsstat: errors, XDG paths and configuration."""

from fsstat.core.config import (
    FsStatConfig,
    get_default_config,
    load_config,
    load_config_or_default,
    save_config,
)
from fsstat.core.errors import (
    CallbackRequiredError,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    FsStatError,
    InvalidArgumentTypeError,
    InvalidFileURLError,
    NotImplementedFeatureError,
)

__all__ = [
    "CallbackRequiredError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "FsStatConfig",
    "FsStatError",
    "InvalidArgumentTypeError",
    "InvalidFileURLError",
    "NotImplementedFeatureError",
    "get_default_config",
    "load_config",
    "load_config_or_default",
    "save_config",
]
