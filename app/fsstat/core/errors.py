"""Exception hierarchy for fsstat.

Usage errors and unsupported-feature errors are raised at the point of
use. Native I/O failures are the ``OSError`` subclasses raised by the
host and are never wrapped by this package.
"""


class FsStatError(Exception):
    """Base exception for all fsstat errors."""


class NotImplementedFeatureError(FsStatError, NotImplementedError):
    """Raised when a feature of the stat convention is not supported.

    Attributes:
        feature: Label of the unsupported feature (e.g. "stats.isFIFO()").
    """

    def __init__(self, feature: str | None = None) -> None:
        self.feature = feature
        message = f"Not implemented: {feature}" if feature else "Not implemented"
        super().__init__(message)


class CallbackRequiredError(FsStatError, TypeError):
    """Raised when options are passed to a callback-style call without a callback."""

    def __init__(self) -> None:
        super().__init__("callback is required but not given")


class InvalidArgumentTypeError(FsStatError, TypeError):
    """Raised when a positional argument has an unsupported runtime type."""

    def __init__(self, name: str, expected: str, actual: object) -> None:
        self.name = name
        super().__init__(
            f'The "{name}" argument must be {expected}. Received {type(actual).__name__}'
        )


class InvalidFileURLError(FsStatError, TypeError):
    """Raised when a URL-form path cannot be converted to a plain path."""


class ConfigError(FsStatError):
    """Base exception for configuration file errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""
