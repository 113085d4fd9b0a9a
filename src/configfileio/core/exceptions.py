"""Custom exceptions for configfileio."""

from pathlib import Path


class ConfigFileIOError(Exception):
    """Base exception for all configfileio errors."""

    pass


class ConfigurationError(ConfigFileIOError):
    """Raised when library options are invalid."""

    pass


class InvalidDelimiterError(ConfigFileIOError, ValueError):
    """Raised when a delimiter is not a single usable character."""

    def __init__(self, delimiter: str):
        self.delimiter = delimiter
        super().__init__(f"Delimiter must be a single non line-break character, got {delimiter!r}")


class AccessFailureError(ConfigFileIOError):
    """Raised when a configuration file cannot be read."""

    def __init__(self, path: Path | str, reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        message = f"Could not access configuration file: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class WriteFailureError(ConfigFileIOError):
    """Raised when a configuration file cannot be written."""

    def __init__(self, path: Path | str, reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        message = f"Could not write to the configuration file: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class FormatMismatchError(ConfigFileIOError):
    """Raised when a setting value is requested as a type it does not parse as."""

    def __init__(self, requested_type: type, payload: str):
        self.requested_type = requested_type
        self.payload = payload
        super().__init__(f"Invalid format for setting requested: {requested_type.__name__} (value {payload!r})")


__all__ = [
    "ConfigFileIOError",
    "ConfigurationError",
    "InvalidDelimiterError",
    "AccessFailureError",
    "WriteFailureError",
    "FormatMismatchError",
]
