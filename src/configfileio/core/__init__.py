"""Core data model and error types."""

from .models import Setting, Value
from .store import SettingsStore
from .exceptions import (
    ConfigFileIOError,
    ConfigurationError,
    InvalidDelimiterError,
    AccessFailureError,
    WriteFailureError,
    FormatMismatchError,
)

__all__ = [
    # Models
    "Value",
    "Setting",
    "SettingsStore",
    # Exceptions
    "ConfigFileIOError",
    "ConfigurationError",
    "InvalidDelimiterError",
    "AccessFailureError",
    "WriteFailureError",
    "FormatMismatchError",
]
