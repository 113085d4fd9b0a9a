"""configfileio - categorized key-value configuration files."""

__version__ = "0.1.0"

from .core import (
    AccessFailureError,
    ConfigFileIOError,
    ConfigurationError,
    FormatMismatchError,
    InvalidDelimiterError,
    Setting,
    SettingsStore,
    Value,
    WriteFailureError,
)
from .config import FileOptions, load_options
from .io import ConfigFileReader, ConfigFileWriter, ConfigParser, ParseResult, parse_text, serialize
from .file import ConfigurationFile

__all__ = [
    "__version__",
    "ConfigurationFile",
    "FileOptions",
    "load_options",
    "Value",
    "Setting",
    "SettingsStore",
    "ParseResult",
    "ConfigParser",
    "ConfigFileReader",
    "ConfigFileWriter",
    "parse_text",
    "serialize",
    "ConfigFileIOError",
    "ConfigurationError",
    "InvalidDelimiterError",
    "AccessFailureError",
    "WriteFailureError",
    "FormatMismatchError",
]
