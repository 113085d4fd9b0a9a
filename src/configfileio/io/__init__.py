"""Reading and writing configuration files."""

from .reader import ConfigFileReader, ConfigParser, ParseResult, parse_text
from .writer import ConfigFileWriter, serialize, serialize_lines

__all__ = [
    "ParseResult",
    "ConfigParser",
    "ConfigFileReader",
    "parse_text",
    "ConfigFileWriter",
    "serialize",
    "serialize_lines",
]
