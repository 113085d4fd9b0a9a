"""Configuration management."""

from .settings import (
    COMMENT_PREFIX,
    DEFAULT_DELIMITER,
    LINE_TERMINATOR,
    FileOptions,
    check_delimiter,
    load_options,
)

__all__ = [
    "FileOptions",
    "load_options",
    "check_delimiter",
    "DEFAULT_DELIMITER",
    "LINE_TERMINATOR",
    "COMMENT_PREFIX",
]
