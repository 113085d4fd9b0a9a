"""Parsing of configuration files into a settings store."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from configfileio.config.settings import COMMENT_PREFIX, DEFAULT_DELIMITER, check_delimiter
from configfileio.core.exceptions import AccessFailureError
from configfileio.core.models import Setting
from configfileio.core.store import SettingsStore

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Settings parsed from a file plus diagnostics for skipped lines."""

    store: SettingsStore
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class ConfigParser:
    """Single-pass line parser.

    Lines outside any category that are neither comments nor category
    headers are dropped without a diagnostic.
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER):
        self.delimiter = check_delimiter(delimiter)
        self._reset()

    def _reset(self) -> None:
        self._line_number = 1
        self._category: Optional[str] = None
        self._store = SettingsStore()
        self._errors: List[str] = []

    def parse_lines(self, lines: Iterable[str]) -> ParseResult:
        """Parse raw lines (without terminators) into a new store."""
        self._reset()
        for line in lines:
            self._process_line(line)
            self._line_number += 1

        result = ParseResult(store=self._store, errors=self._errors)
        logger.debug(
            "Parsed %d lines into %d categories with %d errors",
            self._line_number - 1,
            len(result.store),
            len(result.errors),
        )
        return result

    def parse_text(self, text: str) -> ParseResult:
        """Parse file content, splitting on CRLF, CR or LF."""
        return self.parse_lines(split_lines(text))

    def _process_line(self, line: str) -> None:
        if _is_comment_or_empty(line):
            return

        if _is_category_line(line):
            name = line[1:-1] if len(line) > 2 else ""
            if not name:
                self._error(f"Line {self._line_number} starts a category but has empty category name. Content: {line}")
                return
            self._category = name
            self._store.add_category(name)
            return

        if self._category is None:
            return

        tokens = line.split(self.delimiter)
        if len(tokens) < 2:
            self._error(f"Line {self._line_number} has invalid setting syntax. Content: {line}")
            return
        # Anything after a second delimiter is dropped.
        self._store.add_setting(self._category, Setting(tokens[0], tokens[1]))

    def _error(self, message: str) -> None:
        logger.warning(message)
        self._errors.append(message)


class ConfigFileReader:
    """Reads a configuration file from disk."""

    def __init__(self, path: Path | str, delimiter: str = DEFAULT_DELIMITER, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding
        self.parser = ConfigParser(delimiter)

    def read(self) -> ParseResult:
        """Read and parse the whole file.

        Raises:
            AccessFailureError: If the file cannot be read or decoded.
        """
        try:
            text = self.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise AccessFailureError(self.path, str(exc)) from exc

        result = self.parser.parse_text(text)
        logger.debug("Read %s (%d categories)", self.path, len(result.store))
        return result


def split_lines(text: str) -> List[str]:
    """Split text into lines like a file reader would, without a trailing empty line."""
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _is_comment_or_empty(line: str) -> bool:
    return line.startswith(COMMENT_PREFIX) or line == ""


def _is_category_line(line: str) -> bool:
    return line.startswith("[") and line.endswith("]")


def parse_text(text: str, delimiter: str = DEFAULT_DELIMITER) -> ParseResult:
    """Parse configuration text with a fresh parser."""
    return ConfigParser(delimiter).parse_text(text)


__all__ = ["ParseResult", "ConfigParser", "ConfigFileReader", "parse_text", "split_lines"]
