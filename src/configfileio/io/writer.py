"""Serialization of a settings store into configuration file text."""

import logging
from pathlib import Path
from typing import List

from configfileio.config.settings import DEFAULT_DELIMITER, LINE_TERMINATOR, check_delimiter
from configfileio.core.exceptions import WriteFailureError
from configfileio.core.store import SettingsStore

logger = logging.getLogger(__name__)


def serialize_lines(store: SettingsStore, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    """Render a store as file lines, one blank line after each category."""
    delimiter = check_delimiter(delimiter)
    lines: List[str] = []
    for category in store.list_categories():
        lines.append(f"[{category}]")
        for setting in store.settings_in(category):
            lines.append(f"{setting.name}{delimiter}{setting.value.payload}")
        lines.append("")
    return lines


def serialize(store: SettingsStore, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Render a store as file text joined with CRLF."""
    return LINE_TERMINATOR.join(serialize_lines(store, delimiter))


class ConfigFileWriter:
    """Writes a settings store to a configuration file."""

    def __init__(self, path: Path | str, delimiter: str = DEFAULT_DELIMITER, encoding: str = "utf-8"):
        self.path = Path(path)
        self.delimiter = check_delimiter(delimiter)
        self.encoding = encoding

    def write(self, store: SettingsStore) -> None:
        """Replace the file content with the serialized store.

        Raises:
            WriteFailureError: If the file cannot be written.
        """
        text = serialize(store, self.delimiter)
        try:
            # Encode before opening the file
            data = text.encode(self.encoding)
            self.path.write_bytes(data)
        except (OSError, UnicodeEncodeError) as exc:
            raise WriteFailureError(self.path, str(exc)) from exc

        logger.debug("Wrote %d categories to %s", len(store), self.path)


__all__ = ["serialize", "serialize_lines", "ConfigFileWriter"]
