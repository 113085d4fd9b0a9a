"""Read from or write settings to a configuration file."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from configfileio.config.settings import FileOptions, check_delimiter
from configfileio.core.exceptions import AccessFailureError
from configfileio.core.models import Setting, Value
from configfileio.core.store import SettingsStore
from configfileio.io.reader import ConfigFileReader
from configfileio.io.writer import ConfigFileWriter

logger = logging.getLogger(__name__)

SettingInput = Union[str, int, float, bool]


def _stringify(value: SettingInput) -> str:
    return value if isinstance(value, str) else str(value)


class ConfigurationFile:
    """A configuration file and the settings loaded from it.

    Requesting a value of a missing category or setting returns an absent
    :class:`Value`; use :meth:`category_exists` and :meth:`setting_exists`
    to tell the cases apart.
    """

    def __init__(
        self,
        path: Path | str,
        delimiter: Optional[str] = None,
        *,
        options: Optional[FileOptions] = None,
    ):
        options = options or FileOptions()
        if delimiter is not None:
            options = options.model_copy(update={"delimiter": check_delimiter(delimiter)})
        self.path = Path(path)
        self.options = options
        self._store = SettingsStore()
        self._diagnostics: List[str] = []

    @classmethod
    def open(
        cls,
        path: Path | str,
        delimiter: Optional[str] = None,
        *,
        create: Optional[bool] = None,
        options: Optional[FileOptions] = None,
    ) -> "ConfigurationFile":
        """Load a configuration file, creating an empty one first if allowed.

        Raises:
            AccessFailureError: If the file is missing and may not be created,
                or cannot be created or read.
        """
        config = cls(path, delimiter, options=options)
        if create is None:
            create = config.options.create_if_missing
        if not config.path.exists():
            if not create:
                raise AccessFailureError(config.path, "file does not exist")
            config._create_empty()
        config.read()
        return config

    def _create_empty(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch()
        except OSError as exc:
            raise AccessFailureError(self.path, str(exc)) from exc
        logger.info("Created empty configuration file %s", self.path)

    @property
    def delimiter(self) -> str:
        return self.options.delimiter

    @property
    def store(self) -> SettingsStore:
        return self._store

    @property
    def diagnostics(self) -> List[str]:
        """Problems found in skipped lines during the latest read."""
        return list(self._diagnostics)

    def read(self) -> None:
        """Replace the in-memory settings with the content of the file.

        Raises:
            AccessFailureError: If the file cannot be read.
        """
        reader = ConfigFileReader(self.path, self.delimiter, self.options.encoding)
        result = reader.read()
        self._store = result.store
        self._diagnostics = result.errors
        if result.errors:
            logger.info("Read %s with %d skipped lines", self.path, len(result.errors))

    def write(self) -> None:
        """Write the in-memory settings to the file.

        Raises:
            WriteFailureError: If the file cannot be written.
        """
        ConfigFileWriter(self.path, self.delimiter, self.options.encoding).write(self._store)

    # Queries

    def category_exists(self, category: str) -> bool:
        return self._store.category_exists(category)

    def setting_exists(self, category: str, name: str) -> bool:
        return self._store.setting_exists(category, name)

    def list_categories(self) -> List[str]:
        return self._store.list_categories()

    def list_setting_names(self, category: str) -> List[str]:
        """Names of the settings in a category, empty if the category does not exist."""
        return self._store.list_setting_names(category)

    def get_value(self, category: str, name: str) -> Value:
        """Value of a setting, absent if it does not exist."""
        return self._store.get_value(category, name)

    # Mutation

    def set_value(self, category: str, name: str, value: SettingInput) -> None:
        """Set the value of a setting, creating it if it does not exist."""
        self._store.set_value(category, name, _stringify(value))

    def add_category(self, category: str) -> None:
        self._store.add_category(category)

    def remove_category(self, category: str) -> None:
        self._store.remove_category(category)

    def add_setting(self, category: str, name: str, value: SettingInput) -> None:
        """Add a setting at the end of a category, overwriting one with the same name."""
        self._store.add_setting(category, Setting(name, _stringify(value)))

    def remove_setting(self, category: str, name: str) -> None:
        self._store.remove_setting(category, name)

    def __repr__(self) -> str:
        return f"ConfigurationFile({str(self.path)!r}, delimiter={self.delimiter!r})"


__all__ = ["ConfigurationFile"]
