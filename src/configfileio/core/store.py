"""In-memory store of categorized settings."""

from typing import Dict, Iterator, List, Optional

from .models import Setting, Value


class SettingsStore:
    """Mapping of category name to an ordered list of settings.

    Categories keep insertion order. Setting names are unique within a
    category. Removing something that does not exist is a no-op.
    """

    def __init__(self) -> None:
        self._categories: Dict[str, List[Setting]] = {}

    # Lookup helpers

    def _find(self, category: str, name: str) -> Optional[Setting]:
        for setting in self._categories.get(category, ()):
            if setting.name == name:
                return setting
        return None

    def category_exists(self, category: str) -> bool:
        """Check if a category exists."""
        return category in self._categories

    def setting_exists(self, category: str, name: str) -> bool:
        """Check if a setting exists in the given category."""
        return self._find(category, name) is not None

    def list_categories(self) -> List[str]:
        """List category names in insertion order."""
        return list(self._categories)

    def list_setting_names(self, category: str) -> List[str]:
        """List setting names of a category, empty if the category is absent."""
        return [setting.name for setting in self._categories.get(category, ())]

    def settings_in(self, category: str) -> List[Setting]:
        """Get the settings of a category in order, empty if the category is absent."""
        return list(self._categories.get(category, ()))

    def get_setting(self, category: str, name: str) -> Optional[Setting]:
        """Get the live setting for in-place edits, or None if it does not exist."""
        return self._find(category, name)

    def get_value(self, category: str, name: str) -> Value:
        """Get a copy of a setting's value.

        Returns an absent value if the category or setting does not exist.
        Use :meth:`get_setting` to edit the stored value in place.
        """
        setting = self._find(category, name)
        if setting is None:
            return Value.create_empty()
        return setting.value.model_copy()

    # Mutation

    def set_value(self, category: str, name: str, payload: str) -> None:
        """Set a setting's payload, creating the setting if needed.

        An existing setting keeps its position in the category.
        """
        setting = self._find(category, name)
        if setting is None:
            self.add_setting(category, Setting(name, payload))
        else:
            setting.set_value(payload)

    def add_category(self, category: str) -> None:
        """Add an empty category if it does not exist yet."""
        self._categories.setdefault(category, [])

    def remove_category(self, category: str) -> None:
        """Remove a category and all of its settings."""
        self._categories.pop(category, None)

    def add_setting(self, category: str, setting: Setting) -> None:
        """Append a setting to a category, creating the category if needed.

        A setting with the same name is removed first, so an overwritten
        setting moves to the end of the category.
        """
        settings = self._categories.setdefault(category, [])
        existing = self._find(category, setting.name)
        if existing is not None:
            settings.remove(existing)
        settings.append(setting)

    def remove_setting(self, category: str, name: str) -> None:
        """Remove a setting from a category if it exists."""
        existing = self._find(category, name)
        if existing is not None:
            self._categories[category].remove(existing)

    def __contains__(self, category: object) -> bool:
        return category in self._categories

    def __iter__(self) -> Iterator[str]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SettingsStore):
            return NotImplemented
        return self._categories == other._categories

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        counts = ", ".join(f"{name}: {len(items)}" for name, items in self._categories.items())
        return f"SettingsStore({{{counts}}})"


__all__ = ["SettingsStore"]
