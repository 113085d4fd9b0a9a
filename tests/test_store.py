import pytest
from pydantic import ValidationError

from configfileio.core import Setting, SettingsStore


def _store(**categories):
    store = SettingsStore()
    for category, settings in categories.items():
        for name, payload in settings:
            store.add_setting(category, Setting(name, payload))
    return store


def test_empty_store():
    store = SettingsStore()
    assert store.list_categories() == []
    assert not store.category_exists("A")
    assert not store.setting_exists("A", "x")
    assert store.list_setting_names("A") == []
    assert store.settings_in("A") == []
    assert len(store) == 0


def test_add_setting_creates_category():
    store = SettingsStore()
    store.add_setting("A", Setting("x", "1"))
    assert store.category_exists("A")
    assert "A" in store
    assert store.setting_exists("A", "x")
    assert not store.setting_exists("A", "y")
    assert not store.setting_exists("B", "x")


def test_categories_keep_insertion_order():
    store = SettingsStore()
    for name in ("b", "a", "c"):
        store.add_category(name)
    store.add_category("a")
    assert store.list_categories() == ["b", "a", "c"]
    assert list(store) == ["b", "a", "c"]


def test_add_setting_overwrite_moves_to_end():
    store = _store(A=[("x", "1"), ("y", "2")])
    store.add_setting("A", Setting("x", "9"))
    assert store.list_setting_names("A") == ["y", "x"]
    assert store.get_value("A", "x").as_integer() == 9


def test_set_value_keeps_order():
    store = _store(A=[("x", "1"), ("y", "2")])
    store.set_value("A", "x", "9")
    assert store.list_setting_names("A") == ["x", "y"]
    assert store.get_value("A", "x").as_string() == "9"


def test_set_value_creates_missing_setting():
    store = SettingsStore()
    store.set_value("A", "x", "1")
    assert store.list_setting_names("A") == ["x"]


def test_set_value_is_idempotent():
    once = _store(A=[("x", "1"), ("y", "2")])
    twice = _store(A=[("x", "1"), ("y", "2")])
    once.set_value("A", "x", "5")
    twice.set_value("A", "x", "5")
    twice.set_value("A", "x", "5")
    assert once == twice
    assert twice.list_setting_names("A") == ["x", "y"]


def test_set_value_updates_existing_value_in_place():
    store = _store(A=[("x", "1")])
    setting = store.get_setting("A", "x")
    value = setting.value
    store.set_value("A", "x", "2")
    assert store.get_setting("A", "x") is setting
    assert setting.value is value
    assert value.as_string() == "2"


def test_get_value_missing_is_absent():
    store = _store(A=[("x", "1")])
    assert store.get_value("missing", "missing").absent
    assert store.get_value("missing", "missing").as_integer(42) == 42
    assert store.get_value("A", "missing").as_string() == ""


def test_get_value_returns_snapshot():
    store = _store(A=[("x", "1")])
    value = store.get_value("A", "x")
    value.set("changed")
    assert store.get_value("A", "x").as_string() == "1"


def test_get_setting_allows_in_place_edit():
    store = _store(A=[("x", "1")])
    store.get_setting("A", "x").set_value("2")
    assert store.get_value("A", "x").as_string() == "2"
    assert store.get_setting("A", "missing") is None


def test_remove_category_cascades():
    store = _store(A=[("x", "1"), ("y", "2")], B=[("z", "3")])
    store.remove_category("A")
    assert not store.category_exists("A")
    assert not store.setting_exists("A", "x")
    assert not store.setting_exists("A", "y")
    assert store.list_categories() == ["B"]


def test_remove_missing_is_noop():
    store = _store(A=[("x", "1")])
    store.remove_category("missing")
    store.remove_setting("missing", "x")
    store.remove_setting("A", "missing")
    assert store == _store(A=[("x", "1")])


def test_remove_setting():
    store = _store(A=[("x", "1"), ("y", "2")])
    store.remove_setting("A", "x")
    assert store.list_setting_names("A") == ["y"]
    assert store.category_exists("A")


def test_settings_in_returns_copy():
    store = _store(A=[("x", "1")])
    store.settings_in("A").clear()
    assert store.list_setting_names("A") == ["x"]


def test_equality_depends_on_order():
    assert _store(A=[("x", "1"), ("y", "2")]) != _store(A=[("y", "2"), ("x", "1")])
    assert _store(A=[("x", "1")]) != _store(A=[("x", "2")])


def test_set_value_rejects_non_string_payloads():
    store = _store(A=[("x", "1")])
    with pytest.raises(ValidationError):
        store.set_value("A", "x", 2)
    with pytest.raises(ValidationError):
        store.set_value("A", "y", 2)
    assert store.get_value("A", "x").as_string() == "1"
    assert not store.setting_exists("A", "y")
