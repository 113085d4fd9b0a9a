import pytest

from configfileio.core import FormatMismatchError, Setting, Value


def test_absent_value_returns_defaults():
    value = Value.create_empty()
    assert value.absent
    assert value.payload == ""
    assert value.as_string() == ""
    assert value.as_string("fallback") == "fallback"
    assert value.as_integer() == 0
    assert value.as_integer(42) == 42
    assert value.as_real() == 0.0
    assert value.as_real(1.5) == 1.5
    assert value.as_boolean() is False
    assert value.as_boolean(True) is True


def test_absent_value_skips_parsing():
    value = Value(payload="not a number", absent=True)
    assert value.as_integer(7) == 7


def test_present_value_coercion():
    assert Value(payload="8080").as_integer() == 8080
    assert Value(payload="-12").as_integer() == -12
    assert Value(payload="2.5").as_real() == 2.5
    assert Value(payload="3").as_real() == 3.0
    assert Value(payload="TRUE").as_boolean() is True
    assert Value(payload="False").as_boolean() is False
    assert Value(payload="").as_string("unused") == ""


@pytest.mark.parametrize(
    "payload, accessor, kind",
    [
        ("abc", "as_integer", int),
        ("1.5", "as_integer", int),
        ("", "as_integer", int),
        ("one", "as_real", float),
        ("yes", "as_boolean", bool),
        ("1", "as_boolean", bool),
    ],
)
def test_format_mismatch(payload, accessor, kind):
    with pytest.raises(FormatMismatchError) as info:
        getattr(Value(payload=payload), accessor)()
    assert info.value.requested_type is kind
    assert info.value.payload == payload


def test_try_as_returns_none_instead_of_raising():
    assert Value(payload="12").try_as(int) == 12
    assert Value(payload="twelve").try_as(int) is None
    assert Value.create_empty().try_as(str) is None


def test_set_keeps_identity_and_clears_absence():
    value = Value.create_empty()
    same = value
    value.set("5")
    assert same is value
    assert not value.absent
    assert value.as_integer() == 5


def test_value_equality():
    assert Value(payload="a") == Value(payload="a")
    assert Value(payload="a") != Value(payload="b")
    assert Value(payload="") != Value.create_empty()


def test_setting_wraps_present_value():
    setting = Setting("host", "localhost")
    assert setting.name == "host"
    assert not setting.value.absent
    assert str(setting.value) == "localhost"


def test_setting_set_value_in_place():
    setting = Setting("port", "80")
    value = setting.value
    setting.set_value("8080")
    assert setting.value is value
    assert value.as_integer() == 8080


def test_setting_equality():
    assert Setting("a", "1") == Setting("a", "1")
    assert Setting("a", "1") != Setting("a", "2")
    assert Setting("a", "1") != Setting("b", "1")
