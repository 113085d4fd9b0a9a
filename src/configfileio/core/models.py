"""Data models for configuration settings."""

from typing import Callable, Dict, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from .exceptions import FormatMismatchError

T = TypeVar("T", str, int, float, bool)

_BOOLEAN_WORDS = {"true": True, "false": False}


def _parse_boolean(payload: str) -> bool:
    try:
        return _BOOLEAN_WORDS[payload.strip().lower()]
    except KeyError:
        raise ValueError(f"not a boolean: {payload!r}") from None


_PARSERS: Dict[type, Callable[[str], object]] = {
    str: str,
    int: int,
    float: float,
    bool: _parse_boolean,
}


class Value(BaseModel):
    """Textual value of a setting with typed accessors.

    An absent value stands for a setting that does not exist. Every accessor
    returns its default for an absent value without looking at the payload.
    """

    model_config = ConfigDict(validate_assignment=True)

    payload: str = ""
    absent: bool = False

    @classmethod
    def create_empty(cls) -> "Value":
        """Create a value in the absent state."""
        return cls(payload="", absent=True)

    def set(self, payload: str) -> None:
        """Replace the payload in place and mark the value as present."""
        self.payload = payload
        self.absent = False

    def _coerce(self, kind: type[T], default: T) -> T:
        if self.absent:
            return default
        parse = _PARSERS[kind]
        try:
            return parse(self.payload)
        except ValueError as exc:
            raise FormatMismatchError(kind, self.payload) from exc

    def as_string(self, default: str = "") -> str:
        """Get the value as a string."""
        return self._coerce(str, default)

    def as_integer(self, default: int = 0) -> int:
        """Get the value as an integer."""
        return self._coerce(int, default)

    def as_real(self, default: float = 0.0) -> float:
        """Get the value as a real number."""
        return self._coerce(float, default)

    def as_boolean(self, default: bool = False) -> bool:
        """Get the value as a boolean ("true"/"false", case-insensitive)."""
        return self._coerce(bool, default)

    def try_as(self, kind: type[T]) -> Optional[T]:
        """Get the value as ``kind``, or None when absent or unparsable."""
        if self.absent:
            return None
        try:
            return self._coerce(kind, None)
        except FormatMismatchError:
            return None

    def __str__(self) -> str:
        return self.payload


class Setting(BaseModel):
    """A named setting owning exactly one value."""

    name: str
    value: Value

    def __init__(self, name: str, payload: str = "", **data):
        if "value" not in data:
            data["value"] = Value(payload=payload)
        super().__init__(name=name, **data)

    def set_value(self, payload: str) -> None:
        """Set the payload of the owned value, keeping its identity."""
        self.value.set(payload)

    def __str__(self) -> str:
        return f'"{self.name}":"{self.value}"'


__all__ = ["Value", "Setting"]
