"""64-bit identifiers for scenes, entities and assets."""

from __future__ import annotations

import secrets

__all__ = ["UUID"]

_BITS = 64
_LIMIT = 1 << _BITS


class UUID:
    """An unsigned 64-bit identifier, random unless a value is given.

    It compares and hashes like the integer it holds, so a UUID and its
    integer value find the same entry in a dictionary.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int | UUID | None = None) -> None:
        if value is None:
            self._value = secrets.randbits(_BITS)
            return
        if isinstance(value, UUID):
            self._value = value._value
            return
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"UUID value must be an int, not {type(value).__name__}")
        if not 0 <= value < _LIMIT:
            raise ValueError(f"UUID value must fit in 64 unsigned bits, got {value}")
        self._value = value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UUID):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"UUID({self._value})"

    def __str__(self) -> str:
        return str(self._value)