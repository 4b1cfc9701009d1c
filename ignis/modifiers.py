"""Keyboard modifier flags and mouse button codes."""

from __future__ import annotations

from enum import IntEnum, IntFlag

__all__ = ["KeyMod", "MouseButton", "button_mask"]


class KeyMod(IntFlag):
    """Modifier keys held down while a key event happened."""

    NONE = 0x0000
    LEFT_SHIFT = 0x0001
    RIGHT_SHIFT = 0x0002
    LEVEL5 = 0x0004
    LEFT_CONTROL = 0x0040
    RIGHT_CONTROL = 0x0080
    LEFT_ALT = 0x0100
    RIGHT_ALT = 0x0200
    LEFT_SUPER = 0x0400
    RIGHT_SUPER = 0x0800
    NUM = 0x1000
    CAPS = 0x2000
    MODE = 0x4000
    SCROLL = 0x8000
    CONTROL = 0x0040 | 0x0080
    SHIFT = 0x0001 | 0x0002
    ALT = 0x0100 | 0x0200
    SUPER = 0x0400 | 0x0800


class MouseButton(IntEnum):
    """Mouse buttons, numbered from one."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    X1 = 4
    X2 = 5

    @property
    def mask(self) -> int:
        """The bit this button occupies in a button-state mask."""
        return button_mask(self)


def button_mask(button: int) -> int:
    """Return the state-mask bit for a mouse button number."""
    if not isinstance(button, int) or isinstance(button, bool):
        raise TypeError(f"button must be an int, not {type(button).__name__}")
    if button < 1:
        raise ValueError(f"mouse buttons are numbered from 1, got {button}")
    return 1 << (button - 1)