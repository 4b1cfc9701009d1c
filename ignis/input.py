"""Current state of keyboard keys, modifiers and mouse buttons."""

from __future__ import annotations

from dataclasses import dataclass, field

from ignis.modifiers import KeyMod

__all__ = ["InputState"]

_TRACKED_MODIFIERS = (
    KeyMod.SHIFT,
    KeyMod.CONTROL,
    KeyMod.ALT,
    KeyMod.SUPER,
    KeyMod.LEFT_ALT,
    KeyMod.LEFT_CONTROL,
    KeyMod.LEFT_SHIFT,
    KeyMod.RIGHT_ALT,
    KeyMod.RIGHT_CONTROL,
    KeyMod.RIGHT_SHIFT,
)


@dataclass
class InputState:
    """Which keys, modifiers and mouse buttons are held, and where the mouse is."""

    keys: dict[int, bool] = field(default_factory=dict)
    modifiers: dict[int, bool] = field(default_factory=dict)
    mouse_buttons: dict[int, bool] = field(default_factory=dict)
    mouse_position: tuple[int, int] = (0, 0)

    def set_key(self, key: int, pressed: bool) -> None:
        """Record a key going down or up."""
        self.keys[int(key)] = bool(pressed)

    def is_key_down(self, key: int) -> bool:
        """True while ``key`` is held."""
        return self.keys.get(int(key), False)

    def set_modifiers(self, mods: int) -> None:
        """Update every tracked modifier from a modifier bit mask."""
        for mod in _TRACKED_MODIFIERS:
            self.modifiers[int(mod)] = bool(mods & mod)

    def is_modifier_active(self, mod: int) -> bool:
        """True when the tracked modifier ``mod`` was active at the last update."""
        return self.modifiers.get(int(mod), False)

    def set_mouse_button(self, button: int, pressed: bool) -> None:
        """Record a mouse button going down or up."""
        self.mouse_buttons[int(button)] = bool(pressed)

    def is_mouse_button_down(self, button: int) -> bool:
        """True while ``button`` is held."""
        return self.mouse_buttons.get(int(button), False)

    def reset(self) -> None:
        """Forget all held keys, modifiers and buttons."""
        self.keys.clear()
        self.modifiers.clear()
        self.mouse_buttons.clear()
        self.mouse_position = (0, 0)