"""Window, keyboard and mouse events and a dispatcher for them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, IntFlag, auto
from pathlib import PurePath
from typing import Callable, ClassVar, Iterable, TypeVar

from ignis.modifiers import KeyMod

__all__ = [
    "Event",
    "EventCategory",
    "EventDispatcher",
    "EventType",
    "FramebufferResizeEvent",
    "KeyEvent",
    "KeyPressedEvent",
    "KeyReleasedEvent",
    "KeyTypedEvent",
    "MouseButtonEvent",
    "MouseButtonPressedEvent",
    "MouseButtonReleasedEvent",
    "MouseMovedEvent",
    "MouseScrolledEvent",
    "WindowCloseEvent",
    "WindowDropEvent",
    "WindowResizeEvent",
]


class EventType(Enum):
    """What happened."""

    NONE = 0
    WINDOW_CLOSE = auto()
    WINDOW_RESIZE = auto()
    WINDOW_FOCUS = auto()
    WINDOW_LOST_FOCUS = auto()
    WINDOW_MOVED = auto()
    WINDOW_DROP = auto()
    FRAMEBUFFER_RESIZE = auto()
    KEY_PRESSED = auto()
    KEY_RELEASED = auto()
    KEY_TYPED = auto()
    MOUSE_BUTTON_PRESSED = auto()
    MOUSE_BUTTON_RELEASED = auto()
    MOUSE_MOVED = auto()
    MOUSE_SCROLLED = auto()


class EventCategory(IntFlag):
    """Broad groups an event can belong to."""

    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


def _format_number(value: float) -> str:
    """Format a float the way a default-configured stream prints it."""
    return f"{value:g}"


def _key_char(key_code: int) -> str:
    return chr(key_code & 0xFF)


class Event(ABC):
    """Base of every event; ``handled`` is set by whoever consumed it."""

    event_type: ClassVar[EventType] = EventType.NONE
    category_flags: ClassVar[EventCategory] = EventCategory(0)
    handled: bool = False

    def is_in_category(self, category: EventCategory) -> bool:
        """True when the event belongs to ``category``."""
        return bool(self.category_flags & category)

    @abstractmethod
    def _describe(self) -> str:
        """One-line human-readable description."""

    def __str__(self) -> str:
        return self._describe()


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to the handler registered for its type."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[E], handler: Callable[[E], bool]) -> bool:
        """Call ``handler`` if the event has ``event_class``'s type.

        The handler's result becomes the event's ``handled`` flag. Returns
        whether the handler was called.
        """
        if self.event.event_type is not event_class.event_type:
            return False
        self.event.handled = bool(handler(self.event))  # type: ignore[arg-type]
        return True


@dataclass
class WindowResizeEvent(Event):
    width: int
    height: int

    event_type: ClassVar[EventType] = EventType.WINDOW_RESIZE
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION

    def _describe(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


@dataclass
class WindowCloseEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_CLOSE
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION

    def _describe(self) -> str:
        return "WindowCloseEvent: Window Closed!"


@dataclass
class FramebufferResizeEvent(Event):
    width: int
    height: int

    event_type: ClassVar[EventType] = EventType.FRAMEBUFFER_RESIZE
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION

    def _describe(self) -> str:
        return f"FramebufferResizeEvent: {self.width}, {self.height}"


@dataclass
class WindowDropEvent(Event):
    """Files dropped onto the window."""

    paths: tuple[PurePath, ...]

    event_type: ClassVar[EventType] = EventType.WINDOW_DROP
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION

    def __init__(self, paths: Iterable[str | PurePath]) -> None:
        self.paths = tuple(PurePath(p) for p in paths)

    def _describe(self) -> str:
        listing = "".join(f"{path.as_posix()}\n" for path in self.paths)
        return f"WindoDropEvent: \nDropping files: {listing}"


@dataclass
class KeyEvent(Event):
    """A keyboard event carrying a key code and the active modifiers."""

    key_code: int
    mods: int

    category_flags: ClassVar[EventCategory] = EventCategory.KEYBOARD | EventCategory.INPUT

    def _describe(self) -> str:
        return f"{type(self).__name__}: {_key_char(self.key_code)} Mod: {int(self.mods)}"


@dataclass
class KeyPressedEvent(KeyEvent):
    repeat_count: int

    event_type: ClassVar[EventType] = EventType.KEY_PRESSED

    def _describe(self) -> str:
        return (
            f"KeyPressedEvent: {_key_char(self.key_code)} Mod: {int(self.mods)}"
            f" ({self.repeat_count} repeats)"
        )


@dataclass
class KeyReleasedEvent(KeyEvent):
    # Reports the pressed type, so pressed-key handlers also see releases.
    event_type: ClassVar[EventType] = EventType.KEY_PRESSED

    def _describe(self) -> str:
        return f"KeyReleasedEvent: {_key_char(self.key_code)} Mod: {int(self.mods)}"


@dataclass
class KeyTypedEvent(KeyEvent):
    mods: int = field(default=int(KeyMod.NONE), init=False)

    event_type: ClassVar[EventType] = EventType.KEY_TYPED

    def _describe(self) -> str:
        return f"KeyTypedEvent: {_key_char(self.key_code)}"


@dataclass
class MouseMovedEvent(Event):
    x: float
    y: float

    event_type: ClassVar[EventType] = EventType.MOUSE_MOVED
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    def _describe(self) -> str:
        return f"MouseMovedEvent: {_format_number(self.x)}, {_format_number(self.y)}"


@dataclass
class MouseScrolledEvent(Event):
    x_offset: float
    y_offset: float

    event_type: ClassVar[EventType] = EventType.MOUSE_SCROLLED
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    def _describe(self) -> str:
        return (
            f"MouseScrolledEvent: {_format_number(self.x_offset)}, "
            f"{_format_number(self.y_offset)}"
        )


@dataclass
class MouseButtonEvent(Event):
    button: int

    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    def is_button(self, button: int) -> bool:
        """True when this event concerns ``button``."""
        return self.button == button

    def _describe(self) -> str:
        return f"{type(self).__name__}: {int(self.button)}"


@dataclass
class MouseButtonPressedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_PRESSED


@dataclass
class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_RELEASED