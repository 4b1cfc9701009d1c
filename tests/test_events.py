from pathlib import PurePath

import pytest

from ignis.events import (
    Event,
    EventCategory,
    EventDispatcher,
    EventType,
    FramebufferResizeEvent,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowDropEvent,
    WindowResizeEvent,
)
from ignis.keycodes import Key
from ignis.modifiers import KeyMod, MouseButton


def test_category_bits_are_distinct_powers_of_two():
    values = [int(c) for c in EventCategory]
    assert len(set(values)) == len(values)
    assert all(v & (v - 1) == 0 for v in values)
    close = WindowCloseEvent()
    in_category = [c for c in EventCategory if close.is_in_category(c)]
    assert in_category == [EventCategory.APPLICATION]


def test_window_close_description():
    assert str(WindowCloseEvent()) == "WindowCloseEvent: Window Closed!"


def test_resize_events_mention_dimensions():
    text = str(WindowResizeEvent(640, 480))
    assert text.startswith("WindowResizeEvent: ")
    assert "640" in text and "480" in text
    fb = str(FramebufferResizeEvent(800, 600))
    assert fb.startswith("FramebufferResizeEvent: ")
    assert fb.endswith("600")


def test_application_events_are_only_application():
    for ev in (WindowCloseEvent(), WindowResizeEvent(1, 1), WindowDropEvent([])):
        assert ev.is_in_category(EventCategory.APPLICATION)
        assert not ev.is_in_category(EventCategory.INPUT)


def test_key_events_are_keyboard_input():
    ev = KeyPressedEvent(Key.A, KeyMod.NONE, 0)
    assert ev.is_in_category(EventCategory.KEYBOARD)
    assert ev.is_in_category(EventCategory.INPUT)
    assert not ev.is_in_category(EventCategory.MOUSE)


def test_mouse_button_events_not_in_mouse_button_category():
    ev = MouseButtonPressedEvent(MouseButton.LEFT)
    assert ev.is_in_category(EventCategory.MOUSE)
    assert not ev.is_in_category(EventCategory.MOUSE_BUTTON)


def test_key_pressed_description_uses_character():
    ev = KeyPressedEvent(Key.A, KeyMod.LEFT_SHIFT, 2)
    text = str(ev)
    assert text.startswith("KeyPressedEvent: a Mod: ")
    assert text.endswith("(2 repeats)")


def test_key_typed_has_no_modifiers():
    ev = KeyTypedEvent(Key.Z)
    assert ev.mods == KeyMod.NONE
    assert str(ev) == "KeyTypedEvent: z"
    assert ev.event_type is EventType.KEY_TYPED


def test_key_released_reports_pressed_type():
    ev = KeyReleasedEvent(Key.W, KeyMod.NONE)
    assert ev.event_type is KeyPressedEvent.event_type
    assert str(ev).startswith("KeyReleasedEvent: w")


def test_mouse_moved_prints_numbers_compactly():
    ev = MouseMovedEvent(1.5, 2.0)
    assert str(ev) == "MouseMovedEvent: 1.5, 2"


def test_mouse_scrolled_keeps_offsets():
    ev = MouseScrolledEvent(-1.0, 3.0)
    assert (ev.x_offset, ev.y_offset) == (-1.0, 3.0)
    assert str(ev).startswith("MouseScrolledEvent: -1, ")


def test_mouse_button_is_button():
    ev = MouseButtonReleasedEvent(MouseButton.RIGHT)
    assert ev.is_button(MouseButton.RIGHT)
    assert not ev.is_button(MouseButton.LEFT)
    assert str(ev).endswith(str(int(MouseButton.RIGHT)))


def test_drop_event_lists_paths():
    ev = WindowDropEvent(["a/b.png", PurePath("c.txt")])
    assert ev.paths == (PurePath("a/b.png"), PurePath("c.txt"))
    text = str(ev)
    assert "a/b.png\n" in text
    assert text.endswith("c.txt\n")


def test_dispatch_matching_type_sets_handled():
    ev = MouseScrolledEvent(0.0, 1.0)
    seen = []

    def handler(e):
        seen.append(e)
        return True

    assert EventDispatcher(ev).dispatch(MouseScrolledEvent, handler) is True
    assert seen == [ev]
    assert ev.handled is True


def test_dispatch_other_type_does_nothing():
    ev = MouseScrolledEvent(0.0, 1.0)
    called = []
    assert EventDispatcher(ev).dispatch(KeyPressedEvent, called.append) is False
    assert called == []
    assert ev.handled is False


def test_dispatch_handler_false_leaves_unhandled():
    ev = KeyPressedEvent(Key.S, KeyMod.NONE, 0)
    assert EventDispatcher(ev).dispatch(KeyPressedEvent, lambda e: False)
    assert ev.handled is False


def test_handled_is_per_instance():
    a = WindowCloseEvent()
    b = WindowCloseEvent()
    a.handled = True
    assert b.handled is False


def test_event_base_is_abstract():
    with pytest.raises(TypeError):
        Event()