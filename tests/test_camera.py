import numpy as np
import pytest

from ignis.camera import Camera, CameraType
from ignis.events import KeyPressedEvent, MouseScrolledEvent
from ignis.input import InputState
from ignis.keycodes import Key
from ignis.modifiers import KeyMod


@pytest.fixture
def camera():
    return Camera(CameraType.TWO_D, 1280.0, 720.0)


def test_defaults(camera):
    assert np.allclose(camera.position, (0.0, 0.0, 1.0))
    assert camera.zoom == 3.0
    assert camera.aspect_ratio == pytest.approx(1280.0 / 720.0)


def test_axes_without_rotation(camera):
    assert np.allclose(camera.forward(), (0.0, 0.0, -1.0))
    assert np.allclose(camera.up(), (0.0, 1.0, 0.0))
    assert np.allclose(camera.right(), (1.0, 0.0, 0.0))


def test_view_maps_position_to_origin(camera):
    point = camera.view_matrix @ np.append(camera.position, 1.0)
    assert np.allclose(point, (0.0, 0.0, 0.0, 1.0))


def test_view_projection_is_product(camera):
    assert np.allclose(camera.view_projection(), camera.projection_matrix @ camera.view_matrix)


def test_resize_updates_aspect(camera):
    camera.resize((400.0, 800.0))
    assert camera.size == (400.0, 800.0)
    assert camera.aspect_ratio == pytest.approx(400.0 / 800.0)


def test_pan_left_then_right_returns(camera):
    state = InputState()
    start = camera.position.copy()
    state.set_key(Key.D, True)
    camera.on_update(0.5, state)
    assert camera.position[0] > start[0]
    state.set_key(Key.D, False)
    state.set_key(Key.A, True)
    camera.on_update(0.5, state)
    assert np.allclose(camera.position, start)


def test_w_zooms_in_and_s_zooms_out(camera):
    state = InputState()
    state.set_key(Key.W, True)
    camera.on_update(0.1, state)
    assert camera.zoom < 3.0
    state.set_key(Key.W, False)
    state.set_key(Key.S, True)
    before = camera.zoom
    camera.on_update(0.1, state)
    assert camera.zoom > before


def test_text_input_blocks_movement(camera):
    state = InputState()
    state.set_key(Key.D, True)
    state.set_key(Key.W, True)
    camera.on_update(0.5, state, text_input_active=True)
    assert np.allclose(camera.position, (0.0, 0.0, 1.0))
    assert camera.zoom == 3.0


def test_three_d_camera_moves_forward():
    cam = Camera(CameraType.THREE_D, 800.0, 600.0)
    state = InputState()
    state.set_key(Key.W, True)
    cam.on_update(0.5, state)
    assert cam.position[2] < 1.0
    assert cam.position[0] == pytest.approx(0.0)
    assert cam.zoom == 3.0


def test_alt_scroll_zooms_and_clamps(camera):
    state = InputState()
    state.set_modifiers(KeyMod.LEFT_ALT)
    camera.on_mouse_scroll_event(MouseScrolledEvent(0.0, 1.0), state)
    assert camera.zoom < 3.0
    camera.on_mouse_scroll_event(MouseScrolledEvent(0.0, 100.0), state)
    assert camera.zoom == pytest.approx(0.1)


def test_scroll_pans_and_round_trips(camera):
    state = InputState()
    start = camera.position.copy()
    camera.on_mouse_scroll_event(MouseScrolledEvent(1.0, 0.0), state)
    assert camera.position[0] > start[0]
    assert camera.position[1] == pytest.approx(start[1])
    camera.on_mouse_scroll_event(MouseScrolledEvent(-1.0, 0.0), state)
    assert np.allclose(camera.position, start)


def test_shift_scroll_swaps_axes(camera):
    state = InputState()
    state.set_modifiers(KeyMod.LEFT_SHIFT)
    start = camera.position.copy()
    camera.on_mouse_scroll_event(MouseScrolledEvent(0.0, 1.0), state)
    assert camera.position[0] < start[0]
    assert camera.position[1] == pytest.approx(start[1])


def test_on_event_dispatches_scroll(camera):
    state = InputState()
    state.set_modifiers(KeyMod.LEFT_ALT)
    event = MouseScrolledEvent(0.0, 1.0)
    camera.on_event(event, state)
    assert camera.zoom < 3.0
    assert event.handled is False


def test_key_press_does_not_consume(camera):
    event = KeyPressedEvent(int(Key.A), 0, 0)
    assert camera.on_key_pressed_event(event) is False
    camera.on_event(event, InputState())
    assert event.handled is False
    assert np.allclose(camera.position, (0.0, 0.0, 1.0))