"""A camera that pans and zooms in response to input."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

import numpy as np

from ignis.events import Event, EventDispatcher, KeyPressedEvent, MouseScrolledEvent
from ignis.geometry import (
    ortho,
    quat_from_euler,
    quat_to_mat4,
    rotate,
    translation_matrix,
)
from ignis.input import InputState
from ignis.keycodes import Key
from ignis.modifiers import KeyMod

__all__ = ["Camera", "CameraType"]

NEAR_PLANE = 0.1
FAR_PLANE = 100.0
MIN_ZOOM = 0.1


class CameraType(Enum):
    TWO_D = 0
    THREE_D = 1


class Camera:
    """View and projection of a scene; 2D cameras zoom, 3D cameras move."""

    def __init__(
        self,
        camera_type: CameraType,
        width: float,
        height: float,
        position: Sequence[float] = (0.0, 0.0, 1.0),
    ) -> None:
        self.camera_type = camera_type
        self.zoom = 3.0
        self.aspect_ratio = 1.0
        self.yaw = 0.0
        self.pitch = 0.0
        self.size = (0.0, 0.0)
        self.position = np.asarray(position, dtype=float).copy()
        self.view_matrix = np.eye(4)
        self.projection_matrix = np.eye(4)
        self.resize((width, height))
        self.update_view_projection()

    def resize(self, size: Sequence[float]) -> None:
        """Set the viewport size and the aspect ratio it implies."""
        width, height = (float(v) for v in size)
        self.size = (width, height)
        self.aspect_ratio = width / height

    def _orientation(self) -> np.ndarray:
        return quat_from_euler((-self.pitch, -self.yaw, 0.0))

    def on_update(
        self, delta_time: float, input_state: InputState, text_input_active: bool = False
    ) -> None:
        """Apply held movement keys, unless text is being typed, then refresh matrices."""
        if not text_input_active:
            if input_state.is_key_down(Key.A):
                self.position = self.position - self.right() * self.zoom * delta_time
            elif input_state.is_key_down(Key.D):
                self.position = self.position + self.right() * self.zoom * delta_time

            if input_state.is_key_down(Key.W):
                if self.camera_type is CameraType.TWO_D:
                    self.zoom -= self.zoom * delta_time
                else:
                    self.position = self.position + self.forward() * delta_time
            elif input_state.is_key_down(Key.S):
                if self.camera_type is CameraType.TWO_D:
                    self.zoom += self.zoom * delta_time
                else:
                    self.position = self.position - self.forward() * delta_time

        self.update_view_projection()

    def update_view_projection(self) -> None:
        """Recompute the projection and view matrices."""
        if self.camera_type is CameraType.TWO_D:
            half_w = self.zoom * self.aspect_ratio
            half_h = self.zoom
            self.projection_matrix = ortho(-half_w, half_w, -half_h, half_h, NEAR_PLANE, FAR_PLANE)
        else:
            self.projection_matrix = ortho(
                0.0, 0.0, self.size[0], self.size[1], NEAR_PLANE, FAR_PLANE
            )
        model = translation_matrix(self.position) @ quat_to_mat4(self._orientation())
        self.view_matrix = np.linalg.inv(model)

    def on_event(self, event: Event, input_state: InputState) -> None:
        """Route key presses and scrolling to their handlers."""
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(KeyPressedEvent, self.on_key_pressed_event)
        dispatcher.dispatch(
            MouseScrolledEvent, lambda e: self.on_mouse_scroll_event(e, input_state)
        )

    def on_mouse_scroll_event(self, event: MouseScrolledEvent, input_state: InputState) -> bool:
        """Zoom with Alt held, otherwise pan; Shift swaps the pan axes. Never consumes."""
        if self.camera_type is CameraType.TWO_D:
            if input_state.is_modifier_active(KeyMod.ALT):
                self.zoom -= event.y_offset * (self.zoom * 0.1)
                self.zoom = max(self.zoom, MIN_ZOOM)
            else:
                speed = 50.0 / max(self.size) * self.aspect_ratio * self.zoom
                if input_state.is_modifier_active(KeyMod.LEFT_SHIFT):
                    self.position = self.position - self.right() * event.y_offset * speed
                    self.position = self.position + self.up() * event.x_offset * speed
                else:
                    self.position = self.position + self.right() * event.x_offset * speed
                    self.position = self.position + self.up() * event.y_offset * speed
        return False

    def on_key_pressed_event(self, event: KeyPressedEvent) -> bool:
        """Key presses do not affect the camera."""
        return False

    def view_projection(self) -> np.ndarray:
        return self.projection_matrix @ self.view_matrix

    def forward(self) -> np.ndarray:
        return rotate(self._orientation(), (0.0, 0.0, -1.0))

    def up(self) -> np.ndarray:
        return rotate(self._orientation(), (0.0, 1.0, 0.0))

    def right(self) -> np.ndarray:
        return rotate(self._orientation(), (1.0, 0.0, 0.0))