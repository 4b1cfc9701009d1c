"""Components attached to scene entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from ignis.geometry import (
    euler_angles,
    quat_to_mat4,
    scale_matrix,
    translation_matrix,
)
from ignis.identifiers import UUID

__all__ = ["Component", "ID", "Sprite", "Transform"]


class Component:
    """Base of every component."""

    def destroy(self) -> None:
        """Release what the component holds; nothing by default."""


@dataclass
class ID(Component):
    """An entity's name, identifier and children.

    Without a name the entity is called "untitled" and gets identifier 0;
    with a name and no identifier it gets a random one.
    """

    name: str | None = None
    uuid: UUID | int | None = None
    children: list[UUID] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.name is None:
            self.name = "untitled"
            if self.uuid is None:
                self.uuid = UUID(0)
        self.uuid = UUID(self.uuid)


def _array(values: Any, size: int) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.shape != (size,):
        raise ValueError(f"expected {size} components, got shape {array.shape}")
    return array.copy()


@dataclass(eq=False)
class Transform(Component):
    """Position, rotation (w, x, y, z quaternion) and scale, in world and local space."""

    world_translation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    world_rotation: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 0.0, 1.0]))
    world_scale: np.ndarray = field(default_factory=lambda: np.ones(3))
    local_translation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    local_rotation: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0, 0.0]))
    local_scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    def __post_init__(self) -> None:
        self.world_translation = _array(self.world_translation, 3)
        self.world_rotation = _array(self.world_rotation, 4)
        self.world_scale = _array(self.world_scale, 3)
        self.local_translation = _array(self.local_translation, 3)
        self.local_rotation = _array(self.local_rotation, 4)
        self.local_scale = _array(self.local_scale, 3)

    def world_transform(self) -> np.ndarray:
        """Model matrix: translate, then rotate, then scale."""
        return (
            translation_matrix(self.world_translation)
            @ quat_to_mat4(self.world_rotation)
            @ scale_matrix(self.world_scale)
        )

    def local_transform(self) -> np.ndarray:
        """Matrix of the local translation, rotation and scale."""
        return (
            translation_matrix(self.local_translation)
            @ quat_to_mat4(self.local_rotation)
            @ scale_matrix(self.local_scale)
        )

    def world_euler_rotation(self) -> np.ndarray:
        """World rotation as (pitch, yaw, roll) radians."""
        return euler_angles(self.world_rotation)

    def local_euler_rotation(self) -> np.ndarray:
        """Local rotation as (pitch, yaw, roll) radians."""
        return euler_angles(self.local_rotation)


@dataclass(eq=False)
class Sprite(Component):
    """A coloured, optionally textured quad."""

    color: np.ndarray = field(default_factory=lambda: np.ones(4))
    texture: Any = None

    def __post_init__(self) -> None:
        self.color = _array(self.color, 4)