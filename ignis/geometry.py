"""Rectangles, bounding boxes, ray tests and the vector maths they rely on.

Quaternions are numpy arrays ordered ``(w, x, y, z)``. Matrices are numpy
arrays indexed ``[row, column]`` and act on column vectors, so ``m @ v``
transforms ``v``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Sequence

import numpy as np

__all__ = [
    "AABB",
    "Anchor",
    "Margin",
    "OBB",
    "Rect",
    "euler_angles",
    "ortho",
    "quat_from_euler",
    "quat_to_mat3",
    "quat_to_mat4",
    "rotate",
    "scale_matrix",
    "translation_matrix",
]

FLOAT_EPSILON = float(np.finfo(np.float32).eps)
FLOAT_MAX = float(np.finfo(np.float32).max)

Vec2 = tuple[float, float]


def _vec2(value: Iterable[float]) -> Vec2:
    x, y = value
    return (float(x), float(y))


def _vec3(value: Iterable[float]) -> np.ndarray:
    array = np.asarray(value, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array.copy()


def _quat(value: Iterable[float]) -> np.ndarray:
    array = np.asarray(value, dtype=float)
    if array.shape != (4,):
        raise ValueError(f"expected a (w, x, y, z) quaternion, got shape {array.shape}")
    return array


def _min(a: float, b: float) -> float:
    return b if b < a else a


def _max(a: float, b: float) -> float:
    return b if a < b else a


class Anchor(Enum):
    """Reference point of a rectangle."""

    CENTER = 0
    LEFT = 1
    RIGHT = 2
    TOP_LEFT = 3
    TOP_RIGHT = 4
    BOTTOM_LEFT = 5
    BOTTOM_RIGHT = 6


@dataclass
class Rect:
    """An axis-aligned rectangle given by its lower and upper corners.

    Arithmetic with another ``Rect`` works corner by corner; arithmetic with
    a 2-vector applies the vector to both corners. Both return a new rectangle.
    """

    min: Vec2 = (0.0, 0.0)
    max: Vec2 = (0.0, 0.0)

    def __post_init__(self) -> None:
        self.min = _vec2(self.min)
        self.max = _vec2(self.max)

    @classmethod
    def from_bounds(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> Rect:
        """Build a rectangle from its four bounds."""
        return cls((min_x, min_y), (max_x, max_y))

    def origin(self, anchor: Anchor, offset: Sequence[float] = (0.0, 0.0)) -> Vec2:
        """The point ``anchor`` names, moved by ``offset``."""
        ox, oy = _vec2(offset)
        min_x, min_y = self.min
        max_x, max_y = self.max
        if anchor is Anchor.BOTTOM_LEFT:
            return (min_x + ox, min_y + oy)
        if anchor is Anchor.TOP_LEFT:
            return (min_x + ox, max_y + oy)
        if anchor is Anchor.TOP_RIGHT:
            return (max_x + ox, max_y + oy)
        if anchor is Anchor.RIGHT:
            return (max_x + ox, (min_y + oy) / 2.0)
        if anchor is Anchor.LEFT:
            return (min_x + ox, (max_y + oy) / 2.0)
        cx, cy = self.center()
        return (cx + ox, cy + oy)

    def contains(self, point: Sequence[float]) -> bool:
        """True when ``point`` lies inside or on the border."""
        x, y = _vec2(point)
        return self.min[0] <= x <= self.max[0] and self.min[1] <= y <= self.max[1]

    def center(self) -> Vec2:
        return ((self.min[0] + self.max[0]) / 2.0, (self.min[1] + self.max[1]) / 2.0)

    def size(self) -> Vec2:
        return (self.max[0] - self.min[0], self.max[1] - self.min[1])

    def _combine(self, other: object, op: Callable[[float, float], float]) -> Rect:
        if isinstance(other, Rect):
            low, high = other.min, other.max
        else:
            low = high = _vec2(other)  # type: ignore[arg-type]
        return Rect(
            (op(self.min[0], low[0]), op(self.min[1], low[1])),
            (op(self.max[0], high[0]), op(self.max[1], high[1])),
        )

    def _operate(self, other: object, op: Callable[[float, float], float]) -> Rect:
        try:
            return self._combine(other, op)
        except (TypeError, ValueError):
            return NotImplemented

    def __add__(self, other: object) -> Rect:
        return self._operate(other, lambda a, b: a + b)

    def __sub__(self, other: object) -> Rect:
        return self._operate(other, lambda a, b: a - b)

    def __mul__(self, other: object) -> Rect:
        return self._operate(other, lambda a, b: a * b)

    def __truediv__(self, other: object) -> Rect:
        return self._operate(other, lambda a, b: a / b)


@dataclass
class Margin:
    """Space around the four sides of a box."""

    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> Margin:
        """The same margin on every side."""
        return cls(top=value, bottom=value, left=value, right=value)

    @classmethod
    def symmetric(cls, horizontal: float, vertical: float) -> Margin:
        """One margin for left and right, another for top and bottom."""
        return cls(top=vertical, bottom=vertical, left=horizontal, right=horizontal)


@dataclass(eq=False)
class AABB:
    """An axis-aligned box."""

    min: np.ndarray = field(default_factory=lambda: np.zeros(3))
    max: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        self.min = _vec3(self.min)
        self.max = _vec3(self.max)

    @classmethod
    def from_center(cls, center: Sequence[float], size: Sequence[float]) -> AABB:
        """A box of ``size`` centred on ``center``."""
        c = _vec3(center)
        half = _vec3(size) * 0.5
        return cls(c - half, c + half)

    def ray_intersection(self, origin: Sequence[float], direction: Sequence[float]) -> bool:
        """True when the ray from ``origin`` along ``direction`` hits the box."""
        start = _vec3(origin)
        with np.errstate(divide="ignore", invalid="ignore"):
            inverted = 1.0 / _vec3(direction)
            t_low = (self.min - start) * inverted
            t_high = (self.max - start) * inverted
        near_planes = [_min(a, b) for a, b in zip(t_low.tolist(), t_high.tolist())]
        far_planes = [_max(a, b) for a, b in zip(t_low.tolist(), t_high.tolist())]
        t_near = _max(_max(near_planes[0], near_planes[1]), near_planes[2])
        t_far = _min(_min(far_planes[0], far_planes[1]), far_planes[2])
        return t_near <= t_far and t_far > 0


@dataclass(eq=False)
class OBB:
    """A box oriented by a rotation; ``orientation``'s columns are its axes."""

    center: np.ndarray = field(default_factory=lambda: np.zeros(3))
    half_extents: np.ndarray = field(default_factory=lambda: np.zeros(3))
    orientation: np.ndarray = field(default_factory=lambda: np.eye(3))

    def __post_init__(self) -> None:
        self.center = _vec3(self.center)
        self.half_extents = _vec3(self.half_extents)
        self.orientation = np.asarray(self.orientation, dtype=float).reshape(3, 3).copy()

    @classmethod
    def from_rotation(
        cls,
        center: Sequence[float],
        world_scale: Sequence[float],
        rotation: Sequence[float],
    ) -> OBB:
        """A box of full size ``world_scale`` turned by quaternion ``rotation``."""
        return cls(_vec3(center), _vec3(world_scale) * 0.5, quat_to_mat3(rotation))

    def vertices(self) -> np.ndarray:
        """The eight corners, shape (8, 3); the x sign flips fastest, then y, then z."""
        ax, ay, az = (self.orientation[:, i] * self.half_extents[i] for i in range(3))
        return np.array(
            [
                self.center + sx * ax + sy * ay + sz * az
                for sz in (-1.0, 1.0)
                for sy in (-1.0, 1.0)
                for sx in (-1.0, 1.0)
            ]
        )

    def ray_intersection(
        self, origin: Sequence[float], direction: Sequence[float]
    ) -> float | None:
        """Distance along the ray to the box, or None when it misses.

        Starting inside the box gives the distance to where the ray leaves it.
        """
        delta = self.center - _vec3(origin)
        ray = _vec3(direction)
        t_near = -FLOAT_MAX
        t_far = FLOAT_MAX
        for axis, half in zip(self.orientation.T, self.half_extents.tolist()):
            e = float(np.dot(axis, delta))
            f = float(np.dot(axis, ray))
            if abs(f) > FLOAT_EPSILON:
                t1 = (e + half) / f
                t2 = (e - half) / f
                if t1 > t2:
                    t1, t2 = t2, t1
                t_near = t1 if t1 > t_near else t_near
                t_far = t2 if t2 < t_far else t_far
                if t_near > t_far or t_far < 0.0:
                    return None
            elif -e - half > 0.0 or -e + half < 0.0:
                return None
        return t_near if t_near > 0.0 else t_far


def quat_from_euler(angles: Sequence[float]) -> np.ndarray:
    """Quaternion from (pitch, yaw, roll) angles in radians."""
    half = _vec3(angles) * 0.5
    cx, cy, cz = np.cos(half)
    sx, sy, sz = np.sin(half)
    return np.array(
        [
            cx * cy * cz + sx * sy * sz,
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
        ]
    )


def quat_to_mat3(q: Sequence[float]) -> np.ndarray:
    """3x3 rotation matrix of a quaternion."""
    w, x, y, z = _quat(q)
    return np.array(
        [
            [1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - w * z), 2.0 * (x * z + w * y)],
            [2.0 * (x * y + w * z), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - w * x)],
            [2.0 * (x * z - w * y), 2.0 * (y * z + w * x), 1.0 - 2.0 * (x * x + y * y)],
        ]
    )


def quat_to_mat4(q: Sequence[float]) -> np.ndarray:
    """4x4 rotation matrix of a quaternion."""
    matrix = np.eye(4)
    matrix[:3, :3] = quat_to_mat3(q)
    return matrix


def rotate(q: Sequence[float], v: Sequence[float]) -> np.ndarray:
    """Rotate vector ``v`` by unit quaternion ``q``."""
    w, x, y, z = _quat(q)
    vector = _vec3(v)
    u = np.array([x, y, z])
    uv = np.cross(u, vector)
    uuv = np.cross(u, uv)
    return vector + (uv * w + uuv) * 2.0


def euler_angles(q: Sequence[float]) -> np.ndarray:
    """(pitch, yaw, roll) in radians of a quaternion."""
    w, x, y, z = _quat(q)
    roll = math.atan2(2.0 * (x * y + w * z), w * w + x * x - y * y - z * z)
    py = 2.0 * (y * z + w * x)
    px = w * w - x * x - y * y + z * z
    if abs(py) <= FLOAT_EPSILON and abs(px) <= FLOAT_EPSILON:
        pitch = 2.0 * math.atan2(x, w)
    else:
        pitch = math.atan2(py, px)
    yaw = math.asin(min(max(-2.0 * (x * z - w * y), -1.0), 1.0))
    return np.array([pitch, yaw, roll])


def translation_matrix(v: Sequence[float]) -> np.ndarray:
    """4x4 matrix moving points by ``v``."""
    matrix = np.eye(4)
    matrix[:3, 3] = _vec3(v)
    return matrix


def scale_matrix(v: Sequence[float]) -> np.ndarray:
    """4x4 matrix scaling each axis by the matching component of ``v``."""
    matrix = np.eye(4)
    matrix[:3, :3] = np.diag(_vec3(v))
    return matrix


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Right-handed orthographic projection onto the [-1, 1] cube.

    Empty ranges yield non-finite entries rather than an error.
    """
    l, r, b, t, n, f = (np.float64(value) for value in (left, right, bottom, top, near, far))
    matrix = np.eye(4)
    with np.errstate(divide="ignore", invalid="ignore"):
        matrix[0, 0] = 2.0 / (r - l)
        matrix[1, 1] = 2.0 / (t - b)
        matrix[2, 2] = -2.0 / (f - n)
        matrix[0, 3] = -(r + l) / (r - l)
        matrix[1, 3] = -(t + b) / (t - b)
        matrix[2, 3] = -(f + n) / (f - n)
    return matrix