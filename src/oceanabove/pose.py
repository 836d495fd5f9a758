from __future__ import annotations

import math
from typing import Callable, Sequence

from oceanabove.linalg import Mat4, Vec3


def model_matrix(pose: Pose) -> Mat4:
    """Place an object in the world: T · Rx(pitch) · Ry(yaw) · S."""
    p = pose.position
    return (
        Mat4.translate(p.x, p.y, p.z)
        @ Mat4.rotate_x(math.radians(pose.pitch))
        @ Mat4.rotate_y(math.radians(pose.yaw))
        @ Mat4.scale(pose.scale)
    )


def view_matrix(pose: Pose) -> Mat4:
    """Map world space into camera space: Rx(-pitch) · Ry(-yaw) · T(-position).

    Rotation goes on the left of the translation, the reverse of
    `model_matrix`; the two are only inverses when pitch or yaw is zero.
    """
    p = pose.position
    return (
        Mat4.rotate_x(math.radians(-pose.pitch))
        @ Mat4.rotate_y(math.radians(-pose.yaw))
        @ Mat4.translate(-p.x, -p.y, -p.z)
    )


class Pose:
    """Position, orientation (degrees) and uniform scale of one entity.

    Every mutator sets `dirty`. The owner calls `recompute()` once per frame
    and `mark_clean()` once the matrix has reached the upload sink.
    """

    def __init__(
        self,
        position: Vec3 | Sequence[float] = (0.0, 0.0, 0.0),
        pitch: float = 0.0,
        yaw: float = 0.0,
        scale: float = 1.0,
    ):
        self._position = Vec3.of(position)
        self._pitch = float(pitch)
        self._yaw = float(yaw)
        self._scale = float(scale)
        self.dirty = True
        self.matrix = Mat4.identity()

    @property
    def position(self) -> Vec3:
        # Copy out so callers cannot mutate behind the dirty flag.
        return self._position.clone()

    @position.setter
    def position(self, value) -> None:
        self._position = Vec3.of(value)
        self.dirty = True

    @property
    def pitch(self) -> float:
        return self._pitch

    @pitch.setter
    def pitch(self, value: float) -> None:
        self._pitch = float(value)
        self.dirty = True

    @property
    def yaw(self) -> float:
        return self._yaw

    @yaw.setter
    def yaw(self, value: float) -> None:
        self._yaw = float(value)
        self.dirty = True

    @property
    def scale(self) -> float:
        return self._scale

    @scale.setter
    def scale(self, value: float) -> None:
        self._scale = float(value)
        self.dirty = True

    def move_by(self, delta: Vec3) -> None:
        self.position = self._position + delta

    def turn_by(self, dpitch: float = 0.0, dyaw: float = 0.0) -> None:
        self.pitch = self._pitch + dpitch
        self.yaw = self._yaw + dyaw

    def mark_dirty(self) -> None:
        self.dirty = True

    def mark_clean(self) -> None:
        self.dirty = False

    def recompute(self, build: Callable[[Pose], Mat4] = model_matrix) -> Mat4:
        self.matrix = build(self)
        return self.matrix

    def __repr__(self) -> str:
        return (
            f"Pose(position={self._position!r}, pitch={self._pitch}, "
            f"yaw={self._yaw}, scale={self._scale}, dirty={self.dirty})"
        )
