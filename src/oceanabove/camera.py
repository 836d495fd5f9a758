from __future__ import annotations

import enum
import math
from typing import Iterable, Sequence

from . import config
from .linalg import Mat4, Vec3
from .pose import Pose, view_matrix


class MoveIntent(enum.Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"


def _heading(yaw_deg: float) -> Vec3:
    yaw = math.radians(yaw_deg)
    return Vec3(math.sin(yaw), 0.0, math.cos(yaw))


class Camera:
    """First-person camera with drag-damped motion.

    Input accumulates into `acceleration` during a frame; `integrate()`
    consumes it and resets it to zero. With acceleration scaled to
    ``drag * speed``, horizontal velocity settles at `speed`.
    """

    def __init__(
        self,
        position: Vec3 | Sequence[float] = config.CAMERA_START,
        speed: float = config.SPEED,
        drag: float = config.DRAG,
        sensitivity: float = config.MOUSE_SENSITIVITY,
        pitch_limit: float = config.PITCH_LIMIT,
    ):
        self.pose = Pose(position)
        self.velocity = Vec3()
        self.acceleration = Vec3()
        self.speed = float(speed)
        self.drag = float(drag)
        self.sensitivity = float(sensitivity)
        self.pitch_limit = float(pitch_limit)

    @property
    def position(self) -> Vec3:
        return self.pose.position

    @property
    def pitch(self) -> float:
        return self.pose.pitch

    @property
    def yaw(self) -> float:
        return self.pose.yaw

    def accelerate(self, intent: MoveIntent) -> None:
        if intent is MoveIntent.FORWARD:
            self.acceleration = self.acceleration - _heading(self.pose.yaw)
        elif intent is MoveIntent.BACKWARD:
            self.acceleration = self.acceleration + _heading(self.pose.yaw)
        elif intent is MoveIntent.LEFT:
            self.acceleration = self.acceleration - _heading(self.pose.yaw + 90.0)
        elif intent is MoveIntent.RIGHT:
            self.acceleration = self.acceleration + _heading(self.pose.yaw + 90.0)
        else:
            raise ValueError(f"unknown move intent: {intent!r}")

    def integrate(self, dt: float) -> None:
        if dt <= 0:
            return
        acc = self.acceleration
        vel = self.velocity

        # Position uses the raw input sum and the pre-update velocity.
        step = acc * (0.5 * dt * dt) + vel * dt
        if step.mag() > 0:
            self.pose.move_by(step)

        if acc.mag() > 0:
            acc = acc.norm() * (self.drag * self.speed)

        # No drag on y.
        self.velocity = Vec3(
            vel.x + acc.x * dt - vel.x * self.drag * dt,
            vel.y + acc.y * dt,
            vel.z + acc.z * dt - vel.z * self.drag * dt,
        )
        self.acceleration = Vec3()

    def update(self, dt: float, intents: Iterable[MoveIntent] = ()) -> None:
        if dt <= 0:
            return
        for intent in intents:
            self.accelerate(intent)
        self.integrate(dt)

    def look(self, dx: float, dy: float) -> None:
        if dx != 0:
            self.pose.yaw = self.pose.yaw - dx * self.sensitivity
        if dy != 0:
            pitch = self.pose.pitch - dy * self.sensitivity
            pitch = max(-self.pitch_limit, min(self.pitch_limit, pitch))
            # Pushing against the clamp changes nothing; keep the pose clean.
            if pitch != self.pose.pitch:
                self.pose.pitch = pitch

    def view(self) -> Mat4:
        return view_matrix(self.pose)

    def __repr__(self) -> str:
        return (
            f"Camera(position={self.pose.position!r}, pitch={self.pose.pitch}, "
            f"yaw={self.pose.yaw}, velocity={self.velocity!r})"
        )
