from __future__ import annotations

import math

import pytest

from oceanabove.camera import Camera, MoveIntent
from oceanabove.linalg import Vec3


def test_zero_dt_without_input_changes_nothing(camera: Camera) -> None:
    camera.velocity = Vec3(1.0, 0.5, -2.0)
    before = (camera.position.to_tuple(), camera.velocity.to_tuple())
    for _ in range(5):
        camera.update(0.0)
    assert (camera.position.to_tuple(), camera.velocity.to_tuple()) == before


@pytest.mark.parametrize("dt", [0.0, -0.25])
def test_non_positive_dt_ignores_intents(camera: Camera, dt: float) -> None:
    camera.pose.mark_clean()
    camera.update(dt, [MoveIntent.FORWARD, MoveIntent.LEFT])
    assert camera.position.to_tuple() == (0.0, 1.5, 5.0)
    assert camera.velocity == Vec3()
    assert camera.acceleration == Vec3()
    assert not camera.pose.dirty


@pytest.mark.parametrize(
    "intent,expected",
    [
        (MoveIntent.FORWARD, (0.0, 0.0, -1.0)),
        (MoveIntent.BACKWARD, (0.0, 0.0, 1.0)),
        (MoveIntent.LEFT, (-1.0, 0.0, 0.0)),
        (MoveIntent.RIGHT, (1.0, 0.0, 0.0)),
    ],
)
def test_intent_directions_at_zero_yaw(camera: Camera, intent: MoveIntent, expected) -> None:
    camera.accelerate(intent)
    assert camera.acceleration.isclose(Vec3(*expected))


def test_forward_follows_yaw(camera: Camera) -> None:
    camera.pose.yaw = 90.0
    camera.accelerate(MoveIntent.FORWARD)
    assert camera.acceleration.isclose(Vec3(-1.0, 0.0, 0.0))


def test_acceleration_is_reset_after_integration(camera: Camera) -> None:
    camera.update(0.1, [MoveIntent.FORWARD])
    assert camera.acceleration == Vec3()


def test_diagonal_is_no_faster_than_cardinal() -> None:
    straight = Camera((0.0, 0.0, 0.0))
    diagonal = Camera((0.0, 0.0, 0.0))
    straight.update(0.05, [MoveIntent.FORWARD])
    diagonal.update(0.05, [MoveIntent.FORWARD, MoveIntent.RIGHT])
    assert math.isclose(straight.velocity.mag(), diagonal.velocity.mag())


def test_opposing_intents_cancel(camera: Camera) -> None:
    camera.update(0.1, [MoveIntent.FORWARD, MoveIntent.BACKWARD])
    assert camera.velocity.isclose(Vec3())
    assert camera.position.isclose(Vec3(0.0, 1.5, 5.0))


def test_vertical_velocity_is_not_damped(camera: Camera) -> None:
    camera.velocity = Vec3(2.0, 3.0, -4.0)
    camera.update(0.05)
    assert camera.velocity.y == 3.0
    assert math.isclose(camera.velocity.x, 2.0 * (1 - 10.0 * 0.05))
    assert math.isclose(camera.velocity.z, -4.0 * (1 - 10.0 * 0.05))
    assert math.isclose(camera.position.y, 1.5 + 3.0 * 0.05)


def test_velocity_converges_to_speed() -> None:
    camera = Camera((0.0, 0.0, 0.0), speed=10.0, drag=10.0)
    horizontal = 0.0
    for _ in range(500):
        camera.update(1 / 60, [MoveIntent.FORWARD])
        horizontal = math.hypot(camera.velocity.x, camera.velocity.z)
        assert horizontal <= 10.0 + 1e-9
    assert math.isclose(horizontal, 10.0, rel_tol=1e-6)


def test_velocity_decays_once_input_stops() -> None:
    camera = Camera((0.0, 0.0, 0.0))
    for _ in range(30):
        camera.update(1 / 60, [MoveIntent.RIGHT])
    for _ in range(300):
        camera.update(1 / 60)
    assert camera.velocity.mag() < 1e-6


def test_forward_trace_regression(camera: Camera) -> None:
    # dt * drag == 1, so velocity reaches -speed after one step.
    zs = []
    for _ in range(10):
        camera.update(0.1, [MoveIntent.FORWARD])
        zs.append(camera.position.z)
    assert all(b < a for a, b in zip([5.0] + zs, zs))
    for k, z in enumerate(zs, start=1):
        assert math.isclose(z, 5.0 - 0.005 * k - 1.0 * (k - 1), abs_tol=1e-9)
    assert math.isclose(camera.velocity.z, -10.0)
    assert camera.position.x == 0.0
    assert camera.position.y == 1.5


def test_look_turns_and_clamps_pitch(camera: Camera) -> None:
    camera.look(10.0, 0.0)
    assert camera.yaw == -5.0
    for _ in range(50):
        camera.look(0.0, -20.0)
    assert camera.pitch == 90.0
    for _ in range(50):
        camera.look(0.0, 35.0)
    assert camera.pitch == -90.0


def test_look_without_motion_leaves_pose_clean(camera: Camera) -> None:
    camera.pose.mark_clean()
    camera.look(0.0, 0.0)
    assert not camera.pose.dirty
    camera.look(0.0, 1.0)
    assert camera.pose.dirty


def test_movement_marks_pose_dirty(camera: Camera) -> None:
    camera.pose.mark_clean()
    camera.update(0.1)
    assert not camera.pose.dirty
    camera.update(0.1, [MoveIntent.LEFT])
    assert camera.pose.dirty


def test_pushing_past_pitch_limit_keeps_pose_clean(camera: Camera) -> None:
    camera.look(0.0, -1000.0)
    assert camera.pitch == 90.0
    camera.pose.mark_clean()
    camera.look(0.0, -10.0)
    assert camera.pitch == 90.0
    assert not camera.pose.dirty
    camera.look(0.0, 10.0)
    assert camera.pitch == 85.0
    assert camera.pose.dirty


def test_camera_accepts_vec3_or_sequence_position() -> None:
    start = Vec3(1.0, 2.0, 3.0)
    from_vec = Camera(start)
    from_tuple = Camera((1, 2, 3))
    assert from_vec.position == from_tuple.position == start
    assert from_vec.position is not start
