from __future__ import annotations

import pytest

from oceanabove.backend import RecordingBackend
from oceanabove.camera import Camera
from oceanabove.mesh import CuboidMesh


@pytest.fixture()
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture()
def cube() -> CuboidMesh:
    return CuboidMesh((0.0, 0.0, 0.0), 1.0)


@pytest.fixture()
def camera() -> Camera:
    return Camera((0.0, 1.5, 5.0), speed=10.0, drag=10.0, sensitivity=0.5)
