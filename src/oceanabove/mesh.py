from __future__ import annotations

import numpy as np

from oceanabove.linalg import Vec3

VERTICES_PER_CUBOID = 36
FLOATS_PER_CUBOID = VERTICES_PER_CUBOID * 3

# Corner indices per face, two CCW triangles each (seen from outside).
# Order: top, bottom, front (+z), back (-z), left (-x), right (+x).
_FACES = (
    (1, 2, 3, 3, 0, 1),
    (4, 7, 6, 6, 5, 4),
    (0, 3, 7, 7, 4, 0),
    (1, 5, 6, 6, 2, 1),
    (2, 6, 7, 7, 3, 2),
    (0, 4, 5, 5, 1, 0),
)
FACE_NAMES = ("top", "bottom", "front", "back", "left", "right")

# Sign of the half-size offset per corner, p0..p7.
_CORNER_SIGNS = (
    (1, 1, 1),
    (1, 1, -1),
    (-1, 1, -1),
    (-1, 1, 1),
    (1, -1, 1),
    (1, -1, -1),
    (-1, -1, -1),
    (-1, -1, 1),
)


def cuboid_corners(center, size: float) -> list[Vec3]:
    """The eight corners of a cube centred on `center`, p0 = +x+y+z ... p7 = -x-y+z."""
    c = Vec3.of(center)
    half = size / 2
    return [c + Vec3(sx * half, sy * half, sz * half) for sx, sy, sz in _CORNER_SIGNS]


def generate_cuboid_mesh(center, size: float) -> np.ndarray:
    """Flat triangle list (108 float32s) for glBufferData."""
    ps = cuboid_corners(center, size)
    out = np.empty(FLOATS_PER_CUBOID, dtype=np.float32)
    i = 0
    for face in _FACES:
        for idx in face:
            out[i : i + 3] = ps[idx].to_tuple()
            i += 3
    out.setflags(write=False)
    return out


class CuboidMesh:
    """Immutable vertex data shared by every block of the same shape.

    Blocks keep a plain reference; the GL backend uploads each mesh once and
    keys its buffer on the mesh object.
    """

    def __init__(self, center=(0.0, 0.0, 0.0), size: float = 1.0):
        self.center = Vec3.of(center)
        self.size = float(size)
        self.vertices = generate_cuboid_mesh(self.center, self.size)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // 3

    def positions(self) -> np.ndarray:
        """(36, 3) read-only view of the vertex buffer."""
        return self.vertices.reshape(-1, 3)

    def faces(self) -> dict[str, np.ndarray]:
        pos = self.positions()
        return {name: pos[i * 6 : (i + 1) * 6] for i, name in enumerate(FACE_NAMES)}

    def __repr__(self) -> str:
        return f"CuboidMesh(center={self.center!r}, size={self.size})"
