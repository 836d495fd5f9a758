from __future__ import annotations

import enum

import numpy as np


class Slot(enum.Enum):
    """Matrix upload targets; values are the shader uniform names."""

    MODEL = "model"
    VIEW = "view"
    PROJ = "proj"


def pack_matrix(mat) -> np.ndarray:
    """Mat4 -> 16 column-major float32s, the layout glUniformMatrix4fv expects untransposed."""
    return np.asarray(mat.to_column_major(), dtype=np.float32)


class RecordingBackend:
    """Backend that keeps uploads and draws in memory instead of touching GL.

    Any object with ``upload(slot, matrix)`` and ``draw(mesh)`` can stand in
    for this one; `gl_draw.GLBackend` is the windowed counterpart.
    """

    def __init__(self) -> None:
        self.uploads: list[tuple[Slot, np.ndarray]] = []
        self.draws: list[tuple[object, np.ndarray | None]] = []
        self.current: dict[Slot, np.ndarray] = {}

    def upload(self, slot: Slot, matrix: np.ndarray) -> None:
        data = np.array(matrix, dtype=np.float32)
        self.uploads.append((slot, data))
        self.current[slot] = data

    def draw(self, mesh) -> None:
        self.draws.append((mesh, self.current.get(Slot.MODEL)))

    def uploads_to(self, slot: Slot) -> list[np.ndarray]:
        return [m for s, m in self.uploads if s is slot]

    def reset(self) -> None:
        self.uploads.clear()
        self.draws.clear()
