from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

from . import config
from .backend import Slot, pack_matrix
from .camera import Camera, MoveIntent
from .linalg import Mat4, Vec3
from .mesh import CuboidMesh
from .pose import Pose, model_matrix, view_matrix

logger = logging.getLogger(__name__)


class Block:
    def __init__(self, mesh: CuboidMesh, pose: Pose):
        self.mesh = mesh  # shared, not owned
        self.pose = pose

    def model(self) -> Mat4:
        """Current model matrix, rebuilt first if the pose changed."""
        if self.pose.dirty:
            self.pose.recompute(model_matrix)
            self.pose.mark_clean()
        return self.pose.matrix

    def __repr__(self) -> str:
        return f"Block({self.mesh!r}, {self.pose!r})"


class Scene:
    """Blocks plus one camera, stepped once per frame.

    `update()` advances the camera, uploads the view matrix when the camera
    moved, and refreshes the cached model matrix of every dirty block.
    `render()` uploads each block's model matrix and draws it, rebuilding any
    block whose pose changed after the last `update()`.
    Backend errors propagate unchanged; a pose whose upload failed stays dirty.
    """

    def __init__(self, backend, projection: Mat4, camera: Camera | None = None):
        self.backend = backend
        self.camera = camera if camera is not None else Camera()
        self.blocks: list[Block] = []
        self.projection = projection
        self.backend.upload(Slot.PROJ, pack_matrix(projection))

    @property
    def meshes(self) -> list[CuboidMesh]:
        seen: dict[int, CuboidMesh] = {}
        for block in self.blocks:
            seen.setdefault(id(block.mesh), block.mesh)
        return list(seen.values())

    def add_block(self, mesh: CuboidMesh, position: Vec3 | Sequence[float], size: float = 1.0, pitch: float = 0.0, yaw: float = 0.0) -> Block:
        block = Block(mesh, Pose(position, pitch=pitch, yaw=yaw, scale=size))
        self.blocks.append(block)
        logger.debug("Added block at %s", block.pose.position)
        return block

    def update(
        self,
        dt: float,
        intents: Iterable[MoveIntent] = (),
        pointer_delta: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        self.camera.update(dt, intents)
        dx, dy = pointer_delta
        self.camera.look(dx, dy)

        pose = self.camera.pose
        if pose.dirty:
            view = pose.recompute(view_matrix)
            self.backend.upload(Slot.VIEW, pack_matrix(view))
            pose.mark_clean()

        for block in self.blocks:
            block.model()

    def render(self) -> None:
        # Blocks added or moved since update() still get their own transform.
        for block in self.blocks:
            self.backend.upload(Slot.MODEL, pack_matrix(block.model()))
            self.backend.draw(block.mesh)


def default_projection(aspect: float) -> Mat4:
    return Mat4.perspective(math.radians(config.FOV), aspect, config.NEAR, config.FAR)


def build_default_scene(backend, aspect: float = config.WIDTH / config.HEIGHT, camera: Camera | None = None) -> Scene:
    """The stock world: four unit blocks sharing one cube mesh."""
    scene = Scene(backend, default_projection(aspect), camera)
    cube = CuboidMesh((0.0, 0.0, 0.0), 1.0)
    for position in config.BLOCKS:
        scene.add_block(cube, position, size=config.BLOCK_SIZE)
    logger.info("Scene ready: %d blocks, %d shared mesh(es)", len(scene.blocks), len(scene.meshes))
    return scene
