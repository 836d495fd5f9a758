from .backend import RecordingBackend, Slot
from .camera import Camera, MoveIntent
from .mesh import CuboidMesh, generate_cuboid_mesh
from .pose import Pose, model_matrix, view_matrix
from .scene import Block, Scene, build_default_scene

__all__ = [
    "Block",
    "Camera",
    "CuboidMesh",
    "MoveIntent",
    "Pose",
    "RecordingBackend",
    "Scene",
    "Slot",
    "build_default_scene",
    "generate_cuboid_mesh",
    "model_matrix",
    "view_matrix",
]
