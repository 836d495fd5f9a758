from __future__ import annotations

# --- Window ---
WIDTH = 800
HEIGHT = 600
TITLE = "Ocean Above"
FPS_LIMIT = 0  # 0 = uncapped; vsync (if any) paces the loop.
CLEAR_COLOR = (0.5, 0.5, 0.5)

# --- Projection ---
FOV = 45.0  # vertical, degrees
NEAR = 0.1
FAR = 100.0

# --- Camera ---
CAMERA_START = (0.0, 1.5, 5.0)
SPEED = 10.0
DRAG = 10.0
MOUSE_SENSITIVITY = 0.5  # degrees per pointer unit
PITCH_LIMIT = 90.0

# --- World ---
BLOCK_SIZE = 1.0
BLOCKS = [
    (0.0, 0.0, 0.0),
    (-2.0, 0.0, 0.0),
    (2.0, 0.0, -2.0),
    (0.0, 3.0, 0.0),
]

# --- Headless runs ---
HEADLESS_FRAMES = 10
HEADLESS_DT = 0.1
