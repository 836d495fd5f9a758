from __future__ import annotations

import argparse
import logging

import pygame

from . import config
from .backend import RecordingBackend
from .camera import Camera, MoveIntent
from .input import poll, quit_requested
from .logging_config import setup_logging
from .scene import Scene, build_default_scene

logger = logging.getLogger("oceanabove")


def _intent(name: str) -> MoveIntent:
    try:
        return MoveIntent(name.lower())
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"unknown intent {name!r} (choose from {', '.join(i.value for i in MoveIntent)})"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="oceanabove", description="Fly a camera around a few blocks.")
    parser.add_argument("--speed", type=float, default=config.SPEED, help="Terminal camera speed (units/s).")
    parser.add_argument("--drag", type=float, default=config.DRAG, help="Horizontal drag coefficient.")
    parser.add_argument(
        "--sensitivity",
        type=float,
        default=config.MOUSE_SENSITIVITY,
        help="Mouse-look degrees per pointer unit.",
    )
    parser.add_argument("--fps", type=int, default=config.FPS_LIMIT, help="Frame cap (0 = uncapped).")
    parser.add_argument("--log-level", default="INFO", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    parser.add_argument("--log-file", default=None, metavar="PATH", help="Also write the log to PATH.")
    parser.add_argument("--headless", action="store_true", help="Step the scene without a window.")
    parser.add_argument("--frames", type=int, default=config.HEADLESS_FRAMES, help="Headless frame count.")
    parser.add_argument("--dt", type=float, default=config.HEADLESS_DT, help="Headless fixed time step (s).")
    parser.add_argument(
        "--hold",
        type=_intent,
        action="append",
        default=[],
        metavar="INTENT",
        help="Headless: intent held every frame (repeatable).",
    )
    return parser


def run_headless(scene: Scene, frames: int, dt: float, intents: list[MoveIntent]) -> None:
    for frame in range(frames):
        scene.update(dt, intents)
        scene.render()
        cam = scene.camera
        logger.info(
            "frame %d pos=(%.4f, %.4f, %.4f) vel=(%.4f, %.4f, %.4f)",
            frame,
            *cam.position,
            *cam.velocity,
        )


def run_window(scene: Scene, backend, fps: int) -> None:
    clock = pygame.time.Clock()
    pygame.mouse.set_visible(False)
    pygame.event.set_grab(True)
    pygame.mouse.get_rel()  # discard motion accumulated before the grab

    while True:
        dt = clock.get_time() / 1000.0
        if quit_requested(pygame.event.get()):
            return
        intents, pointer_delta = poll()
        scene.update(dt, intents, pointer_delta)

        backend.clear()
        scene.render()
        pygame.display.flip()

        clock.tick(fps)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    camera = Camera(
        config.CAMERA_START,
        speed=args.speed,
        drag=args.drag,
        sensitivity=args.sensitivity,
    )

    if args.headless:
        scene = build_default_scene(RecordingBackend(), camera=camera)
        run_headless(scene, args.frames, args.dt, args.hold)
        return 0

    pygame.init()
    try:
        pygame.display.set_mode((config.WIDTH, config.HEIGHT), pygame.OPENGL | pygame.DOUBLEBUF)
        pygame.display.set_caption(config.TITLE)
        from .gl_draw import GLBackend

        backend = GLBackend(config.WIDTH, config.HEIGHT)
        scene = build_default_scene(backend, config.WIDTH / config.HEIGHT, camera=camera)
        run_window(scene, backend, args.fps)
        backend.release()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
