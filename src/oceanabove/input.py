from __future__ import annotations

import pygame

from .camera import MoveIntent

KEY_INTENTS = (
    (pygame.K_w, MoveIntent.FORWARD),
    (pygame.K_s, MoveIntent.BACKWARD),
    (pygame.K_a, MoveIntent.LEFT),
    (pygame.K_d, MoveIntent.RIGHT),
)


def intents_from_keys(keys) -> list[MoveIntent]:
    return [intent for key, intent in KEY_INTENTS if keys[key]]


def poll() -> tuple[list[MoveIntent], tuple[float, float]]:
    """Held movement keys and the pointer motion since the last call."""
    mx, my = pygame.mouse.get_rel()
    return intents_from_keys(pygame.key.get_pressed()), (float(mx), float(my))


def quit_requested(events) -> bool:
    for event in events:
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return True
    return False
