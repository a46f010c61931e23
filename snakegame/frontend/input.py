from __future__ import annotations

import pygame

from ..session import Intent

KEY_INTENTS = {
    pygame.K_UP: Intent.UP,
    pygame.K_w: Intent.UP,
    pygame.K_DOWN: Intent.DOWN,
    pygame.K_s: Intent.DOWN,
    pygame.K_LEFT: Intent.LEFT,
    pygame.K_a: Intent.LEFT,
    pygame.K_RIGHT: Intent.RIGHT,
    pygame.K_d: Intent.RIGHT,
    pygame.K_SPACE: Intent.TOGGLE,
    pygame.K_p: Intent.PAUSE,
    pygame.K_r: Intent.RESTART,
}

QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def intents_from_events(events) -> tuple[list[Intent], bool]:
    """Translate pygame events into intents; the flag reports a quit request."""
    intents: list[Intent] = []
    quit_requested = False
    for event in events:
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN:
            if event.key in QUIT_KEYS:
                quit_requested = True
            elif event.key in KEY_INTENTS:
                intents.append(KEY_INTENTS[event.key])
    return intents, quit_requested
