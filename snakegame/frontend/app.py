from __future__ import annotations

import logging

import pygame

from ..config import Settings
from ..data_access import ScoreStore
from ..domain import Grid
from ..engine import GameEngine
from ..session import SessionController
from .colors import parse_hex
from .input import intents_from_events
from .render import HUD_HEIGHT, PANEL_WIDTH, Renderer
from .scoreboard import Scoreboard

logger = logging.getLogger(__name__)

FPS = 60


def run(settings: Settings, store: ScoreStore, snake_color: str, food_style: str) -> int:
    """Open the game window and drive the session until the player quits."""
    pygame.init()
    tile = settings.tile_size
    screen = pygame.display.set_mode(
        (settings.grid_width * tile + PANEL_WIDTH, HUD_HEIGHT + settings.grid_height * tile)
    )
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    engine = GameEngine(Grid(settings.grid_width, settings.grid_height), store)
    controller = SessionController(engine, interval_ms=settings.tick_ms)
    renderer = Renderer(tile, parse_hex(snake_color), food_style)
    scoreboard = Scoreboard(engine, store)

    try:
        while True:
            intents, quit_requested = intents_from_events(pygame.event.get())
            if quit_requested:
                break
            for intent in intents:
                controller.dispatch(intent)

            controller.run_pending()
            state = engine.snapshot()
            scoreboard.update(state)
            renderer.draw(screen, state, scoreboard.lines())
            clock.tick(FPS)
    finally:
        controller.ticker.stop()
        store.close()
        pygame.quit()

    logger.info("Closed. Best score: %s", engine.best_score)
    return 0
