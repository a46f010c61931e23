"""
Session controller: start/pause/resume/restart and the tick schedule.
"""

import logging
from enum import Enum
from typing import Optional

from .domain import SessionState
from .domain.constants import DEFAULT_TICK_MS
from .engine import GameEngine
from .services import Ticker

logger = logging.getLogger(__name__)


class Intent(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    TOGGLE = "TOGGLE"
    PAUSE = "PAUSE"
    RESTART = "RESTART"


DIRECTION_INTENTS = {Intent.UP, Intent.DOWN, Intent.LEFT, Intent.RIGHT}


class SessionController:
    """
    Drives a GameEngine on a fixed-interval schedule.

    Every operation is valid in every state; requests that make no sense in
    the current state are ignored and return False.
    """

    def __init__(
        self,
        engine: GameEngine,
        ticker: Optional[Ticker] = None,
        interval_ms: int = DEFAULT_TICK_MS,
    ):
        self.engine = engine
        self.ticker = ticker or Ticker(self._on_tick, interval_ms=interval_ms)

    @property
    def state(self) -> SessionState:
        return self.engine.state

    def _on_tick(self) -> None:
        self.engine.tick()
        if self.engine.state is not SessionState.RUNNING:
            self.ticker.stop()

    def start(self) -> bool:
        """Begin a new game from IDLE or GAME_OVER."""
        if self.engine.state not in (SessionState.IDLE, SessionState.GAME_OVER):
            return False
        self.engine.reset()
        self.engine.transition(SessionState.RUNNING)
        self.ticker.start()
        logger.info("Session started (best score %s)", self.engine.best_score)
        return True

    def pause(self) -> bool:
        if not self.engine.transition(SessionState.PAUSED):
            return False
        self.ticker.stop()
        logger.info("Session paused at score %s", self.engine.score)
        return True

    def resume(self) -> bool:
        if self.engine.state is not SessionState.PAUSED:
            return False
        self.engine.transition(SessionState.RUNNING)
        self.ticker.start()
        logger.info("Session resumed")
        return True

    def restart(self, auto_start: bool = True) -> bool:
        """
        Abandon the current game and reinitialize.

        Args:
            auto_start: Start the new game immediately; otherwise stay IDLE

        Returns:
            True if the new game is running.
        """
        self.ticker.stop()
        self.engine.reset()
        if auto_start:
            return self.start()
        return False

    def toggle(self) -> bool:
        """Single start/pause control: restart after game over, otherwise flip."""
        state = self.engine.state
        if state is SessionState.GAME_OVER:
            return self.restart()
        if state is SessionState.IDLE:
            return self.start()
        if state is SessionState.RUNNING:
            return self.pause()
        return self.resume()

    def change_direction(self, direction: str) -> bool:
        return self.engine.set_direction(direction)

    def dispatch(self, intent: Intent) -> bool:
        intent = Intent(intent)
        if intent in DIRECTION_INTENTS:
            return self.change_direction(intent.value)
        if intent is Intent.TOGGLE:
            return self.toggle()
        if intent is Intent.PAUSE:
            return self.pause()
        return self.restart(auto_start=False)

    def run_pending(self) -> None:
        self.ticker.run_pending()
