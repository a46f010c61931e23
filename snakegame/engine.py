"""
Game engine: tick update, collision detection, scoring and game-over handling.
"""

import logging
from typing import Callable, Dict, List, Optional, Set, Tuple

from .data_access import InMemoryScoreStore, ScoreStore
from .domain import (
    END_BOARD_FULL,
    END_SELF,
    END_WALL,
    FOOD_REWARD,
    LEADERBOARD_LIMIT,
    FoodSpawner,
    GameState,
    Grid,
    LeaderboardEntry,
    SessionState,
    Snake,
    top_entries,
)

logger = logging.getLogger(__name__)

Listener = Callable[[GameState], None]

# Transitions reachable through GameEngine.transition(). GAME_OVER is only
# entered from tick(), IDLE only from reset().
ALLOWED_TRANSITIONS: Dict[SessionState, Set[SessionState]] = {
    SessionState.IDLE: {SessionState.RUNNING},
    SessionState.RUNNING: {SessionState.PAUSED},
    SessionState.PAUSED: {SessionState.RUNNING},
    SessionState.GAME_OVER: set(),
}


class GameEngine:
    """
    Owns the whole mutable game: snake, food, score and session state.

      - tick() advances one step while RUNNING and is a no-op otherwise
      - listeners receive a GameState snapshot after every tick and
        every state change
      - the score store is consulted on construction, written when the best
        score is beaten and when a game with a positive score ends
    """

    def __init__(
        self,
        grid: Grid,
        store: Optional[ScoreStore] = None,
        spawner: Optional[FoodSpawner] = None,
    ):
        self.grid = grid
        self.store = store if store is not None else InMemoryScoreStore()
        self.spawner = spawner or FoodSpawner(grid)
        self.listeners: List[Listener] = []

        self.best_score = self._load_best_score()
        self.snake: Snake
        self.food: Optional[Tuple[int, int]] = None
        self.score = 0
        self.tick_count = 0
        self.state = SessionState.IDLE
        self.end_reason: Optional[str] = None
        self.reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Fresh snake, food and score; back to IDLE. The best score is kept."""
        self.snake = Snake.initial(self.grid)
        self.score = 0
        self.tick_count = 0
        self.end_reason = None
        self.food = self.spawner.spawn(self.snake.positions)
        self.state = SessionState.IDLE
        self._notify()

    def transition(self, target: SessionState) -> bool:
        """
        Move to ``target`` if the state machine allows it.

        Returns:
            True if the state changed, False for an ignored request.
        """
        if target not in ALLOWED_TRANSITIONS[self.state]:
            logger.debug("Ignoring transition %s -> %s", self.state.value, target.value)
            return False
        logger.debug("Session %s -> %s", self.state.value, target.value)
        self.state = target
        self._notify()
        return True

    def set_direction(self, direction: str) -> bool:
        if self.state is SessionState.GAME_OVER:
            return False
        return self.snake.set_pending_direction(direction)

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def tick(self) -> GameState:
        """
        Execute one step:
          1) Commit the pending direction and compute the new head
          2) Wall collision, then body collision, before any mutation
          3) Grow and score on food, otherwise move and drop the tail
          4) End the game if no free cell is left for the next food
        """
        if self.state is not SessionState.RUNNING:
            return self.snapshot()

        self.tick_count += 1
        move = self.snake.advance(self.food)

        if not self.grid.is_inside(move.new_head):
            self._end_game(END_WALL)
            return self.snapshot()

        # The tail still counts: it only leaves its cell after this check.
        if self.snake.occupies(move.new_head):
            self._end_game(END_SELF)
            return self.snapshot()

        if move.ate_food:
            self.snake.grow(move.new_head)
            self.score += FOOD_REWARD
            self._record_best_score()

            self.food = None
            if len(self.snake) < self.grid.size:
                self.food = self.spawner.spawn(self.snake.positions)
            if self.food is None:
                self._end_game(END_BOARD_FULL)
                return self.snapshot()
        else:
            self.snake.move_and_shrink(move.new_head)

        logger.debug("Tick %s: head=%s score=%s", self.tick_count, self.snake.head, self.score)
        self._notify()
        return self.snapshot()

    def _end_game(self, reason: str) -> None:
        self.state = SessionState.GAME_OVER
        self.end_reason = reason
        logger.info("Game Over (%s) after %s ticks. Score: %s", reason, self.tick_count, self.score)

        if self.score > 0:
            try:
                self.store.append_leaderboard_entry(LeaderboardEntry(score=self.score))
            except Exception as e:
                # The game still ends cleanly if the store is unavailable
                logger.warning("Could not record leaderboard entry: %s", e)

        self._notify()

    def _record_best_score(self) -> None:
        if self.score <= self.best_score:
            return
        self.best_score = self.score
        try:
            self.store.set_best_score(self.best_score)
        except Exception as e:
            logger.warning("Could not persist best score %s: %s", self.best_score, e)

    def _load_best_score(self) -> int:
        try:
            return max(int(self.store.get_best_score()), 0)
        except Exception as e:
            logger.warning("Could not load best score, starting from 0: %s", e)
            return 0

    # ------------------------------------------------------------------
    # Render sink
    # ------------------------------------------------------------------

    def add_listener(self, listener: Listener) -> None:
        self.listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self.listeners:
            self.listeners.remove(listener)

    def _notify(self) -> None:
        if not self.listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self.listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("State listener %r failed", listener)

    def snapshot(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick=self.tick_count,
            snake=list(self.snake.positions),
            direction=self.snake.direction,
            food=self.food,
            score=self.score,
            best_score=self.best_score,
            state=self.state,
            width=self.grid.width,
            height=self.grid.height,
            end_reason=self.end_reason,
        )

    def leaderboard(self, limit: int = LEADERBOARD_LIMIT) -> List[LeaderboardEntry]:
        try:
            entries = self.store.get_leaderboard()
        except Exception as e:
            logger.warning("Could not load leaderboard: %s", e)
            return []
        return top_entries(entries, limit)
