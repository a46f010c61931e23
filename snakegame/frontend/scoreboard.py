"""
Top-scores panel state, kept apart from pygame so it can be tested headless.
"""

import logging
from typing import List

from ..data_access import BackgroundScoreStore, ScoreStore
from ..domain import GameState, LeaderboardEntry
from ..domain.constants import LEADERBOARD_LIMIT
from ..engine import GameEngine

logger = logging.getLogger(__name__)


class Scoreboard:
    """
    The leaderboard shown beside the board.

    Loaded once at startup and refreshed once per finished game. The host
    loop calls update() every frame; the refresh (and any flush of queued
    background writes) happens there, never inside an engine tick.
    """

    def __init__(self, engine: GameEngine, store: ScoreStore, limit: int = LEADERBOARD_LIMIT):
        self.engine = engine
        self.store = store
        self.limit = limit
        self.entries: List[LeaderboardEntry] = engine.leaderboard(limit)
        self._refreshed_for_game = False

    def update(self, state: GameState) -> bool:
        """Refresh after a game ends. Returns True when a refresh happened."""
        if not state.is_over:
            self._refreshed_for_game = False
            return False
        if self._refreshed_for_game:
            return False

        self._refreshed_for_game = True
        if isinstance(self.store, BackgroundScoreStore):
            self.store.flush()
        self.entries = self.engine.leaderboard(self.limit)
        logger.debug("Leaderboard refreshed (%d entries)", len(self.entries))
        return True

    def lines(self) -> List[str]:
        rows = ["Top scores"]
        if not self.entries:
            rows.append("No games yet")
            return rows
        for rank, entry in enumerate(self.entries, start=1):
            rows.append(f"{rank}. {entry.score:>5}  {entry.date[:10]}")
        return rows
