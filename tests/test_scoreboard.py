"""
Tests for the leaderboard panel state (no display needed).
"""

import os
import random
import sys
from datetime import datetime
from unittest.mock import MagicMock

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snakegame.data_access import BackgroundScoreStore, InMemoryScoreStore  # noqa: E402
from snakegame.domain import RIGHT, FoodSpawner, Grid, LeaderboardEntry, SessionState, Snake  # noqa: E402
from snakegame.engine import GameEngine  # noqa: E402
from snakegame.frontend.scoreboard import Scoreboard  # noqa: E402


def make_engine(store):
    grid = Grid(10, 10)
    return GameEngine(grid, store=store, spawner=FoodSpawner(grid, rng=random.Random(0)))


def play_to_wall(engine, score=30):
    """Run one game that ends against the right wall with the given score."""
    engine.reset()
    engine.snake = Snake([(9, 5), (8, 5)], direction=RIGHT)
    engine.food = (0, 0)
    engine.score = score
    engine.transition(SessionState.RUNNING)
    return engine.tick()


class TestScoreboardRefresh:
    """Tests for when the panel reloads the leaderboard."""

    def test_loaded_at_startup(self):
        """Existing entries are visible before any game is played."""
        stamp = datetime(2024, 3, 1, 9, 30, 0)
        store = InMemoryScoreStore(entries=[
            LeaderboardEntry(score=s, timestamp=stamp) for s in [40, 10, 70]
        ])
        board = Scoreboard(make_engine(store), store)

        assert [e.score for e in board.entries] == [70, 40, 10]

    def test_no_refresh_while_running(self):
        """update() ignores snapshots of a game still in progress."""
        store = InMemoryScoreStore()
        engine = make_engine(store)
        board = Scoreboard(engine, store)

        assert board.update(engine.snapshot()) is False

    def test_refreshes_once_per_finished_game(self):
        """The panel reloads once after each game over."""
        store = InMemoryScoreStore()
        engine = make_engine(store)
        board = Scoreboard(engine, store)

        final = play_to_wall(engine, score=30)
        assert board.update(final) is True
        assert board.update(engine.snapshot()) is False
        assert [e.score for e in board.entries] == [30]

        engine.reset()
        board.update(engine.snapshot())
        final = play_to_wall(engine, score=50)
        assert board.update(final) is True
        assert [e.score for e in board.entries] == [50, 30]

    def test_background_writes_flushed_outside_tick(self):
        """Queued writes are flushed by update(), never during the engine tick."""
        store = MagicMock(spec=BackgroundScoreStore)
        store.get_best_score.return_value = 0
        store.get_leaderboard.return_value = []
        engine = make_engine(store)
        board = Scoreboard(engine, store)

        final = play_to_wall(engine)
        store.flush.assert_not_called()

        board.update(final)
        store.flush.assert_called_once()

    def test_background_store_entry_visible_after_update(self):
        """A game-over entry written in the background shows up after update()."""
        store = BackgroundScoreStore(InMemoryScoreStore())
        try:
            engine = make_engine(store)
            board = Scoreboard(engine, store)

            board.update(play_to_wall(engine, score=20))

            assert [e.score for e in board.entries] == [20]
        finally:
            store.close()


class TestScoreboardLines:
    """Tests for the text shown in the panel."""

    def test_empty_board(self):
        store = InMemoryScoreStore()
        board = Scoreboard(make_engine(store), store)

        assert board.lines() == ["Top scores", "No games yet"]

    def test_ranked_lines(self):
        """Rows are numbered best first and show the date only."""
        store = InMemoryScoreStore(entries=[
            LeaderboardEntry(score=120, timestamp=datetime(2024, 5, 2, 18, 0, 0)),
            LeaderboardEntry(score=60, timestamp=datetime(2024, 5, 1, 8, 0, 0)),
        ])
        board = Scoreboard(make_engine(store), store)

        assert board.lines() == [
            "Top scores",
            "1.   120  2024-05-02",
            "2.    60  2024-05-01",
        ]
