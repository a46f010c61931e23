"""
Tests for the domain entities: Grid, Snake, FoodSpawner, scores and GameState.
"""

import os
import random
import sys
from collections import deque
from datetime import datetime, timedelta
from unittest.mock import Mock

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snakegame.domain import (  # noqa: E402
    UP, DOWN, LEFT, RIGHT,
    FoodSpawner,
    GameState,
    Grid,
    LeaderboardEntry,
    SessionState,
    Snake,
    top_entries,
)


class TestGrid:
    """Tests for the Grid class."""

    def test_is_inside_accepts_corners(self):
        """All four corners are valid cells."""
        grid = Grid(10, 8)
        for cell in [(0, 0), (9, 0), (0, 7), (9, 7)]:
            assert grid.is_inside(cell)

    def test_is_inside_rejects_outside_cells(self):
        """Cells one step past any edge are invalid."""
        grid = Grid(10, 8)
        for cell in [(-1, 0), (10, 0), (0, -1), (0, 8)]:
            assert not grid.is_inside(cell)

    def test_size_and_cells(self):
        """cells() yields every cell exactly once."""
        grid = Grid(4, 3)
        cells = list(grid.cells())
        assert grid.size == 12
        assert len(cells) == 12
        assert len(set(cells)) == 12

    def test_center(self):
        """center() rounds down."""
        assert Grid(10, 10).center() == (5, 5)
        assert Grid(7, 5).center() == (3, 2)

    def test_too_small_grid_raises(self):
        """A grid that cannot hold the starting snake is rejected."""
        with pytest.raises(ValueError):
            Grid(1, 5)
        with pytest.raises(ValueError):
            Grid(5, 0)


class TestSnake:
    """Tests for the Snake class."""

    def test_initial_snake_is_centered_and_heading_right(self):
        """Snake.initial() builds two segments centered on the grid."""
        snake = Snake.initial(Grid(10, 10))
        assert list(snake.positions) == [(5, 5), (4, 5)]
        assert snake.direction == RIGHT
        assert snake.pending_direction == RIGHT

    def test_positions_is_deque(self):
        """Snake positions are stored as a deque for efficient operations."""
        snake = Snake([(5, 5), (4, 5)])
        assert isinstance(snake.positions, deque)
        assert snake.head == (5, 5)
        assert len(snake) == 2

    def test_short_snake_raises(self):
        """A snake needs at least two segments."""
        with pytest.raises(ValueError):
            Snake([(5, 5)])

    def test_overlapping_snake_raises(self):
        """Segments must be distinct."""
        with pytest.raises(ValueError):
            Snake([(5, 5), (4, 5), (5, 5)])

    def test_reversal_is_ignored(self):
        """Requesting the opposite direction leaves the pending direction unchanged."""
        snake = Snake([(5, 5), (4, 5)], direction=RIGHT)
        assert snake.set_pending_direction(LEFT) is False
        assert snake.pending_direction == RIGHT

    def test_perpendicular_turn_is_accepted(self):
        """Turning 90 degrees is allowed."""
        snake = Snake([(5, 5), (4, 5)], direction=RIGHT)
        assert snake.set_pending_direction(UP) is True
        assert snake.pending_direction == UP

    def test_double_turn_within_one_tick_cannot_reverse(self):
        """UP then LEFT before a tick is still checked against the current heading."""
        snake = Snake([(5, 5), (4, 5)], direction=RIGHT)
        snake.set_pending_direction(UP)
        assert snake.set_pending_direction(LEFT) is False
        assert snake.pending_direction == UP

    def test_unknown_direction_is_ignored(self):
        """Anything outside the four directions is rejected without raising."""
        snake = Snake([(5, 5), (4, 5)])
        assert snake.set_pending_direction("SIDEWAYS") is False
        assert snake.pending_direction == RIGHT

    def test_advance_commits_direction_without_moving_body(self):
        """advance() computes the new head but leaves the body alone."""
        snake = Snake([(5, 5), (4, 5)])
        snake.set_pending_direction(DOWN)

        move = snake.advance(food=(9, 9))

        assert move.new_head == (5, 6)
        assert move.ate_food is False
        assert snake.direction == DOWN
        assert list(snake.positions) == [(5, 5), (4, 5)]

    def test_advance_reports_food(self):
        """ate_food is True when the new head lands on the food."""
        snake = Snake([(5, 5), (4, 5)])
        move = snake.advance(food=(6, 5))
        assert move.ate_food is True

    def test_advance_without_food(self):
        """No food on the board means nothing can be eaten."""
        snake = Snake([(5, 5), (4, 5)])
        assert snake.advance(food=None).ate_food is False

    def test_grow_adds_one_segment(self):
        """grow() prepends the head and keeps the tail."""
        snake = Snake([(5, 5), (4, 5)])
        snake.grow((6, 5))
        assert list(snake.positions) == [(6, 5), (5, 5), (4, 5)]

    def test_move_and_shrink_keeps_length(self):
        """move_and_shrink() prepends the head and drops the tail."""
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        snake.move_and_shrink((6, 5))
        assert list(snake.positions) == [(6, 5), (5, 5), (4, 5)]


class TestFoodSpawner:
    """Tests for the FoodSpawner class."""

    def test_spawn_never_returns_occupied_cell(self):
        """Spawned food never lands on an occupied cell."""
        grid = Grid(6, 6)
        spawner = FoodSpawner(grid, rng=random.Random(7))
        occupied = {(x, y) for x in range(6) for y in range(3)}

        for _ in range(200):
            cell = spawner.spawn(occupied)
            assert cell not in occupied
            assert grid.is_inside(cell)

    def test_spawn_on_full_grid_returns_none(self):
        """A fully occupied grid yields None instead of looping."""
        grid = Grid(3, 3)
        spawner = FoodSpawner(grid, rng=random.Random(1))
        assert spawner.spawn(set(grid.cells())) is None

    def test_spawn_falls_back_to_free_cell_enumeration(self):
        """With no sampling budget the single free cell is still found."""
        grid = Grid(3, 3)
        spawner = FoodSpawner(grid, rng=random.Random(1), max_attempts=0)
        occupied = set(grid.cells()) - {(2, 1)}
        assert spawner.spawn(occupied) == (2, 1)

    def test_spawn_rejects_and_resamples(self):
        """Occupied samples are rejected until a free one comes up."""
        grid = Grid(10, 10)
        rng = Mock()
        # (5, 5) is occupied, (1, 2) is free
        rng.randint.side_effect = [5, 5, 1, 2]
        spawner = FoodSpawner(grid, rng=rng)

        assert spawner.spawn({(5, 5), (4, 5)}) == (1, 2)
        assert rng.randint.call_count == 4


class TestScores:
    """Tests for LeaderboardEntry and ranking."""

    def test_non_positive_score_raises(self):
        """Only positive scores make the leaderboard."""
        with pytest.raises(ValueError):
            LeaderboardEntry(score=0)

    def test_top_entries_sorted_and_truncated(self):
        """Entries are sorted descending and cut to the limit."""
        now = datetime(2024, 1, 1, 12, 0, 0)
        entries = [LeaderboardEntry(score=s, timestamp=now) for s in [30, 10, 70, 50, 20, 60, 40]]

        ranked = top_entries(entries)

        assert [e.score for e in ranked] == [70, 60, 50, 40, 30]

    def test_top_entries_ties_prefer_newer(self):
        """On equal scores the newer entry ranks first."""
        older = LeaderboardEntry(score=40, timestamp=datetime(2024, 1, 1))
        newer = LeaderboardEntry(score=40, timestamp=datetime(2024, 1, 1) + timedelta(hours=1))
        assert top_entries([older, newer]) == [newer, older]

    def test_top_entries_empty(self):
        """An empty leaderboard ranks to an empty list."""
        assert top_entries([]) == []

    def test_entry_date_format(self):
        """date renders the timestamp for display."""
        entry = LeaderboardEntry(score=10, timestamp=datetime(2024, 3, 9, 8, 5, 1))
        assert entry.date == "2024-03-09 08:05:01"


class TestGameState:
    """Tests for the GameState snapshot."""

    def _state(self, **overrides):
        values = dict(
            tick=3,
            snake=[(2, 1), (1, 1)],
            direction=RIGHT,
            food=(4, 3),
            score=20,
            best_score=50,
            state=SessionState.RUNNING,
            width=6,
            height=5,
        )
        values.update(overrides)
        return GameState(**values)

    def test_print_board_marks_head_body_and_food(self):
        """print_board() draws H for the head, o for the body and F for food."""
        lines = self._state().print_board().split("\n")

        assert len(lines) == 6
        assert lines[1].split()[1:] == ['.', 'o', 'H', '.', '.', '.']
        assert lines[3].split()[1:] == ['.', '.', '.', '.', 'F', '.']

    def test_print_board_without_food(self):
        """A missing food cell is simply not drawn."""
        assert "F" not in self._state(food=None).print_board()

    def test_to_dict(self):
        """to_dict() produces plain JSON-friendly values."""
        data = self._state().to_dict()
        assert data["snake"] == [[2, 1], [1, 1]]
        assert data["food"] == [4, 3]
        assert data["state"] == "running"
        assert data["end_reason"] is None

    def test_is_over_and_repr(self):
        """is_over reflects GAME_OVER and repr is informative."""
        state = self._state(state=SessionState.GAME_OVER, end_reason="wall")
        assert state.is_over is True
        assert state.head == (2, 1)
        assert "state=game_over" in repr(state)
