"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (storage, scheduling, rendering).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, FOOD_REWARD, LEADERBOARD_LIMIT,
    END_WALL, END_SELF, END_BOARD_FULL, SessionState,
)
from .grid import Grid
from .snake import Snake, Advance
from .food import FoodSpawner
from .scores import LeaderboardEntry, top_entries
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'FOOD_REWARD', 'LEADERBOARD_LIMIT',
    'END_WALL', 'END_SELF', 'END_BOARD_FULL', 'SessionState',
    'Grid',
    'Snake',
    'Advance',
    'FoodSpawner',
    'LeaderboardEntry',
    'top_entries',
    'GameState',
]
