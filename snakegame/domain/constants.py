"""
Game constants for the snake game.
"""

from enum import Enum

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Unit deltas in screen coordinates (row grows downward)
DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Game settings
FOOD_REWARD = 10
LEADERBOARD_LIMIT = 5
INITIAL_LENGTH = 2
DEFAULT_TICK_MS = 120
DEFAULT_GRID_WIDTH = 20
DEFAULT_GRID_HEIGHT = 20

# Reasons a session can end
END_WALL = "wall"
END_SELF = "self"
END_BOARD_FULL = "board_full"


class SessionState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"
