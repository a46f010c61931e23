"""
GameState entity - a read-only snapshot of the session at a point in time.
"""

from typing import List, Optional, Tuple

from .constants import SessionState


class GameState:
    """
    A snapshot of the game handed to the presentation layer.

    Attributes:
        tick: number of ticks applied since the last reset
        snake: list of (x, y) from head to tail
        direction: direction committed on the last tick
        food: (x, y) of the food, or None when the board is full
        score: current session score
        best_score: best score known to the score store
        state: SessionState of the session
        end_reason: 'wall', 'self' or 'board_full' once the game is over
        width, height: board dimensions
    """

    def __init__(
        self,
        tick: int,
        snake: List[Tuple[int, int]],
        direction: str,
        food: Optional[Tuple[int, int]],
        score: int,
        best_score: int,
        state: SessionState,
        width: int,
        height: int,
        end_reason: Optional[str] = None
    ):
        self.tick = tick
        self.snake = snake
        self.direction = direction
        self.food = food
        self.score = score
        self.best_score = best_score
        self.state = state
        self.width = width
        self.height = height
        self.end_reason = end_reason

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake[0]

    @property
    def is_over(self) -> bool:
        return self.state is SessionState.GAME_OVER

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        o = snake body
        Row 0 is printed first, matching screen coordinates.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake):
            if not (0 <= x < self.width and 0 <= y < self.height):
                continue
            board[y][x] = 'H' if pos_idx == 0 else 'o'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))
        return "\n".join(result)

    def to_dict(self) -> dict:
        return {
            "tick": self.tick,
            "snake": [list(cell) for cell in self.snake],
            "direction": self.direction,
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "best_score": self.best_score,
            "state": self.state.value,
            "end_reason": self.end_reason,
            "width": self.width,
            "height": self.height,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, state={self.state.value}, "
            f"food={self.food}, length={len(self.snake)}, score={self.score}>"
        )
