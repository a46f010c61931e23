"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, NamedTuple, Optional, Tuple

from .constants import DELTAS, OPPOSITES, RIGHT, VALID_MOVES
from .grid import Grid

Cell = Tuple[int, int]


class Advance(NamedTuple):
    """Result of committing one step of movement, before any body mutation."""

    new_head: Cell
    ate_food: bool


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        direction: direction committed on the last tick
        pending_direction: direction that the next tick will commit
    """

    def __init__(self, positions: List[Cell], direction: str = RIGHT):
        if len(positions) < 2:
            raise ValueError("A snake needs at least two segments.")
        if len(set(positions)) != len(positions):
            raise ValueError(f"Snake segments overlap: {positions}")
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {direction!r}")
        self.positions = deque(positions)
        self.direction = direction
        self.pending_direction = direction

    @classmethod
    def initial(cls, grid: Grid) -> "Snake":
        """Two segments centered on the grid, heading right."""
        cx, cy = grid.center()
        return cls([(cx, cy), (cx - 1, cy)], direction=RIGHT)

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def occupies(self, cell: Cell) -> bool:
        return cell in self.positions

    def set_pending_direction(self, direction: str) -> bool:
        """
        Queue a direction for the next tick.

        A request for the exact opposite of the current heading is ignored so
        the snake cannot turn back into its own neck.

        Returns:
            True if the request was accepted.
        """
        if direction not in VALID_MOVES:
            return False
        if OPPOSITES[direction] == self.direction:
            return False
        self.pending_direction = direction
        return True

    def advance(self, food: Optional[Cell] = None) -> Advance:
        self.direction = self.pending_direction
        dx, dy = DELTAS[self.direction]
        hx, hy = self.head
        new_head = (hx + dx, hy + dy)
        return Advance(new_head=new_head, ate_food=food is not None and new_head == food)

    def grow(self, new_head: Cell) -> None:
        self.positions.appendleft(new_head)

    def move_and_shrink(self, new_head: Cell) -> None:
        self.positions.appendleft(new_head)
        self.positions.pop()

    def __repr__(self):
        return f"<Snake head={self.head} length={len(self.positions)} direction={self.direction}>"
