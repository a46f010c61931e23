"""
Grid entity - board bounds and coordinate validity.
"""

from typing import Iterator, Tuple

from .constants import INITIAL_LENGTH

Cell = Tuple[int, int]


class Grid:
    """
    Fixed-size board of width x height cells.

    Attributes:
        width: number of columns
        height: number of rows
    """

    def __init__(self, width: int, height: int):
        if width < INITIAL_LENGTH or height < 1:
            raise ValueError(
                f"Grid must be at least {INITIAL_LENGTH}x1, got {width}x{height}."
            )
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        """Total number of cells on the board."""
        return self._width * self._height

    def is_inside(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self._width and 0 <= y < self._height

    def cells(self) -> Iterator[Cell]:
        for y in range(self._height):
            for x in range(self._width):
                yield (x, y)

    def center(self) -> Cell:
        return (self._width // 2, self._height // 2)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self._width, self._height) == (other._width, other._height)

    def __hash__(self) -> int:
        return hash((self._width, self._height))

    def __repr__(self):
        return f"<Grid {self._width}x{self._height}>"
