"""
Food placement policy.
"""

import logging
import random
from typing import Collection, Optional, Tuple

from .grid import Grid

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class FoodSpawner:
    """
    Places food uniformly at random on a free cell.

    Rejection sampling is bounded by ``max_attempts``; after that the free
    cells are enumerated and one is picked directly, so a crowded board never
    stalls a tick. A full board yields ``None``.
    """

    def __init__(
        self,
        grid: Grid,
        rng: Optional[random.Random] = None,
        max_attempts: Optional[int] = None,
    ):
        self.grid = grid
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts if max_attempts is not None else grid.size * 2

    def _random_cell(self) -> Cell:
        x = self.rng.randint(0, self.grid.width - 1)
        y = self.rng.randint(0, self.grid.height - 1)
        return (x, y)

    def spawn(self, occupied: Collection[Cell]) -> Optional[Cell]:
        """
        Return a random cell (x, y) not in ``occupied``.

        Args:
            occupied: cells the food must not land on (normally the snake body)

        Returns:
            A free cell, or None when every cell is occupied.
        """
        occupied = set(occupied)
        if len(occupied) >= self.grid.size:
            return None

        for _ in range(self.max_attempts):
            cell = self._random_cell()
            if cell not in occupied:
                return cell

        free_cells = [cell for cell in self.grid.cells() if cell not in occupied]
        logger.debug(
            "Rejection sampling exhausted after %s attempts; choosing from %s free cells",
            self.max_attempts,
            len(free_cells),
        )
        if not free_cells:
            return None
        return self.rng.choice(free_cells)
