"""
Food spawner - picks a free cell uniformly at random.
"""

import random
from typing import Iterable, Optional

from .errors import GridFullError
from .grid import Cell, Grid


class FoodSpawner:
    """
    Places food by rejection sampling: draw (x, y) uniformly over the grid
    and retry while the draw lands on an occupied cell.

    rng: any object exposing randrange(n); defaults to a fresh random.Random.
    """

    def __init__(self, grid: Grid, rng: Optional[random.Random] = None):
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()

    def spawn(self, occupied: Iterable[Cell]) -> Cell:
        """
        Return a random cell not in occupied.

        Raises:
            GridFullError: if every cell on the grid is occupied.
        """
        taken = {cell for cell in occupied if self.grid.in_bounds(cell)}
        if len(taken) >= self.grid.cell_count:
            raise GridFullError(self.grid.cell_count)

        while True:
            x = self.rng.randrange(self.grid.cols)
            y = self.rng.randrange(self.grid.rows)
            if (x, y) not in taken:
                return (x, y)
