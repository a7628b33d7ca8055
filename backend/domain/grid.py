"""
Grid model - the fixed rectangular coordinate space of the board.
"""

from typing import Iterator, Tuple

Cell = Tuple[int, int]


class Grid:
    """
    A cols x rows board. Cells are (x, y) with (0, 0) at the top left.
    """

    def __init__(self, cols: int, rows: int):
        self.cols = cols
        self.rows = rows

    @property
    def cell_count(self) -> int:
        return self.cols * self.rows

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cells(self) -> Iterator[Cell]:
        for y in range(self.rows):
            for x in range(self.cols):
                yield (x, y)

    def spawn_origin(self) -> Cell:
        """Head cell of a freshly created snake: (10, 11) on a 22x22 board."""
        return (max(1, self.cols // 2 - 1), self.rows // 2)

    def __repr__(self):
        return f"<Grid {self.cols}x{self.rows}>"
