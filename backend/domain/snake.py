"""
Snake body helpers for the game engine.

A body is a tuple of (x, y) cells from the head at index 0 to the tail at
the end. Bodies are never mutated; each move builds a new tuple.
"""

from typing import Tuple

from .constants import Direction, RIGHT
from .grid import Cell, Grid

Body = Tuple[Cell, ...]


def new_head(body: Body, direction: Direction) -> Cell:
    x, y = body[0]
    return (x + direction.dx, y + direction.dy)


def advance(body: Body, head: Cell, grow: bool) -> Body:
    """
    Prepend the new head. The tail is dropped unless the snake grows,
    so length is unchanged on a plain move and +1 after eating.
    """
    if grow:
        return (head,) + body
    return (head,) + body[:-1]


def initial_body(grid: Grid) -> Body:
    """Canonical two-cell snake facing right, e.g. [(10, 11), (9, 11)]."""
    hx, hy = grid.spawn_origin()
    return ((hx, hy), (hx - RIGHT.dx, hy))
