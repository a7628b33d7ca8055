"""
Game constants for the snake engine.
"""

from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """
    Movement directions. Screen coordinates are used, so y grows downward.
    """

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def vector(self) -> Tuple[int, int]:
        return _VECTORS[self]

    @property
    def dx(self) -> int:
        return _VECTORS[self][0]

    @property
    def dy(self) -> int:
        return _VECTORS[self][1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def is_opposite(self, other: "Direction") -> bool:
        return _OPPOSITES[self] is other


_VECTORS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = frozenset(Direction)


class Phase(str, Enum):
    """Coarse lifecycle of a game session. OVER and WON are terminal."""

    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        return self in (Phase.OVER, Phase.WON)


class TickEvent(str, Enum):
    """What happened during a single tick."""

    MOVED = "moved"
    ATE = "ate"
    WALL_COLLISION = "wall_collision"
    SELF_COLLISION = "self_collision"
    GRID_FULL = "grid_full"


# Board settings
DEFAULT_COLS = 22
DEFAULT_ROWS = 22

# Tick interval settings (milliseconds)
SPEED_START_MS = 140
SPEED_MIN_MS = 70
SPEED_STEP_MS = 4
