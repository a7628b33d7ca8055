"""
GameState entity - an immutable snapshot of the game at a point in time.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, NamedTuple, Optional

from .constants import Direction, Phase, TickEvent
from .grid import Cell
from .snake import Body


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of a single-player game. A new GameState is produced by every
    engine operation; existing snapshots are never modified.

    Attributes:
        snake: tuple of (x, y) from head at index 0 to tail at the end
        current_direction: direction applied on the last tick
        pending_direction: direction the next tick will adopt
        food: position of the food, None only once the grid is full
        score: food items eaten since the last restart
        tick_interval_ms: recommended delay before the next tick
        phase: running, paused, over or won
        cols, rows: board dimensions
    """

    snake: Body
    current_direction: Direction
    pending_direction: Direction
    food: Optional[Cell]
    score: int
    tick_interval_ms: int
    phase: Phase
    cols: int
    rows: int

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def snake_length(self) -> int:
        return len(self.snake)

    @property
    def is_terminal(self) -> bool:
        return self.phase.is_terminal

    def occupies(self, cell: Cell) -> bool:
        return cell in self.snake

    def evolve(self, **changes: Any) -> "GameState":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (cells become [x, y] lists)."""
        return {
            "snake": [list(cell) for cell in self.snake],
            "current_direction": self.current_direction.value,
            "pending_direction": self.pending_direction.value,
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "tick_interval_ms": self.tick_interval_ms,
            "phase": self.phase.value,
            "cols": self.cols,
            "rows": self.rows,
        }

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = food
        H = snake head
        T = snake body
        Row 0 is printed first, matching screen coordinates.
        """
        board = [['.' for _ in range(self.cols)] for _ in range(self.rows)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'A'

        for pos_idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = []
        for y in range(self.rows):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # x-axis labels, last digit only so columns stay aligned
        result.append("   " + " ".join(str(x % 10) for x in range(self.cols)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState phase={self.phase.value}, head={self.head}, "
            f"length={self.snake_length}, food={self.food}, score={self.score}, "
            f"interval={self.tick_interval_ms}ms>"
        )


class TickResult(NamedTuple):
    state: GameState
    event: TickEvent
