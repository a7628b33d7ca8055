"""
Exceptions raised by the snake engine.
"""

from .constants import Phase


class SnakeEngineError(Exception):
    """Base class for engine errors."""


class InvalidPhaseError(SnakeEngineError, ValueError):
    """
    An operation was invoked in a phase that does not allow it,
    e.g. ticking a paused game or steering a finished one.
    """

    def __init__(self, operation: str, phase: Phase):
        self.operation = operation
        self.phase = phase
        super().__init__(f"Cannot {operation} while game is {phase.value}")


class GridFullError(SnakeEngineError):
    """No unoccupied cell is left for food placement."""

    def __init__(self, cell_count: int):
        self.cell_count = cell_count
        super().__init__(f"All {cell_count} cells are occupied; no room for food")
