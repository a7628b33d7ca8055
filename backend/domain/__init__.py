"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (scheduling, persistence, input devices, etc.).
"""

from .constants import (
    Direction, Phase, TickEvent,
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    DEFAULT_COLS, DEFAULT_ROWS, SPEED_START_MS, SPEED_MIN_MS, SPEED_STEP_MS,
)
from .errors import SnakeEngineError, InvalidPhaseError, GridFullError
from .grid import Cell, Grid
from .food import FoodSpawner
from .speed import SpeedController
from .game_state import GameState, TickResult

__all__ = [
    'Direction', 'Phase', 'TickEvent',
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'DEFAULT_COLS', 'DEFAULT_ROWS', 'SPEED_START_MS', 'SPEED_MIN_MS', 'SPEED_STEP_MS',
    'SnakeEngineError', 'InvalidPhaseError', 'GridFullError',
    'Cell', 'Grid',
    'FoodSpawner',
    'SpeedController',
    'GameState', 'TickResult',
]
