"""
Game configuration.

Board size and speed settings come from environment variables (a local .env
file is honoured via python-dotenv) and fall back to the classic defaults:
a 22x22 board, 140ms start interval, 70ms floor, 4ms faster per food item.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import (
    DEFAULT_COLS,
    DEFAULT_ROWS,
    SPEED_START_MS,
    SPEED_MIN_MS,
    SPEED_STEP_MS,
)


@dataclass(frozen=True)
class GameConfig:
    cols: int = DEFAULT_COLS
    rows: int = DEFAULT_ROWS
    start_interval_ms: int = SPEED_START_MS
    min_interval_ms: int = SPEED_MIN_MS
    speed_step_ms: int = SPEED_STEP_MS

    def __post_init__(self):
        if self.cols < 2 or self.rows < 2:
            raise ValueError(f"Board must be at least 2x2, got {self.cols}x{self.rows}")
        if self.min_interval_ms <= 0:
            raise ValueError(f"min_interval_ms must be positive, got {self.min_interval_ms}")
        if self.start_interval_ms < self.min_interval_ms:
            raise ValueError(
                f"start_interval_ms ({self.start_interval_ms}) must not be below "
                f"min_interval_ms ({self.min_interval_ms})"
            )
        if self.speed_step_ms < 0:
            raise ValueError(f"speed_step_ms must not be negative, got {self.speed_step_ms}")

    @property
    def board_label(self) -> str:
        return f"{self.cols}x{self.rows}"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got '{raw}'")


def load_config(env_file: Optional[str] = None) -> GameConfig:
    """
    Build a GameConfig from the environment.

    Recognised variables: SNAKE_COLS, SNAKE_ROWS, SNAKE_SPEED_START_MS,
    SNAKE_SPEED_MIN_MS, SNAKE_SPEED_STEP_MS.

    Raises:
        ValueError: if a variable is not an integer or the result is invalid.
    """
    load_dotenv(env_file)
    return GameConfig(
        cols=_env_int('SNAKE_COLS', DEFAULT_COLS),
        rows=_env_int('SNAKE_ROWS', DEFAULT_ROWS),
        start_interval_ms=_env_int('SNAKE_SPEED_START_MS', SPEED_START_MS),
        min_interval_ms=_env_int('SNAKE_SPEED_MIN_MS', SPEED_MIN_MS),
        speed_step_ms=_env_int('SNAKE_SPEED_STEP_MS', SPEED_STEP_MS),
    )
