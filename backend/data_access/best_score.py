"""
Best-score stores.

A store only needs get() -> int and set(int). The host consults it when a
game finishes; the engine never touches it.
"""

import logging
import threading
from typing import Optional, Protocol

from .repositories import BestScoreRepository

logger = logging.getLogger(__name__)


class BestScoreStore(Protocol):
    def get(self) -> int:
        ...

    def set(self, score: int) -> None:
        ...


class InMemoryBestScoreStore:
    """Keeps the best score for the lifetime of the process."""

    def __init__(self, initial: int = 0):
        self._score = initial
        self._lock = threading.Lock()

    def get(self) -> int:
        with self._lock:
            return self._score

    def set(self, score: int) -> None:
        with self._lock:
            self._score = score


class SqliteBestScoreStore:
    """
    Persists the best score across sessions in the best_scores table,
    one row per board label (e.g. "22x22").
    """

    def __init__(self, board: str = "22x22", db_path: Optional[str] = None,
                 repository: Optional[BestScoreRepository] = None):
        self.board = board
        self.repository = repository or BestScoreRepository(db_path)

    def get(self) -> int:
        score = self.repository.get_best_score(self.board)
        return score if score is not None else 0

    def set(self, score: int) -> None:
        self.repository.set_best_score(self.board, score)


def record_best_score(store: BestScoreStore, score: int) -> int:
    """
    Store score if it beats the current best.

    Returns:
        The best score after the update.
    """
    best = store.get()
    if score > best:
        store.set(score)
        logger.info(f"New best score: {score} (previous {best})")
        return score
    return best
