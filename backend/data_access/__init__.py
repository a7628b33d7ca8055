"""
Data access layer for best-score persistence.
"""

from .best_score import (
    BestScoreStore,
    InMemoryBestScoreStore,
    SqliteBestScoreStore,
    record_best_score,
)
from .repositories import BestScoreRepository

__all__ = [
    'BestScoreStore',
    'InMemoryBestScoreStore',
    'SqliteBestScoreStore',
    'record_best_score',
    'BestScoreRepository',
]
