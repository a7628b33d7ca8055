"""
Repository pattern implementations for data access.

This module provides a clean abstraction over database operations
with proper connection management and error handling.
"""

from .base import BaseRepository
from .best_score_repository import BestScoreRepository

__all__ = ['BaseRepository', 'BestScoreRepository']
