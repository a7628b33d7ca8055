"""
Best score repository for the best_scores table.
"""

from typing import Optional

from .base import BaseRepository


class BestScoreRepository(BaseRepository):

    def get_best_score(self, board: str) -> Optional[int]:
        """Return the stored best score for a board label, or None if never stored."""
        with self.connection(auto_commit=False) as (conn, cursor):
            cursor.execute("SELECT score FROM best_scores WHERE board = ?", (board,))
            row = cursor.fetchone()
            return row['score'] if row else None

    def set_best_score(self, board: str, score: int) -> None:
        with self.connection() as (conn, cursor):
            cursor.execute(
                """
                INSERT INTO best_scores (board, score, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(board) DO UPDATE SET
                    score = excluded.score,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (board, score),
            )

    def delete_best_score(self, board: str) -> bool:
        with self.connection() as (conn, cursor):
            cursor.execute("DELETE FROM best_scores WHERE board = ?", (board,))
            return cursor.rowcount > 0
