#!/usr/bin/env python3
"""
Show or reset the stored best score.

Usage:
    python backend/cli/best_score.py [--board 22x22] [--reset [--confirm]]
"""

import os
import sys
import argparse

# Add parent directory to path to import database modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from data_access.repositories import BestScoreRepository
from database import get_database_path


def show_best_score(board: str, repository: BestScoreRepository) -> int:
    score = repository.get_best_score(board)
    if score is None:
        print(f"No best score recorded for {board}")
        return 0
    print(f"Best score for {board}: {score}")
    return score


def reset_best_score(board: str, repository: BestScoreRepository, confirm: bool = False) -> bool:
    """
    Delete the best score for a board.

    Args:
        board: board label, e.g. "22x22"
        confirm: If True, skip confirmation prompt

    Returns:
        True if a score was deleted, False otherwise
    """
    if not confirm:
        response = input(f"Type 'RESET' to delete the best score for {board}: ")
        if response != 'RESET':
            print("Reset cancelled")
            return False

    deleted = repository.delete_best_score(board)
    if deleted:
        print(f"Best score for {board} deleted")
    else:
        print(f"No best score recorded for {board}")
    return deleted


def main():
    parser = argparse.ArgumentParser(description="Show or reset the stored best score.")
    parser.add_argument("--board", type=str, default="22x22",
                        help="Board label, COLSxROWS")
    parser.add_argument("--db", type=str, default=None,
                        help="Path to the SQLite database (default: SNAKE_DB_PATH or backend/snake.db)")
    parser.add_argument("--reset", action="store_true",
                        help="Delete the stored best score")
    parser.add_argument("--confirm", action="store_true",
                        help="Skip the confirmation prompt when resetting")
    args = parser.parse_args()

    repository = BestScoreRepository(args.db or get_database_path())

    if args.reset:
        success = reset_best_score(args.board, repository, confirm=args.confirm)
        sys.exit(0 if success else 1)

    show_best_score(args.board, repository)


if __name__ == "__main__":
    main()
