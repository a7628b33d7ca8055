"""
Tests for best-score persistence.
"""

import sys
import os
from unittest.mock import MagicMock

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from data_access import (
    BestScoreRepository,
    InMemoryBestScoreStore,
    SqliteBestScoreStore,
    record_best_score,
)
from database import get_database_path


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "snake.db")


class TestBestScoreRepository:

    def test_missing_board_returns_none(self, db_path):
        repo = BestScoreRepository(db_path)

        assert repo.get_best_score("22x22") is None

    def test_set_and_overwrite(self, db_path):
        repo = BestScoreRepository(db_path)

        repo.set_best_score("22x22", 5)
        repo.set_best_score("22x22", 3)

        assert repo.get_best_score("22x22") == 3

    def test_boards_are_independent(self, db_path):
        repo = BestScoreRepository(db_path)

        repo.set_best_score("22x22", 5)
        repo.set_best_score("10x10", 9)

        assert repo.get_best_score("22x22") == 5
        assert repo.get_best_score("10x10") == 9

    def test_delete(self, db_path):
        repo = BestScoreRepository(db_path)
        repo.set_best_score("22x22", 5)

        assert repo.delete_best_score("22x22") is True
        assert repo.delete_best_score("22x22") is False
        assert repo.get_best_score("22x22") is None


class TestSqliteBestScoreStore:

    def test_defaults_to_zero(self, db_path):
        assert SqliteBestScoreStore(db_path=db_path).get() == 0

    def test_survives_new_store_instance(self, db_path):
        SqliteBestScoreStore(board="22x22", db_path=db_path).set(12)

        assert SqliteBestScoreStore(board="22x22", db_path=db_path).get() == 12

    def test_uses_injected_repository(self):
        repo = MagicMock()
        repo.get_best_score.return_value = None
        store = SqliteBestScoreStore(board="8x8", repository=repo)

        assert store.get() == 0
        store.set(4)
        repo.set_best_score.assert_called_once_with("8x8", 4)


class TestRecordBestScore:

    def test_higher_score_is_stored(self):
        store = InMemoryBestScoreStore(initial=3)

        assert record_best_score(store, 7) == 7
        assert store.get() == 7

    def test_lower_score_keeps_best(self):
        store = InMemoryBestScoreStore(initial=9)

        assert record_best_score(store, 2) == 9
        assert store.get() == 9

    def test_equal_score_does_not_write(self):
        store = MagicMock()
        store.get.return_value = 4

        assert record_best_score(store, 4) == 4
        store.set.assert_not_called()


class TestDatabasePath:

    def test_env_override(self, monkeypatch, tmp_path):
        target = tmp_path / "nested" / "scores.db"
        monkeypatch.setenv("SNAKE_DB_PATH", str(target))

        assert get_database_path() == str(target)
        assert target.parent.is_dir()

    def test_default_path(self, monkeypatch):
        monkeypatch.delenv("SNAKE_DB_PATH", raising=False)

        assert get_database_path().endswith("snake.db")
