"""
Tests for players: the random autopilot and keyboard bindings.
"""

import random
import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT
from players import Player, RandomPlayer, KeyAction, resolve_key
from tests.helpers import make_state


class TestPlayer:

    def test_base_player_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(make_state([(5, 5), (4, 5)]))


class TestRandomPlayer:

    def test_never_reverses(self):
        player = RandomPlayer(rng=random.Random(0))
        state = make_state([(5, 5), (4, 5)], direction=RIGHT)

        moves = {player.get_move(state) for _ in range(100)}

        assert LEFT not in moves
        assert moves == {UP, DOWN, RIGHT}

    def test_avoids_walls_in_corner(self):
        player = RandomPlayer(rng=random.Random(0))
        state = make_state([(0, 0), (1, 0)], direction=LEFT)

        moves = {player.get_move(state) for _ in range(50)}

        assert moves == {DOWN}

    def test_avoids_own_body_including_tail(self):
        player = RandomPlayer(rng=random.Random(0))
        # Head at (5, 5) moving up; the tail sits just left of the head.
        state = make_state([(5, 5), (5, 6), (4, 6), (4, 5)], direction=UP)

        moves = {player.get_move(state) for _ in range(50)}

        assert LEFT not in moves
        assert moves == {UP, RIGHT}

    def test_trapped_keeps_current_direction(self):
        player = RandomPlayer(rng=random.Random(0))
        # Top-left corner, heading left, body blocks the only way down.
        state = make_state([(0, 0), (1, 0), (1, 1), (0, 1)], direction=LEFT)

        assert player.get_move(state) is LEFT


class TestKeyBindings:

    @pytest.mark.parametrize("key,direction", [
        ("ArrowUp", UP), ("ArrowDown", DOWN), ("ArrowLeft", LEFT), ("ArrowRight", RIGHT),
        ("w", UP), ("s", DOWN), ("a", LEFT), ("d", RIGHT),
        ("W", UP), ("D", RIGHT),
    ])
    def test_direction_keys(self, key, direction):
        command = resolve_key(key)

        assert command.action is KeyAction.DIRECTION
        assert command.direction is direction

    @pytest.mark.parametrize("key", ["p", "P"])
    def test_pause_keys(self, key):
        assert resolve_key(key).action is KeyAction.PAUSE

    @pytest.mark.parametrize("key", ["r", "R"])
    def test_restart_keys(self, key):
        command = resolve_key(key)
        assert command.action is KeyAction.RESTART
        assert command.direction is None

    @pytest.mark.parametrize("key", ["", "x", "Enter", "Escape"])
    def test_unbound_keys(self, key):
        assert resolve_key(key) is None
