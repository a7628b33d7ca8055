"""
Tests for services/game_loop.py - the schedule-driven tick loop.
"""

import random
import sys
import os
import time

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameConfig
from domain.constants import Phase, TickEvent, UP, LEFT
from main import SnakeEngine
from players import Player
from services.game_loop import GameLoop
from services.game_session import GameSession

FAST = GameConfig(cols=6, rows=6, start_interval_ms=2, min_interval_ms=1, speed_step_ms=1)


class ScriptedPlayer(Player):
    def __init__(self, moves):
        self.moves = list(moves)

    def get_move(self, game_state):
        return self.moves.pop(0)


def make_session(config=FAST, seed=0):
    return GameSession(SnakeEngine(config, rng=random.Random(seed)))


class TestGameLoop:

    def test_runs_until_wall(self):
        """Heading right from (2, 3) on a 6-wide board hits the wall on tick 4."""
        session = make_session()
        events = []

        loop = GameLoop(session, on_tick=lambda result: events.append(result.event),
                        poll_seconds=0.001)
        ticks = loop.run()

        assert ticks == 4
        assert events[-1] is TickEvent.WALL_COLLISION
        assert session.state.phase is Phase.OVER
        assert not loop.running

    def test_max_ticks(self):
        session = make_session(GameConfig(cols=30, rows=30, start_interval_ms=1, min_interval_ms=1))

        loop = GameLoop(session, poll_seconds=0.001)

        assert loop.run(max_ticks=3) == 3
        assert session.state.head == (17, 15)
        assert session.state.phase is Phase.RUNNING

    def test_player_is_consulted_before_each_tick(self):
        from players import RandomPlayer

        session = make_session(seed=4)
        loop = GameLoop(session, player=RandomPlayer(rng=random.Random(4)), poll_seconds=0.001)

        loop.run(max_ticks=20)

        assert loop.ticks >= 1
        assert loop.ticks <= 20

    def test_next_tick_uses_latest_interval(self):
        session = make_session(GameConfig(cols=10, rows=10, start_interval_ms=100,
                                          min_interval_ms=10, speed_step_ms=30))
        session._state = session.state.evolve(food=(5, 5))
        loop = GameLoop(session)

        loop._run_tick()

        assert session.state.score == 1
        assert session.state.tick_interval_ms == 70
        assert len(loop.scheduler.jobs) == 1
        assert loop.scheduler.jobs[0].interval == 0.07

    def test_paused_game_does_not_tick(self):
        session = make_session()
        session.toggle_pause()
        loop = GameLoop(session, poll_seconds=0.001)

        loop.start()
        time.sleep(0.05)
        loop.stop()

        assert loop.ticks == 0
        assert session.state.phase is Phase.PAUSED
        assert session.state.head == (2, 3)

    def test_stop_ends_background_loop(self):
        session = make_session(GameConfig(cols=200, rows=5, start_interval_ms=5, min_interval_ms=5))
        loop = GameLoop(session, poll_seconds=0.001)

        thread = loop.start()
        time.sleep(0.05)
        loop.stop()

        assert not thread.is_alive()
        assert loop.ticks < 200

    def test_zero_max_ticks_runs_nothing(self):
        session = make_session()
        loop = GameLoop(session, poll_seconds=0.001)

        assert loop.run(max_ticks=0) == 0
        assert session.state.head == (2, 3)
        assert not loop.running

    def test_stops_when_grid_fills(self):
        """On a 2x2 board, UP then LEFT eats the last two free cells."""
        session = make_session(GameConfig(cols=2, rows=2, start_interval_ms=1, min_interval_ms=1))
        session._state = session.state.evolve(food=(1, 0))
        events = []

        loop = GameLoop(session, player=ScriptedPlayer([UP, LEFT]),
                        on_tick=lambda result: events.append(result.event),
                        poll_seconds=0.001)

        assert loop.run(max_ticks=10) == 2
        assert events == [TickEvent.ATE, TickEvent.GRID_FULL]
        assert session.state.phase is Phase.WON
        assert not loop.running
