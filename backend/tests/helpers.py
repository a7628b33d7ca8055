"""
Shared builders for engine tests.
"""

from domain.constants import Direction, Phase, SPEED_START_MS
from domain.game_state import GameState


class SequenceRng:
    """Deterministic stand-in for random.Random: randrange() replays fixed draws."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        value = self.values.pop(0)
        assert 0 <= value < n, f"draw {value} outside [0, {n})"
        return value


def make_state(
    snake,
    direction=Direction.RIGHT,
    pending=None,
    food=(0, 0),
    score=0,
    interval=SPEED_START_MS,
    phase=Phase.RUNNING,
    cols=22,
    rows=22,
):
    return GameState(
        snake=tuple(snake),
        current_direction=direction,
        pending_direction=pending or direction,
        food=food,
        score=score,
        tick_interval_ms=interval,
        phase=phase,
        cols=cols,
        rows=rows,
    )
