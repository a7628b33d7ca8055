"""
Speed controller - shortens the tick interval each time food is eaten.
"""

from .constants import SPEED_MIN_MS, SPEED_STEP_MS


class SpeedController:
    def __init__(self, min_ms: int = SPEED_MIN_MS, step_ms: int = SPEED_STEP_MS):
        self.min_ms = min_ms
        self.step_ms = step_ms

    def next_interval(self, current: int) -> int:
        # Floors at min_ms: 140 -> 136 -> ... -> 72 -> 70 with the defaults.
        return max(self.min_ms, current - self.step_ms)
