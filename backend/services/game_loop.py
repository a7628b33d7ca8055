"""
Game loop - the external scheduler that ticks a GameSession.

Each tick is a one-shot `schedule` job. After it runs, the next job is
registered using the tick interval of the newest state, so a speed-up
applies from the following tick on. Paused games keep polling without
ticking; the loop ends on game over, on max_ticks or on stop().
"""

import logging
import threading
from typing import Callable, Optional

import schedule

from domain.constants import Phase
from domain.game_state import TickResult

logger = logging.getLogger(__name__)

POLL_SECONDS = 0.005


class GameLoop:
    def __init__(
        self,
        session,
        player=None,
        on_tick: Optional[Callable[[TickResult], None]] = None,
        poll_seconds: float = POLL_SECONDS,
    ):
        self.session = session
        self.player = player
        self.on_tick = on_tick
        self.poll_seconds = poll_seconds
        self.scheduler = schedule.Scheduler()
        self.ticks = 0
        self._max_ticks: Optional[int] = None
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return not self._stop.is_set()

    def _schedule_next(self) -> None:
        interval_seconds = self.session.state.tick_interval_ms / 1000.0
        self.scheduler.every(interval_seconds).seconds.do(self._run_tick)

    def _run_tick(self):
        if self._max_ticks is not None and self.ticks >= self._max_ticks:
            logger.info(f"Game loop reached max ticks ({self._max_ticks})")
            self._stop.set()
            return schedule.CancelJob

        state = self.session.state
        if state.is_terminal:
            self._stop.set()
            return schedule.CancelJob

        if state.phase is Phase.RUNNING:
            if self.player is not None:
                self.session.propose_direction(self.player.get_move(state))

            result = self.session.step()
            if result is not None:
                self.ticks += 1
                if self.on_tick is not None:
                    self.on_tick(result)
                if result.state.is_terminal:
                    logger.info(f"Game loop stopping after {self.ticks} ticks: {result.event.value}")
                    self._stop.set()
                    return schedule.CancelJob

        self._schedule_next()
        return schedule.CancelJob

    def run(self, max_ticks: Optional[int] = None) -> int:
        """
        Tick until the game ends, max_ticks is reached or stop() is called.

        Returns:
            Number of ticks run by this loop.
        """
        self._stop.clear()
        return self._loop(max_ticks)

    def _loop(self, max_ticks: Optional[int]) -> int:
        self._max_ticks = max_ticks
        self.scheduler.clear()
        self._schedule_next()
        try:
            while not self._stop.is_set():
                self.scheduler.run_pending()
                self._stop.wait(self.poll_seconds)
        finally:
            self.scheduler.clear()
        return self.ticks

    def start(self, max_ticks: Optional[int] = None) -> threading.Thread:
        """Run the loop on a daemon thread."""
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._loop, kwargs={'max_ticks': max_ticks}, name='game-loop', daemon=True
        )
        self._thread.start()
        return self._thread

    def stop(self, timeout: Optional[float] = 1.0) -> None:
        self._stop.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)
            self._thread = None
