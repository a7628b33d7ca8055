"""
Game session - the host that owns the live game state.

The engine is pure; this module keeps the latest GameState, serializes
every transition behind a lock (ticks from the scheduler thread and
direction changes from input handlers both read-modify the same state),
turns key presses into engine calls and records the best score when a
game finishes.
"""

import logging
import threading
from typing import Optional, Tuple, Union

from data_access.best_score import BestScoreStore, InMemoryBestScoreStore, record_best_score
from domain.constants import Direction, Phase
from domain.game_state import GameState, TickResult
from players.key_bindings import KeyAction, resolve_key

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(self, engine, best_store: Optional[BestScoreStore] = None):
        self.engine = engine
        self.best_store = best_store if best_store is not None else InMemoryBestScoreStore()
        self._lock = threading.Lock()
        self._state = engine.create_initial_state()
        self.last_event = None
        self.games_finished = 0

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def best(self) -> int:
        return self.best_store.get()

    def step(self) -> Optional[TickResult]:
        """
        Run one tick. Returns None without touching the state when the
        game is not running, so a late timer callback is harmless.
        """
        with self._lock:
            if self._state.phase is not Phase.RUNNING:
                return None

            result = self.engine.tick(self._state)
            self._state = result.state
            self.last_event = result.event

            if result.state.is_terminal:
                self._finish(result)
            return result

    def _finish(self, result: TickResult) -> None:
        self.games_finished += 1
        best = record_best_score(self.best_store, result.state.score)
        logger.info(
            f"Game ended ({result.event.value}) with score {result.state.score}, best {best}"
        )

    def _apply_direction(self, direction: Union[Direction, str]) -> Tuple[GameState, GameState]:
        with self._lock:
            before = self._state
            if not before.is_terminal:
                self._state = self.engine.propose_direction(before, direction)
            return before, self._state

    def propose_direction(self, direction: Union[Direction, str]) -> bool:
        """
        Queue a direction for the next tick.

        Returns:
            True if the pending direction is now the proposed one.
        """
        _, after = self._apply_direction(direction)
        return not after.is_terminal and after.pending_direction is Direction(direction)

    def _toggle_pause(self) -> Tuple[GameState, GameState]:
        with self._lock:
            before = self._state
            if before.is_terminal:
                return before, before
            target = Phase.PAUSED if before.phase is Phase.RUNNING else Phase.RUNNING
            self._state = self.engine.set_phase(before, target)
            logger.debug(f"Game {target.value}")
            return before, self._state

    def toggle_pause(self) -> GameState:
        return self._toggle_pause()[1]

    def restart(self) -> GameState:
        with self._lock:
            return self._restart()

    def _restart(self) -> GameState:
        self._state = self.engine.restart()
        self.last_event = None
        return self._state

    def handle_key(self, key: str) -> bool:
        """
        Dispatch a raw key press. Restart is only honoured once the game is
        over; use restart() directly for a restart button.

        Returns:
            True if the key changed anything.
        """
        command = resolve_key(key)
        if command is None:
            return False

        if command.action is KeyAction.DIRECTION:
            before, after = self._apply_direction(command.direction)
            return after is not before

        if command.action is KeyAction.PAUSE:
            before, after = self._toggle_pause()
            return after is not before

        if command.action is KeyAction.RESTART:
            with self._lock:
                if self._state.is_terminal:
                    self._restart()
                    return True

        return False
