import argparse
import json
import logging
import random
from typing import Any, Dict, Optional, Union

from config import GameConfig, load_config
from domain.constants import Direction, Phase, TickEvent
from domain.errors import GridFullError, InvalidPhaseError
from domain.food import FoodSpawner
from domain.game_state import GameState, TickResult
from domain.grid import Grid
from domain.snake import advance, initial_body, new_head
from domain.speed import SpeedController

logger = logging.getLogger(__name__)


class SnakeEngine:
    """
    Pure state-transition core of the game.

    Every operation takes a GameState and returns a new one; the engine
    itself only holds configuration and the random source used for food.
    Timing is not handled here: callers tick at state.tick_interval_ms.

    Phase errors are signalled, never ignored:
      - tick() outside RUNNING raises InvalidPhaseError
      - propose_direction() in OVER/WON raises InvalidPhaseError
      - set_phase() out of OVER/WON raises InvalidPhaseError
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self._configure(config or GameConfig())

    def _configure(self, config: GameConfig) -> None:
        self.config = config
        self.grid = Grid(config.cols, config.rows)
        self.food_spawner = FoodSpawner(self.grid, self.rng)
        self.speed = SpeedController(config.min_interval_ms, config.speed_step_ms)

    def create_initial_state(self) -> GameState:
        """Fresh game: two-cell snake heading right, random food, score 0."""
        body = initial_body(self.grid)
        return GameState(
            snake=body,
            current_direction=Direction.RIGHT,
            pending_direction=Direction.RIGHT,
            food=self.food_spawner.spawn(body),
            score=0,
            tick_interval_ms=self.config.start_interval_ms,
            phase=Phase.RUNNING,
            cols=self.config.cols,
            rows=self.config.rows,
        )

    def restart(self, config: Optional[GameConfig] = None) -> GameState:
        """Start over, independent of any prior state. A new config replaces the old one."""
        if config is not None:
            self._configure(config)
        logger.info(f"Restarting game on a {self.config.board_label} board")
        return self.create_initial_state()

    def tick(self, state: GameState) -> TickResult:
        """
        Advance the snake by one cell.

        Wall and self collisions end the game without moving the snake.
        Eating grows the snake, bumps the score, speeds up the game and
        places new food; if no free cell is left the game is won.
        """
        if state.phase is not Phase.RUNNING:
            raise InvalidPhaseError("tick", state.phase)

        direction = state.pending_direction
        head = new_head(state.snake, direction)

        if not self.grid.in_bounds(head):
            logger.info(f"Wall collision at {head} with score {state.score}")
            over = state.evolve(current_direction=direction, phase=Phase.OVER)
            return TickResult(over, TickEvent.WALL_COLLISION)

        # The tail has not moved yet, so it still counts as occupied.
        if head in state.snake:
            logger.info(f"Self collision at {head} with score {state.score}")
            over = state.evolve(current_direction=direction, phase=Phase.OVER)
            return TickResult(over, TickEvent.SELF_COLLISION)

        ate = head == state.food
        body = advance(state.snake, head, grow=ate)

        if not ate:
            moved = state.evolve(snake=body, current_direction=direction)
            return TickResult(moved, TickEvent.MOVED)

        score = state.score + 1
        interval = self.speed.next_interval(state.tick_interval_ms)
        logger.debug(f"Ate food at {head}; score={score}, interval={interval}ms")

        try:
            food = self.food_spawner.spawn(body)
        except GridFullError:
            logger.info(f"Grid full with score {score}; game won")
            won = state.evolve(
                snake=body,
                current_direction=direction,
                food=None,
                score=score,
                tick_interval_ms=interval,
                phase=Phase.WON,
            )
            return TickResult(won, TickEvent.GRID_FULL)

        fed = state.evolve(
            snake=body,
            current_direction=direction,
            food=food,
            score=score,
            tick_interval_ms=interval,
        )
        return TickResult(fed, TickEvent.ATE)

    def propose_direction(self, state: GameState, direction: Union[Direction, str]) -> GameState:
        """
        Queue a direction for the next tick. The exact opposite of the current
        direction is ignored; otherwise the last proposal before a tick wins.
        """
        if state.is_terminal:
            raise InvalidPhaseError("change direction", state.phase)

        direction = Direction(direction)
        if direction.is_opposite(state.current_direction):
            return state
        if direction is state.pending_direction:
            return state
        return state.evolve(pending_direction=direction)

    def set_phase(self, state: GameState, phase: Union[Phase, str]) -> GameState:
        """Pause or resume. Finished games can only be left through restart()."""
        phase = Phase(phase)
        if phase not in (Phase.RUNNING, Phase.PAUSED):
            raise ValueError(f"Phase can only be set to running or paused, not {phase.value}")
        if state.is_terminal:
            raise InvalidPhaseError(f"set phase to {phase.value}", state.phase)
        if state.phase is phase:
            return state
        return state.evolve(phase=phase)


def create_initial_state(config: Optional[GameConfig] = None, rng: Optional[random.Random] = None) -> GameState:
    return SnakeEngine(config, rng).create_initial_state()


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    config: GameConfig,
    seed: Optional[int] = None,
    max_ticks: int = 10_000,
    render: bool = False,
    realtime: bool = False,
    best_store=None,
) -> Dict[str, Any]:
    """
    Plays one game with the random autopilot until it ends or max_ticks is hit.

    Args:
        config: board and speed settings
        seed: seeds both food placement and the autopilot for reproducible runs
        max_ticks: safety limit on the number of ticks
        render: print the board after every tick
        realtime: pace ticks with the scheduler at tick_interval_ms
        best_store: best-score store; in-memory if omitted

    Returns:
        A dictionary summarizing the game.
    """
    from players import RandomPlayer
    from services.game_loop import GameLoop
    from services.game_session import GameSession

    engine = SnakeEngine(config, rng=random.Random(seed))
    session = GameSession(engine, best_store=best_store)
    player = RandomPlayer(rng=random.Random(seed))

    events = {event.value: 0 for event in TickEvent}
    last_event: Optional[TickEvent] = None

    def on_tick(result: TickResult) -> None:
        nonlocal last_event
        last_event = result.event
        events[result.event.value] += 1
        if render:
            print("\n" + result.state.print_board() + "\n")

    if realtime:
        loop = GameLoop(session, player=player, on_tick=on_tick)
        loop.run(max_ticks=max_ticks)
        ticks = loop.ticks
    else:
        ticks = 0
        while ticks < max_ticks and not session.state.is_terminal:
            session.propose_direction(player.get_move(session.state))
            result = session.step()
            if result is None:
                break
            ticks += 1
            on_tick(result)

    state = session.state
    logger.info(f"Game finished after {ticks} ticks: phase={state.phase.value}, score={state.score}")

    return {
        "board": config.board_label,
        "seed": seed,
        "ticks": ticks,
        "phase": state.phase.value,
        "last_event": last_event.value if last_event else None,
        "score": state.score,
        "best_score": session.best,
        "snake_length": state.snake_length,
        "tick_interval_ms": state.tick_interval_ms,
        "events": events,
    }


def main():
    defaults = load_config()

    parser = argparse.ArgumentParser(
        description="Run a headless snake game driven by the random autopilot."
    )
    parser.add_argument("--cols", type=int, default=defaults.cols,
                        help="Board width in cells")
    parser.add_argument("--rows", type=int, default=defaults.rows,
                        help="Board height in cells")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement and autopilot")
    parser.add_argument("--max-ticks", type=int, default=10_000,
                        help="Stop after this many ticks")
    parser.add_argument("--render", action="store_true",
                        help="Print the board after every tick")
    parser.add_argument("--realtime", action="store_true",
                        help="Pace ticks at the game's tick interval")
    parser.add_argument("--persist", action="store_true",
                        help="Keep the best score in the SQLite database")
    parser.add_argument("--log-level", type=str.upper, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (DEBUG, INFO, WARNING, ...)")

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    config = GameConfig(
        cols=args.cols,
        rows=args.rows,
        start_interval_ms=defaults.start_interval_ms,
        min_interval_ms=defaults.min_interval_ms,
        speed_step_ms=defaults.speed_step_ms,
    )

    best_store = None
    if args.persist:
        from data_access import SqliteBestScoreStore
        best_store = SqliteBestScoreStore(board=config.board_label)

    result = run_simulation(
        config,
        seed=args.seed,
        max_ticks=args.max_ticks,
        render=args.render,
        realtime=args.realtime,
        best_store=best_store,
    )

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
