"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import Direction, VALID_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that picks a random direction avoiding walls, reversal
    and its own body.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> Direction:
        body = game_state.snake
        head_x, head_y = body[0]

        # Filter out moves that:
        # 1. Reverse into the neck
        # 2. Hit walls
        # 3. Hit own body (the tail still counts, it moves only after the check)
        valid_moves: List[Direction] = []
        for move in sorted(VALID_MOVES, key=lambda d: d.value):
            if move.is_opposite(game_state.current_direction):
                continue

            new_x, new_y = head_x + move.dx, head_y + move.dy
            if (new_x < 0 or new_x >= game_state.cols or
                new_y < 0 or new_y >= game_state.rows):
                continue

            if (new_x, new_y) in body:
                continue

            valid_moves.append(move)

        # No safe move: keep going, the next tick ends the game anyway
        if not valid_moves:
            return game_state.current_direction

        return self.rng.choice(valid_moves)
