"""
Keyboard bindings - translate raw key names into game commands.

Key names follow the browser KeyboardEvent.key convention
(ArrowUp, ArrowDown, ...) plus single letters for WASD, pause and restart.
"""

from enum import Enum
from typing import Dict, NamedTuple, Optional

from domain.constants import Direction


class KeyAction(str, Enum):
    DIRECTION = "direction"
    PAUSE = "pause"
    RESTART = "restart"


class KeyCommand(NamedTuple):
    action: KeyAction
    direction: Optional[Direction] = None


KEY_DIRECTIONS: Dict[str, Direction] = {
    "arrowup": Direction.UP,
    "arrowdown": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

PAUSE_KEYS = frozenset({"p"})
RESTART_KEYS = frozenset({"r"})


def resolve_key(key: str) -> Optional[KeyCommand]:
    """
    Map a key name to a command, ignoring case. Unbound keys return None.
    """
    if not key:
        return None

    name = key.strip().lower()
    if name in KEY_DIRECTIONS:
        return KeyCommand(KeyAction.DIRECTION, KEY_DIRECTIONS[name])
    if name in PAUSE_KEYS:
        return KeyCommand(KeyAction.PAUSE)
    if name in RESTART_KEYS:
        return KeyCommand(KeyAction.RESTART)
    return None
