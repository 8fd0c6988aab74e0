# controls.py
from typing import Dict
import logging

from .config import KEY_BINDINGS
from .game import GameState
from .grid import Direction

logger = logging.getLogger(__name__)


def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def on_key(
    key: int,
    state: GameState,
    bindings: Dict[int, Direction] = KEY_BINDINGS,
) -> bool:
    """
    Turn the snake for a key press. At most one turn is accepted per tick
    and no 180° turns. Returns True if the direction changed.
    """
    if not state.running or state.direction_changed:
        return False

    cand = bindings.get(key)
    if cand is None or cand == state.direction:
        return False
    if is_opposite(cand, state.direction):
        logger.debug("rejected reversal %s -> %s", state.direction, cand)
        return False

    state.direction = cand
    state.direction_changed = True
    return True
