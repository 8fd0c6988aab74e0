# game.py
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional
import logging
import random

from .config import RIGHT, CFG, Config
from .grid import Cell, Direction, Grid
from .timer import TimerHandle

logger = logging.getLogger(__name__)

# ---------- Helpers ----------
def spawn_food(snake: List[Cell], grid: Grid, rng: random.Random) -> Cell:
    """Rejection-sample a free cell. Never returns if the snake fills the board."""
    while True:
        cell = grid.random_cell(rng)
        if cell not in snake:
            return cell

def initial_snake(grid: Grid) -> List[Cell]:
    cx, cy = grid.center()
    return [(cx, cy), (cx - 1, cy), (cx - 2, cy)]

# ---------- State ----------
class TickOutcome(Enum):
    CONTINUED = "continued"
    ATE = "ate"
    COLLIDED = "collided"

@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    food: Cell
    direction: Direction
    score: int
    tick_delay_ms: int             # delay before the next tick
    running: bool = True
    direction_changed: bool = False   # one accepted turn per tick
    pending_tick: Optional[TimerHandle] = None

    @property
    def head(self) -> Cell:
        return self.snake[0]

def new_game_state(grid: Grid, rng: random.Random, cfg: Config = CFG) -> GameState:
    snake = initial_snake(grid)
    return GameState(
        snake=snake,
        food=spawn_food(snake, grid, rng),
        direction=RIGHT,
        score=0,
        tick_delay_ms=cfg.initial_delay_ms,
    )

# ---------- Update ----------
def advance(
    state: GameState,
    grid: Grid,
    rng: random.Random,
    cfg: Config = CFG,
    on_eat: Optional[Callable[[GameState], None]] = None,
) -> TickOutcome:
    """
    Advance the snake by one cell in its current direction.

    The collision test sees the snake before the tail moves, so stepping
    into the cell the tail is about to leave is fatal. On COLLIDED the
    snake is left untouched.

    `on_eat` does the scoring when given (see ScoreTracker.on_eat);
    otherwise the food reward is added here.
    """
    hx, hy = state.head
    dx, dy = state.direction
    new_head = (hx + dx, hy + dy)

    if not grid.in_bounds(new_head):
        logger.debug("wall collision at %s", new_head)
        return TickOutcome.COLLIDED
    if new_head in state.snake:
        logger.debug("self collision at %s", new_head)
        return TickOutcome.COLLIDED

    state.snake.insert(0, new_head)

    if new_head != state.food:
        state.snake.pop()
        return TickOutcome.CONTINUED

    if on_eat is None:
        state.score += cfg.food_reward
    else:
        on_eat(state)
    state.tick_delay_ms = max(cfg.min_delay_ms, state.tick_delay_ms - cfg.delay_step_ms)
    state.food = spawn_food(state.snake, grid, rng)
    logger.debug(
        "ate at %s: score=%d delay=%dms next food %s",
        new_head, state.score, state.tick_delay_ms, state.food,
    )
    return TickOutcome.ATE
