# loop.py
from enum import Enum
from typing import Dict, Iterable, Optional, Protocol
import logging
import random

from .config import CFG, Config, KEY_BINDINGS, START_KEYS, STILL
from .controls import on_key
from .game import GameState, TickOutcome, advance, new_game_state
from .grid import Direction, Grid
from .scores import ScoreTracker
from .timer import TimerHandle

logger = logging.getLogger(__name__)

START_PROMPT = "Press Enter to start"
RESTART_PROMPT = "Press Enter to play again"


class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class Timer(Protocol):
    def call_later(self, delay_ms: int, callback) -> TimerHandle: ...


class Renderer(Protocol):
    def draw_state(self, state: GameState) -> None: ...
    def show_scores(self, score: int, high_score: int) -> None: ...
    def show_message(self, text: Optional[str]) -> None: ...


def game_over_message(score: int) -> str:
    return f"Game over! Final score: {score}\n{RESTART_PROMPT}"


class GameLoop:
    """
    Drives one game session at a time.

    IDLE -> start() -> RUNNING -> collision -> ENDED -> start() -> RUNNING ...

    Ticks are single-shot timer callbacks re-armed after each successful
    tick. The handle of the one outstanding tick lives on the session
    state and is cancelled on restart and on game over.
    """

    def __init__(
        self,
        grid: Grid,
        timer: Timer,
        renderer: Renderer,
        tracker: ScoreTracker,
        cfg: Config = CFG,
        rng: Optional[random.Random] = None,
        bindings: Dict[int, Direction] = KEY_BINDINGS,
        start_keys: Iterable[int] = START_KEYS,
    ):
        self.grid = grid
        self.timer = timer
        self.renderer = renderer
        self.tracker = tracker
        self.cfg = cfg
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.bindings = bindings
        self.start_keys = frozenset(start_keys)
        self.phase = Phase.IDLE
        self.state: Optional[GameState] = None
        self.games_played = 0

        self.renderer.show_scores(0, self.tracker.high_score)
        self.renderer.show_message(START_PROMPT)

    @property
    def direction(self) -> Direction:
        return self.state.direction if self.state is not None else STILL

    # ---------- commands ----------
    def start(self) -> None:
        if self.state is not None:
            self._cancel_pending(self.state)
            self.state.running = False

        self.state = new_game_state(self.grid, self.rng, self.cfg)
        self.phase = Phase.RUNNING
        self.games_played += 1
        logger.info("Game %d started (food at %s)", self.games_played, self.state.food)

        self.renderer.show_scores(0, self.tracker.high_score)
        self.renderer.show_message(None)
        self.renderer.draw_state(self.state)
        self.tick()

    def tick(self) -> Optional[TickOutcome]:
        state = self.state
        if self.phase is not Phase.RUNNING or state is None or not state.running:
            return None

        state.direction_changed = False
        outcome = advance(state, self.grid, self.rng, self.cfg, on_eat=self.tracker.on_eat)
        if outcome is TickOutcome.COLLIDED:
            self.end()
            return outcome

        if outcome is TickOutcome.ATE:
            self.renderer.show_scores(state.score, self.tracker.high_score)
        self.renderer.draw_state(state)
        self._cancel_pending(state)
        state.pending_tick = self.timer.call_later(state.tick_delay_ms, self.tick)
        return outcome

    def end(self) -> None:
        state = self.state
        if state is None or self.phase is not Phase.RUNNING:
            return
        self.phase = Phase.ENDED
        state.running = False
        self._cancel_pending(state)

        self.tracker.on_end(state)
        logger.info("Game %d over: score=%d length=%d",
                    self.games_played, state.score, len(state.snake))
        self.renderer.show_scores(state.score, self.tracker.high_score)
        self.renderer.show_message(game_over_message(state.score))

    def handle_key(self, key: int) -> bool:
        """Route a key press. Returns True if it changed anything."""
        if key in self.start_keys:
            self.start()
            return True
        if self.state is None:
            return False
        return on_key(key, self.state, self.bindings)

    @staticmethod
    def _cancel_pending(state: GameState) -> None:
        if state.pending_tick is not None:
            state.pending_tick.cancel()
            state.pending_tick = None
