# scores.py
from __future__ import annotations
from pathlib import Path
from typing import Protocol
import json
import logging

from .config import CFG
from .game import GameState

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def get_high_score(self) -> int: ...
    def set_high_score(self, value: int) -> None: ...


class MemoryHighScoreStore:
    """Keeps the high score for the lifetime of the process only."""

    def __init__(self, value: int = 0):
        self.value = value

    def get_high_score(self) -> int:
        return self.value

    def set_high_score(self, value: int) -> None:
        self.value = value


class JsonHighScoreStore:
    """
    High score in a small JSON file: {"high_score": <int>}.

    A missing file reads as 0. I/O or parse failures are logged and the
    store degrades to a no-op so the game keeps its in-memory score.
    """

    KEY = "high_score"

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def get_high_score(self) -> int:
        if not self.path.exists():
            return 0
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            value = int(data.get(self.KEY, 0))
        except (OSError, ValueError, TypeError, AttributeError, OverflowError) as exc:
            logger.warning("Unable to read high score from %s: %s", self.path, exc)
            return 0
        return max(value, 0)

    def set_high_score(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({self.KEY: int(value)}), encoding="utf-8")
        except OSError as exc:
            logger.warning("Unable to save high score to %s: %s", self.path, exc)


class ScoreTracker:
    """Current-session scoring plus the persisted best."""

    def __init__(self, store: HighScoreStore, food_reward: int = CFG.food_reward):
        self.store = store
        self.food_reward = food_reward
        self.high_score = store.get_high_score()

    def on_eat(self, state: GameState) -> None:
        state.score += self.food_reward
        if state.score > self.high_score:
            self.high_score = state.score

    def on_end(self, state: GameState) -> bool:
        """Persist the score if it beats the stored one. Returns True if saved."""
        self.high_score = max(self.high_score, state.score)
        if state.score > self.store.get_high_score():
            self.store.set_high_score(state.score)
            logger.info("New high score: %d", state.score)
            return True
        return False
