# timer.py
from typing import Callable, List, Optional
import itertools

import pygame # type: ignore


class TimerHandle:
    """One scheduled callback. Fires at most once."""

    __slots__ = ("due_ms", "callback", "cancelled", "fired", "_seq")

    def __init__(self, due_ms: int, callback: Callable[[], None], seq: int):
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False
        self.fired = False
        self._seq = seq

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def __repr__(self) -> str:
        return f"<TimerHandle due={self.due_ms} active={self.active}>"


class FrameTimer:
    """
    Single-shot delayed callbacks, polled from the frame loop.

    Nothing runs on its own: `run_due()` must be called every frame. A
    callback that re-arms itself is scheduled from the time it actually
    ran, so a slow frame delays the chain instead of piling up ticks.
    """

    def __init__(self, clock: Callable[[], int] = pygame.time.get_ticks):
        self.clock = clock
        self._pending: List[TimerHandle] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(self.clock() + max(delay_ms, 0), callback, next(self._seq))
        self._pending.append(handle)
        return handle

    def run_due(self, now_ms: Optional[int] = None) -> int:
        """Fire every due, uncancelled callback once. Returns how many ran."""
        now = self.clock() if now_ms is None else now_ms
        due = sorted(
            (h for h in self._pending if h.due_ms <= now),
            key=lambda h: (h.due_ms, h._seq),
        )
        self._pending = [h for h in self._pending if h.due_ms > now and not h.cancelled]

        ran = 0
        for handle in due:
            if handle.cancelled:
                continue
            handle.fired = True
            handle.callback()
            ran += 1
        return ran

    @property
    def pending(self) -> int:
        return sum(1 for h in self._pending if h.active)
