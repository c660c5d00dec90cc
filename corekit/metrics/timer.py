"""Measure an interval and report it, in whole milliseconds, to an observer."""

from __future__ import annotations

import time
from typing import Protocol


class Observer(Protocol):
    def observe(self, value: float) -> None: ...


class Timer:
    """Starts on creation; each ``observe`` reports milliseconds since then."""

    def __init__(self, observer: Observer) -> None:
        self.observer = observer
        self._started_at = time.monotonic()

    def observe(self) -> None:
        """Report the whole milliseconds elapsed since the timer was created."""
        elapsed_ms = int((time.monotonic() - self._started_at) * 1000)
        self.observer.observe(float(elapsed_ms))