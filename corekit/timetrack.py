"""Measure elapsed wall-clock time between two instants."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta


@dataclass
class TimeTracker:
    """Records its start on creation and its end when finished."""

    start: datetime = field(default_factory=datetime.now)
    end: datetime | None = None

    def finish(self) -> timedelta:
        """Mark the end instant and return the elapsed time."""
        self.end = datetime.now()
        return self.duration()

    def duration(self) -> timedelta:
        """Elapsed time between start and end; zero while unfinished."""
        if self.end is None:
            return timedelta(0)
        return self.end - self.start