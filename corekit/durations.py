"""Helpers for working with time spans."""

from __future__ import annotations

from datetime import timedelta
from typing import Iterable

_MILLISECOND = timedelta(milliseconds=1)
_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE
_MS_PER_DAY = 24 * _MS_PER_HOUR


def max_duration(*durations: timedelta) -> timedelta:
    """The longest of the given spans, or zero when none are given."""
    return max_duration_slice(durations)


def max_duration_slice(durations: Iterable[timedelta]) -> timedelta:
    """The longest span in the collection, or zero when it is empty."""
    return max(durations, default=timedelta(0))


def format_duration(duration: timedelta) -> str:
    """Render a span as e.g. ``1d 2h 30m 45s 123ms``; zero or negative gives ``0ms``."""
    remaining = max(duration // _MILLISECOND, 0)

    parts = []
    for unit_ms, suffix in (
        (_MS_PER_DAY, "d"),
        (_MS_PER_HOUR, "h"),
        (_MS_PER_MINUTE, "m"),
        (_MS_PER_SECOND, "s"),
        (1, "ms"),
    ):
        count, remaining = divmod(remaining, unit_ms)
        if count > 0:
            parts.append(f"{count}{suffix}")

    return " ".join(parts) if parts else "0ms"