"""Classify Redis errors as business results or availability problems."""

from __future__ import annotations

import asyncio
import concurrent.futures
from typing import Iterator

_CANCELLED = (asyncio.CancelledError, concurrent.futures.CancelledError)


class KeyNotFoundError(LookupError):
    """The requested key does not exist."""

    def __init__(self, message: str = "redis: nil") -> None:
        super().__init__(message)


class ClientClosedError(ConnectionError):
    """The client has been closed."""

    def __init__(self, message: str = "redis: client is closed") -> None:
        super().__init__(message)


def _chain(err: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def should_ignore_error_for_circuit_breaker(err: BaseException | None) -> bool:
    """True for errors that reflect application logic rather than Redis availability."""
    if err is None:
        return False

    for link in _chain(err):
        if isinstance(link, KeyNotFoundError):
            return True
        if isinstance(link, _CANCELLED):
            return True

    message = str(err)

    if "WRONGTYPE" in message:
        return True

    if "NOAUTH" in message or "WRONGPASS" in message or "NOPERM" in message:
        return True

    # Closed clients, cluster failover states (READONLY, MASTERDOWN, CLUSTERDOWN,
    # LOADING), exhausted client slots and everything else are availability issues.
    return False