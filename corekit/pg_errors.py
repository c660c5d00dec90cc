"""Classify PostgreSQL errors as business results or availability problems."""

from __future__ import annotations

import asyncio
import concurrent.futures
from typing import Iterator

_CANCELLED = (asyncio.CancelledError, concurrent.futures.CancelledError)

# Whole SQLSTATE classes that describe the request, not the server's health:
# 22 data exception, 23 integrity constraint violation, 42 syntax or access rule.
_IGNORED_CLASSES = frozenset({"22", "23", "42"})
# Transaction rollbacks that a retry resolves: serialization failure, deadlock.
_IGNORED_CODES = frozenset({"40001", "40P01"})


class PgError(Exception):
    """An error reported by the PostgreSQL server, identified by its SQLSTATE code."""

    def __init__(self, code: str, message: str = "", severity: str = "ERROR") -> None:
        super().__init__(f"{severity}: {message} (SQLSTATE {code})")
        self.code = code
        self.message = message
        self.severity = severity


class NoRowsError(LookupError):
    """A query that had to return a row returned none."""

    def __init__(self, message: str = "no rows") -> None:
        super().__init__(message)


def _chain(err: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def _should_ignore_pg_error(err: PgError) -> bool:
    code = err.code or ""
    if len(code) < 2:
        return False
    return code[:2] in _IGNORED_CLASSES or code in _IGNORED_CODES


def should_ignore_error_for_circuit_breaker(err: BaseException | None) -> bool:
    """True for errors that are expected query outcomes rather than database outages."""
    if err is None:
        return False

    links = list(_chain(err))

    if any(isinstance(link, (NoRowsError, *_CANCELLED)) for link in links):
        return True

    pg_error = next((link for link in links if isinstance(link, PgError)), None)
    if pg_error is not None:
        return _should_ignore_pg_error(pg_error)

    return False