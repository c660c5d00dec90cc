"""Health check that runs a trivial query against a database."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Protocol

_PROBE_QUERY = "SELECT 1"
_NO_ROW = object()


class QueryExecutor(Protocol):
    def query(self, sql: str, *args: Any) -> Iterable[Any]: ...


class Database(ABC):
    """A database that connects lazily and hands out query executors."""

    @abstractmethod
    def is_connected(self) -> bool:
        """Whether a connection has been established."""

    @abstractmethod
    def executor(self) -> QueryExecutor:
        """An executor for queries, connecting first if needed."""


class HealthcheckService:
    """Reports whether a database answers a probe query."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def is_ok(self) -> bool:
        """True when unconnected, or when the probe query returns a row."""
        if not self.database.is_connected():
            return True

        try:
            rows = self.database.executor().query(_PROBE_QUERY)
        except Exception:
            return False

        try:
            return next(iter(rows), _NO_ROW) is not _NO_ROW
        except Exception:
            return False
        finally:
            close = getattr(rows, "close", None)
            if callable(close):
                close()