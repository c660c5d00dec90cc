"""A value loaded on demand and cached for a fixed time."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class RefreshValueError(Exception):
    """The loader failed while refreshing the value."""

    def __init__(self, message: str, default_value: Any = None) -> None:
        super().__init__(message)
        self.default_value = default_value


class GetValueError(Exception):
    """The value was expired and could not be reloaded."""

    def __init__(self, message: str, default_value: Any = None) -> None:
        super().__init__(message)
        self.default_value = default_value


@dataclass
class PreloaderConfig:
    """Name and time-to-live of a preloaded value."""

    name: str
    ttl: timedelta


class Preloader(Generic[T]):
    """Caches the result of ``loader`` and reloads it once ``ttl`` has passed.

    Failures raise with the default value attached as ``default_value``.
    """

    def __init__(self, config: PreloaderConfig, default_value: T, loader: Callable[[], T]) -> None:
        self.name = config.name
        self.ttl = config.ttl
        self.default_value = default_value
        self._loader = loader
        self._current_value = default_value
        self.last_refresh_at = datetime.now() - config.ttl
        self._refreshed_at: float | None = None
        self._lock = threading.Lock()

    def _is_expired(self) -> bool:
        if self._refreshed_at is None:
            return True
        return time.monotonic() > self._refreshed_at + self.ttl.total_seconds()

    def value(self) -> T:
        """The cached value, refreshed first if it has expired."""
        if not self._is_expired():
            return self._current_value
        try:
            return self.refresh()
        except RefreshValueError as err:
            raise GetValueError(f"get value: {err}", self.default_value) from err

    def refresh(self) -> T:
        """Load a new value now and cache it."""
        with self._lock:
            try:
                new_value = self._loader()
            except Exception as err:
                raise RefreshValueError(f"refresh value: {err}", self.default_value) from err
            self._current_value = new_value
            self._refreshed_at = time.monotonic()
            self.last_refresh_at = datetime.now()
            return new_value