"""Metric wrappers that pair a description with a driver-specific implementation."""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol

from corekit.metrics.description import MetricDescription
from corekit.metrics.options import HistogramOptions, SummaryOptions


class MetricType(str, Enum):
    """Kinds of metric."""

    COUNTER = "counter"
    GAUGE = "gauge"
    HISTOGRAM = "histogram"
    SUMMARY = "summary"


class CounterImplementation(Protocol):
    def inc(self) -> None: ...

    def add(self, value: float) -> None: ...


class GaugeImplementation(Protocol):
    def set(self, value: float) -> None: ...

    def inc(self) -> None: ...

    def dec(self) -> None: ...

    def add(self, value: float) -> None: ...

    def sub(self, value: float) -> None: ...

    def set_to_current_time(self) -> None: ...


class ObserverImplementation(Protocol):
    def observe(self, value: float) -> None: ...


class Metric:
    """A metric of some type, its description and the object that records values."""

    def __init__(self, metric_type: MetricType, description: MetricDescription, implementation: Any) -> None:
        self.metric_type = metric_type
        self.description = description
        self.implementation = implementation

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description.name!r})"


class Counter(Metric):
    """A monotonically increasing value."""

    def __init__(self, description: MetricDescription, implementation: CounterImplementation) -> None:
        super().__init__(MetricType.COUNTER, description, implementation)

    def inc(self) -> None:
        """Increase by one."""
        self.implementation.inc()

    def add(self, value: float) -> None:
        """Increase by ``value``."""
        self.implementation.add(value)


class Gauge(Metric):
    """A value that can go up and down."""

    def __init__(self, description: MetricDescription, implementation: GaugeImplementation) -> None:
        super().__init__(MetricType.GAUGE, description, implementation)

    def set(self, value: float) -> None:
        """Set to ``value``."""
        self.implementation.set(value)

    def inc(self) -> None:
        """Increase by one."""
        self.implementation.inc()

    def dec(self) -> None:
        """Decrease by one."""
        self.implementation.dec()

    def add(self, value: float) -> None:
        """Increase by ``value``."""
        self.implementation.add(value)

    def sub(self, value: float) -> None:
        """Decrease by ``value``."""
        self.implementation.sub(value)

    def set_to_current_time(self) -> None:
        """Set to the current Unix time."""
        self.implementation.set_to_current_time()


class Histogram(Metric):
    """Observations sorted into buckets."""

    def __init__(
        self,
        description: MetricDescription,
        options: HistogramOptions,
        implementation: ObserverImplementation,
    ) -> None:
        super().__init__(MetricType.HISTOGRAM, description, implementation)
        self.options = options

    def observe(self, value: float) -> None:
        """Record one observation."""
        self.implementation.observe(value)


class Summary(Metric):
    """Observations summarised into quantiles."""

    def __init__(
        self,
        description: MetricDescription,
        options: SummaryOptions,
        implementation: ObserverImplementation,
    ) -> None:
        super().__init__(MetricType.SUMMARY, description, implementation)
        self.options = options

    def observe(self, value: float) -> None:
        """Record one observation."""
        self.implementation.observe(value)