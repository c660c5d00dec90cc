"""Metrics drivers and the manager that delegates to one."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from corekit.metrics.description import MetricDescription
from corekit.metrics.metric import Counter, Gauge, Histogram, Metric, Summary
from corekit.metrics.options import HistogramOptions, SummaryOptions
from corekit.metrics.timer import Observer, Timer


class Driver(ABC):
    """A metrics backend that creates, registers and gathers metrics."""

    @abstractmethod
    def register(self, *metrics: Metric) -> None:
        """Register metrics; raises when one cannot be registered."""

    @abstractmethod
    def gather(self) -> list[Any]:
        """Collect the current state of every registered metric."""

    @abstractmethod
    def new_counter(self, description: MetricDescription) -> Counter:
        """Create a counter."""

    @abstractmethod
    def new_gauge(self, description: MetricDescription) -> Gauge:
        """Create a gauge."""

    @abstractmethod
    def new_histogram(self, description: MetricDescription, options: HistogramOptions) -> Histogram:
        """Create a histogram."""

    @abstractmethod
    def new_summary(self, description: MetricDescription, options: SummaryOptions) -> Summary:
        """Create a summary."""

    def new_timer(self, observer: Observer) -> Timer:
        """Create a timer that reports to ``observer``."""
        return Timer(observer)


class MetricsManager:
    """Front end for metrics that forwards every call to its driver."""

    def __init__(self, driver: Driver) -> None:
        self.driver = driver

    def register(self, *metrics: Metric) -> None:
        """Register metrics with the driver."""
        self.driver.register(*metrics)

    def gather(self) -> list[Any]:
        """Collect the current state from the driver."""
        return self.driver.gather()

    def new_counter(self, description: MetricDescription) -> Counter:
        """Create a counter through the driver."""
        return self.driver.new_counter(description)

    def new_gauge(self, description: MetricDescription) -> Gauge:
        """Create a gauge through the driver."""
        return self.driver.new_gauge(description)

    def new_histogram(self, description: MetricDescription, options: HistogramOptions) -> Histogram:
        """Create a histogram through the driver."""
        return self.driver.new_histogram(description, options)

    def new_summary(self, description: MetricDescription, options: SummaryOptions) -> Summary:
        """Create a summary through the driver."""
        return self.driver.new_summary(description, options)

    def new_timer(self, observer: Observer) -> Timer:
        """Create a timer through the driver."""
        return self.driver.new_timer(observer)