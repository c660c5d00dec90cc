"""Static description of a metric: name, grouping, help text and constant labels."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping


@dataclass
class MetricDescription:
    """Describes a metric; the ``with_*`` methods update it in place and return it."""

    name: str
    namespace: str = ""
    subsystem: str = ""
    help: str = ""
    labels: dict[str, str] = field(default_factory=dict)

    def with_namespace(self, namespace: str) -> MetricDescription:
        """Set the namespace."""
        self.namespace = namespace
        return self

    def with_subsystem(self, subsystem: str) -> MetricDescription:
        """Set the subsystem."""
        self.subsystem = subsystem
        return self

    def with_help(self, help: str) -> MetricDescription:  # noqa: A002
        """Set the help text."""
        self.help = help
        return self

    def with_label(self, key: str, value: str) -> MetricDescription:
        """Add or replace one constant label."""
        self.labels[key] = value
        return self

    def with_labels(self, labels: Mapping[str, str]) -> MetricDescription:
        """Copy every given label into this description, replacing existing keys."""
        self.labels.update(labels)
        return self