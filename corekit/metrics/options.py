"""Tuning options for histogram and summary metrics."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass
class HistogramOptions:
    """Bucket layout and native-histogram settings; zero values mean driver defaults."""

    buckets: list[float] | None = None
    native_histogram_bucket_factor: float = 0.0
    native_histogram_zero_threshold: float = 0.0
    native_histogram_max_bucket_number: int = 0
    native_histogram_min_reset_duration: timedelta = timedelta(0)
    native_histogram_max_zero_threshold: float = 0.0
    native_histogram_max_exemplars: int = 0
    native_histogram_exemplar_ttl: timedelta = timedelta(0)


@dataclass
class SummaryOptions:
    """Quantile objectives and sliding-window settings; zero values mean driver defaults."""

    objectives: dict[float, float] | None = None
    max_age: timedelta = timedelta(0)
    age_buckets: int = 0
    buf_cap: int = 0