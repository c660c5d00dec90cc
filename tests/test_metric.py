import pytest

from corekit.metrics.description import MetricDescription
from corekit.metrics.metric import Counter, Gauge, Histogram, MetricType, Summary
from corekit.metrics.options import HistogramOptions, SummaryOptions


class Recorder:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        def record(*args):
            self.calls.append((name, *args))

        return record


@pytest.mark.parametrize(
    "member, text",
    [
        (MetricType.COUNTER, "counter"),
        (MetricType.GAUGE, "gauge"),
        (MetricType.HISTOGRAM, "histogram"),
        (MetricType.SUMMARY, "summary"),
    ],
)
def test_metric_type_values(member, text):
    assert member.value == text
    assert MetricType(text) is member


def test_counter_delegates():
    impl = Recorder()
    description = MetricDescription("c")
    counter = Counter(description, impl)
    counter.inc()
    counter.add(2.5)
    assert impl.calls == [("inc",), ("add", 2.5)]
    assert counter.metric_type is MetricType.COUNTER
    assert counter.description is description
    assert counter.implementation is impl


def test_gauge_delegates_every_operation():
    impl = Recorder()
    gauge = Gauge(MetricDescription("g"), impl)
    gauge.set(1.0)
    gauge.inc()
    gauge.dec()
    gauge.add(3.0)
    gauge.sub(0.5)
    gauge.set_to_current_time()
    assert impl.calls == [
        ("set", 1.0),
        ("inc",),
        ("dec",),
        ("add", 3.0),
        ("sub", 0.5),
        ("set_to_current_time",),
    ]
    assert gauge.metric_type is MetricType.GAUGE


def test_histogram_keeps_options_and_observes():
    impl = Recorder()
    options = HistogramOptions(buckets=[0.1, 1.0])
    histogram = Histogram(MetricDescription("h"), options, impl)
    histogram.observe(0.7)
    assert impl.calls == [("observe", 0.7)]
    assert histogram.options is options
    assert histogram.metric_type is MetricType.HISTOGRAM


def test_summary_keeps_options_and_observes():
    impl = Recorder()
    options = SummaryOptions(objectives={0.5: 0.05})
    summary = Summary(MetricDescription("s"), options, impl)
    summary.observe(4.0)
    assert impl.calls == [("observe", 4.0)]
    assert summary.options.objectives == {0.5: 0.05}
    assert summary.metric_type is MetricType.SUMMARY


def test_option_defaults_are_empty():
    histogram_options = HistogramOptions()
    summary_options = SummaryOptions()
    assert histogram_options.buckets is None
    assert histogram_options.native_histogram_max_bucket_number == 0
    assert summary_options.objectives is None
    assert summary_options.age_buckets == 0