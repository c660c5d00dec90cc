# corekit

Building blocks for backend services. The package has metric abstractions,
a value preloader with a TTL cache, file storage with pluggable providers,
filters that decide which PostgreSQL and Redis errors a circuit breaker
should count, a small Redis client, database value types, and a set of
small utilities.

## Installation

```
pip install corekit
```

To install the test dependencies and run the tests:

```
pip install "corekit[test]"
pytest
```

## Utilities

- `corekit.helpers`: `Ref` and `make_ref` (a mutable box), `is_nil`,
  `or_default`, `ternary`, `ternary_func`, `apply_if_not_nil`,
  `apply_if_not_nil_default`, `map_checked`, `map_simple`,
  `slice_unique` (keeps the order of first occurrence), `slice_sort` (sorts
  in place with a less-than predicate), `slice_sum`, and the
  `UnbelievableError` exception.
- `corekit.mathutil`: `round_float64_to_precision` (halves round away from
  zero), `mat3_to_quaternion`, `quaternion_to_mat3`, and `new_point`, which
  returns a `Point(lon, lat)` named tuple.
- `corekit.codec`: `gzip_bytes`, `gunzip_bytes` (raises `ValueError` on bad
  input), `sha1_hex`, and `unmarshal_json_to_id`. The last one accepts a
  JSON UUID string or a JSON array of 16 bytes. On failure it raises
  `UnmarshalStringError`, `UnmarshalByteArrayError` or `UnmarshalError`,
  and the error carries the given default in its `default_value`
  attribute.
- `corekit.durations`: `max_duration`, `max_duration_slice` (both return
  zero when given nothing), and `format_duration`.
- `corekit.files`: `file_exists`, which returns an `os.stat_result` or
  `None`, and `copy_file`.
- `corekit.imaging`: `resize_image`, where a zero width or height keeps the
  aspect ratio, and `remove_image_alpha_channel`, which returns an opaque
  RGBA copy.
- `corekit.timetrack`: `TimeTracker`, which records `start` when it is
  created, sets `end` on `finish()`, and gives the elapsed time from
  `duration()`.

```python
from datetime import timedelta
from corekit.durations import format_duration
from corekit.codec import gzip_bytes, gunzip_bytes, sha1_hex

format_duration(timedelta(hours=1, minutes=45))   # "1h 45m"
gunzip_bytes(gzip_bytes(b"hello")) == b"hello"    # True
sha1_hex(b"abc")  # "a9993e364706816aba3e25717850c26c9cd0d89d"
```

## Metrics

`corekit.metrics` describes metrics without tying them to any backend.

- `description.MetricDescription` holds a name, namespace, subsystem, help
  text and constant labels. Its `with_*` methods change the description in
  place and return it.
- `options.HistogramOptions` and `options.SummaryOptions` hold the backend
  settings.
- `metric.Counter`, `Gauge`, `Histogram` and `Summary` pass each call on to
  an implementation object. `MetricType` names the kinds of metric.
- `timer.Timer` reports to its observer the whole milliseconds that have
  passed since the timer was created.
- `manager.Driver` is the abstract backend. `manager.MetricsManager`
  passes every call on to a driver.

## Preloader

`corekit.preloader.Preloader` caches the result of a loader function. It
calls the loader again once the `ttl` from `PreloaderConfig` has passed.
`refresh()` loads a new value straight away. `value()` returns the cached
value, or refreshes it first if it has expired. If loading fails,
`refresh()` raises `RefreshValueError` and `value()` raises
`GetValueError`. Both errors carry the preloader's default in
`default_value`, and the last good value stays cached.

## Storage

`corekit.storage.service.Storage` and `LocalStorage` work on top of a
`Provider` from `corekit.storage.base`. Any failure in a provider is raised
as a `StorageError` that names the operation that failed. In
`corekit.storage.providers`:

- `OsProvider` keeps files under a directory on the local disk. It does not
  support `compose`.
- `NoUrlProvider` builds public URLs by putting a fixed prefix in front of
  the path.

```python
import io
from corekit.storage.service import LocalStorage
from corekit.storage.providers import OsProvider, NoUrlProvider

with LocalStorage(OsProvider("/tmp/files"), NoUrlProvider("https://cdn.example.com/")) as storage:
    storage.write("a/b.txt", io.BytesIO(b"data"))
    storage.get_public_url("a/b.txt")  # "https://cdn.example.com/a/b.txt"
```

## PostgreSQL and Redis helpers

- `corekit.pg_errors.should_ignore_error_for_circuit_breaker` returns true
  for `NoRowsError`, for cancellation, and for `PgError` codes in SQLSTATE
  classes 22, 23 and 42, as well as codes 40001 and 40P01. It looks through
  the whole chain of causes.
- `corekit.redis_errors.should_ignore_error_for_circuit_breaker` returns
  true for `KeyNotFoundError`, for cancellation, and for WRONGTYPE, NOAUTH,
  WRONGPASS and NOPERM errors.
- `corekit.pg_config.DatabaseConfig` builds a `postgres://` DSN with
  `dsn()` and a string of `key=value` pairs with `params_url()`.
- `corekit.pg_query` has `PlainSql`, `table_alias`, `carry_tx_func`,
  `carry_dao_func` and `carry_tx_factory`.
- `corekit.pg_types` has `SqlNull` and `new_sql_null`, `Json` (stored as
  JSON bytes), `Slice`, `Geometry` (read as hex WKB and written as WKT),
  `scan_typed_id_uuid`, `scan_typed_id_str` and `render_sql_driver_value`.
  Bad input raises `ScanError`.
- `corekit.redis_client.Client` connects to Redis the first time it is
  used. It can find the master through Sentinel. It offers `set_key`,
  `get_string`, `is_connected` and `close`. `set_json` and `get_json`
  store and load JSON values. You can pass any object with an
  `execute(fn)` method as the circuit breaker.
- `corekit.pg_health.HealthcheckService` and
  `corekit.redis_client.HealthcheckService` report healthy when nothing is
  connected yet. Otherwise they run a probe against the backend.

## What is not included

- There is no metrics backend. You supply your own `Driver`.
- There is no PostgreSQL client, connection pool or query runner.
  `pg_health.Database` is an abstract interface for you to implement.
- There is no circuit breaker. The error filters only decide which errors
  one should count.