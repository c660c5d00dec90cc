"""Small general-purpose helpers: references, optional values and sequences."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key, reduce
from typing import Any, Callable, Generic, Hashable, Iterable, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class UnbelievableError(Exception):
    """Raised for a state that should never be reached."""


@dataclass
class Ref(Generic[T]):
    """A mutable box holding a single value."""

    value: T


def _deref(ref: Any) -> Any:
    return ref.value if isinstance(ref, Ref) else ref


def is_nil(value: Any) -> bool:
    """True when the value is absent."""
    return value is None


def make_ref(value: T) -> Ref[T]:
    """Wrap a value in a new reference."""
    return Ref(value)


def apply_if_not_nil(value: Any, apply: Callable[[Any], R]) -> R | None:
    """Call ``apply`` with the value unless it is absent."""
    if is_nil(value):
        return None
    return apply(value)


def apply_if_not_nil_default(value: Any, default_value: R, apply: Callable[[Any], R]) -> R:
    """Call ``apply`` with the referenced value, or return the default when absent."""
    if is_nil(value):
        return default_value
    return apply(_deref(value))


def or_default(ref: Any, default_value: T) -> T:
    """The referenced value, or the default when absent."""
    if is_nil(ref):
        return default_value
    return _deref(ref)


def ternary(what_if: bool, then: T, other: T) -> T:
    """Choose between two values."""
    return then if what_if else other


def ternary_func(what_if: bool, then: Callable[[], R], other: Callable[[], R]) -> R:
    """Call exactly one of two functions and return its result."""
    return then() if what_if else other()


def map_checked(items: Iterable[T], mapping_function: Callable[[T], R]) -> list[R]:
    """Map every item; an exception from the mapping aborts the whole result."""
    return [mapping_function(item) for item in items]


def map_simple(items: Iterable[T], mapping_function: Callable[[T], R]) -> list[R]:
    """Map every item."""
    return [mapping_function(item) for item in items]


def slice_unique(items: Iterable[Hashable]) -> list:
    """Distinct items, in order of first occurrence."""
    return list(dict.fromkeys(items))


def slice_sort(items: list[T], comp: Callable[[T, T], bool]) -> None:
    """Sort in place using a less-than predicate."""

    def _compare(a: T, b: T) -> int:
        if comp(a, b):
            return -1
        if comp(b, a):
            return 1
        return 0

    items.sort(key=cmp_to_key(_compare))


def slice_sum(items: Iterable[T], start: R, reducer: Callable[[R, T], R]) -> R:
    """Fold the items into a single value starting from ``start``."""
    return reduce(reducer, items, start)