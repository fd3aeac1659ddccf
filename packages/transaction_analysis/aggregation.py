"""Generic single-pass reductions shared by the aggregators.

Each helper takes plain callables for key/value extraction so new categories
or roles never need their own branch.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any


def is_real_number(value: Any) -> bool:
    """Return True for real numbers, excluding ``bool``."""

    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    """Return True for real numbers that are finite as a ``float``.

    Infinities, NaN and integers too large for a float are rejected.
    """

    if not is_real_number(value):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def is_record_sequence(value: Any) -> bool:
    """Return True for list-like inputs; strings and bytes do not count."""

    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def to_float(x: Any) -> float:
    """Convert a real number to ``float``, saturating to an infinity on overflow."""

    try:
        return float(x)
    except OverflowError:
        return math.inf if x > 0 else -math.inf


def add_amounts(a: Any, b: Any) -> Any:
    """Return ``a + b``, degrading to float arithmetic on overflow.

    An ``int`` total past the float range cannot be added to a ``float``; the
    result then saturates to an infinity instead of raising.
    """

    try:
        return a + b
    except OverflowError:
        return to_float(a) + to_float(b)


def total(values: Iterable[Any]) -> Any:
    """Sum ``values`` with :func:`add_amounts`; an empty input gives ``0``."""

    result: Any = 0
    for v in values:
        result = add_amounts(result, v)
    return result


@dataclass(frozen=True, slots=True)
class UnhashableKey:
    """Grouping key standing in for an unhashable value such as a list.

    Two keys are equal only when both values had the same type and text, so a
    list category never merges with a string that happens to print the same.
    """

    type_name: str
    text: str

    def __str__(self) -> str:
        return f"{self.type_name}:{self.text}"


def group_key(value: Any) -> Hashable:
    """Return ``value`` itself when hashable, else an :class:`UnhashableKey`."""

    try:
        hash(value)
    except TypeError:
        return UnhashableKey(type(value).__name__, str(value))
    return value


def sum_by_key(
    items: Iterable[Any],
    key: Callable[[Any], Hashable],
    value: Callable[[Any], Any],
) -> dict[Hashable, Any]:
    """Accumulate ``value(item)`` per ``key(item)`` in first-encounter order."""

    totals: dict[Hashable, Any] = {}
    for item in items:
        k = key(item)
        if k in totals:
            totals[k] = add_amounts(totals[k], value(item))
        else:
            totals[k] = value(item)
    return totals


def count_by_key(items: Iterable[Any], key: Callable[[Any], Hashable]) -> dict[Hashable, int]:
    """Count items per ``key(item)`` in first-encounter order."""

    return sum_by_key(items, key, lambda _item: 1)


def first_max_by(items: Iterable[Any], value: Callable[[Any], Any]) -> Any:
    # ``max`` keeps the first of several equal maxima.
    return max(items, key=value)


def first_min_by(items: Iterable[Any], value: Callable[[Any], Any]) -> Any:
    return min(items, key=value)


def _sort_key(value: Any) -> tuple[int, str, str]:
    # Strings first in plain string order, then other values grouped by type,
    # then missing values.
    if value is None:
        return (2, "", "")
    if isinstance(value, str):
        return (0, "", value)
    return (1, type(value).__name__, str(value))


def _same_run(a: Any, b: Any) -> bool:
    return _sort_key(a) == _sort_key(b) and a == b


def most_frequent_sorted(values: Iterable[Any]) -> Any:
    """Return the most frequent value, breaking ties by sorted order.

    The values are sorted and scanned for the longest run of equal entries.
    Only a strictly longer run replaces the current best, so among values with
    the same count the one that sorts first wins (``["Zara", "Amit", "Zara",
    "Amit"]`` gives ``"Amit"``). Values of different types never share a run,
    so ``1`` and ``"1"`` are counted apart. Returns ``None`` for an empty input.
    """

    ordered = sorted(values, key=_sort_key)
    if not ordered:
        return None

    best_value = ordered[0]
    best_len = 0
    run_start = 0
    for i in range(1, len(ordered) + 1):
        if i < len(ordered) and _same_run(ordered[i], ordered[run_start]):
            continue
        run_len = i - run_start
        if run_len > best_len:
            best_value, best_len = ordered[run_start], run_len
        run_start = i
    return best_value


def _to_decimal(x: Any) -> Decimal:
    if isinstance(x, (int, float, Decimal)):
        return Decimal(x)
    return Decimal(float(x))


def rounded_mean(values: Sequence[Any]) -> int:
    """Return the mean of ``values`` rounded half away from zero.

    ``values`` must be non-empty and finite. When the total overflows to
    infinity the mean is taken as a sum of shares instead.
    """

    mean = total(values) / len(values)
    if isinstance(mean, float) and math.isinf(mean):
        mean = total(v / len(values) for v in values)
    return round_half_away_from_zero(mean)


def round_half_away_from_zero(x: Any) -> int:
    """Round to the nearest integer; exact halves move away from zero."""

    return int(_to_decimal(x).to_integral_value(rounding=ROUND_HALF_UP))


__all__ = [
    "UnhashableKey",
    "add_amounts",
    "count_by_key",
    "first_max_by",
    "first_min_by",
    "group_key",
    "is_finite_number",
    "is_real_number",
    "is_record_sequence",
    "most_frequent_sorted",
    "round_half_away_from_zero",
    "rounded_mean",
    "sum_by_key",
    "to_float",
    "total",
]
