"""Finding the smallest and largest values of a sequence."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def min_max(values: Iterable[Any]) -> tuple[Any, Any]:
    """Return ``(minimum, maximum)`` of ``values``.

    Raises ValueError if ``values`` is empty.
    """
    items = list(values)
    if not items:
        raise ValueError("min_max() of an empty sequence")
    return min(items), max(items)


def min_max_dac(values: Iterable[Any]) -> tuple[Any, Any]:
    """Return ``(minimum, maximum)`` by divide and conquer.

    Raises ValueError if ``values`` is empty.
    """
    items = list(values)
    if not items:
        raise ValueError("min_max_dac() of an empty sequence")
    return _divide(items)


def _divide(items: Sequence[Any]) -> tuple[Any, Any]:
    if len(items) == 1:
        return items[0], items[0]
    if len(items) == 2:
        first, second = items
        return (first, second) if first < second else (second, first)
    mid = (len(items) + 1) // 2
    left_min, left_max = _divide(items[:mid])
    right_min, right_max = _divide(items[mid:])
    return (
        left_min if left_min < right_min else right_min,
        left_max if left_max > right_max else right_max,
    )