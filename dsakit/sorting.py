"""Merge sort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Merge two sorted sequences into one sorted list.

    On ties the element from ``left`` comes first, so the merge is stable.
    """
    merged: list[Any] = []
    left_iter, right_iter = iter(left), iter(right)
    sentinel = object()
    a = next(left_iter, sentinel)
    b = next(right_iter, sentinel)
    while a is not sentinel and b is not sentinel:
        if a <= b:
            merged.append(a)
            a = next(left_iter, sentinel)
        else:
            merged.append(b)
            b = next(right_iter, sentinel)
    if a is not sentinel:
        merged.append(a)
        merged.extend(left_iter)
    if b is not sentinel:
        merged.append(b)
        merged.extend(right_iter)
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` in ascending order."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return merge(merge_sort(items[:mid]), merge_sort(items[mid:]))