"""Greedy fractional knapsack."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item with a positive weight and a value."""

    weight: float
    value: float

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError(f"item weight must be positive, got {self.weight}")

    @property
    def ratio(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


def fractional_knapsack(capacity: float, items: Iterable[Item]) -> float:
    """Return the largest value that fits in ``capacity``, splitting items.

    Items are taken whole in decreasing order of value per weight; the first
    item that does not fit is taken in part and the filling stops there.
    """
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    remaining = capacity
    total = 0.0
    for item in sorted(items, key=lambda it: it.ratio, reverse=True):
        if remaining == 0:
            break
        if item.weight <= remaining:
            total += item.value
            remaining -= item.weight
        else:
            total += item.ratio * remaining
            break
    return total