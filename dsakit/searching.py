"""Searching in sequences of comparable values."""

from __future__ import annotations

import argparse
from bisect import bisect_left
from collections.abc import Iterable, Sequence
from typing import Any

BINARY_SAMPLE: tuple[int, ...] = (10, 4, 45, 34, 6, 3)
LINEAR_SAMPLE: tuple[int, ...] = (1, 2, 5, 6, 7, 8)


def binary_search(values: Iterable[Any], target: Any) -> bool:
    """Return True if ``target`` occurs in ``values``.

    The values are sorted first (into a new list), then searched by bisection.
    """
    ordered = sorted(values)
    position = bisect_left(ordered, target)
    return position < len(ordered) and ordered[position] == target


def linear_search(values: Sequence[Any], target: Any) -> int:
    """Return the index of the first occurrence of ``target``, or -1."""
    return next(
        (index for index, value in enumerate(values) if value == target), -1
    )


def main(argv: list[str] | None = None) -> int:
    """Look a key up in a small built-in sample and report the outcome."""
    parser = argparse.ArgumentParser(
        prog="dsakit-search",
        description="Search a built-in sample of integers for a key.",
    )
    parser.add_argument("key", nargs="?", type=int, help="the key to look for")
    parser.add_argument(
        "--linear",
        action="store_true",
        help="search linearly and print the index found (-1 if absent)",
    )
    args = parser.parse_args(argv)

    key = args.key
    if key is None:
        try:
            key = int(input("Enter the key: "))
        except (ValueError, EOFError):
            parser.error("the key must be an integer")

    if args.linear:
        print(linear_search(LINEAR_SAMPLE, key))
    elif binary_search(BINARY_SAMPLE, key):
        print("Key found!")
    else:
        print("Key not found.")
    return 0