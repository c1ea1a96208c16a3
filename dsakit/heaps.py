"""A binary max-heap."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class MaxHeap:
    """A binary max-heap kept in a list, largest value at the root."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._heap: list[Any] = []
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Add ``value`` and restore the heap property."""
        self._heap.append(value)
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> Any:
        """Remove and return the largest value; raise IndexError if empty."""
        if not self._heap:
            raise IndexError("pop from an empty heap")
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> Any:
        """Return the largest value without removing it."""
        if not self._heap:
            raise IndexError("peek at an empty heap")
        return self._heap[0]

    def drain(self) -> Iterator[Any]:
        """Pop and yield every value, largest first, leaving the heap empty."""
        while self._heap:
            yield self.pop()

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index] > heap[parent]:
                heap[index], heap[parent] = heap[parent], heap[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and heap[child] > heap[largest]:
                    largest = child
            if largest == index:
                break
            heap[index], heap[largest] = heap[largest], heap[index]
            index = largest

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values in their storage (level) order."""
        return iter(list(self._heap))

    def __repr__(self) -> str:
        return f"MaxHeap({self._heap!r})"