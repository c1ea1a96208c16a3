"""Fixed-capacity array, queue and stack."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class BoundedArray:
    """A list-like sequence that holds at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` at ``index`` (0 to ``len(self)`` inclusive)."""
        if len(self._items) == self.capacity:
            raise OverflowError("array is full, cannot insert element")
        if not 0 <= index <= len(self._items):
            raise IndexError(f"invalid index {index} for insertion")
        self._items.insert(index, value)

    def remove(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        self._check_index(index)
        return self._items.pop(index)

    def update(self, index: int, value: Any) -> Any:
        """Replace the element at ``index`` and return the old one."""
        self._check_index(index)
        old = self._items[index]
        self._items[index] = value
        return old

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"invalid index {index}")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._items[index]

    def __repr__(self) -> str:
        return f"BoundedArray(capacity={self.capacity}, items={self._items!r})"


class Queue:
    """A first-in, first-out queue with a fixed capacity."""

    def __init__(self, capacity: int = 10000) -> None:
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back; raise OverflowError if full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("the queue is full")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("the queue is empty")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise IndexError("the queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue(capacity={self.capacity}, items={list(self._items)!r})"


class Stack:
    """A last-in, first-out stack with a fixed capacity."""

    def __init__(self, capacity: int = 100) -> None:
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Push ``value``; raise OverflowError if the stack is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack(capacity={self.capacity}, items={self._items!r})"