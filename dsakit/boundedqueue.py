"""A first-in first-out queue with a fixed capacity."""

from __future__ import annotations

from collections import deque
from typing import Iterator


class QueueFullError(Exception):
    """Raised when an item is added to a full queue."""


class QueueEmptyError(Exception):
    """Raised when an item is taken from an empty queue."""


class BoundedQueue:
    """A queue that holds at most capacity items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[int] = deque()

    def enqueue(self, item: int) -> None:
        """Add item at the rear."""
        if len(self._items) == self.capacity:
            raise QueueFullError("Queue is full")
        self._items.append(item)

    def dequeue(self) -> int:
        """Remove and return the front item."""
        if not self._items:
            raise QueueEmptyError("Queue is empty")
        return self._items.popleft()

    def front(self) -> int:
        """Return the front item without removing it."""
        if not self._items:
            raise QueueEmptyError("Queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def format(self) -> str:
        """Render the items front to rear, each followed by an arrow."""
        return "".join(f" {item} <-- " for item in self._items)