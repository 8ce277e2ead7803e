"""A growable FIFO queue whose front element always sits at index 0."""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_CAPACITY = 3


class BoundedQueue:
    """FIFO queue that shifts its elements down on every dequeue.

    The front element never drifts away from position 0. Enqueuing into
    a full queue doubles its capacity first.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, fill: int | None = None) -> None:
        """Create an empty queue, or a full one when ``fill`` is given."""
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[int] = [] if fill is None else [fill] * capacity

    def enqueue(self, value: int) -> None:
        """Append ``value`` at the back, doubling the capacity if full."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the front element, shifting the rest down."""
        if not self._items:
            raise IndexError("queue is already empty")
        return self._items.pop(0)

    def is_empty(self) -> bool:
        """Return True when the queue holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def capacity(self) -> int:
        """Return the number of slots currently allocated."""
        return self._capacity

    def front(self) -> int:
        """Return the index of the front element, or -1 when empty."""
        return 0 if self._items else -1

    def back(self) -> int:
        """Return the index of the back element, or -1 when empty."""
        return len(self._items) - 1

    def render(self) -> str:
        """Return the queue drawn as ``| a | b | ``, or ``[x]`` when empty."""
        if not self._items:
            return "[x]"
        return "| " + "".join(f"{item} | " for item in self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r}, capacity={self._capacity})"