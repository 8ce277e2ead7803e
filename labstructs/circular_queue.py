"""A growable FIFO queue on a ring buffer whose front may drift."""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_CAPACITY = 3


class CircularQueue:
    """FIFO queue over a fixed ring of slots.

    Dequeuing advances the front index instead of shifting elements.
    Enqueuing into a full queue doubles the capacity and moves the
    elements so that the front lands on slot 0 again.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, fill: int | None = None) -> None:
        """Create an empty queue, or a full one when ``fill`` is given."""
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        if fill is None:
            self._slots: list[int | None] = [None] * capacity
            self._front = self._back = -1
            self._size = 0
        else:
            self._slots = [fill] * capacity
            self._front, self._back = 0, capacity - 1
            self._size = capacity

    def _is_full(self) -> bool:
        return self._size == self._capacity

    def _grow(self) -> None:
        items = list(self)
        self._capacity *= 2
        self._slots = items + [None] * (self._capacity - len(items))
        self._front = 0
        self._back = len(items) - 1

    def enqueue(self, value: int) -> None:
        """Insert ``value`` at the back, doubling the capacity if full."""
        if self._is_full():
            self._grow()
        if self._front == -1:
            self._front = self._back = 0
        else:
            self._back = (self._back + 1) % self._capacity
        self._slots[self._back] = value
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the front element."""
        if self._front == -1:
            raise IndexError("queue is already empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._back:
            self._front = self._back = -1
        else:
            self._front = (self._front + 1) % self._capacity
        self._size -= 1
        return value  # type: ignore[return-value]

    def is_empty(self) -> bool:
        """Return True when the queue holds no elements."""
        return self._front == -1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        start, capacity = self._front, self._capacity
        snapshot = [self._slots[(start + offset) % capacity] for offset in range(self._size)]
        return iter(snapshot)  # type: ignore[arg-type]

    def capacity(self) -> int:
        """Return the number of slots in the ring."""
        return self._capacity

    def front(self) -> int:
        """Return the slot index of the front element, or -1 when empty."""
        return self._front

    def back(self) -> int:
        """Return the slot index of the back element, or -1 when empty."""
        return self._back

    def render(self) -> str:
        """Return the queue drawn as ``| a | b | ``, or ``[x]`` when empty."""
        if self.is_empty():
            return "[x]"
        return "| " + "".join(f"{item} | " for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self._capacity})"