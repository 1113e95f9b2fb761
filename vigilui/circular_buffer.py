"""A fixed-capacity ring buffer that overwrites its oldest entry when full."""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 32


class CircularBuffer(Generic[T]):
    """Ring buffer backed by a fixed number of slots.

    One slot is always kept free to tell a full buffer from an empty one,
    so the buffer starts overwriting its oldest entry once ``capacity - 1``
    values are held.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._data: List[Optional[T]] = [None] * capacity
        self._head = 0
        self._tail = 0
        self._size = 0
        self._capacity = capacity

    def __getitem__(self, index: int) -> Optional[T]:
        """Return the raw slot at ``index``, regardless of head and tail."""
        return self._data[index]

    def __len__(self) -> int:
        return self._size

    def push(self, value: T) -> None:
        """Append ``value``, dropping the oldest entry if the buffer is full."""
        self._data[self._tail] = value
        if self.is_full():
            self._head = (self._head + 1) % self._capacity
        self._tail = (self._tail + 1) % self._capacity
        if self._size < self._capacity:
            self._size += 1

    def pop(self) -> None:
        """Drop the oldest entry."""
        if self.is_empty():
            raise IndexError("pop from an empty circular buffer")
        self._head = (self._head + 1) % self._capacity
        if self._size > 0:
            self._size -= 1

    def clear(self) -> None:
        """Remove every entry."""
        self._head = 0
        self._tail = 0
        self._size = 0

    def capacity(self) -> int:
        """Number of slots in the buffer."""
        return self._capacity

    def is_empty(self) -> bool:
        return self._tail == self._head

    def is_full(self) -> bool:
        return (self._tail + 1) % self._capacity == self._head

    def front(self) -> Optional[T]:
        """The oldest entry (None if that slot was never written)."""
        return self._data[self._head]

    def back(self) -> Optional[T]:
        """The most recently pushed entry (None if that slot was never written)."""
        return self._data[self._tail - 1]