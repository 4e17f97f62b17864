"""A sequence with a fixed capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar, overload

T = TypeVar("T")


class BufferFull(Exception):
    """Raised when pushing onto a buffer that is at capacity."""


class FixedBuffer(Generic[T]):
    """A stack-like sequence that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, item: T) -> None:
        """Append ``item``; raise BufferFull if there is no room."""
        if len(self._items) >= self._capacity:
            raise BufferFull(f"buffer is full ({self._capacity} items)")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the last item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty buffer")
        return self._items.pop()

    def reset(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __repr__(self) -> str:
        return f"FixedBuffer(capacity={self._capacity}, items={self._items!r})"