"""A bump allocator over one anonymous memory mapping."""

from __future__ import annotations

import mmap


class ArenaError(Exception):
    """Raised when the arena cannot map or hand out memory."""


class MemoryArena:
    """Reserves one block of memory and hands out consecutive slices of it."""

    def __init__(self) -> None:
        self._map: mmap.mmap | None = None
        self._view: memoryview | None = None
        self._slices: list[memoryview] = []
        self._offset = 0
        self._size = 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return self._size - self._offset

    def allocate(self, size: int) -> None:
        """Map ``size`` bytes, dropping any earlier mapping."""
        self.close()
        if size <= 0:
            raise ArenaError(f"cannot map {size} bytes")
        try:
            self._map = mmap.mmap(-1, size)
        except (OSError, ValueError, OverflowError) as exc:
            raise ArenaError(f"cannot map {size} bytes: {exc}") from exc
        self._view = memoryview(self._map)
        self._size = size
        self._offset = 0

    def push(self, size: int) -> memoryview:
        """Return the next ``size`` bytes of the arena as a writable view."""
        if size < 0:
            raise ArenaError(f"cannot push {size} bytes")
        new_offset = self._offset + size
        if new_offset > self._size:
            raise ArenaError(
                f"arena exhausted: {size} bytes requested, {self.remaining} left"
            )
        if self._view is None:
            return memoryview(bytearray())
        chunk = self._view[self._offset:new_offset]
        self._slices.append(chunk)
        self._offset = new_offset
        return chunk

    def close(self) -> None:
        """Release the mapping; views handed out become unusable."""
        for chunk in self._slices:
            try:
                chunk.release()
            except BufferError:
                pass
        self._slices.clear()
        if self._view is not None:
            try:
                self._view.release()
            except BufferError:
                pass
            self._view = None
        if self._map is not None:
            try:
                self._map.close()
            except BufferError:
                # Views derived by callers still hold the mapping; it is
                # unmapped once they are gone.
                pass
            self._map = None
        self._size = 0
        self._offset = 0

    def __enter__(self) -> MemoryArena:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()