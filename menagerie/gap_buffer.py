"""A gap buffer: a sequence with cheap insertion and removal at a cursor."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")

_GAP = object()


class GapBuffer(Generic[T]):
    """A sequence that inserts and removes at the current position in constant time.

    Moving the position costs time proportional to the distance moved.
    """

    def __init__(self) -> None:
        self._storage: List[object] = []
        self._gap_start = 0
        self._gap_end = 0

    def capacity(self) -> int:
        """Return how many elements fit without reallocation."""
        return len(self._storage)

    def __len__(self) -> int:
        return self.capacity() - (self._gap_end - self._gap_start)

    def position(self) -> int:
        """Return the current insertion position."""
        return self._gap_start

    def _index_to_raw(self, index: int) -> int:
        if index < self._gap_start:
            return index
        return index + (self._gap_end - self._gap_start)

    def get(self, index: int) -> Optional[T]:
        """Return the element at ``index``, or None if it is out of bounds."""
        if index < 0:
            return None
        raw = self._index_to_raw(index)
        if raw < self.capacity():
            return self._storage[raw]  # type: ignore[return-value]
        return None

    def set_position(self, pos: int) -> None:
        """Move the insertion position to ``pos``; raise IndexError if out of range."""
        if pos < 0 or pos > len(self):
            raise IndexError(f"index {pos} out of range for GapBuffer")
        start, end = self._gap_start, self._gap_end
        gap_len = end - start
        if pos > start:
            distance = pos - start
            self._storage[start:start + distance] = self._storage[end:end + distance]
        elif pos < start:
            distance = start - pos
            self._storage[end - distance:end] = self._storage[pos:start]
        self._storage[pos:pos + gap_len] = [_GAP] * gap_len
        self._gap_start = pos
        self._gap_end = pos + gap_len

    def insert(self, elt: T) -> None:
        """Insert ``elt`` at the position and leave the position after it."""
        if self._gap_start == self._gap_end:
            self._enlarge_gap()
        self._storage[self._gap_start] = elt
        self._gap_start += 1

    def insert_iter(self, iterable: Iterable[T]) -> None:
        """Insert every item of ``iterable`` in order at the position."""
        for item in iterable:
            self.insert(item)

    def remove(self) -> Optional[T]:
        """Remove and return the element after the position, or None at the end."""
        if self._gap_end == self.capacity():
            return None
        element = self._storage[self._gap_end]
        self._storage[self._gap_end] = _GAP
        self._gap_end += 1
        return element  # type: ignore[return-value]

    def _enlarge_gap(self) -> None:
        new_capacity = self.capacity() * 2 or 4
        before = self._storage[:self._gap_start]
        after = self._storage[self._gap_end:]
        gap_len = new_capacity - len(before) - len(after)
        self._storage = before + [_GAP] * gap_len + after
        self._gap_end = self._gap_start + gap_len

    def __iter__(self) -> Iterator[T]:
        yield from self._storage[:self._gap_start]  # type: ignore[misc]
        yield from self._storage[self._gap_end:]  # type: ignore[misc]

    def get_string(self) -> str:
        """Join the elements, which must be strings, into one string."""
        return "".join(self)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"GapBuffer([{', '.join(repr(e) for e in self)}])"