"""First-in, first-out queues built from two stacks."""

from __future__ import annotations

from typing import Generic, List, Tuple, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """A first-in, first-out queue with amortised constant-time operations."""

    def __init__(self) -> None:
        self._older: List[T] = []  # older elements, eldest last
        self._younger: List[T] = []  # younger elements, youngest last

    def push(self, item: T) -> None:
        """Add an item to the back of the queue."""
        self._younger.append(item)

    def pop(self) -> T:
        """Remove and return the item at the front of the queue.

        Raises IndexError if the queue is empty.
        """
        if not self._older:
            if not self._younger:
                raise IndexError("pop from an empty queue")
            self._older, self._younger = self._younger, self._older
            self._older.reverse()
        return self._older.pop()

    def is_empty(self) -> bool:
        """Return True if the queue holds no items."""
        return not self._older and not self._younger

    def split(self) -> Tuple[List[T], List[T]]:
        """Return the internal (older, younger) lists and leave the queue empty."""
        parts = (self._older, self._younger)
        self._older, self._younger = [], []
        return parts

    def __len__(self) -> int:
        return len(self._older) + len(self._younger)


class CharQueue(Queue[str]):
    """A queue that holds only single characters."""

    def push(self, c: str) -> None:
        """Add a single character to the back of the queue."""
        if not isinstance(c, str):
            raise TypeError(f"expected a character, got {type(c).__name__}")
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        super().push(c)