"""Half-open intervals with a partial ordering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Interval(Generic[T]):
    """The half-open interval from ``lower`` (inclusive) to ``upper`` (exclusive).

    Disjoint intervals are ordered by position; overlapping, unequal
    intervals are not ordered with respect to each other.
    """

    lower: T
    upper: T

    def compare(self, other: "Interval[T]") -> Optional[int]:
        """Return -1, 0 or 1 for less, equal or greater; None if overlapping."""
        if self == other:
            return 0
        if self.lower >= other.upper:
            return 1
        if self.upper <= other.lower:
            return -1
        return None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.compare(other) == -1

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.compare(other) in (-1, 0)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.compare(other) == 1

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.compare(other) in (1, 0)