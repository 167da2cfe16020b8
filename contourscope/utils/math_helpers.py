"""Math helpers — cyclic indexing for closed point rings. No engine imports."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class CircularSequence(Generic[T]):
    """Read-only view of a sequence whose indices wrap around its length.

    ``ring[len(ring)]`` is ``ring[0]`` and ``ring[-1]`` is the last item.
    """

    def __init__(self, items: Sequence[T]) -> None:
        self._items = items

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[self.wrap(index)]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def wrap(self, index: int) -> int:
        n = len(self._items)
        if n == 0:
            raise IndexError("Empty circular sequence")
        return index % n

    def next_index(self, index: int) -> int:
        return self.wrap(index + 1)

    def prev_index(self, index: int) -> int:
        return self.wrap(index - 1)

    def step(self, index: int, inc: int) -> int:
        """Move ``inc`` positions (negative walks backwards)."""
        return self.wrap(index + inc)

    def walk(self, start: int, inc: int = 1) -> Iterator[int]:
        """Endless stream of indices after ``start`` in direction ``inc``."""
        i = start
        while True:
            i = self.step(i, inc)
            yield i


def majority_increasing(a: int, b: int, c: int) -> bool:
    """True when at least two of the cyclic pairs (a,b), (b,c), (c,a) ascend.

    Three indices taken in order around a ring ascend in exactly two pairs
    when walking forward and in one pair when walking backward.
    """
    votes = int(b > a) + int(c > b) + int(a > c)
    return votes == 2
