"""An array-backed list that grows in steps of ten and sorts itself in place."""

from __future__ import annotations

import random
from typing import Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

_MIN_CAPACITY = 10
_GROWTH = 10


class SortedAList(Generic[T]):
    """A growable list offering selection, quick and heap sorts in either direction."""

    def __init__(self, size: int = _MIN_CAPACITY) -> None:
        self._capacity = max(size, _MIN_CAPACITY)
        self._items: list[T] = []

    def insert(self, item: T) -> None:
        """Append ``item``, growing the capacity by ten when the list is full."""
        if self.is_full():
            self._capacity += _GROWTH
        self._items.append(item)

    def randomise(self, rng: Optional[random.Random] = None) -> None:
        """Shuffle by swapping each position with a randomly chosen one."""
        rng = rng or random.Random()
        items = self._items
        count = len(items)
        for i in range(count):
            j = rng.randrange(count)
            items[i], items[j] = items[j], items[i]

    @staticmethod
    def _precedes(descending: bool) -> Callable[[T, T], bool]:
        if descending:
            return lambda a, b: a > b
        return lambda a, b: a < b

    def selection_sort(self, descending: bool = False) -> None:
        """Sort in place by repeatedly selecting the extreme remaining element."""
        items = self._items
        before = self._precedes(descending)
        for i in range(len(items) - 1):
            best = i
            for j in range(i + 1, len(items)):
                if before(items[j], items[best]):
                    best = j
            items[i], items[best] = items[best], items[i]

    def quick_sort(self, descending: bool = False) -> None:
        """Sort in place with quick sort using the middle element as pivot."""
        before = self._precedes(descending)
        pending = [(0, len(self._items) - 1)]
        while pending:
            first, last = pending.pop()
            if first < last:
                pivot_index = self._partition(first, last, before)
                pending.append((pivot_index + 1, last))
                pending.append((first, pivot_index - 1))

    def _partition(self, first: int, last: int, before: Callable[[T, T], bool]) -> int:
        items = self._items
        middle = (first + last) // 2
        pivot = items[middle]
        items[first], items[middle] = items[middle], items[first]
        boundary = first
        for i in range(first + 1, last + 1):
            if before(items[i], pivot):
                boundary += 1
                items[i], items[boundary] = items[boundary], items[i]
        items[first], items[boundary] = items[boundary], items[first]
        return boundary

    def heap_sort(self, descending: bool = False) -> None:
        """Sort in place with heap sort (max heap ascending, min heap descending)."""
        items = self._items
        after = self._precedes(not descending)
        count = len(items)
        for root in range(count // 2 - 1, -1, -1):
            self._sift_down(count, root, after)
        for end in range(count - 1, -1, -1):
            items[0], items[end] = items[end], items[0]
            self._sift_down(end, 0, after)

    def _sift_down(self, count: int, root: int, outranks: Callable[[T, T], bool]) -> None:
        items = self._items
        while True:
            top = root
            left, right = 2 * root + 1, 2 * root + 2
            if left < count and outranks(items[left], items[top]):
                top = left
            if right < count and outranks(items[right], items[top]):
                top = right
            if top == root:
                return
            items[root], items[top] = items[top], items[root]
            root = top

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def capacity(self) -> int:
        return self._capacity

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def is_empty(self) -> bool:
        return not self._items