"""A sorted multiset with order-statistic queries."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from collections.abc import Iterable, Iterator


class OrderedMultiset:
    """Sorted collection that keeps duplicates and answers rank queries."""

    def __init__(self, values: Iterable = ()) -> None:
        self._items = sorted(values)

    def add(self, value) -> None:
        """Insert ``value``, keeping any equal values already present."""
        insort(self._items, value)

    def discard(self, value) -> None:
        """Remove one occurrence of ``value``; do nothing if it is absent."""
        position = bisect_left(self._items, value)
        if position < len(self._items) and self._items[position] == value:
            del self._items[position]

    def find_by_order(self, k: int):
        """Return the element of rank ``k`` (0-based) in sorted order."""
        if not 0 <= k < len(self._items):
            raise IndexError(f"rank {k} out of range")
        return self._items[k]

    def order_of_key(self, value) -> int:
        """Return how many elements are strictly smaller than ``value``."""
        return bisect_left(self._items, value)

    def lower_bound(self, value):
        """Return the first element not less than ``value``, or ``None``."""
        position = bisect_left(self._items, value)
        return self._items[position] if position < len(self._items) else None

    def upper_bound(self, value):
        """Return the first element greater than ``value``, or ``None``."""
        position = bisect_right(self._items, value)
        return self._items[position] if position < len(self._items) else None

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, value) -> bool:
        position = bisect_left(self._items, value)
        return position < len(self._items) and self._items[position] == value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"