"""Enumeration of combinations, permutations and subsets by backtracking."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")


def combinations(data: Sequence[T], r: int) -> Iterator[tuple[T, ...]]:
    """Yield every r-element combination of ``data`` in index order.

    A negative ``r``, or one larger than ``len(data)``, yields nothing.
    """
    if r < 0:
        return
    chosen: list[T] = []

    def extend(start: int) -> Iterator[tuple[T, ...]]:
        if len(chosen) == r:
            yield tuple(chosen)
            return
        for index in range(start, len(data)):
            chosen.append(data[index])
            yield from extend(index + 1)
            chosen.pop()

    yield from extend(0)


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of ``text``, generated by successive swaps.

    The order is that of swapping each position with every later one in
    turn, so it is not lexicographic. An empty string yields nothing.
    """
    if not text:
        return
    chars = list(text)
    last = len(chars) - 1

    def arrange(start: int) -> Iterator[str]:
        if start == last:
            yield "".join(chars)
            return
        for index in range(start, last + 1):
            chars[index], chars[start] = chars[start], chars[index]
            yield from arrange(start + 1)
            chars[index], chars[start] = chars[start], chars[index]

    yield from arrange(0)


def subsets(data: Sequence[T]) -> Iterator[tuple[T, ...]]:
    """Yield every subset of ``data``, choosing to include each item first."""
    chosen: list[T] = []

    def decide(index: int) -> Iterator[tuple[T, ...]]:
        if index == len(data):
            yield tuple(chosen)
            return
        chosen.append(data[index])
        yield from decide(index + 1)
        chosen.pop()
        yield from decide(index + 1)

    yield from decide(0)