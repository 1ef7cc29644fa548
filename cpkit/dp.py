"""Classic dynamic-programming problems on sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence


def longest_common_subsequence(a: Sequence, b: Sequence) -> str:
    """Return a longest common subsequence of two strings.

    Ties during the trace-back move along ``b`` unless moving along ``a``
    keeps a strictly longer subsequence.
    """
    rows = [[0] * (len(b) + 1)]
    for item_a in a:
        previous = rows[-1]
        row = [0]
        for j, item_b in enumerate(b, start=1):
            if item_a == item_b:
                row.append(previous[j - 1] + 1)
            else:
                row.append(max(previous[j], row[j - 1]))
        rows.append(row)

    i, j = len(a), len(b)
    picked = []
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            picked.append(a[i - 1])
            i -= 1
            j -= 1
        elif rows[i - 1][j] > rows[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(picked))


def longest_increasing_subsequence_length(values: Iterable) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)