"""SplitMix64 mixing and a seeded integer hash built on it."""

from __future__ import annotations

import time

_MASK = (1 << 64) - 1


def splitmix64(x: int) -> int:
    """Return the SplitMix64 mix of ``x`` taken as an unsigned 64-bit value."""
    x = (x + 0x9E3779B97F4A7C15) & _MASK
    x = ((x ^ (x >> 30)) * 0xBF58476D1CE4E5B9) & _MASK
    x = ((x ^ (x >> 27)) * 0x94D049BB133111EB) & _MASK
    return x ^ (x >> 31)


class SeededHasher:
    """Hash integers with SplitMix64 after adding a fixed per-instance seed.

    Without an explicit seed, one is taken from a monotonic clock so that
    hash values cannot be predicted in advance.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.monotonic_ns()
        self.seed = seed & _MASK

    def __call__(self, key: int) -> int:
        return splitmix64((key + self.seed) & _MASK)