"""Knuth–Morris–Pratt substring search."""

from __future__ import annotations


def build_lps(pattern: str) -> list[int]:
    """Return the longest-proper-prefix-that-is-also-suffix table of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = [0]
    length = 0
    for ch in pattern[1:]:
        while length > 0 and ch != pattern[length]:
            length = lps[length - 1]
        if ch == pattern[length]:
            length += 1
        lps.append(length)
    return lps


def find_all(text: str, pattern: str) -> list[int]:
    """Return the start index of every, possibly overlapping, match of ``pattern``."""
    lps = build_lps(pattern)
    matches = []
    matched = 0
    for index, ch in enumerate(text):
        while matched > 0 and pattern[matched] != ch:
            matched = lps[matched - 1]
        if pattern[matched] == ch:
            matched += 1
        if matched == len(pattern):
            matches.append(index - len(pattern) + 1)
            matched = lps[matched - 1]
    return matches