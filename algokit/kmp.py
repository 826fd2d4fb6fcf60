"""Knuth-Morris-Pratt substring search."""

from __future__ import annotations

from collections.abc import Sequence


def prefix_table(pattern: Sequence) -> list[int]:
    """Return the failure table of ``pattern``.

    Entry ``i`` is the length of the longest proper border of ``pattern[:i]``;
    entry 0 is -1 by convention. An empty pattern gives an empty table.
    """
    length = len(pattern)
    if length == 0:
        return []
    table = [-1] * length
    if length == 1:
        return table
    table[1] = 0
    i, candidate = 2, 0
    while i < length:
        if pattern[i - 1] == pattern[candidate]:
            candidate += 1
            table[i] = candidate
            i += 1
        elif candidate > 0:
            candidate = table[candidate]
        else:
            table[i] = 0
            i += 1
    return table


def kmp_search(text: Sequence, pattern: Sequence) -> int:
    """Return the index of the first occurrence of ``pattern`` in ``text``, or -1."""
    table = prefix_table(pattern)
    x = y = 0
    while x < len(text) and y < len(pattern):
        if text[x] == pattern[y]:
            x += 1
            y += 1
        elif y == 0:
            x += 1
        else:
            y = table[y]
    return x - y if y == len(pattern) else -1