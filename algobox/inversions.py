"""Counting inversions with a bottom-up merge sort."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import Any


def count_inversions(items: Iterable[Any]) -> int:
    """Return the number of pairs i < j with items[i] > items[j]."""
    values = list(items)
    size = len(values)
    total = 0
    step = 1
    while step < size:
        merged: list[Any] = []
        for left in range(0, size, 2 * step):
            middle = min(left + step, size)
            right = min(left + 2 * step, size)
            i, j = left, middle
            while i < middle and j < right:
                if values[i] <= values[j]:
                    merged.append(values[i])
                    i += 1
                else:
                    merged.append(values[j])
                    j += 1
                    total += middle - i
            merged.extend(values[i:middle])
            merged.extend(values[j:right])
        values = merged
        step *= 2
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count and numbers from a file, write their inversion count.

    Usage: ``inversions INPUT OUTPUT``. Returns 1 on missing arguments,
    2 if the input cannot be read and 3 if the output cannot be written.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        return 1
    try:
        with open(args[0], encoding="utf-8") as handle:
            tokens = handle.read().split()
    except OSError:
        return 2
    count = int(tokens[0]) if tokens else 0
    values = [int(token) for token in tokens[1 : 1 + count]]
    try:
        with open(args[1], "w", encoding="utf-8") as handle:
            handle.write(str(count_inversions(values)))
    except OSError:
        return 3
    return 0