"""Searching in sorted sequences and text, and small scanning helpers."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(items: Sequence[Any], element: Any) -> int:
    """Return the first index of ``element`` in sorted ``items``, or -1."""
    index = bisect_left(items, element)
    if index == len(items) or items[index] != element:
        return -1
    return index


def find_substring(text: str, pattern: str) -> int:
    """Return the first position of ``pattern`` in ``text``, or -1.

    An empty pattern is found at position 0.
    """
    if not pattern:
        return 0
    width = len(pattern)
    for start in range(len(text) - width + 1):
        if text[start : start + width] == pattern:
            return start
    return -1


def max_element(items: Iterable[Any]) -> Any:
    """Return the largest item; raise ValueError if there are none."""
    iterator = iter(items)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError("max_element() of an empty sequence") from None
    for item in iterator:
        if item > best:
            best = item
    return best


def sum_of_squares(x: int) -> int:
    """Return 1*1 + 2*2 + ... + x*x (0 when x < 1)."""
    return sum(i * i for i in range(1, x + 1))