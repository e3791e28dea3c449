"""Algorithms over sequences of numbers and strings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import pairwise
from typing import Any


@dataclass(frozen=True)
class Item:
    """An item for the knapsack: its weight and its value."""

    weight: int
    value: int


def remove_even(values: Iterable[int]) -> list[int]:
    """Return the values with every even number removed, order kept."""
    return [v for v in values if v % 2 != 0]


def count_subarrays_at_most(values: Sequence[int], k: int) -> int:
    """Count contiguous subarrays whose sum is at most ``k``.

    Uses a sliding window, which is exact for non-negative values.
    """
    window_sum = 0
    start = 0
    count = 0
    for end, value in enumerate(values):
        window_sum += value
        while window_sum > k and end > start:
            window_sum -= values[start]
            start += 1
        if window_sum <= k:
            count += end - start + 1
    return count


def longest_increasing_run(values: Iterable[Any]) -> list[Any]:
    """Return the first longest strictly increasing contiguous run."""
    data = list(values)
    if not data:
        return []
    best_start, best_length = 0, 1
    start = 0
    for end, (previous, current) in enumerate(pairwise(data), start=1):
        if not previous < current:
            start = end
        if end - start + 1 > best_length:
            best_start, best_length = start, end - start + 1
    return data[best_start : best_start + best_length]


def greedy_knapsack_value(capacity: int, items: Iterable[Item]) -> int:
    """Fill the knapsack greedily by value and return the value taken.

    Items are tried from most to least valuable; an item is taken only
    while its weight is strictly less than the remaining capacity.
    """
    total = 0
    for item in sorted(items, key=lambda it: it.value, reverse=True):
        if capacity > item.weight:
            total += item.value
            capacity -= item.weight
    return total


def edit_distance(a: str, b: str) -> int:
    """Return the Levenshtein distance between two strings."""
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current
    return previous[-1]