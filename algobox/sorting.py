"""Comparison sorts and the merge step of merge sort."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items sorted by insertion sort."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items sorted by selection sort."""
    result = list(items)
    for i in range(len(result) - 1):
        min_index = min(range(i, len(result)), key=result.__getitem__)
        if min_index != i:
            result[i], result[min_index] = result[min_index], result[i]
    return result


def _sift_down(values: list[Any], size: int, index: int) -> None:
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items sorted by heap sort."""
    result = list(items)
    size = len(result)
    for index in reversed(range(size // 2)):
        _sift_down(result, size, index)
    for end in reversed(range(size)):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def merge(left: Iterable[Any], right: Iterable[Any]) -> list[Any]:
    """Merge two sorted sequences into one sorted list.

    On ties the element from ``left`` comes first, so the merge is stable.
    """
    first, second = list(left), list(right)
    merged: list[Any] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged