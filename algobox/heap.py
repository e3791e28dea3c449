"""Binary and ternary max-heaps stored in flat lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Heap:
    """A binary max-heap kept in a list in level order."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)
        for index in reversed(range(len(self._items) // 2)):
            self.shift_down(index)

    @staticmethod
    def parent(index: int) -> int:
        """Return the index of the parent of ``index``."""
        return (index - 1) >> 1

    @staticmethod
    def left(index: int) -> int:
        """Return the index of the left child of ``index``."""
        return (index << 1) + 1

    @staticmethod
    def right(index: int) -> int:
        """Return the index of the right child of ``index``."""
        return (index + 1) << 1

    def shift_up(self, index: int) -> None:
        """Move the element at ``index`` up while it beats its parent."""
        items = self._items
        if index >= len(items):
            return
        while index != 0 and items[index] > items[self.parent(index)]:
            up = self.parent(index)
            items[index], items[up] = items[up], items[index]
            index = up

    def _swap_index(self, child: int, current: int) -> int:
        if child < len(self._items) and self._items[child] > self._items[current]:
            return child
        return current

    def shift_down(self, index: int) -> None:
        """Move the element at ``index`` down while a child beats it."""
        items = self._items
        while index < len(items):
            target = self._swap_index(self.left(index), index)
            target = self._swap_index(self.right(index), target)
            if target == index:
                break
            items[index], items[target] = items[target], items[index]
            index = target

    def add(self, element: Any) -> None:
        """Insert ``element`` into the heap."""
        self._items.append(element)
        self.shift_up(len(self._items) - 1)

    def pop(self) -> Any:
        """Remove and return the largest element; raise IndexError if empty."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        items[0], items[-1] = items[-1], items[0]
        largest = items.pop()
        self.shift_down(0)
        return largest

    def top(self) -> Any:
        """Return the largest element; raise IndexError if empty."""
        if not self._items:
            raise IndexError("top of an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the stored elements in level order."""
        return iter(list(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Heap):
            return NotImplemented
        return self._items == other._items


class TernaryHeap:
    """A max-heap in which every node has up to three children."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)
        for index in reversed(range((len(self._items) + 1) // 3)):
            self.heapify(index)

    def heapify(self, index: int) -> None:
        """Restore heap order below ``index``, children taken left to right."""
        items = self._items
        for child in (3 * index + 1, 3 * index + 2, 3 * index + 3):
            if child < len(items) and items[index] < items[child]:
                items[index], items[child] = items[child], items[index]
                self.heapify(child)

    def pop_max(self) -> Any:
        """Remove and return the largest element; raise IndexError if empty."""
        items = self._items
        if not items:
            raise IndexError("pop_max from an empty heap")
        largest = items[0]
        items[0] = items[-1]
        items.pop()
        self.heapify(0)
        return largest

    def __len__(self) -> int:
        return len(self._items)