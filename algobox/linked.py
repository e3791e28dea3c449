"""Singly linked list structures and a stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: Any
    next: ListNode | None = None


class LinkedList:
    """A singly linked list that grows at the front."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: ListNode | None = None
        for value in values:
            self.add(value)

    def add(self, value: Any) -> None:
        """Insert ``value`` at the front of the list."""
        self._head = ListNode(value, self._head)

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: ListNode | None = None
        current = self._head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self._head = previous

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.val
            node = node.next


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop repeated values from a sorted list in place; return its head."""
    node = head
    while node is not None and node.next is not None:
        if node.next.val == node.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


class Stack:
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def replace_top(self, value: Any) -> None:
        """Replace the top item with ``value``; raise IndexError if empty."""
        if not self._items:
            raise IndexError("replace_top on an empty stack")
        self._items[-1] = value

    def __len__(self) -> int:
        return len(self._items)