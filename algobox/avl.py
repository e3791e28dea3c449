"""A self-balancing AVL search tree of integer keys."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    key: int
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return 0 if node is None else node.height


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.right) - _height(node.left)


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _insert(node: _Node | None, key: int) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node

    _update(node)
    balance = _balance(node)
    if balance < -1:
        assert node.left is not None
        if key > node.left.key:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance > 1:
        assert node.right is not None
        if key < node.right.key:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: _Node | None, key: int) -> _Node | None:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        return node.left if node.left is not None else node.right
    else:
        successor = _min_node(node.right)
        node.key = successor.key
        node.right = _delete(node.right, successor.key)

    _update(node)
    balance = _balance(node)
    if balance < -1:
        if _balance(node.left) > 0:
            assert node.left is not None
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance > 1:
        if _balance(node.right) < 0:
            assert node.right is not None
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """A set of integer keys kept in a height-balanced binary search tree."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, key: int) -> None:
        """Add ``key``; a key already present is left as is."""
        self._root = _insert(self._root, key)

    def delete(self, key: int) -> None:
        """Remove ``key`` if present."""
        self._root = _delete(self._root, key)

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if node.key == key:
                return True
            node = node.right if node.key < key else node.left  # type: ignore[operator]
        return False

    def balance(self) -> int:
        """Return the root's right height minus its left height (0 if empty)."""
        return _balance(self._root)

    @property
    def height(self) -> int:
        """Number of levels in the tree (0 if empty)."""
        return _height(self._root)

    def __iter__(self) -> Iterator[int]:
        """Yield the keys in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return sum(1 for _ in self)


def _operations(tokens: list[str], count: int) -> Iterator[tuple[str, str]]:
    stream = iter(tokens)
    for _ in range(count):
        token = next(stream, None)
        if token is None:
            return
        op, rest = token[0], token[1:]
        if not rest:
            rest = next(stream, None)
            if rest is None:
                return
        yield op, rest


def main(argv: Sequence[str] | None = None) -> int:
    """Apply tree operations read from a file and write the results.

    Usage: ``avl INPUT OUTPUT``. The input holds a count followed by that
    many operations ``+ X``, ``- X`` or ``? X``. After each insertion or
    deletion the root balance is written; each query writes ``true`` or
    ``false``. Returns -1 on missing arguments, -2 if the input cannot be
    read and -3 if the output cannot be written.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        return -1
    try:
        with open(args[0], encoding="utf-8") as handle:
            tokens = handle.read().split()
    except OSError:
        return -2
    count = int(tokens[0]) if tokens else 0
    tree = AVLTree()
    lines: list[str] = []
    for op, value in _operations(tokens[1:], count):
        if op == "+":
            tree.insert(int(value))
            lines.append(str(tree.balance()))
        elif op == "-":
            tree.delete(int(value))
            lines.append(str(tree.balance()))
        elif op == "?":
            lines.append("true" if int(value) in tree else "false")
    try:
        with open(args[1], "w", encoding="utf-8", newline="") as handle:
            handle.write("".join(line + "\r\n" for line in lines))
    except OSError:
        return -3
    return 0