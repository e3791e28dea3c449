"""A B-tree of integer keys with top-down splitting and rebalancing."""

from __future__ import annotations

import sys
from bisect import bisect_left, bisect_right, insort_right
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field


@dataclass(eq=False)
class _Node:
    keys: list[int] = field(default_factory=list)
    children: list[_Node] | None = None

    @property
    def is_leaf(self) -> bool:
        return self.children is None


class BTree:
    """A B-tree of minimum degree ``t``: every node but the root holds
    between ``t - 1`` and ``2t - 1`` keys. Duplicate keys are allowed."""

    def __init__(self, t: int) -> None:
        if t < 2:
            raise ValueError("minimum degree must be at least 2")
        self._t = t
        self._root = _Node()

    def _is_full(self, node: _Node) -> bool:
        return len(node.keys) == 2 * self._t - 1

    def _split(self, parent: _Node | None, c: int) -> _Node:
        """Split the full child ``c`` of ``parent`` (the root if no parent)."""
        if parent is None:
            left = self._root
            parent = _Node(children=[left])
            self._root = parent
        else:
            assert parent.children is not None
            left = parent.children[c]
        t = self._t
        median = left.keys[t - 1]
        right = _Node(
            keys=left.keys[t:],
            children=None if left.children is None else left.children[t:],
        )
        left.keys = left.keys[: t - 1]
        if left.children is not None:
            left.children = left.children[:t]
        assert parent.children is not None
        parent.keys.insert(c, median)
        parent.children.insert(c + 1, right)
        return parent

    def insert(self, key: int) -> None:
        """Add ``key``, splitting full nodes on the way down."""
        parent: _Node | None = None
        c = 0
        cur = self._root
        while True:
            if self._is_full(cur):
                parent = self._split(parent, c)
                assert parent.children is not None
                if key < parent.keys[c]:
                    cur = parent.children[c]
                else:
                    cur = parent.children[c + 1]
            if cur.children is None:
                break
            c = bisect_right(cur.keys, key)
            parent = cur
            cur = cur.children[c]
        insort_right(cur.keys, key)

    def __contains__(self, key: object) -> bool:
        node: _Node | None = self._root
        while node is not None:
            index = bisect_left(node.keys, key)  # type: ignore[arg-type]
            if index < len(node.keys) and node.keys[index] == key:
                return True
            node = None if node.children is None else node.children[index]
        return False

    def _grab_from_right(self, parent: _Node, c: int) -> _Node:
        assert parent.children is not None
        left, right = parent.children[c], parent.children[c + 1]
        left.keys.append(parent.keys[c])
        if right.children is not None and left.children is not None:
            left.children.append(right.children.pop(0))
        parent.keys[c] = right.keys.pop(0)
        return left

    def _grab_from_left(self, parent: _Node, c: int) -> _Node:
        assert parent.children is not None
        left, right = parent.children[c - 1], parent.children[c]
        right.keys.insert(0, parent.keys[c - 1])
        if left.children is not None and right.children is not None:
            right.children.insert(0, left.children.pop())
        parent.keys[c - 1] = left.keys.pop()
        return right

    def _merge_right(self, parent: _Node, c: int) -> _Node:
        """Merge child ``c + 1`` and its separator into child ``c``."""
        assert parent.children is not None
        left, right = parent.children[c], parent.children[c + 1]
        separator = parent.keys.pop(c)
        del parent.children[c + 1]
        left.keys.append(separator)
        left.keys.extend(right.keys)
        if left.children is not None and right.children is not None:
            left.children.extend(right.children)
        if not parent.keys:
            self._root = left
        return left

    def _balance(self, cur: _Node, parent: _Node | None, c: int) -> _Node:
        """Make sure ``cur`` has more than ``t - 1`` keys before descending."""
        t = self._t
        if len(cur.keys) > t - 1 or cur is self._root or parent is None:
            return cur
        assert parent.children is not None
        children = parent.children
        if c > 0:
            if c < len(parent.keys):
                if len(children[c + 1].keys) > len(children[c - 1].keys):
                    return self._grab_from_right(parent, c)
                if len(children[c - 1].keys) > t - 1:
                    return self._grab_from_left(parent, c)
                return self._merge_right(parent, c - 1)
            if len(children[c - 1].keys) > t - 1:
                return self._grab_from_left(parent, c)
            return self._merge_right(parent, c - 1)
        if len(children[c + 1].keys) > t - 1:
            return self._grab_from_right(parent, c)
        return self._merge_right(parent, c)

    def erase(self, key: int) -> None:
        """Remove one occurrence of ``key``; raise KeyError if it is absent."""
        if key not in self:
            raise KeyError(key)
        self._erase(key, self._root)

    def _erase(self, key: int, cur: _Node) -> None:
        parent: _Node | None = None
        c = 0
        while True:
            cur = self._balance(cur, parent, c)
            k = bisect_left(cur.keys, key)
            if k < len(cur.keys) and cur.keys[k] == key:
                break
            if cur.children is None:
                raise KeyError(key)
            parent, c, cur = cur, k, cur.children[k]

        t = self._t
        if cur.children is None:
            del cur.keys[k]
        elif len(cur.children[k].keys) > t - 1:
            cur.keys[k] = self._erase_max(cur, k)
        elif len(cur.children[k + 1].keys) > t - 1:
            cur.keys[k] = self._erase_min(cur, k + 1)
        else:
            self._erase(key, self._merge_right(cur, k))

    def _erase_max(self, parent: _Node, c: int) -> int:
        assert parent.children is not None
        cur = parent.children[c]
        while True:
            cur = self._balance(cur, parent, c)
            if cur.children is None:
                break
            parent = cur
            c = len(parent.keys)
            cur = cur.children[c]
        return cur.keys.pop()

    def _erase_min(self, parent: _Node, c: int) -> int:
        assert parent.children is not None
        cur = parent.children[c]
        while True:
            cur = self._balance(cur, parent, c)
            if cur.children is None:
                break
            parent = cur
            c = 0
            cur = cur.children[0]
        return cur.keys.pop(0)

    def root_keys(self) -> list[int]:
        """Return a copy of the keys held in the root node."""
        return list(self._root.keys)

    def __iter__(self) -> Iterator[int]:
        """Yield the keys in ascending order."""

        def walk(node: _Node) -> Iterator[int]:
            if node.children is None:
                yield from node.keys
                return
            for child, key in zip(node.children, node.keys):
                yield from walk(child)
                yield key
            yield from walk(node.children[-1])

        return walk(self._root)

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


def _root_line(tree: BTree) -> str:
    keys = tree.root_keys()
    return " ".join([str(len(keys)), *(str(key) for key in keys)])


def main(argv: Sequence[str] | None = None) -> int:
    """Apply B-tree operations read from a file and write the results.

    Usage: ``btree INPUT OUTPUT``. The input holds the minimum degree, a
    count and that many operations ``+ X``, ``- X`` or ``? X``. After each
    insertion or deletion the root's key count and keys are written; each
    query writes ``true`` or ``false``. Returns 1 on missing arguments,
    2 if the input cannot be read, 3 if the output cannot be written and
    4 if a key to delete is not in the tree.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        return 1
    try:
        with open(args[0], encoding="utf-8") as handle:
            tokens = handle.read().split()
    except OSError:
        return 2
    tree = BTree(int(tokens[0]))
    count = int(tokens[1]) if len(tokens) > 1 else 0
    lines: list[str] = []
    try:
        for op, value in _operations(tokens[2:], count):
            if op == "+":
                tree.insert(int(value))
                lines.append(_root_line(tree))
            elif op == "-":
                tree.erase(int(value))
                lines.append(_root_line(tree))
            elif op == "?":
                lines.append("true" if int(value) in tree else "false")
    except KeyError as error:
        print(f"error: key {error} is not in the tree", file=sys.stderr)
        return 4
    try:
        with open(args[1], "w", encoding="utf-8", newline="") as handle:
            handle.write("".join(line + "\n" for line in lines))
    except OSError:
        return 3
    return 0