"""A hash table of integers using separate chaining and the division method."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence


def is_prime(number: int) -> bool:
    """Return True if no integer in 2..number//2 divides ``number``.

    Numbers below 4 that have no such divisor, including 0 and 1, count
    as prime.
    """
    return all(number % i != 0 for i in range(2, number // 2 + 1))


def select_table_size(n: int) -> int:
    """Return the first prime that is at least ``n // 3 + 1``."""
    size = n // 3 + 1
    while not is_prime(size):
        size += 1
    return size


class HashTable:
    """A multiset of integers stored in chained buckets."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("hash table size must be positive")
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def bucket_index(self, value: int) -> int:
        """Return the bucket that ``value`` belongs to."""
        return value % len(self._buckets)

    def insert(self, value: int) -> None:
        """Append ``value`` to its bucket; duplicates are kept."""
        self._buckets[self.bucket_index(value)].append(value)

    def remove(self, value: int) -> None:
        """Remove one occurrence of ``value`` if present."""
        bucket = self._buckets[self.bucket_index(value)]
        if value in bucket:
            bucket.remove(value)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        return value in self._buckets[self.bucket_index(value)]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[int]:
        """Yield the stored values bucket by bucket."""
        for bucket in self._buckets:
            yield from bucket


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
    """Apply hash table operations read from a file and write query answers.

    Usage: ``hashtable INPUT OUTPUT``. The input holds a count followed by
    that many operations ``+ X``, ``- X`` or ``? X``; each query writes
    ``true`` or ``false`` on its own line. Returns -1 on missing arguments,
    -2 if the input cannot be read and -3 if the output cannot be written.
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
    table = HashTable(select_table_size(count))
    lines: list[str] = []
    for op, value in _operations(tokens[1:], count):
        if op == "+":
            table.insert(int(value))
        elif op == "-":
            table.remove(int(value))
        elif op == "?":
            lines.append("true" if int(value) in table else "false")
    try:
        with open(args[1], "w", encoding="utf-8", newline="") as handle:
            handle.write("".join(line + "\n" for line in lines))
    except OSError:
        return -3
    return 0