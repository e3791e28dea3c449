"""Substring search with the Knuth-Morris-Pratt algorithm."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def prefix_function(pattern: str) -> list[int]:
    """Return, for each prefix, the length of its longest proper border."""
    table = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            table[i] = length
            i += 1
        elif length:
            length = table[length - 1]
        else:
            table[i] = 0
            i += 1
    return table


def find_occurrences(text: str, pattern: str) -> list[int]:
    """Return the 0-based start of every (possibly overlapping) match."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = prefix_function(pattern)
    positions: list[int] = []
    i = j = 0
    while i < len(text):
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == len(pattern):
            positions.append(i - j)
            j = table[j - 1]
        elif i < len(text) and pattern[j] != text[i]:
            if j:
                j = table[j - 1]
            else:
                i += 1
    return positions


def main(argv: Sequence[str] | None = None) -> int:
    """Find a pattern in a text, both read from a file.

    Usage: ``kmp INPUT OUTPUT``. The first input line is the pattern, the
    second the text. The output holds the match count on one line and the
    1-based match positions on the next. Returns -1 on missing arguments,
    -2 if the input cannot be read and -3 if the output cannot be written.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        return -1
    try:
        with open(args[0], encoding="utf-8") as handle:
            lines = handle.read().split("\n")
    except OSError:
        return -2
    pattern = lines[0]
    text = lines[1] if len(lines) > 1 else ""
    positions = find_occurrences(text, pattern) if pattern else []
    try:
        with open(args[1], "w", encoding="utf-8") as handle:
            handle.write(f"{len(positions)}\n")
            handle.write(" ".join(str(p + 1) for p in positions))
    except OSError:
        return -3
    return 0