"""Graph representation conversions."""

from __future__ import annotations

from collections.abc import Sequence


def adjacency_to_incidence(adjacency: Sequence[Sequence[bool]]) -> list[list[bool]]:
    """Convert a square adjacency matrix into an incidence matrix.

    Each edge becomes one row marking its endpoints; edges are taken from
    the lower triangle (including the diagonal) in column order.
    """
    size = len(adjacency)
    if size == 0:
        raise ValueError("adjacency matrix is empty")
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency matrix must be square")

    incidence: list[list[bool]] = []
    for col in range(size):
        for row in range(col + 1):
            if adjacency[col][row]:
                edge = [False] * size
                edge[row] = edge[col] = True
                incidence.append(edge)
    return incidence