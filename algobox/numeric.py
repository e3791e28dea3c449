"""Small numeric routines."""

from __future__ import annotations

import math
from collections.abc import Iterable


def ackermann(n: int, m: int) -> int:
    """Return the Ackermann function A(n, m) for non-negative arguments."""
    if n < 0 or m < 0:
        raise ValueError("ackermann() arguments must be non-negative")
    pending = [n]
    while pending:
        level = pending.pop()
        if level == 0:
            m += 1
        elif m == 0:
            pending.append(level - 1)
            m = 1
        else:
            pending.append(level - 1)
            pending.append(level)
            m -= 1
    return m


def binary_power(a: int, n: int) -> int:
    """Return a ** n by repeated squaring; n must be non-negative."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    base = a
    while n:
        if n & 1:
            result *= base
        base *= base
        n >>= 1
    return result


def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient C(n, k) computed multiplicatively."""
    if n < 0 or k < 0 or k > n:
        raise ValueError("binomial() needs 0 <= k <= n")
    if k > n // 2:
        k = n - k
    if k == 1:
        return n
    if k == 0:
        return 1
    result = 1.0
    for i in range(1, k + 1):
        result *= n - k + i
        result /= i
    return int(math.ceil(result - 0.2))


def average_cube(values: Iterable[float]) -> float:
    """Return the mean of the cubes of the values (0.0 for none)."""
    data = list(values)
    count = len(data)
    return sum(x * x * x / count for x in data)


def trapezoid_area(points: Iterable[tuple[float, float]]) -> float:
    """Return the signed area of a closed polygon by the trapezoid rule.

    Vertices given clockwise yield a positive area.
    """
    vertices = [(float(x), float(y)) for x, y in points]
    if not vertices:
        raise ValueError("trapezoid_area() needs at least one point")
    closed = vertices[1:] + vertices[:1]
    return sum(
        (cx - px) * (py + cy) / 2 for (px, py), (cx, cy) in zip(vertices, closed)
    )