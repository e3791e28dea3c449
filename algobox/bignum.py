"""Karatsuba multiplication of non-negative integers held as decimal digits."""

from __future__ import annotations

import sys
from collections.abc import Sequence

_SCHOOLBOOK_LIMIT = 3


def _normalize(coefficients: list[int]) -> list[int]:
    digits: list[int] = []
    carry = 0
    for value in coefficients:
        carry, digit = divmod(value + carry, 10)
        digits.append(digit)
    while carry > 0:
        carry, digit = divmod(carry, 10)
        digits.append(digit)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    return digits or [0]


def _add(a: list[int], b: list[int]) -> list[int]:
    size = max(len(a), len(b))
    return _normalize(
        [x + y for x, y in zip(a + [0] * (size - len(a)), b + [0] * (size - len(b)))]
    )


def _multiply(a: list[int], b: list[int]) -> list[int]:
    size = max(len(a), len(b))
    a = a + [0] * (size - len(a))
    b = b + [0] * (size - len(b))
    if size <= _SCHOOLBOOK_LIMIT:
        product = [0] * (2 * size)
        for i, x in enumerate(a):
            for j, y in enumerate(b):
                product[i + j] += x * y
        return _normalize(product)

    half = (size + 1) // 2
    a_low, a_high = a[:half], a[half:]
    b_low, b_high = b[:half], b[half:]
    low = _multiply(a_low, b_low)
    high = _multiply(a_high, b_high)
    both = _multiply(_add(a_low, a_high), _add(b_low, b_high))

    middle = list(both)
    for part in (low, high):
        middle.extend([0] * (len(part) - len(middle)))
        for i, digit in enumerate(part):
            middle[i] -= digit

    result = [0] * (2 * half + max(len(high), len(middle), len(low)) + 1)
    for offset, part in ((0, low), (half, middle), (2 * half, high)):
        for i, digit in enumerate(part):
            result[offset + i] += digit
    return _normalize(result)


def karatsuba(a: int, b: int) -> int:
    """Return a * b computed by Karatsuba multiplication on decimal digits."""
    if a < 0 or b < 0:
        raise ValueError("karatsuba() needs non-negative integers")
    digits_a = [int(d) for d in reversed(str(a))]
    digits_b = [int(d) for d in reversed(str(b))]
    product = _multiply(digits_a, digits_b)
    return int("".join(str(d) for d in reversed(product)))


def main(argv: Sequence[str] | None = None) -> int:
    """Read two numbers from standard input, one per line, print their product."""
    del argv
    lines = sys.stdin.read().splitlines()
    try:
        first, second = (int(line.strip()) for line in lines[:2])
        product = karatsuba(first, second)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(product, end="")
    return 0