"""Integer arithmetic helpers: division, binary addition, roots, primes and bit counts."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key
from itertools import zip_longest
from math import isqrt

__all__ = [
    "divide",
    "add_binary",
    "integer_sqrt",
    "largest_number",
    "count_primes",
    "count_bits",
]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def divide(dividend: int, divisor: int) -> int:
    """Divide two 32-bit integers, truncating toward zero.

    The single overflowing case, ``INT_MIN / -1``, is clamped to ``INT_MAX``.
    Raises ZeroDivisionError when ``divisor`` is zero.
    """
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    if dividend == INT_MIN and divisor == -1:
        return INT_MAX
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def add_binary(a: str, b: str) -> str:
    """Add two numbers written in binary and return the sum in binary.

    The result is at least as long as the longer operand, so leading zeros
    of the operands are kept. Raises ValueError on a digit other than 0 or 1.
    """
    digits: list[str] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        if x not in "01" or y not in "01":
            raise ValueError(f"invalid binary digit in {a!r} or {b!r}")
        total = carry + int(x) + int(y)
        digits.append(str(total % 2))
        carry = total // 2
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def integer_sqrt(x: int) -> int:
    """Return the largest integer whose square does not exceed ``x``.

    Raises ValueError for a negative ``x``.
    """
    if x < 0:
        raise ValueError("integer_sqrt() argument must be non-negative")
    return isqrt(x)


def _concat_order(a: str, b: str) -> int:
    if a + b > b + a:
        return -1
    if a + b < b + a:
        return 1
    return 0


def largest_number(nums: Iterable[int]) -> str:
    """Arrange non-negative integers so their concatenation is as large as possible.

    Raises ValueError for an empty input.
    """
    parts = sorted((str(num) for num in nums), key=cmp_to_key(_concat_order))
    if not parts:
        raise ValueError("largest_number() arg is an empty iterable")
    if parts[0] == "0":
        return "0"
    return "".join(parts)


def count_primes(n: int) -> int:
    """Count the primes strictly less than ``n``."""
    if n <= 2:
        return 0
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for i in range(2, isqrt(n - 1) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, n, i)))
    return sum(sieve)


def count_bits(n: int) -> list[int]:
    """Return the number of set bits of every integer from 0 to ``n``.

    Raises ValueError for a negative ``n``.
    """
    if n < 0:
        raise ValueError("count_bits() argument must be non-negative")
    bits = [0] * (n + 1)
    for i in range(1, n + 1):
        bits[i] = bits[i >> 1] + (i & 1)
    return bits