"""Exercises on integers and number theory."""

from __future__ import annotations

from collections import Counter
from math import gcd as _gcd
from math import isqrt
from typing import Sequence

_MASK32 = 0xFFFFFFFF
_SIGN32 = 0x80000000
_COIN_LIMIT = 10000


def _to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= _MASK32
    return value - (1 << 32) if value & _SIGN32 else value


def num_squares(n: int) -> int:
    """Return the least number of perfect squares that sum to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    best = [0]
    for i in range(1, n + 1):
        best.append(min(best[i - j * j] for j in range(1, isqrt(i) + 1)) + 1)
    return best[n]


def is_power_of_three(n: int) -> bool:
    """Return True if ``n`` is 3 raised to a non-negative integer power."""
    if n < 1:
        return False
    while n % 3 == 0:
        n //= 3
    return n == 1


def get_sum(a: int, b: int) -> int:
    """Add two 32-bit integers using only bitwise operations.

    The result wraps around like signed 32-bit arithmetic.
    """
    a &= _MASK32
    b &= _MASK32
    while b:
        a, b = a ^ b, ((a & b) << 1) & _MASK32
    return _to_int32(a)


def get_multi(a: int, b: int) -> int:
    """Multiply by shifting ``a`` and adding it for each set bit of ``b``.

    ``b`` must not be negative. The result wraps like signed 32-bit arithmetic.
    """
    if b < 0:
        raise ValueError("the multiplier must not be negative")
    result = 0
    for shift in range(b.bit_length()):
        if (b >> shift) & 1:
            result = get_sum(result, _to_int32(a << shift))
    return result


def count_primes(n: int) -> int:
    """Return how many primes are strictly less than ``n``."""
    if n < 3:
        return 0
    composite = bytearray(n)
    for i in range(2, isqrt(n) + 1):
        if not composite[i]:
            multiples = range(i * i, n, i)
            composite[i * i::i] = b"\x01" * len(multiples)
    return sum(1 for i in range(2, n) if not composite[i])


def _truncated_remainder(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend, for a positive divisor."""
    remainder = abs(a) % b
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor by repeated division.

    The loop runs while ``b`` is positive, so ``gcd(a, 0)`` is ``a``.
    """
    while b > 0:
        a, b = b, _truncated_remainder(a, b)
    return a


def max_points(points: Sequence[Sequence[int]]) -> int:
    """Return the largest number of the given points lying on one straight line.

    Repeated points count once for every time they appear.
    """
    n = len(points)
    if n < 3:
        return n
    best = 1
    for i, (x0, y0) in enumerate(points[:-1]):
        same = 1
        slopes: Counter[tuple[int, int]] = Counter()
        for x1, y1 in points[i + 1:]:
            dx, dy = x0 - x1, y0 - y1
            if dx == 0 and dy == 0:
                same += 1
                continue
            divisor = _gcd(dx, dy)
            dx, dy = dx // divisor, dy // divisor
            if dy < 0 or (dy == 0 and dx < 0):
                dx, dy = -dx, -dy
            slopes[(dy, dx)] += 1
        best = max(best, same + max(slopes.values(), default=0))
    return best


def bottles(n: int) -> int:
    """Count the drinks had when three empty bottles buy one more.

    With two empties left, one more drink is borrowed and its three
    empties given back.
    """
    count = 0
    while n > 2:
        traded, kept = divmod(n, 3)
        count += traded
        n = traded + kept
    if n == 2:
        count += 1
    return count


def weight_num(weights: Sequence[int], nums: Sequence[int]) -> int:
    """Count the distinct weights that can be measured, zero included.

    ``nums[i]`` is how many copies of ``weights[i]`` are available.
    """
    if len(weights) != len(nums):
        raise ValueError("weights and nums must have the same length")
    total = sum(w * c for w, c in zip(weights, nums))
    reachable = {total}
    for weight, count in zip(weights, nums):
        reachable |= {
            value - k * weight
            for value in reachable
            for k in range(1, count + 1)
            if value - k * weight > 0
        }
    return len(reachable) + 1


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins that make up ``amount``, or -1 if none do.

    Answers of 10000 coins or more are reported as -1.
    """
    usable = [c for c in coins if c > 0]
    fewest = [0]
    for i in range(1, amount + 1):
        best = min(
            (fewest[i - c] for c in usable if c <= i and fewest[i - c] < _COIN_LIMIT),
            default=_COIN_LIMIT,
        )
        fewest.append(best + 1)
    result = fewest[amount]
    return -1 if result >= _COIN_LIMIT else result