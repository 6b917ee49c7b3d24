"""Dynamic-programming exercises: seating, stamps, knapsack splits and more."""

from __future__ import annotations

import math
from typing import Iterable, Sequence


def seats(n: int) -> int:
    """Count the ways to line up ``n`` people so that no girl stands alone.

    Every girl must have at least one girl directly beside her.
    """
    if n < 1:
        raise ValueError("there must be at least one person")
    if n == 1:
        return 1
    # (arrangements ending with a boy, arrangements ending with a girl)
    before = (1, 0)
    current = (1, 1)
    for _ in range(3, n + 1):
        before, current = current, (current[0] + current[1], before[0] + current[1])
    return sum(current)


def _require_non_negative(values: Iterable[int], what: str) -> list[int]:
    values = list(values)
    if any(v < 0 for v in values):
        raise ValueError(f"{what} must not be negative")
    return values


def stamps(total: int, values: Sequence[int]) -> int:
    """Return the fewest stamps, each used at most once, that add up to ``total``.

    Raises ValueError if no selection of the stamps reaches the total.
    """
    if total < 0:
        raise ValueError("the total must not be negative")
    if any(v <= 0 for v in values):
        raise ValueError("stamp values must be positive")
    fewest = [0.0] + [math.inf] * total
    for value in values:
        for amount in range(total, value - 1, -1):
            fewest[amount] = min(fewest[amount], fewest[amount - value] + 1)
    if math.isinf(fewest[total]):
        raise ValueError(f"the stamps cannot make up {total}")
    return int(fewest[total])


def _subset_sums(weights: Iterable[int]) -> int:
    """Return a bit mask whose bit ``s`` is set when some subset sums to ``s``."""
    reachable = 1
    for weight in weights:
        reachable |= reachable << weight
    return reachable


def _best_fill(weights: Iterable[int], capacity: int) -> int:
    """Return the largest subset sum that does not exceed ``capacity``."""
    reachable = _subset_sums(weights) & ((1 << (capacity + 1)) - 1)
    return reachable.bit_length() - 1


def fruit(weights: Sequence[int]) -> int:
    """Split the fruit into two shares and return the smallest weight difference."""
    weights = _require_non_negative(weights, "fruit weights")
    total = sum(weights)
    return total - 2 * _best_fill(weights, total // 2)


def boat(a: int, b: int, cargo: Sequence[int]) -> bool:
    """Decide whether two boats of capacity ``a`` and ``b`` can carry the cargo.

    The smaller boat is filled as fully as possible; the load left over
    must then be strictly below the larger boat's capacity.
    """
    cargo = _require_non_negative(cargo, "cargo weights")
    if a < 0 or b < 0:
        raise ValueError("boat capacities must not be negative")
    small, big = sorted((a, b))
    return sum(cargo) - _best_fill(cargo, small) < big


def job_plan(jobs: Sequence[Sequence[int]]) -> int:
    """Return the largest total pay from jobs that do not overlap in time.

    Each job is ``(start, end, pay)``. Jobs are considered in order of
    start time; a job may follow the nearest earlier one that ends no later
    than it starts.
    """
    ordered = sorted(jobs, key=lambda job: job[0])
    best = [0]
    for i, (start, _end, pay) in enumerate(ordered):
        previous = next(
            (k for k in range(i, 0, -1) if ordered[k - 1][1] <= start), 0
        )
        best.append(max(best[previous] + pay, best[i]))
    return best[-1]


def missile(heights: Sequence[int]) -> int:
    """Return the most missiles one interceptor can hit.

    The interceptor fires in order and each shot may be no higher than the
    one before it.
    """
    longest: list[int] = []
    for i, height in enumerate(heights):
        longest.append(
            1 + max((longest[j] for j in range(i) if heights[j] >= height), default=0)
        )
    return max(longest, default=0)


def sub_series(values: Sequence[int]) -> int:
    """Return the length of the longest increasing subsequence ending at the last value."""
    if not values:
        return 0
    ending: list[int] = []
    for i, value in enumerate(values):
        ending.append(
            1 + max((ending[j] for j in range(i) if values[j] < value), default=0)
        )
    return ending[-1]


def stack_sequences(n: int) -> int:
    """Count the valid push/pop sequences made of ``n`` stack operations."""
    if n < 0:
        raise ValueError("the number of operations must not be negative")
    if n % 2 == 1:
        return 0
    pairs = n // 2
    previous = [1]
    for i in range(1, pairs + 1):
        row = [1]
        for j in range(1, i + 1):
            if j == i:
                row.append(row[j - 1])
            else:
                row.append(previous[j] + row[j - 1])
        previous = row
    return previous[pairs]