"""Exercises on integer arrays."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import product
from operator import xor
from typing import MutableSequence, Optional, Sequence


def trap(heights: Sequence[int]) -> int:
    """Return how much rain water is held between the bars of an elevation map."""
    water = 0
    stack: list[int] = []
    for i, height in enumerate(heights):
        while stack and height > heights[stack[-1]]:
            bottom = stack.pop()
            if not stack:
                break
            left = stack[-1]
            width = i - left - 1
            depth = min(height, heights[left]) - heights[bottom]
            water += width * depth
        stack.append(i)
    return water


def first_missing_positive(nums: Sequence[int]) -> int:
    """Return the smallest positive integer that does not occur in ``nums``."""
    present = {x for x in nums if x > 0}
    candidate = 1
    while candidate in present:
        candidate += 1
    return candidate


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the largest rectangle that fits under a histogram of unit-wide bars."""
    best = 0
    stack: list[int] = []
    for i, height in enumerate([*heights, 0]):
        while stack and heights[stack[-1]] > height:
            top = stack.pop()
            width = i if not stack else i - stack[-1] - 1
            best = max(best, heights[top] * width)
        stack.append(i)
    return best


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the other values in order."""
    kept = [x for x in nums if x != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))


def find_duplicate(nums: Sequence[int]) -> int:
    """Find the repeated value among n+1 numbers drawn from 1..n.

    Binary search on the value range: if more than ``mid`` numbers are at
    most ``mid``, the duplicate lies in the lower half. The input is not
    modified and only constant extra space is used.
    """
    low, high = 1, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        count = sum(1 for x in nums if x <= mid)
        if count > mid:
            high = mid
        else:
            low = mid + 1
    return high


def length_of_lis(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    best: list[int] = []
    for i, value in enumerate(nums):
        longest_before = max(
            (best[j] for j in range(i) if nums[j] < value), default=0
        )
        best.append(longest_before + 1)
    return max(best, default=0)


def increasing_triplet(nums: Sequence[int]) -> bool:
    """Return True if some i < j < k has nums[i] < nums[j] < nums[k]."""
    if len(nums) < 3:
        return False
    low = spare_low = nums[0]
    high: Optional[int] = None
    for x in nums[1:]:
        if high is None:
            if x > low:
                high = x
            else:
                low = x
        elif low < x < high:
            high = x
        elif spare_low < x < high:
            low = spare_low
            high = x
        elif x < low:
            spare_low = x
        elif high > low and x > high:
            return True
    return False


def reverse_string(chars: MutableSequence[str]) -> None:
    """Reverse a list of characters in place."""
    n = len(chars)
    for i in range(n // 2):
        chars[i], chars[n - 1 - i] = chars[n - 1 - i], chars[i]


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """Return the ``k`` values that occur most often, most frequent first."""
    return [value for value, _ in Counter(nums).most_common(k)]


def intersect(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Return the multiset intersection of two arrays in ascending order."""
    return sorted((Counter(nums1) & Counter(nums2)).elements())


def four_sum_count(
    a: Sequence[int], b: Sequence[int], c: Sequence[int], d: Sequence[int]
) -> int:
    """Count index tuples (i, j, k, l) with a[i] + b[j] + c[k] + d[l] == 0."""
    pair_sums = Counter(x + y for x, y in product(a, b))
    return sum(pair_sums[-(x + y)] for x, y in product(c, d))


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of 0..n missing from ``n`` distinct values."""
    if not nums:
        return 0
    return reduce(xor, range(len(nums) + 1), 0) ^ reduce(xor, nums, 0)


def wiggle_sort(nums: MutableSequence[int]) -> None:
    """Reorder in place so that nums[0] < nums[1] > nums[2] < nums[3] ...

    Even slots take the smaller half in descending order, odd slots the
    larger half in descending order.
    """
    descending = sorted(nums, reverse=True)
    half = len(nums) // 2
    nums[::2] = descending[half:]
    nums[1::2] = descending[:half]