"""Classic comparison sorts. Each one sorts the given list in place."""

from __future__ import annotations

from typing import MutableSequence


def insertion_sort(values: MutableSequence[int]) -> None:
    """Sort by sliding each element left past larger neighbours."""
    for i in range(1, len(values)):
        j = i
        while j > 0 and values[j] < values[j - 1]:
            values[j - 1], values[j] = values[j], values[j - 1]
            j -= 1


def selection_sort(values: MutableSequence[int]) -> None:
    """Sort by swapping the smallest remaining element into place."""
    n = len(values)
    for i in range(n - 1):
        smallest = min(range(i, n), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sorted(values: list[int]) -> list[int]:
    if len(values) < 2:
        return values
    mid = (len(values) + 1) // 2
    return _merge(_merge_sorted(values[:mid]), _merge_sorted(values[mid:]))


def merge_sort(values: MutableSequence[int]) -> None:
    """Sort by splitting in halves and merging the sorted halves."""
    values[:] = _merge_sorted(list(values))


def _partition(values: MutableSequence[int], low: int, high: int) -> int:
    """Partition around values[low]; return the pivot's final index."""
    pivot = values[low]
    boundary = low
    for j in range(low + 1, high + 1):
        if values[j] <= pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[low], values[boundary] = values[boundary], values[low]
    return boundary


def quick_sort(values: MutableSequence[int]) -> None:
    """Sort by partitioning around the first element of each range."""
    ranges = [(0, len(values) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            p = _partition(values, low, high)
            ranges.append((low, p - 1))
            ranges.append((p + 1, high))