"""Exercises on two-dimensional grids."""

from __future__ import annotations

from bisect import bisect_right
from typing import MutableSequence, Sequence


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Find ``target`` in a grid whose rows and columns are both ascending.

    The search walks from the top-right corner, dropping a column when the
    value is too large and a row when it is too small.
    """
    if not matrix:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False


def kth_smallest(matrix: Sequence[Sequence[int]], k: int) -> int:
    """Return the k-th smallest value of a square grid with sorted rows and columns.

    An empty grid gives 0.
    """
    if not matrix:
        return 0
    low, high = matrix[0][0], matrix[-1][-1]
    while low < high:
        mid = (low + high) // 2
        at_most = sum(bisect_right(row, mid) for row in matrix)
        if at_most < k:
            low = mid + 1
        else:
            high = mid
    return low


_NEIGHBOURS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]


def game_of_life(board: MutableSequence[MutableSequence[int]]) -> None:
    """Advance a grid of 0/1 cells one generation of Conway's Life, in place."""
    if not board:
        return
    rows, cols = len(board), len(board[0])

    def live_neighbours(r: int, c: int) -> int:
        return sum(
            1
            for dr, dc in _NEIGHBOURS
            if 0 <= r + dr < rows and 0 <= c + dc < cols and board[r + dr][c + dc] == 1
        )

    def next_state(r: int, c: int) -> int:
        count = live_neighbours(r, c)
        if count == 3:
            return 1
        if count == 2 and board[r][c] == 1:
            return 1
        return 0

    updated = [[next_state(r, c) for c in range(cols)] for r in range(rows)]
    for row, new_row in zip(board, updated):
        row[:] = new_row