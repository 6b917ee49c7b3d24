import pytest

from drillbook.matrix import game_of_life, kth_smallest, search_matrix

LARGE = [
    [1, 6, 10, 13, 14, 16, 21],
    [3, 10, 12, 18, 22, 27, 29],
    [3, 15, 19, 20, 23, 29, 34],
    [8, 15, 19, 25, 27, 29, 39],
    [12, 17, 24, 25, 28, 29, 41],
    [16, 22, 27, 31, 31, 33, 44],
    [20, 26, 28, 35, 39, 41, 45],
    [25, 31, 34, 39, 44, 45, 47],
]

SQUARE = [
    [1, 4, 7, 11, 15],
    [2, 5, 8, 12, 19],
    [3, 6, 9, 16, 22],
    [10, 13, 14, 17, 24],
    [18, 21, 23, 26, 30],
]


def test_search_matrix_source_case():
    assert search_matrix(LARGE, 39) is True


@pytest.mark.parametrize("grid", [LARGE, SQUARE])
def test_search_matrix_agrees_with_membership(grid):
    for target in range(-1, 50):
        expected = any(target in row for row in grid)
        assert search_matrix(grid, target) is expected


def test_search_matrix_single_row():
    assert search_matrix([[1, 1]], 0) is False
    assert search_matrix([[1, 1]], 1) is True


def test_search_matrix_empty():
    assert search_matrix([], 1) is False
    assert search_matrix([[]], 1) is False


def test_kth_smallest_source_case():
    grid = [[1, 5, 9], [10, 11, 13], [12, 13, 15]]
    assert kth_smallest(grid, 8) == 13


@pytest.mark.parametrize("grid", [SQUARE, [[1, 5, 9], [10, 11, 13], [12, 13, 15]], [[-5, -4], [-3, -1]]])
def test_kth_smallest_matches_sorted_order(grid):
    flat = sorted(value for row in grid for value in row)
    for k, value in enumerate(flat, start=1):
        assert kth_smallest(grid, k) == value


def test_kth_smallest_empty():
    assert kth_smallest([], 1) == 0


def test_game_of_life_source_board():
    board = [[0, 1, 0], [0, 0, 1], [1, 1, 1], [0, 0, 0]]
    game_of_life(board)
    assert board == [[0, 0, 0], [1, 0, 1], [0, 1, 1], [0, 1, 0]]


def test_game_of_life_block_is_still():
    board = [[0, 0, 0, 0], [0, 1, 1, 0], [0, 1, 1, 0], [0, 0, 0, 0]]
    before = [row[:] for row in board]
    game_of_life(board)
    assert board == before


def test_game_of_life_blinker_period_two():
    board = [[0, 0, 0], [1, 1, 1], [0, 0, 0]]
    before = [row[:] for row in board]
    game_of_life(board)
    assert board == [[0, 1, 0], [0, 1, 0], [0, 1, 0]]
    game_of_life(board)
    assert board == before


def test_game_of_life_keeps_row_objects():
    board = [[1, 1], [1, 0]]
    first_row = board[0]
    game_of_life(board)
    assert board[0] is first_row
    assert board == [[1, 1], [1, 1]]


def test_game_of_life_empty():
    board = []
    game_of_life(board)
    assert board == []