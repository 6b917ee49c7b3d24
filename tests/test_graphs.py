import pytest

from drillbook.graphs import can_finish_bfs, can_finish_dfs, find_order

CASES = [
    (10, [[1, 2], [2, 3], [2, 4], [3, 4], [4, 5], [5, 6], [6, 7]], True),
    (8, [[1, 0], [2, 6], [1, 7], [6, 4], [7, 0], [0, 5]], True),
    (4, [[2, 0], [1, 0], [3, 1], [3, 2], [1, 3]], False),
    (4, [[1, 0], [3, 1], [3, 2], [1, 3]], False),
    (3, [[1, 0], [2, 1]], True),
    (3, [[0, 1], [0, 2], [1, 0]], False),
    (4, [[0, 1], [3, 1], [1, 3], [3, 2]], False),
    (5, [[1, 2], [2, 3], [3, 4], [4, 1]], False),
    (2, [[1, 0]], True),
    (2, [[1, 0], [0, 1]], False),
]


@pytest.mark.parametrize("n, edges, expected", CASES)
def test_can_finish_bfs(n, edges, expected):
    assert can_finish_bfs(n, edges) is expected


@pytest.mark.parametrize("n, edges, expected", CASES)
def test_can_finish_dfs(n, edges, expected):
    assert can_finish_dfs(n, edges) is expected


@pytest.mark.parametrize("n, edges, expected", CASES)
def test_find_order_respects_prerequisites(n, edges, expected):
    order = find_order(n, edges)
    if not expected:
        assert order == []
        return
    assert sorted(order) == list(range(n))
    position = {course: i for i, course in enumerate(order)}
    assert all(position[b] < position[a] for a, b in edges)


def test_find_order_simple_chain():
    assert find_order(2, [[1, 0]]) == [0, 1]


def test_find_order_diamond_starts_and_ends_fixed():
    order = find_order(4, [[1, 0], [2, 0], [3, 1], [3, 2]])
    assert order[0] == 0
    assert order[-1] == 3
    assert sorted(order[1:3]) == [1, 2]


def test_no_edges_every_course_free():
    assert find_order(3, []) == [0, 1, 2]
    assert can_finish_bfs(3, []) is True
    assert can_finish_dfs(3, []) is True


@pytest.mark.parametrize("check", [can_finish_bfs, can_finish_dfs, find_order])
def test_edge_outside_range_is_rejected(check):
    with pytest.raises(ValueError):
        check(2, [[1, 5]])


@pytest.mark.parametrize("check", [can_finish_bfs, can_finish_dfs, find_order])
def test_short_edge_is_rejected(check):
    with pytest.raises(ValueError):
        check(2, [[1]])