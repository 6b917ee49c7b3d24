"""Course scheduling over prerequisite graphs."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Iterable, Sequence


def _edges(n: int, edges: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Return (course, prerequisite) pairs, checking both lie in 0..n-1."""
    pairs = []
    for edge in edges:
        if len(edge) < 2:
            raise ValueError(f"edge {edge!r} needs a course and a prerequisite")
        course, prerequisite = edge[0], edge[1]
        if not (0 <= course < n and 0 <= prerequisite < n):
            raise ValueError(f"edge {edge!r} names a course outside 0..{n - 1}")
        pairs.append((course, prerequisite))
    return pairs


def _kahn_order(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Return courses in the order they become free to take."""
    dependents: defaultdict[int, list[int]] = defaultdict(list)
    indegree = [0] * n
    for course, prerequisite in _edges(n, edges):
        dependents[prerequisite].append(course)
        indegree[course] += 1

    order = [course for course in range(n) if indegree[course] == 0]
    queue = deque(order)
    while queue:
        done = queue.popleft()
        for course in dependents[done]:
            indegree[course] -= 1
            if indegree[course] == 0:
                order.append(course)
                queue.append(course)
    return order


def can_finish_bfs(n: int, edges: Iterable[Sequence[int]]) -> bool:
    """Return True if all ``n`` courses can be taken, by peeling free courses."""
    return len(_kahn_order(n, edges)) == n


def can_finish_dfs(n: int, edges: Iterable[Sequence[int]]) -> bool:
    """Return True if all ``n`` courses can be taken, by searching for a cycle."""
    prerequisites: defaultdict[int, list[int]] = defaultdict(list)
    for course, prerequisite in _edges(n, edges):
        prerequisites[course].append(prerequisite)

    unvisited, in_progress, finished = 0, 1, 2
    state = [unvisited] * n
    for start in range(n):
        if state[start] != unvisited:
            continue
        state[start] = in_progress
        stack = [(start, iter(prerequisites[start]))]
        while stack:
            node, remaining = stack[-1]
            following = next(remaining, None)
            if following is None:
                state[node] = finished
                stack.pop()
            elif state[following] == in_progress:
                return False
            elif state[following] == unvisited:
                state[following] = in_progress
                stack.append((following, iter(prerequisites[following])))
    return True


def find_order(
    num_courses: int, prerequisites: Iterable[Sequence[int]]
) -> list[int]:
    """Return an order to take every course in, or an empty list if none exists.

    Each prerequisite pair ``[a, b]`` means course ``b`` comes before ``a``.
    """
    order = _kahn_order(num_courses, prerequisites)
    return order if len(order) == num_courses else []