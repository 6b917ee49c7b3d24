"""Exercises on strings."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator


def is_match(s: str, p: str) -> bool:
    """Match ``s`` against a wildcard pattern over the whole string.

    ``?`` matches any single character and ``*`` matches any run of
    characters, including an empty one.
    """
    if not p:
        return not s
    n = len(p)
    # previous[j]: does s[:i-1] match p[:j]; current[j]: does s[:i] match p[:j]
    previous = [True] + [False] * n
    for j, symbol in enumerate(p, start=1):
        previous[j] = symbol == "*" and previous[j - 1]
    for ch in s:
        current = [False] * (n + 1)
        for j, symbol in enumerate(p, start=1):
            if symbol == "*":
                current[j] = current[j - 1] or previous[j]
            elif symbol == "?" or symbol == ch:
                current[j] = previous[j - 1]
        previous = current
    return previous[n]


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` holding every character of ``t``.

    Repeated characters in ``t`` must appear as often in the window. The
    leftmost shortest window wins; an empty string means there is none.
    """
    need = Counter(t)
    missing = len(t)
    left = 0
    best_pos = best_len = 0
    for right, ch in enumerate(s):
        need[ch] -= 1
        if need[ch] >= 0:
            missing -= 1
        while missing == 0 and left <= right:
            width = right - left + 1
            if best_len == 0 or best_len > width:
                best_pos, best_len = left, width
            need[s[left]] += 1
            if need[s[left]] > 0:
                missing += 1
            left += 1
    return s[best_pos:best_pos + best_len]


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` is a rearrangement of the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def fizz_buzz(n: int) -> list[str]:
    """Return the FizzBuzz sequence for 1..n."""

    def word(i: int) -> str:
        if i % 15 == 0:
            return "FizzBuzz"
        if i % 3 == 0:
            return "Fizz"
        if i % 5 == 0:
            return "Buzz"
        return str(i)

    return [word(i) for i in range(1, n + 1)]


def first_uniq_char(s: str) -> int:
    """Return the index of the first character that occurs once, or -1."""
    counts = Counter(s)
    return next((i for i, ch in enumerate(s) if counts[ch] == 1), -1)


def word_break(s: str, words: Iterable[str]) -> list[str]:
    """Return every way to split ``s`` into dictionary words.

    Each result is the words joined by single spaces; the results are
    returned in sorted order.
    """
    dictionary = {word for word in words if word}
    lengths = {len(word) for word in dictionary}
    n = len(s)
    # starts[i]: positions j such that s[j:i] is a word reachable from 0
    starts: list[set[int]] = [set() for _ in range(n + 1)]
    for end in range(1, n + 1):
        for length in lengths:
            begin = end - length
            if begin < 0 or s[begin:end] not in dictionary:
                continue
            if begin == 0 or starts[begin]:
                starts[end].add(begin)

    def sentences(end: int) -> Iterator[list[str]]:
        for begin in starts[end]:
            word = s[begin:end]
            if begin == 0:
                yield [word]
            else:
                for prefix in sentences(begin):
                    yield [*prefix, word]

    return sorted(" ".join(parts) for parts in sentences(n))