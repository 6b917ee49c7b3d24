from collections import Counter

import pytest

from drillbook.strings import (
    first_uniq_char,
    fizz_buzz,
    is_anagram,
    is_match,
    min_window,
    word_break,
)


@pytest.mark.parametrize(
    "s, p, expected",
    [
        (
            "babbbbaabababaabbababaababaabbaabababbaaababbababaaaaaabbabaaaabababbabbababbbaaaababbbabbbbbbbbbbaabbb",
            "b**bb**a**bba*b**a*bbb**aba***babbb*aa****aabb*bbb***a",
            False,
        ),
        ("c", "*?*", True),
        ("abefcdgiescdfimde", "ab*cd?i*de", True),
        ("aa", "a", False),
        ("aa", "*", True),
        ("cb", "?a", False),
        ("adceb", "*a*b", True),
        ("acdcb", "a*c?b", False),
    ],
)
def test_is_match_source_cases(s, p, expected):
    assert is_match(s, p) is expected


def test_is_match_empty_pattern():
    assert is_match("", "") is True
    assert is_match("a", "") is False


def test_is_match_stars_match_empty_string():
    assert is_match("", "***") is True
    assert is_match("", "*?") is False


def test_min_window_source_case():
    assert min_window("cabwefgewcwaefgcf", "cae") == "cwae"


def test_min_window_covers_target():
    s, t = "xaybzcyaxb", "abc"
    window = min_window(s, t)
    assert window in s
    assert not (Counter(t) - Counter(window))


def test_min_window_no_window():
    assert min_window("abc", "d") == ""
    assert min_window("a", "aa") == ""


def test_min_window_whole_string():
    assert min_window("ab", "ba") == "ab"


@pytest.mark.parametrize(
    "s, t, expected",
    [
        ("a", "a", True),
        ("anagram", "nagaram", True),
        ("rat", "car", False),
        ("ab", "abc", False),
    ],
)
def test_is_anagram(s, t, expected):
    assert is_anagram(s, t) is expected


def test_is_anagram_symmetric():
    assert is_anagram("listen", "silent") == is_anagram("silent", "listen")


def test_fizz_buzz_fifteen():
    result = fizz_buzz(15)
    assert len(result) == 15
    assert result[0] == "1"
    assert result[2] == "Fizz"
    assert result[4] == "Buzz"
    assert result[14] == "FizzBuzz"


def test_fizz_buzz_empty():
    assert fizz_buzz(0) == []


def test_first_uniq_char_leetcode():
    assert first_uniq_char("leetcode") == 0


@pytest.mark.parametrize("s", ["loveleetcode", "aabbcdc", "zz y"])
def test_first_uniq_char_invariant(s):
    index = first_uniq_char(s)
    counts = Counter(s)
    assert counts[s[index]] == 1
    assert all(counts[ch] > 1 for ch in s[:index])


def test_first_uniq_char_none():
    assert first_uniq_char("aabb") == -1
    assert first_uniq_char("") == -1


def test_word_break_pineapple():
    words = ["apple", "pen", "applepen", "pine", "pineapple"]
    assert word_break("pineapplepenapple", words) == [
        "pine apple pen apple",
        "pine applepen apple",
        "pineapple pen apple",
    ]


def test_word_break_no_split():
    words = ["cats", "dog", "sand", "and", "cat"]
    assert word_break("catsandog", words) == []


@pytest.mark.parametrize(
    "s, words",
    [
        ("catsanddog", ["cat", "cats", "and", "sand", "dog"]),
        ("aaaaaaa", ["aaaa", "aaa"]),
    ],
)
def test_word_break_sentences_rebuild_input(s, words):
    result = word_break(s, words)
    assert result
    assert len(set(result)) == len(result)
    for sentence in result:
        parts = sentence.split(" ")
        assert "".join(parts) == s
        assert all(part in words for part in parts)