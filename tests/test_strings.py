import pytest

from cpkit.strings import (
    OnlineManacher,
    count_occurrences,
    is_palindrome,
    longest_palindrome,
    manacher,
    palindrome_radii_even,
    palindrome_radii_odd,
    prefix_function,
    sort_cyclic_shifts,
    suffix_array,
    suffix_lower_bound,
    z_function,
)

WORDS = ["abacabad", "aaaa", "abcba", "aabaaab", "banana", "x", "abba"]


@pytest.mark.parametrize("s", WORDS)
def test_prefix_function_borders(s):
    pi = prefix_function(s)
    assert len(pi) == len(s)
    for i, k in enumerate(pi):
        assert k <= i
        assert s[:k] == s[i - k + 1: i + 1]
        if i + 1 < len(s):
            assert pi[i + 1] <= k + 1


def test_prefix_function_known():
    assert prefix_function("aabaaab") == [0, 1, 0, 1, 2, 2, 3]


@pytest.mark.parametrize("s", WORDS)
def test_z_function_matches(s):
    z = z_function(s)
    assert z[0] == 0
    for i in range(1, len(s)):
        k = z[i]
        assert s[:k] == s[i: i + k]
        if i + k < len(s):
            assert s[k] != s[i + k]


@pytest.mark.parametrize("s", WORDS)
def test_manacher_is_palindrome(s):
    radii = manacher(s)
    assert len(radii) == 2 * len(s) - 1
    for l in range(len(s)):
        for r in range(l, len(s)):
            sub = s[l: r + 1]
            assert is_palindrome(l, r, radii) == (sub == sub[::-1])


def test_longest_palindrome_known():
    assert longest_palindrome("forgeeksskeegfor") == "geeksskeeg"


@pytest.mark.parametrize("s", WORDS)
def test_longest_palindrome_is_longest(s):
    best = longest_palindrome(s)
    assert best == best[::-1]
    assert best in s
    radii = manacher(s)
    for l in range(len(s)):
        for r in range(l, len(s)):
            if is_palindrome(l, r, radii):
                assert r - l + 1 <= len(best)


@pytest.mark.parametrize("s", WORDS)
def test_online_manacher_agrees(s):
    om = OnlineManacher()
    for i, c in enumerate(s):
        om.add_letter(c)
        prefix = s[: i + 1]
        assert om.max_palindrome() == len(longest_palindrome(prefix))
        d1 = palindrome_radii_odd(prefix)
        d2 = palindrome_radii_even(prefix)
        for j in range(i + 1):
            assert om.radius(True, j) == d1[j]
            assert om.radius(False, j) == d2[j]


def test_online_manacher_errors():
    om = OnlineManacher()
    with pytest.raises(ValueError):
        om.add_letter("ab")
    with pytest.raises(IndexError):
        om.radius(True, 0)


def test_suffix_array_banana():
    assert suffix_array("banana") == [5, 3, 1, 0, 4, 2]


@pytest.mark.parametrize("s", WORDS)
def test_suffix_array_sorted(s):
    sa = suffix_array(s)
    assert sorted(sa) == list(range(len(s)))
    suffixes = [s[i:] for i in sa]
    assert suffixes == sorted(suffixes)


@pytest.mark.parametrize("s", WORDS)
def test_cyclic_shifts_sorted(s):
    order = sort_cyclic_shifts(s + "$")
    shifts = [(s + "$")[i:] + (s + "$")[:i] for i in order]
    assert shifts == sorted(shifts)


@pytest.mark.parametrize("pattern", ["a", "ana", "ban", "nab", "banana", "z"])
def test_count_occurrences(pattern):
    text = "banana"
    sa = suffix_array(text)
    expected = sum(text.startswith(pattern, i) for i in range(len(text)))
    assert count_occurrences(pattern, text, sa) == expected


def test_lower_bound_past_end():
    text = "banana"
    sa = suffix_array(text)
    assert suffix_lower_bound("zzz", text, sa) == len(text)
    assert suffix_lower_bound("", text, sa) == 0