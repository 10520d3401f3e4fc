"""String algorithms: prefix and Z functions, palindromes and suffix arrays."""

from __future__ import annotations

from collections.abc import Sequence


def prefix_function(s: str) -> list[int]:
    """For each i, the length of the longest proper border of s[:i + 1]."""
    lps = [0] * len(s)
    j = 0
    for i in range(1, len(s)):
        while j and s[i] != s[j]:
            j = lps[j - 1]
        if s[i] == s[j]:
            j += 1
            lps[i] = j
    return lps


def z_function(s: str) -> list[int]:
    """For each i, the length of the longest common prefix of s and s[i:]; z[0] is 0."""
    n = len(s)
    z = [0] * n
    l = r = 0
    for i in range(1, n):
        if i <= r:
            z[i] = min(r - i + 1, z[i - l])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > r:
            l, r = i, i + z[i] - 1
    return z


def _manacher_odd(s: str) -> list[int]:
    n = len(s)
    t = "\0" + s + "\1"
    p = [0] * (n + 2)
    l = r = 1
    for i in range(1, n + 1):
        p[i] = max(0, min(r - i, p[l + (r - i)]))
        while t[i - p[i]] == t[i + p[i]]:
            p[i] += 1
        if i + p[i] > r:
            l, r = i - p[i], i + p[i]
    return p[1:-1]


def manacher(s: str) -> list[int]:
    """Palindrome table over the 2n - 1 centres of ``s``, for use with :func:`is_palindrome`."""
    if not s:
        return []
    t = "".join("#" + c for c in s) + "#"
    return _manacher_odd(t)[1:-1]


def is_palindrome(l: int, r: int, radii: Sequence[int]) -> bool:
    """Whether s[l..r] inclusive is a palindrome, given ``radii = manacher(s)``."""
    return radii[l + r] >= r - l + 1


def palindrome_radii_odd(s: str) -> list[int]:
    """d1[i]: the number of odd palindromes centred at i (length 2 * d1[i] - 1 at most)."""
    n = len(s)
    d1 = [0] * n
    l, r = 0, -1
    for i in range(n):
        k = 1 if i > r else min(d1[l + r - i], r - i) + 1
        while i + k < n and i - k >= 0 and s[i + k] == s[i - k]:
            k += 1
        d1[i] = k
        k -= 1
        if i + k > r:
            l, r = i - k, i + k
    return d1


def palindrome_radii_even(s: str) -> list[int]:
    """d2[i]: the largest k with s[i - k .. i + k - 1] a palindrome."""
    n = len(s)
    d2 = [0] * n
    l, r = 0, -1
    for i in range(n):
        k = 1 if i > r else min(d2[l + r - i + 1], r - i + 1) + 1
        while i + k - 1 < n and i - k >= 0 and s[i + k - 1] == s[i - k]:
            k += 1
        k -= 1
        d2[i] = k
        if i + k - 1 > r:
            l, r = i - k, i + k - 1
    return d2


def longest_palindrome(s: str) -> str:
    """The leftmost longest palindromic substring of ``s``."""
    if not s:
        return ""
    t = "".join("#" + c for c in s) + "#"
    n = len(t)
    length = [0] * n
    right = 0
    middle = 0
    for i in range(n):
        mirror = middle - (i - middle)
        if i <= right:
            length[i] = min(right - i, length[mirror])
        lo, hi = i - 1 - length[i], i + 1 + length[i]
        while lo >= 0 and hi < n and t[lo] == t[hi]:
            length[i] += 1
            lo -= 1
            hi += 1
        if hi - 1 > right:
            right = hi - 1
            middle = i
    best = max(range(n), key=lambda i: (length[i], -i))
    span = t[best - length[best]: best + length[best] + 1]
    return span.replace("#", "")


class OnlineManacher:
    """Palindrome radii and the longest palindrome of a string built letter by letter."""

    def __init__(self) -> None:
        self._chars: list[str] = []
        self._odd: list[int] | None = []
        self._even: list[int] | None = []
        self._best = 0

    def _tables(self) -> tuple[list[int], list[int]]:
        if self._odd is None or self._even is None:
            text = "".join(self._chars)
            self._odd = palindrome_radii_odd(text)
            self._even = palindrome_radii_even(text)
        return self._odd, self._even

    def add_letter(self, c: str) -> None:
        """Append one character."""
        if len(c) != 1:
            raise ValueError("expected a single character")
        self._chars.append(c)
        self._odd = self._even = None
        text = "".join(self._chars)
        n = len(text)
        # The longest palindromic suffix grows by at most two per letter.
        for length in range(min(self._best + 2, n), 0, -1):
            tail = text[n - length:]
            if tail == tail[::-1]:
                self._best = max(self._best, length)
                break

    def max_palindrome(self) -> int:
        """Length of the longest palindrome in the text so far."""
        return self._best

    def radius(self, odd: bool, pos: int) -> int:
        """Odd or even radius at ``pos``, as in the radii functions."""
        if not 0 <= pos < len(self._chars):
            raise IndexError("position out of range")
        odd_table, even_table = self._tables()
        return odd_table[pos] if odd else even_table[pos]


def sort_cyclic_shifts(s: str) -> list[int]:
    """Start indices of the cyclic shifts of ``s`` in sorted order."""
    n = len(s)
    if n == 0:
        return []
    order = sorted(range(n), key=lambda i: s[i])
    cls = [0] * n
    for prev, cur in zip(order, order[1:]):
        cls[cur] = cls[prev] + (s[cur] != s[prev])
    k = 1
    while k < n:
        key = [(cls[i], cls[(i + k) % n]) for i in range(n)]
        order = sorted(range(n), key=key.__getitem__)
        new_cls = [0] * n
        for prev, cur in zip(order, order[1:]):
            new_cls[cur] = new_cls[prev] + (key[cur] != key[prev])
        cls = new_cls
        k <<= 1
    return order


def suffix_array(s: str) -> list[int]:
    """Start indices of the suffixes of ``s`` in sorted order."""
    return sort_cyclic_shifts(s + "$")[1:]


def suffix_lower_bound(pattern: str, text: str, sa: Sequence[int]) -> int:
    """First rank in ``sa`` whose suffix is not smaller than ``pattern``; len(text) if none."""
    result = len(text)
    low, high = 0, len(sa) - 1
    while low <= high:
        mid = (low + high) // 2
        if pattern <= text[sa[mid]:]:
            result = mid
            high = mid - 1
        else:
            low = mid + 1
    return result


def count_occurrences(pattern: str, text: str, sa: Sequence[int]) -> int:
    """Number of (possibly overlapping) occurrences of ``pattern`` in ``text``."""
    start = suffix_lower_bound(pattern, text, sa)
    end = suffix_lower_bound(pattern + "~", text, sa)
    return end - start