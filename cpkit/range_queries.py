"""Offline and static range queries: merge sort tree, Mo's algorithm, Li Chao tree, 2D sums."""

from __future__ import annotations

import math
from bisect import bisect_right
from collections.abc import Sequence
from heapq import merge
from itertools import accumulate

NEG_INF = -(10**18)


class MergeSortTree:
    """Static tree answering count and sum of values <= v over index ranges."""

    def __init__(self, values: Sequence[int]) -> None:
        self._n = len(values)
        self._sorted: list[list[int]] = [[] for _ in range(4 * self._n)]
        self._pref: list[list[int]] = [[] for _ in range(4 * self._n)]
        if self._n:
            self._build(0, 0, self._n - 1, values)

    def _build(self, node: int, l: int, r: int, values: Sequence[int]) -> None:
        if l == r:
            self._sorted[node] = [values[l]]
        else:
            mid = (l + r) // 2
            self._build(2 * node + 1, l, mid, values)
            self._build(2 * node + 2, mid + 1, r, values)
            self._sorted[node] = list(merge(self._sorted[2 * node + 1], self._sorted[2 * node + 2]))
        self._pref[node] = list(accumulate(self._sorted[node]))

    def _query(self, node: int, l: int, r: int, ql: int, qr: int, value: int) -> tuple[int, int]:
        if r < ql or l > qr:
            return 0, 0
        if ql <= l and r <= qr:
            k = bisect_right(self._sorted[node], value)
            return k, (self._pref[node][k - 1] if k else 0)
        mid = (l + r) // 2
        c1, s1 = self._query(2 * node + 1, l, mid, ql, qr, value)
        c2, s2 = self._query(2 * node + 2, mid + 1, r, ql, qr, value)
        return c1 + c2, s1 + s2

    def sum_at_most(self, l: int, r: int, value: int) -> int:
        """Sum of values[i] <= value for i in l..r inclusive."""
        if l > r or not self._n:
            return 0
        return self._query(0, 0, self._n - 1, l, r, value)[1]

    def count_at_most(self, l: int, r: int, value: int) -> int:
        """Number of values[i] <= value for i in l..r inclusive."""
        if l > r or not self._n:
            return 0
        return self._query(0, 0, self._n - 1, l, r, value)[0]


def mo_even_xor(values: Sequence[int], queries: Sequence[tuple[int, int]]) -> list[int]:
    """For each inclusive range, XOR of the distinct values occurring an even, positive number of times."""
    n = len(values)
    for l, r in queries:
        if l > r:
            raise ValueError("query range has l > r")
        if l < 0 or r >= n:
            raise IndexError("query range out of bounds")
    if not queries:
        return []

    block = math.isqrt(n) + 1
    order = sorted(range(len(queries)), key=lambda i: (queries[i][0] // block, queries[i][1]))
    freq: dict[int, int] = {}
    cur = 0

    def shift(x: int, delta: int) -> None:
        nonlocal cur
        before = freq.get(x, 0)
        after = before + delta
        freq[x] = after
        if before > 0 and before % 2 == 0:
            cur ^= x
        if after > 0 and after % 2 == 0:
            cur ^= x

    answers = [0] * len(queries)
    lo, hi = 0, -1
    for qi in order:
        ql, qr = queries[qi]
        while lo > ql:
            lo -= 1
            shift(values[lo], 1)
        while hi < qr:
            hi += 1
            shift(values[hi], 1)
        while lo < ql:
            shift(values[lo], -1)
            lo += 1
        while hi > qr:
            shift(values[hi], -1)
            hi -= 1
        answers[qi] = cur
    return answers


class _LiChaoNode:
    __slots__ = ("line", "left", "right")

    def __init__(self, line: tuple[int, int]) -> None:
        self.line = line
        self.left: _LiChaoNode | None = None
        self.right: _LiChaoNode | None = None


def _at(line: tuple[int, int], x: int) -> int:
    return line[0] * x + line[1]


class LiChaoTree:
    """Maximum of inserted lines y = slope * x + intercept over integers 1..n."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("domain size must be positive")
        self._low = 1
        self._high = n + 1
        self._default = (0, NEG_INF)
        self._root = _LiChaoNode(self._default)

    def insert(self, slope: int, intercept: int) -> None:
        """Add the line slope * x + intercept."""
        line = (slope, intercept)
        node, lo, hi = self._root, self._low, self._high
        while True:
            m = lo + (hi - lo) // 2
            left_better = _at(line, lo) > _at(node.line, lo)
            mid_better = _at(line, m) > _at(node.line, m)
            if mid_better:
                node.line, line = line, node.line
            if hi - lo == 1:
                return
            if left_better != mid_better:
                if node.left is None:
                    node.left = _LiChaoNode(self._default)
                node, hi = node.left, m
            else:
                if node.right is None:
                    node.right = _LiChaoNode(self._default)
                node, lo = node.right, m

    def query(self, x: int) -> int:
        """Largest value of any inserted line at ``x``; NEG_INF when none."""
        if not self._low <= x < self._high:
            raise ValueError("x is outside the tree's domain")
        node, lo, hi = self._root, self._low, self._high
        best = _at(node.line, x)
        while hi - lo > 1:
            m = lo + (hi - lo) // 2
            if x < m and node.left is not None:
                node, hi = node.left, m
            elif x >= m and node.right is not None:
                node, lo = node.right, m
            else:
                break
            best = max(best, _at(node.line, x))
        return best


class CumulativeSum2D:
    """Point additions followed by half-open rectangle sums."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._data = [[0] * (height + 1) for _ in range(width + 1)]
        self._built = False

    def add(self, x: int, y: int, z: int) -> None:
        """Add ``z`` at cell (x, y); cells outside the grid are ignored."""
        if self._built:
            raise RuntimeError("cannot add after build")
        if 0 <= x < self._width and 0 <= y < self._height:
            self._data[x + 1][y + 1] += z

    def build(self) -> None:
        """Turn the cell values into 2D prefix sums."""
        d = self._data
        for i in range(1, len(d)):
            for j in range(1, len(d[i])):
                d[i][j] += d[i][j - 1] + d[i - 1][j] - d[i - 1][j - 1]
        self._built = True

    def query(self, sx: int, sy: int, gx: int, gy: int) -> int:
        """Sum over cells with sx <= x < gx and sy <= y < gy."""
        if not self._built:
            raise RuntimeError("query before build")
        d = self._data
        return d[gx][gy] - d[sx][gy] - d[gx][sy] + d[sx][sy]


def rotate90(grid):
    """Rotate a grid counter-clockwise; rows of strings stay strings."""
    if not grid:
        return list(grid)
    columns = list(zip(*grid))[::-1]
    if all(isinstance(row, str) for row in grid):
        return ["".join(col) for col in columns]
    return [list(col) for col in columns]