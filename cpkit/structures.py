"""General-purpose structures: disjoint sets, prefix sums, segment tree, compression."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

_MASK64 = (1 << 64) - 1


class DSU:
    """Disjoint-set union with path compression and union by size."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(n))
        self._size = [1] * n

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def unite(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; False if they were already one set."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True


class PrefixSum:
    """Constant-time sums over inclusive ranges of a fixed sequence."""

    def __init__(self, values: Iterable[int]) -> None:
        self._pref = [0]
        for v in values:
            self._pref.append(self._pref[-1] + v)

    def query(self, l: int, r: int) -> int:
        """Sum of values[l..r] inclusive; zero when l > r."""
        if l > r:
            return 0
        return self._pref[r + 1] - self._pref[l]


class Prefix2D:
    """Constant-time sums over inclusive rectangles of a fixed grid."""

    def __init__(self, grid: Sequence[Sequence[int]]) -> None:
        if not grid or not grid[0]:
            self._pref = [[0]]
            return
        m = len(grid[0])
        pref = [[0] * (m + 1)]
        for row in grid:
            above = pref[-1]
            cur = [0]
            for j, cell in enumerate(row, start=1):
                cur.append(cell + above[j] + cur[j - 1] - above[j - 1])
            pref.append(cur)
        self._pref = pref

    def query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum of grid[x1..x2][y1..y2] inclusive."""
        p = self._pref
        return p[x2 + 1][y2 + 1] - p[x1][y2 + 1] - p[x2 + 1][y1] + p[x1][y1]


class SegTree:
    """Sum segment tree with point assignment."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._n = len(items)
        self._tree = [0] * self._n + items
        for i in range(self._n - 1, 0, -1):
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def update(self, idx: int, val: int) -> None:
        """Set position ``idx`` to ``val``."""
        if not 0 <= idx < self._n:
            raise IndexError("segment tree index out of range")
        i = idx + self._n
        self._tree[i] = val
        while i > 1:
            i >>= 1
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def query(self, l: int, r: int) -> int:
        """Sum over positions l..r inclusive, clipped to the array; zero if empty."""
        l, r = max(l, 0), min(r, self._n - 1)
        if l > r:
            return 0
        total = 0
        l += self._n
        r += self._n + 1
        while l < r:
            if l & 1:
                total += self._tree[l]
                l += 1
            if r & 1:
                r -= 1
                total += self._tree[r]
            l >>= 1
            r >>= 1
        return total


class Compressor:
    """Coordinate compression onto 0..k-1 over the sorted distinct values."""

    def __init__(self, values: Iterable) -> None:
        self._vals = sorted(set(values))

    def get(self, x) -> int:
        """Index of the first stored value not less than ``x``."""
        return bisect_left(self._vals, x)

    def index_of(self, x) -> int:
        """Index of ``x`` among the stored values, or -1 if absent."""
        i = bisect_left(self._vals, x)
        return i if i < len(self._vals) and self._vals[i] == x else -1

    def __len__(self) -> int:
        return len(self._vals)


def split(s: str, delim: str) -> list[str]:
    """Split on every occurrence of ``delim``, keeping empty fields."""
    return s.split(delim)


def splitmix64(x: int) -> int:
    """The SplitMix64 finaliser applied to ``x + golden gamma``, modulo 2**64."""
    x = (x + 0x9E3779B97F4A7C15) & _MASK64
    x = ((x ^ (x >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
    x = ((x ^ (x >> 27)) * 0x94D049BB133111EB) & _MASK64
    return x ^ (x >> 31)