"""Binary indexed tree over 0-based positions."""

from __future__ import annotations


class FenwickTree:
    """Point additions and prefix sums over positions 0..n-1."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.n = n
        self._bit = [0] * (n + 1)

    def _check(self, idx: int) -> None:
        if not 0 <= idx < self.n:
            raise IndexError("fenwick index out of range")

    def add(self, idx: int, val: int) -> None:
        """Add ``val`` at position ``idx``."""
        self._check(idx)
        i = idx + 1
        while i <= self.n:
            self._bit[i] += val
            i += i & -i

    def prefix_sum(self, idx: int) -> int:
        """Sum of positions 0..idx inclusive; zero for idx == -1."""
        if idx == -1:
            return 0
        self._check(idx)
        total = 0
        i = idx + 1
        while i > 0:
            total += self._bit[i]
            i -= i & -i
        return total

    def range_sum(self, l: int, r: int) -> int:
        """Sum of positions l..r inclusive; zero when r < l."""
        if r < l:
            return 0
        return self.prefix_sum(r) - self.prefix_sum(l - 1)

    def clear(self, idx: int) -> None:
        """Subtract the prefix sum through ``idx`` at ``idx``, zeroing that prefix."""
        self.add(idx, -self.prefix_sum(idx))