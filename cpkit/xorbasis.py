"""Linear basis over GF(2) and a maximum AND-plus-XOR partition search."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from itertools import compress

BITS = 31


class XorBasis:
    """Gaussian-eliminated basis of ``bits``-bit non-negative integers."""

    def __init__(self, bits: int = BITS) -> None:
        if bits < 0:
            raise ValueError("bits must be non-negative")
        self.bits = bits
        self._basis = [0] * bits

    def __len__(self) -> int:
        return sum(1 for b in self._basis if b)

    def insert(self, value: int) -> bool:
        """Add ``value`` to the span; True if it raised the rank."""
        if value < 0 or value >> self.bits:
            raise ValueError(f"{value} does not fit in {self.bits} bits")
        for i in range(self.bits - 1, -1, -1):
            if not (value >> i) & 1:
                continue
            if not self._basis[i]:
                self._basis[i] = value
                return True
            value ^= self._basis[i]
        return False

    def max_xor(self) -> int:
        """Largest XOR of any subset of the inserted values."""
        result = 0
        for b in reversed(self._basis):
            if result ^ b > result:
                result ^= b
        return result


def best_masked_xor(nums: Sequence[int], mask: int) -> int:
    """Largest subset XOR of ``nums`` after clearing the bits of ``mask``."""
    basis = XorBasis(BITS)
    for num in nums:
        basis.insert(num & ~mask)
    return basis.max_xor()


def maximize_xor_and_xor(nums: Sequence[int]) -> int:
    """Best AND(A) + XOR(B) + XOR(C) over partitions of ``nums`` into three groups.

    An empty group contributes zero.
    """
    n = len(nums)
    best = 0
    for and_mask in range(1 << n):
        picked = [(and_mask >> i) & 1 == 1 for i in range(n)]
        chosen = list(compress(nums, picked))
        rest = [v for v, p in zip(nums, picked) if not p]
        and_value = reduce(lambda x, y: x & y, chosen) if chosen else 0
        xor_value = reduce(lambda x, y: x ^ y, rest, 0)
        total = and_value + xor_value + 2 * best_masked_xor(rest, xor_value)
        best = max(best, total)
    return best