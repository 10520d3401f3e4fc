"""Signed arbitrary-precision integers stored as base 10**9 limbs, and a water-level check."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from functools import total_ordering
from itertools import zip_longest

BASE = 10**9
BASE_DIGITS = 9
_KARATSUBA_CUTOFF = 32
_DIGITS = frozenset("0123456789")


def _trim(limbs: list[int]) -> list[int]:
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return limbs


def _cmp_mag(a: list[int], b: list[int]) -> int:
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return -1 if x < y else 1
    return 0


def _add_mag(a: list[int], b: list[int]) -> list[int]:
    out = []
    carry = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        carry, digit = divmod(x + y + carry, BASE)
        out.append(digit)
    if carry:
        out.append(carry)
    return out


def _sub_mag(a: list[int], b: list[int]) -> list[int]:
    """|a| - |b| for |a| >= |b|."""
    out = []
    borrow = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        cur = x - y - borrow
        borrow = 1 if cur < 0 else 0
        out.append(cur + BASE if borrow else cur)
    return _trim(out)


def _mul_small(a: list[int], v: int) -> list[int]:
    out = []
    carry = 0
    for x in a:
        carry, digit = divmod(x * v + carry, BASE)
        out.append(digit)
    while carry:
        carry, digit = divmod(carry, BASE)
        out.append(digit)
    return _trim(out)


def _divmod_small(a: list[int], v: int) -> tuple[list[int], int]:
    quotient = []
    rem = 0
    for x in reversed(a):
        q, rem = divmod(x + rem * BASE, v)
        quotient.append(q)
    quotient.reverse()
    return _trim(quotient), rem


def _karatsuba(a: list[int], b: list[int]) -> list[int]:
    """Raw convolution of two equal power-of-two length limb lists."""
    n = len(a)
    if n <= _KARATSUBA_CUTOFF:
        res = [0] * (2 * n)
        for i, x in enumerate(a):
            if x:
                for j, y in enumerate(b):
                    res[i + j] += x * y
        return res
    k = n >> 1
    a1, a2 = a[:k], a[k:]
    b1, b2 = b[:k], b[k:]
    low = _karatsuba(a1, b1)
    high = _karatsuba(a2, b2)
    mid = _karatsuba([x + y for x, y in zip(a1, a2)], [x + y for x, y in zip(b1, b2)])
    res = [0] * (2 * n)
    for i, (m, lo, hi) in enumerate(zip(mid, low, high)):
        res[i + k] += m - lo - hi
    for i, v in enumerate(low):
        res[i] += v
    for i, v in enumerate(high):
        res[i + n] += v
    return res


def _mul_mag(a: list[int], b: list[int]) -> list[int]:
    if not a or not b:
        return []
    size = 1
    while size < max(len(a), len(b)):
        size <<= 1
    coeffs = _karatsuba(a + [0] * (size - len(a)), b + [0] * (size - len(b)))
    out = []
    carry = 0
    for c in coeffs:
        carry, digit = divmod(c + carry, BASE)
        out.append(digit)
    while carry:
        carry, digit = divmod(carry, BASE)
        out.append(digit)
    return _trim(out)


def _divmod_mag(a: list[int], b: list[int]) -> tuple[list[int], list[int]]:
    """Quotient and remainder of magnitudes; ``b`` must be non-empty."""
    if _cmp_mag(a, b) < 0:
        return [], list(a)
    norm = BASE // (b[-1] + 1)
    an = _mul_small(a, norm)
    bn = _mul_small(b, norm)
    top = bn[-1]
    width = len(bn)
    quotient = []
    rem: list[int] = []
    for limb in reversed(an):
        rem = _trim([limb] + rem)
        s1 = rem[width] if len(rem) > width else 0
        s2 = rem[width - 1] if len(rem) > width - 1 else 0
        d = (BASE * s1 + s2) // top
        product = _mul_small(bn, d)
        while _cmp_mag(rem, product) < 0:
            product = _sub_mag(product, bn)
            d -= 1
        rem = _sub_mag(rem, product)
        quotient.append(d)
    quotient.reverse()
    rem, _ = _divmod_small(rem, norm)
    return _trim(quotient), rem


@total_ordering
class BigInt:
    """Signed integer of unbounded size; division truncates toward zero."""

    __slots__ = ("_sign", "_limbs")

    def __init__(self, value: int | str | BigInt = 0) -> None:
        if isinstance(value, BigInt):
            self._sign = value._sign
            self._limbs = list(value._limbs)
        elif isinstance(value, int):
            self._sign = -1 if value < 0 else 1
            magnitude = abs(value)
            limbs = []
            while magnitude:
                magnitude, digit = divmod(magnitude, BASE)
                limbs.append(digit)
            self._limbs = limbs
        elif isinstance(value, str):
            self._sign, self._limbs = self._parse(value)
        else:
            raise TypeError(f"cannot make a BigInt from {type(value).__name__}")
        self._normalise()

    @staticmethod
    def _parse(text: str) -> tuple[int, list[int]]:
        s = text.strip()
        sign = 1
        pos = 0
        while pos < len(s) and s[pos] in "+-":
            if s[pos] == "-":
                sign = -sign
            pos += 1
        digits = s[pos:]
        if not set(digits) <= _DIGITS:
            raise ValueError(f"invalid integer literal {text!r}")
        limbs = [int(digits[max(0, end - BASE_DIGITS):end]) for end in range(len(digits), 0, -BASE_DIGITS)]
        return sign, _trim(limbs)

    @classmethod
    def _make(cls, sign: int, limbs: list[int]) -> BigInt:
        obj = cls.__new__(cls)
        obj._sign = sign
        obj._limbs = limbs
        obj._normalise()
        return obj

    def _normalise(self) -> None:
        _trim(self._limbs)
        if not self._limbs:
            self._sign = 1

    @staticmethod
    def _coerce(value) -> BigInt:
        if isinstance(value, BigInt):
            return value
        if isinstance(value, int):
            return BigInt(value)
        return NotImplemented

    def __add__(self, other) -> BigInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if self._sign == other._sign:
            return BigInt._make(self._sign, _add_mag(self._limbs, other._limbs))
        if _cmp_mag(self._limbs, other._limbs) >= 0:
            return BigInt._make(self._sign, _sub_mag(self._limbs, other._limbs))
        return BigInt._make(other._sign, _sub_mag(other._limbs, self._limbs))

    def __radd__(self, other) -> BigInt:
        return self.__add__(other)

    def __sub__(self, other) -> BigInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other) -> BigInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self, other) -> BigInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return BigInt._make(self._sign * other._sign, _mul_mag(self._limbs, other._limbs))

    def __rmul__(self, other) -> BigInt:
        return self.__mul__(other)

    def _divmod(self, other: BigInt) -> tuple[BigInt, BigInt]:
        if other.is_zero():
            raise ZeroDivisionError("BigInt division by zero")
        q, r = _divmod_mag(self._limbs, other._limbs)
        return BigInt._make(self._sign * other._sign, q), BigInt._make(self._sign, r)

    def __floordiv__(self, other) -> BigInt:
        """Quotient truncated toward zero."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._divmod(other)[0]

    def __rfloordiv__(self, other) -> BigInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._divmod(self)[0]

    def __mod__(self, other) -> BigInt:
        """Remainder carrying the sign of the dividend."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._divmod(other)[1]

    def __rmod__(self, other) -> BigInt:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._divmod(self)[1]

    def __neg__(self) -> BigInt:
        return BigInt._make(-self._sign, list(self._limbs))

    def __abs__(self) -> BigInt:
        return BigInt._make(1, list(self._limbs))

    def _compare(self, other: BigInt) -> int:
        if self._sign != other._sign:
            return -1 if self._sign < other._sign else 1
        return _cmp_mag(self._limbs, other._limbs) * self._sign

    def __lt__(self, other) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) < 0

    def __eq__(self, other) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) == 0

    def __hash__(self) -> int:
        return hash(int(self))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        if not self._limbs:
            return "0"
        head = str(self._limbs[-1])
        tail = "".join(f"{limb:0{BASE_DIGITS}d}" for limb in reversed(self._limbs[:-1]))
        return ("-" if self._sign < 0 else "") + head + tail

    def __repr__(self) -> str:
        return f"BigInt('{self}')"

    def __int__(self) -> int:
        value = 0
        for limb in reversed(self._limbs):
            value = value * BASE + limb
        return value * self._sign

    def is_zero(self) -> bool:
        """Whether the value is zero."""
        return not self._limbs


def gcd(a: BigInt, b: BigInt) -> BigInt:
    """Euclid's algorithm on BigInts (sign follows the truncating remainder)."""
    a, b = BigInt(a), BigInt(b)
    while not b.is_zero():
        a, b = b, a % b
    return a


def lcm(a: BigInt, b: BigInt) -> BigInt:
    """a / gcd(a, b) * b."""
    a, b = BigInt(a), BigInt(b)
    return a // gcd(a, b) * b


def can_keep_level(k: int, l: int, r: int, t: int, x: int, y: int) -> bool:
    """Whether a level starting at ``k`` stays within [l, r] for ``t`` days.

    Each day up to ``y`` may be added first (only when the result stays at
    most ``r``), then ``x`` is removed, and the level must remain at least ``l``.
    """
    if not l <= k <= r:
        raise ValueError("starting level must lie in [l, r]")
    if x < 1 or y < 1:
        raise ValueError("x and y must be positive")

    if x == y:
        return k <= r - x or k >= l + x

    if x > y:
        if k + y > r:
            k -= x
            t -= 1
            if k < l:
                return False
        loss = BigInt(x - y) * BigInt(t)
        return BigInt(k) - loss >= BigInt(l)

    def transition(i: int) -> tuple[int, int] | None:
        if l + i + y > r:
            return None
        raised = i + y - x
        steps = raised // x
        return raised - steps * x, steps + 1

    steps = (k - l) // x
    t -= steps
    k = k - steps * x - l
    seen: set[int] = set()
    while t > 0:
        if k in seen:
            return True
        seen.add(k)
        move = transition(k)
        if move is None:
            return False
        k, cost = move
        t -= cost
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Read k l r t x y and print Yes or No."""
    parser = argparse.ArgumentParser(description="Check whether the level can be kept in range.")
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)
    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    fields = text.split()
    if len(fields) < 6:
        raise ValueError("expected six integers: k l r t x y")
    k, l, r, t, x, y = (int(f) for f in fields[:6])
    print("Yes" if can_keep_level(k, l, r, t, x, y) else "No")
    return 0