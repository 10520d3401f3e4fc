"""Modular arithmetic: residues, modular helpers and binomial coefficients."""

from __future__ import annotations

from typing import Union

MOD = 1_000_000_007
MOD_998 = 998_244_353
MOD_1E9_9 = 1_000_000_009

IntLike = Union[int, "ModInt"]


class ModInt:
    """An integer residue modulo ``mod``; division assumes ``mod`` is prime."""

    __slots__ = ("value", "mod")

    def __init__(self, value: int = 0, mod: int = MOD) -> None:
        if mod <= 0:
            raise ValueError("modulus must be positive")
        self.mod = mod
        self.value = value % mod

    def _coerce(self, other: object) -> int:
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError("cannot combine residues with different moduli")
            return other.value
        if isinstance(other, int):
            return other % self.mod
        raise TypeError(f"unsupported operand type: {type(other).__name__}")

    def _new(self, value: int) -> ModInt:
        return ModInt(value, self.mod)

    def __add__(self, other: IntLike) -> ModInt:
        if not isinstance(other, (int, ModInt)):
            return NotImplemented
        return self._new(self.value + self._coerce(other))

    __radd__ = __add__

    def __sub__(self, other: IntLike) -> ModInt:
        if not isinstance(other, (int, ModInt)):
            return NotImplemented
        return self._new(self.value - self._coerce(other))

    def __rsub__(self, other: int) -> ModInt:
        if not isinstance(other, int):
            return NotImplemented
        return self._new(self._coerce(other) - self.value)

    def __mul__(self, other: IntLike) -> ModInt:
        if not isinstance(other, (int, ModInt)):
            return NotImplemented
        return self._new(self.value * self._coerce(other))

    __rmul__ = __mul__

    def __truediv__(self, other: IntLike) -> ModInt:
        if not isinstance(other, (int, ModInt)):
            return NotImplemented
        return self * self._new(self._coerce(other)).inverse()

    def __rtruediv__(self, other: int) -> ModInt:
        if not isinstance(other, int):
            return NotImplemented
        return self._new(other) * self.inverse()

    def __neg__(self) -> ModInt:
        return self._new(-self.value)

    def __pos__(self) -> ModInt:
        return self._new(self.value)

    def __pow__(self, exponent: int) -> ModInt:
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            return self.inverse() ** (-exponent)
        return self._new(pow(self.value, exponent, self.mod))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModInt):
            return self.mod == other.mod and self.value == other.value
        if isinstance(other, int):
            return self.value == other % self.mod
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.value, self.mod))

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"ModInt({self.value}, {self.mod})"

    def __str__(self) -> str:
        return str(self.value)

    def inverse(self) -> ModInt:
        """Multiplicative inverse by Fermat's little theorem (prime modulus)."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no modular inverse")
        return self._new(pow(self.value, self.mod - 2, self.mod))


def mod_add(a: int, b: int, m: int = MOD) -> int:
    """Return (a + b) mod m."""
    s = a % m + b % m
    return s - m if s >= m else s


def mod_sub(a: int, b: int, m: int = MOD) -> int:
    """Return (a - b) mod m."""
    d = a % m - b % m
    return d + m if d < 0 else d


def mod_mul(a: int, b: int, m: int = MOD) -> int:
    """Return (a * b) mod m."""
    return (a % m) * (b % m) % m


def mod_pow(a: int, e: int, m: int = MOD) -> int:
    """Return a ** e mod m by binary exponentiation."""
    if e < 0:
        raise ValueError("exponent must be non-negative")
    result = 1 % m
    a %= m
    while e:
        if e & 1:
            result = mod_mul(result, a, m)
        a = mod_mul(a, a, m)
        e >>= 1
    return result


def mod_inv(a: int, m: int = MOD) -> int:
    """Inverse of a modulo a prime m."""
    if a % m == 0:
        raise ZeroDivisionError("zero has no modular inverse")
    return mod_pow(a, m - 2, m)


class Combinatorics:
    """Factorials and inverse factorials up to ``limit`` modulo a prime."""

    def __init__(self, limit: int, mod: int = MOD) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self.limit = limit
        self.mod = mod
        fact = [1] * (limit + 1)
        for i in range(2, limit + 1):
            fact[i] = fact[i - 1] * i % mod
        inv_fact = [1] * (limit + 1)
        inv_fact[limit] = mod_inv(fact[limit], mod)
        for i in range(limit - 1, 0, -1):
            inv_fact[i] = inv_fact[i + 1] * (i + 1) % mod
        self._fact = fact
        self._inv_fact = inv_fact

    def _check(self, n: int) -> None:
        if not 0 <= n <= self.limit:
            raise ValueError(f"{n} is outside the precomputed range 0..{self.limit}")

    def factorial(self, n: int) -> int:
        """n! modulo the modulus."""
        self._check(n)
        return self._fact[n]

    def ncr(self, n: int, r: int) -> int:
        """C(n, r) modulo the modulus; zero when r is out of 0..n."""
        if r < 0 or r > n:
            return 0
        self._check(n)
        return self._fact[n] * self._inv_fact[r] % self.mod * self._inv_fact[n - r] % self.mod


def binomial(n: int, r: int) -> int:
    """Exact C(n, r) by the multiplicative formula; zero when r is out of 0..n."""
    if r < 0 or r > n:
        return 0
    r = min(r, n - r)
    result = 1
    for i in range(1, r + 1):
        result = result * (n - i + 1) // i
    return result