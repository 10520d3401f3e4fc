"""Number-theory helpers: totients, sieves, integer roots and capped products."""

from __future__ import annotations

import math

INF = 10**18


def totients(n: int) -> list[int]:
    """Euler's phi for every integer 0..n."""
    if n < 0:
        raise ValueError("n must be non-negative")
    phi = list(range(n + 1))
    for i in range(2, n + 1):
        if phi[i] == i:
            for j in range(i, n + 1, i):
                phi[j] -= phi[j] // i
    return phi


def divisor_phi_sums(n: int) -> list[int]:
    """For each j in 0..n, the sum over divisors i of j of i * phi(j / i)."""
    phi = totients(n)
    result = [0] * (n + 1)
    for i in range(1, n + 1):
        for j in range(i, n + 1, i):
            result[j] += i * phi[j // i]
    return result


def segmented_sieve(low: int, high: int) -> list[bool]:
    """Primality flags for every integer in low..high inclusive (low >= 1)."""
    if low < 1:
        raise ValueError("low must be at least 1")
    if high < low:
        raise ValueError("high must not be below low")
    limit = math.isqrt(high)
    marked = [False] * (limit + 1)
    primes = []
    for i in range(2, limit + 1):
        if not marked[i]:
            primes.append(i)
            for j in range(i * i, limit + 1, i):
                marked[j] = True

    flags = [True] * (high - low + 1)
    for p in primes:
        start = max(p * p, -(-low // p) * p)
        for k in range(start, high + 1, p):
            flags[k - low] = False
    if low == 1:
        flags[0] = False
    return flags


def exact_isqrt(n: int) -> int:
    """The largest r with r * r <= n."""
    if n < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(n)


def capped_mul(a: int, b: int, cap: int = INF) -> int:
    """a * b, saturated at ``cap``."""
    if a == 0 or b == 0:
        return 0
    if a == cap or b == cap:
        return cap
    product = a * b
    return product if product <= cap else cap


def capped_lcm(a: int, b: int, cap: int = INF) -> int:
    """lcm(a, b), saturated at ``cap``."""
    if a == cap or b == cap:
        return cap
    return capped_mul(a // math.gcd(a, b), b, cap)


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True