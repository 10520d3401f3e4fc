import math

import pytest

from cpkit.modular import (
    MOD,
    Combinatorics,
    ModInt,
    binomial,
    mod_add,
    mod_inv,
    mod_mul,
    mod_pow,
    mod_sub,
)

P = 13


def test_negative_value_is_normalised():
    assert int(ModInt(-1, 7)) == 6


@pytest.mark.parametrize("a", range(1, P))
def test_inverse_round_trip(a):
    x = ModInt(a, P)
    assert x * x.inverse() == 1
    assert (ModInt(5, P) / x) * x == ModInt(5, P)


def test_inverse_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        ModInt(0, P).inverse()
    with pytest.raises(ZeroDivisionError):
        ModInt(3, P) / 0


def test_addition_subtraction_inverse():
    a, b = ModInt(10, P), ModInt(9, P)
    assert (a + b) - b == a
    assert a + (-a) == 0
    assert 3 - a == ModInt(3 - 10, P)


def test_pow_matches_builtin_and_negative_exponent():
    x = ModInt(12345, MOD)
    assert int(x ** 100) == pow(12345, 100, MOD)
    assert x ** -1 == x.inverse()
    assert x ** 0 == 1


def test_fermat_little_theorem():
    for a in range(1, P):
        assert ModInt(a, P) ** (P - 1) == 1


def test_mixed_moduli_raise():
    with pytest.raises(ValueError):
        ModInt(1, 7) + ModInt(1, 11)


def test_equality_and_hash():
    assert ModInt(3, P) == ModInt(3 + P, P)
    assert len({ModInt(3, P), ModInt(3 + P, P)}) == 1
    assert ModInt(3, P) == 3 + 2 * P


def test_mod_helpers_agree_with_python():
    m = 97
    for a in (-50, 0, 13, 96, 500):
        for b in (-3, 1, 45, 200):
            assert mod_add(a, b, m) == (a + b) % m
            assert mod_sub(a, b, m) == (a - b) % m
            assert mod_mul(a, b, m) == (a * b) % m


def test_mod_pow_and_inv():
    assert mod_pow(7, 123, MOD) == pow(7, 123, MOD)
    assert mod_mul(mod_inv(7), 7) == 1
    with pytest.raises(ValueError):
        mod_pow(2, -1)
    with pytest.raises(ZeroDivisionError):
        mod_inv(MOD)


def test_combinatorics_matches_math_comb():
    comb = Combinatorics(60)
    for n in range(61):
        for r in range(n + 1):
            assert comb.ncr(n, r) == math.comb(n, r) % MOD
    assert comb.factorial(60) == math.factorial(60) % MOD


def test_combinatorics_out_of_range():
    comb = Combinatorics(10)
    assert comb.ncr(5, 6) == 0
    assert comb.ncr(5, -1) == 0
    with pytest.raises(ValueError):
        comb.ncr(11, 2)
    with pytest.raises(ValueError):
        comb.factorial(11)


def test_combinatorics_small_prime_pascal():
    comb = Combinatorics(12, P)
    for n in range(1, 13):
        for r in range(1, n):
            assert comb.ncr(n, r) == (comb.ncr(n - 1, r - 1) + comb.ncr(n - 1, r)) % P


def test_binomial_exact():
    for n in range(40):
        for r in range(-1, n + 2):
            expected = math.comb(n, r) if r >= 0 else 0
            assert binomial(n, r) == expected