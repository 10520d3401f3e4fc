import pytest

from cpkit.fft import fft, multiply
from cpkit.modular import binomial


def test_delta_transforms_to_ones():
    out = fft([1, 0, 0, 0, 0, 0, 0, 0])
    assert all(abs(x - 1) < 1e-9 for x in out)


def test_constant_transforms_to_spike():
    values = [1] * 8
    out = fft(values)
    assert abs(out[0] - len(values)) < 1e-9
    assert all(abs(x) < 1e-9 for x in out[1:])


def test_inverse_round_trip():
    values = [3, -1, 4, 1, -5, 9, 2, 6]
    back = fft(fft(values), invert=True)
    assert all(abs(x - v) < 1e-9 for x, v in zip(back, values))


def test_length_must_be_power_of_two():
    with pytest.raises(ValueError):
        fft([1, 2, 3])
    with pytest.raises(ValueError):
        fft([])


def test_binomial_square():
    assert multiply([1, 1], [1, 1]) == [binomial(2, k) for k in range(3)]


def test_binomial_powers():
    poly = [1]
    for _ in range(10):
        poly = multiply(poly, [1, 1])
    assert poly == [binomial(10, k) for k in range(11)]


def test_identity_and_commutativity():
    a = [7, -3, 0, 2, 5]
    b = [1, 4, -2]
    assert multiply(a, [1]) == a
    assert multiply(a, b) == multiply(b, a)
    assert len(multiply(a, b)) == len(a) + len(b) - 1


def test_evaluation_invariant():
    a = [2, 0, -1, 3]
    b = [5, 1, 1]

    def at(poly, x):
        return sum(c * x**i for i, c in enumerate(poly))

    product = multiply(a, b)
    for x in (-2, 1, 3):
        assert at(product, x) == at(a, x) * at(b, x)


def test_empty_input():
    assert multiply([], [1, 2]) == []