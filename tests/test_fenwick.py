import random

import pytest

from cpkit.fenwick import FenwickTree


def _filled(values):
    ft = FenwickTree(len(values))
    for i, v in enumerate(values):
        ft.add(i, v)
    return ft


def test_prefix_sums_match():
    values = [5, -2, 7, 0, 3, 3, -8, 1, 4]
    ft = _filled(values)
    for i in range(len(values)):
        assert ft.prefix_sum(i) == sum(values[: i + 1])
    assert ft.prefix_sum(-1) == 0


def test_range_sums_after_random_updates():
    rng = random.Random(3)
    values = [0] * 20
    ft = FenwickTree(20)
    for _ in range(300):
        i = rng.randrange(20)
        d = rng.randint(-10, 10)
        values[i] += d
        ft.add(i, d)
        l = rng.randrange(20)
        r = rng.randrange(l, 20)
        assert ft.range_sum(l, r) == sum(values[l : r + 1])


def test_empty_range_is_zero():
    ft = _filled([1, 2, 3])
    assert ft.range_sum(2, 1) == 0


def test_clear_zeroes_prefix():
    values = [4, 1, 6, 2]
    ft = _filled(values)
    ft.clear(2)
    assert ft.prefix_sum(2) == 0
    assert ft.range_sum(3, 3) == values[3]
    assert ft.prefix_sum(1) == values[0] + values[1]


def test_index_errors():
    ft = FenwickTree(4)
    with pytest.raises(IndexError):
        ft.add(4, 1)
    with pytest.raises(IndexError):
        ft.prefix_sum(-2)
    with pytest.raises(ValueError):
        FenwickTree(-1)