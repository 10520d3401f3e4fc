import pytest

from cpkit.xorbasis import XorBasis, best_masked_xor, maximize_xor_and_xor


def test_powers_of_two_span_everything():
    basis = XorBasis()
    for k in range(5):
        assert basis.insert(1 << k) is True
    assert basis.max_xor() == (1 << 5) - 1
    assert len(basis) == 5


def test_dependent_value_not_added():
    basis = XorBasis()
    assert basis.insert(6)
    assert basis.insert(3)
    assert basis.insert(6 ^ 3) is False
    assert len(basis) == 2


def test_max_xor_at_least_every_value():
    values = [17, 9, 30, 4, 12]
    basis = XorBasis()
    for v in values:
        basis.insert(v)
    best = basis.max_xor()
    assert all(best >= v for v in values)
    assert all(best >= a ^ b for a in values for b in values)


def test_empty_basis_gives_zero():
    assert XorBasis().max_xor() == 0


def test_value_too_wide():
    basis = XorBasis(bits=4)
    with pytest.raises(ValueError):
        basis.insert(1 << 4)
    with pytest.raises(ValueError):
        basis.insert(-1)


def test_masked_xor_ignores_masked_bits():
    nums = [5, 9, 14]
    full = (1 << 31) - 1
    assert best_masked_xor(nums, full) == 0
    assert best_masked_xor(nums, 0) >= max(nums)


@pytest.mark.parametrize(
    "nums, expected",
    [([2, 3], 5), ([1, 3, 2], 6), ([2, 3, 6, 7], 15)],
)
def test_worked_examples(nums, expected):
    assert maximize_xor_and_xor(nums) == expected


def test_single_element():
    assert maximize_xor_and_xor([37]) == 37


def test_result_at_least_plain_xor():
    nums = [4, 11, 7, 2]
    total = 0
    for v in nums:
        total ^= v
    assert maximize_xor_and_xor(nums) >= total