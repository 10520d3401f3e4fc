import itertools

import pytest

from cpkit.geometry import cross, dist_sq, is_square, lower_hull, upper_hull


def test_cross_orientation_signs():
    assert cross((0, 0), (1, 0), (0, 1)) > 0
    assert cross((0, 0), (0, 1), (1, 0)) < 0
    assert cross((0, 0), (1, 1), (3, 3)) == 0


@pytest.mark.parametrize("a,b,c", [((0, 0), (4, 1), (2, 7)), ((-3, 2), (5, -1), (0, 0))])
def test_cross_antisymmetry_and_translation(a, b, c):
    assert cross(a, b, c) == -cross(a, c, b)
    shift = (7, -11)
    moved = [(p[0] + shift[0], p[1] + shift[1]) for p in (a, b, c)]
    assert cross(*moved) == cross(a, b, c)


def test_dist_sq_symmetric():
    assert dist_sq((1, 2), (4, 6)) == dist_sq((4, 6), (1, 2))
    assert dist_sq((3, 3), (3, 3)) == 0


def test_is_square_any_order():
    corners = [(0, 0), (2, 1), (1, 3), (-1, 2)]
    for perm in itertools.permutations(corners):
        assert is_square(*perm)


def test_is_square_rejects():
    assert not is_square((0, 0), (2, 0), (2, 1), (0, 1))
    assert not is_square((0, 0), (0, 0), (0, 0), (0, 0))
    assert not is_square((0, 0), (1, 0), (1, 1), (0, 0))


def test_hulls_of_triangle_with_inner_point():
    pts = [(2, 1), (4, 0), (0, 0), (2, 2)]
    assert upper_hull(pts) == [(0, 0), (2, 2), (4, 0)]
    assert lower_hull(pts) == [(0, 0), (4, 0)]


def test_hull_invariants():
    pts = [(x, (x * 7 + 3) % 11 - 5) for x in range(-8, 9)]
    up = upper_hull(pts)
    low = lower_hull(pts)
    assert up[0] == low[0] == min(pts)
    assert up[-1] == low[-1] == max(pts)
    for a, b, c in zip(up, up[1:], up[2:]):
        assert cross(a, b, c) <= 0
    for a, b, c in zip(low, low[1:], low[2:]):
        assert cross(a, b, c) >= 0
    for p in pts:
        for a, b in zip(up, up[1:]):
            if a[0] <= p[0] <= b[0]:
                assert cross(a, b, p) <= 0
        for a, b in zip(low, low[1:]):
            if a[0] <= p[0] <= b[0]:
                assert cross(a, b, p) >= 0


def test_hull_of_collinear_points_keeps_all():
    pts = [(3, 3), (0, 0), (1, 1), (2, 2)]
    assert upper_hull(pts) == sorted(pts)
    assert lower_hull(pts) == sorted(pts)