"""Planar integer geometry: orientation, squares and monotone-chain hulls."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Callable

Point = tuple[int, int]


def cross(a: Point, b: Point, c: Point) -> int:
    """Cross product of AB and AC: positive for a left turn a -> b -> c."""
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def dist_sq(p: Point, q: Point) -> int:
    """Squared Euclidean distance."""
    return (p[0] - q[0]) ** 2 + (p[1] - q[1]) ** 2


def is_square(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """Whether four points, in any order, are the corners of a square."""
    d2 = dist_sq(p1, p2)
    d3 = dist_sq(p1, p3)
    d4 = dist_sq(p1, p4)
    if 0 in (d2, d3, d4):
        return False
    if d2 == d3 and 2 * d2 == d4 and 2 * dist_sq(p2, p4) == dist_sq(p2, p3):
        return True
    if d3 == d4 and 2 * d3 == d2 and 2 * dist_sq(p3, p2) == dist_sq(p3, p4):
        return True
    if d2 == d4 and 2 * d2 == d3 and 2 * dist_sq(p2, p3) == dist_sq(p2, p4):
        return True
    return False


def _chain(points: Iterable[Point], bad_turn: Callable[[int], bool]) -> list[Point]:
    hull: list[Point] = []
    for now in sorted(points):
        while len(hull) >= 2 and bad_turn(cross(hull[-2], hull[-1], now)):
            hull.pop()
        hull.append(now)
    return hull


def upper_hull(points: Iterable[Point]) -> list[Point]:
    """Upper hull from left to right; collinear points are kept."""
    return _chain(points, lambda turn: turn > 0)


def lower_hull(points: Iterable[Point]) -> list[Point]:
    """Lower hull from left to right; collinear points are kept."""
    return _chain(points, lambda turn: turn < 0)