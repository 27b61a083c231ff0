from __future__ import annotations

import math

import pytest

from linal import Point, Vec2


def test_point_vec2_add_sub() -> None:
    a = Point(1.0, 2.0)
    b = Vec2(-3.0, 6.0)
    assert a + b == Point(-2.0, 8.0)
    assert a - b == Point(4.0, -4.0)


def test_point_minus_point_is_vec2() -> None:
    d = Point(1.0, 2.0) - Point(-3.0, 6.0)
    assert isinstance(d, Vec2)
    assert d == Vec2(4.0, -4.0)


def test_point_neg_zero_polar() -> None:
    assert -Point(1.0, 2.0) == Point(-1.0, -2.0)
    assert Point.zero() == Point(0.0, 0.0)
    p = Point.from_polar(5.0, math.atan2(4.0, 3.0))
    assert (p - Point(3, 4)).length() < 1e-10


def test_point_vec2_conversions() -> None:
    v = Vec2(3.3, 5.5)
    p = Point.from_vec2(v)
    assert p == Point(3.3, 5.5)
    assert p.position() == v
    with pytest.raises(TypeError):
        Point.from_vec2(p)  # type: ignore[arg-type]


def test_point_is_not_a_vector() -> None:
    assert Point(1, 2) != Vec2(1, 2)
    with pytest.raises(TypeError):
        _ = Point(1, 2) + Point(1, 2)  # type: ignore[operator]
    with pytest.raises(TypeError):
        _ = Vec2(1, 2) + Point(1, 2)  # type: ignore[operator]


def test_point_parse_and_str() -> None:
    assert Point.parse("1 2") == Point(1.0, 2.0)
    assert str(Point(1.5, 3.4)) == "1.5 3.4"
    assert tuple(Point(1, 2)) == (1.0, 2.0)


def test_point_nan_is_never_equal() -> None:
    p = Point(math.nan, 1)
    assert p != p
    assert Point(1, 2) == Point(1.0, 2.0)
    assert Point(1, 2) != Vec2(1, 2)
