import math

import pytest

from isotd.geometry import (
    Circle,
    Vec2,
    angle_to,
    build_circle,
    calc_dist,
    shortest_angle_delta,
)


def test_vec2_arithmetic_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(3.0, 4.0)
    assert (a + b) - b == a
    assert (a * 2) / 2 == a
    assert 2 * a == a * 2
    assert -(-a) == a
    assert tuple(a) == (1.5, -2.0)


def test_angle_to_axes():
    origin = Vec2(10, 10)
    assert angle_to(origin, Vec2(20, 10)) == pytest.approx(0.0)
    assert angle_to(origin, Vec2(10, 20)) == pytest.approx(math.pi / 2)
    assert angle_to(origin, Vec2(0, 10)) == pytest.approx(math.pi)


def test_shortest_angle_delta_small():
    assert shortest_angle_delta(0.0, math.pi / 2) == pytest.approx(math.pi / 2)
    assert shortest_angle_delta(math.pi / 2, 0.0) == pytest.approx(-math.pi / 2)


@pytest.mark.parametrize("start,end", [(3.0, -3.0), (-3.0, 3.0), (0.1, 6.0), (5.0, -5.0)])
def test_shortest_angle_delta_wraps(start, end):
    delta = shortest_angle_delta(start, end)
    assert -math.pi <= delta <= math.pi
    turns = (end - start - delta) / (2 * math.pi)
    assert turns == pytest.approx(round(turns))


def test_calc_dist():
    assert calc_dist(Vec2(0, 0), Vec2(3, 4)) == pytest.approx(5.0)
    assert calc_dist(Vec2(7, 7), Vec2(7, 7)) == 0.0
    a, b = Vec2(1, 2), Vec2(-4, 9)
    assert calc_dist(a, b) == pytest.approx(calc_dist(b, a))


def test_build_circle_offsets_position_by_radius():
    circle = build_circle(Vec2(100, 50), (1, 2, 3), 20.0)
    assert circle == Circle(Vec2(80, 30), 20.0, (1, 2, 3))