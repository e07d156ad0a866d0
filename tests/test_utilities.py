import math

import pytest

from pillarsofself.utilities import (
    Vec2,
    bearing,
    center_origin,
    deg_to_rad,
    dist,
    format_rect,
    format_vector,
    length,
    normalize,
    rad_to_deg,
    u_vec_bearing,
)


def test_rad_to_deg_of_pi_is_half_turn():
    assert rad_to_deg(math.pi) == pytest.approx(180.0)


@pytest.mark.parametrize("degrees", [-270.0, -45.0, 0.0, 30.0, 123.4, 720.0])
def test_degree_round_trip(degrees):
    assert rad_to_deg(deg_to_rad(degrees)) == pytest.approx(degrees)


def test_length_of_axis_vector_is_its_component():
    assert length(Vec2(0.0, -7.5)) == pytest.approx(7.5)


@pytest.mark.parametrize("v", [Vec2(3, 4), Vec2(-2, 0.5), Vec2(100, -100)])
def test_normalize_gives_unit_length_same_direction(v):
    n = normalize(v)
    assert length(n) == pytest.approx(1.0)
    assert bearing(n) == pytest.approx(bearing(v))


def test_normalize_leaves_tiny_vector_alone():
    tiny = Vec2(0.0, 0.0)
    assert normalize(tiny) == tiny


def test_dist_is_symmetric_and_matches_length():
    u, v = Vec2(1, 2), Vec2(-4, 6)
    assert dist(u, v) == pytest.approx(dist(v, u))
    assert dist(u, v) == pytest.approx(length(v - u))
    assert dist(u, u) == 0.0


@pytest.mark.parametrize("b", [-170.0, -90.0, 0.0, 45.0, 90.0, 179.0])
def test_bearing_round_trip(b):
    unit = u_vec_bearing(b)
    assert length(unit) == pytest.approx(1.0)
    assert bearing(unit) == pytest.approx(b)


def test_center_origin_is_half_size_for_zero_offset():
    origin = center_origin(0, 0, 40, 18)
    assert origin * 2 == Vec2(40, 18)


def test_center_origin_follows_offset():
    base = center_origin(0, 0, 12, 8)
    shifted = center_origin(3, 5, 12, 8)
    assert shifted - base == Vec2(3, 5)


def test_format_vector():
    assert format_vector(Vec2(1.5, 2)) == "{1.5, 2}"


def test_format_rect():
    assert format_rect(1, 2, 3, 4) == "{{1, 2}, {3, 4}"


def test_vector_arithmetic_round_trip():
    a, b = Vec2(1.25, -3), Vec2(0.5, 7)
    assert (a + b) - b == a
    assert (a * 4) / 4 == a
    assert -(-a) == a
    assert tuple(a) == (1.25, -3)