import numpy as np
import pytest

from trigomestre.model.geometry_utils import clean, deg2rad, parse_number, rad2deg, rotate_point, rotate_points


def test_degree_radian_conversion():
    assert deg2rad(180) == pytest.approx(np.pi)
    assert rad2deg(np.pi / 2) == pytest.approx(90)


def test_clean_uses_one_decimal_above_one():
    assert clean(12.3456) == 12.3
    assert clean(-7.89) == -7.9


def test_clean_uses_three_decimals_below_one():
    assert clean(0.123456) == 0.123
    assert clean(0.0004) == 0.0


@pytest.mark.parametrize("text,expected", [
    ("12,5", 12.5),
    ("12.5", 12.5),
    (" 7 ", 7.0),
    ("3,5 cm", 3.5),
    ("-3.5e2", -350.0),
    (4, 4.0),
])
def test_parse_number(text, expected):
    assert parse_number(text) == pytest.approx(expected)


def test_parse_number_defaults():
    assert parse_number("") == 0.0
    assert parse_number(None) == 0.0
    assert parse_number("abc") == 0.0
    assert parse_number("abc", default=None) is None


def test_rotate_point_counter_clockwise():
    x, y = rotate_point(1, 0, 90)
    assert (x, y) == pytest.approx((0, 1))


def test_rotate_point_about_pivot():
    x, y = rotate_point(2, 1, 180, center=(1, 1))
    assert (x, y) == pytest.approx((0, 1))


def test_rotate_points_keeps_distances():
    pts = np.array([[0, 0], [4, 0], [0, 3]])
    rotated = rotate_points(pts, 37, center=(1, 1))
    assert rotated.shape == (3, 2)
    assert np.linalg.norm(rotated[1] - rotated[2]) == pytest.approx(5)
