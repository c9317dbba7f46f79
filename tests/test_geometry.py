import math

import pytest

from trigomestre.model.geometry import (
    Vertex,
    DisplayOptions,
    TriangleCoordinates,
    cevian_feet,
    circumcircle,
    drawing_bounds,
    is_right_angle,
    rotate_coordinates,
    triangle_coordinates,
)
from trigomestre.model.solver import solve_triangle
from trigomestre.model.triangle import TriangleData


@pytest.fixture
def pythagorean():
    return solve_triangle("SSS", 3, 4, 5)


def test_coordinates_place_c_on_x_axis(pythagorean):
    coords = triangle_coordinates(pythagorean)
    assert (coords.Ax, coords.Ay) == (0, 0)
    assert (coords.Bx, coords.By) == (5, 0)
    assert coords.Cx == pytest.approx(3.2, abs=0.01)
    assert coords.Cy == pytest.approx(2.4, abs=0.01)
    # |AC| is side b
    assert coords.A.distance_to(coords.C) == pytest.approx(4)


def test_coordinates_array_round_trip(pythagorean):
    coords = triangle_coordinates(pythagorean)
    assert TriangleCoordinates.from_array(coords.to_array()) == coords


def test_circumcircle_of_right_triangle(pythagorean):
    coords = triangle_coordinates(pythagorean)
    circle = circumcircle(pythagorean, coords)
    # hypotenuse is a diameter
    assert circle.R == pytest.approx(2.5)
    assert circle.Ox == pytest.approx(2.5)
    assert circle.Oy == pytest.approx(0, abs=0.01)


def test_circumcircle_center_is_equidistant():
    t = solve_triangle("SSS", 2, 2, 2)
    coords = triangle_coordinates(t)
    center = circumcircle(t, coords).center
    distances = [center.distance_to(p) for p in (coords.A, coords.B, coords.C)]
    assert distances == pytest.approx([2 / math.sqrt(3)] * 3, abs=0.01)


def test_circumcircle_degenerate_area():
    flat = TriangleData(a=1.0, b=1.0, c=2.0, A=0.0, B=0.0, C=180.0, area=0.0, valid=True)
    circle = circumcircle(flat, triangle_coordinates(flat))
    assert (circle.Ox, circle.Oy, circle.R) == (1.0, 0.0, 0.0)


def test_rotation_keeps_shape_and_centroid(pythagorean):
    coords = triangle_coordinates(pythagorean)
    rotated = rotate_coordinates(coords, 90)
    assert rotated.centroid.x == pytest.approx(coords.centroid.x)
    assert rotated.centroid.y == pytest.approx(coords.centroid.y)
    assert rotated.A.distance_to(rotated.B) == pytest.approx(5)
    assert rotated.Ay != pytest.approx(0)


def test_zero_rotation_is_identity(pythagorean):
    coords = triangle_coordinates(pythagorean)
    assert rotate_coordinates(coords, 0) is coords


def test_cevian_feet_from_c(pythagorean):
    coords = triangle_coordinates(pythagorean)
    feet = cevian_feet(pythagorean, coords, Vertex.C)
    assert feet.origin == coords.C
    assert feet.altitude_foot.x == pytest.approx(coords.Cx)
    assert feet.altitude_foot.y == pytest.approx(0)
    assert (feet.median_foot.x, feet.median_foot.y) == pytest.approx((2.5, 0))
    # bisector splits AB as b : a
    assert feet.bisector_foot.x == pytest.approx(20 / 7)
    assert feet.height == pytest.approx(2.4)
    assert feet.median == pytest.approx(2.5)


def test_altitude_from_a_lands_on_right_angle(pythagorean):
    coords = triangle_coordinates(pythagorean)
    feet = cevian_feet(pythagorean, coords, "A")
    assert feet.altitude_foot.x == pytest.approx(coords.Cx, abs=0.02)
    assert feet.altitude_foot.y == pytest.approx(coords.Cy, abs=0.02)
    assert feet.height == pytest.approx(4.0)


def test_is_right_angle():
    assert is_right_angle(90.05)
    assert not is_right_angle(89.8)


def test_drawing_bounds(pythagorean):
    coords = triangle_coordinates(pythagorean)
    min_x, max_x, min_y, max_y = drawing_bounds(coords)
    assert (min_x, max_x, min_y) == pytest.approx((0, 5, 0))
    assert max_y == pytest.approx(coords.Cy)

    circle = circumcircle(pythagorean, coords)
    _, _, min_y, max_y = drawing_bounds(coords, circle)
    assert min_y == pytest.approx(-2.5, abs=0.01)
    assert max_y == pytest.approx(2.5, abs=0.01)


def test_display_defaults():
    options = DisplayOptions()
    assert options.show_side_a and options.show_angle_c
    assert not (options.show_height or options.show_circumcircle)
    assert options.visual_origin == Vertex.C
