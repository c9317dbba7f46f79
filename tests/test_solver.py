import dataclasses
import math

import numpy as np
import pytest

from trigomestre.model.solver import solve_triangle
from trigomestre.model.triangle import TriangleMode, TriangleData, SolverMessage


def assert_zeroed(result: TriangleData):
    assert not result.valid
    assert result.error
    for name in ("a", "b", "c", "A", "B", "C", "area", "perimeter", "height"):
        assert getattr(result, name) == 0
    assert result.heights.to_dict() == {"a": 0, "b": 0, "c": 0}


def test_sss_right_triangle():
    t = solve_triangle(TriangleMode.SSS, 3, 4, 5)
    assert t.valid
    assert t.error is None
    assert (t.a, t.b, t.c) == (3, 4, 5)
    assert t.A == pytest.approx(36.9)
    assert t.B == pytest.approx(53.1)
    assert t.C == pytest.approx(90.0)
    assert t.area == pytest.approx(6.0)
    assert t.perimeter == pytest.approx(12.0)
    assert t.height == pytest.approx(2.4)


def test_sss_cevians():
    t = solve_triangle("SSS", 3, 4, 5)
    assert t.heights.to_dict() == pytest.approx({"a": 4.0, "b": 3.0, "c": 2.4})
    assert t.medians.to_dict() == pytest.approx({"a": 4.3, "b": 3.6, "c": 2.5})
    assert t.bisectors["c"] == pytest.approx(2.4)


def test_sss_triangle_inequality():
    t = solve_triangle("SSS", 1, 1, 5)
    assert_zeroed(t)
    assert t.error == SolverMessage.TRIANGLE_INEQUALITY


def test_sss_flat_triangle_is_rejected():
    # a + b == c is not a triangle
    assert solve_triangle("SSS", 2, 3, 5).error == SolverMessage.TRIANGLE_INEQUALITY


def test_right_legs():
    t = solve_triangle("Right", 3, 4, 0)
    assert t.valid
    assert (t.a, t.b, t.c) == (3, 4, 5)
    assert t.A == pytest.approx(36.9)
    assert t.B == pytest.approx(53.1)
    assert t.C == 90


def test_right_ignores_third_value():
    assert solve_triangle("Right", 3, 4, 5_000_000).valid
    assert solve_triangle("Right", 3, 4, -1).valid


def test_sas_isosceles_right():
    t = solve_triangle("SAS", 5, 90, 5)
    assert t.valid
    assert t.a == pytest.approx(7.1)
    assert t.B == pytest.approx(45.0)
    assert t.C == pytest.approx(45.0)


def test_asa():
    t = solve_triangle("ASA", 60, 10, 90)
    assert t.valid
    assert t.C == pytest.approx(30.0)
    assert t.a == pytest.approx(17.3)
    assert t.b == pytest.approx(20.0)
    assert t.c == 10


def test_aas():
    t = solve_triangle("AAS", 30, 60, 5)
    assert t.valid
    assert t.C == pytest.approx(90.0)
    assert t.b == pytest.approx(8.7)
    assert t.c == pytest.approx(10.0)


def test_right_hypotenuse_and_leg():
    t = solve_triangle("Right_HypCat", 5, 3)
    assert t.valid
    assert t.b == pytest.approx(4.0)
    assert t.A == pytest.approx(36.9)
    assert t.C == 90


def test_right_hypotenuse_and_leg_requires_shorter_leg():
    assert solve_triangle("Right_HypCat", 5, 5).error == SolverMessage.LEG_NOT_SHORTER
    assert solve_triangle("Right_HypCat", 5, 6).error == SolverMessage.LEG_NOT_SHORTER


def test_right_leg_and_angle():
    t = solve_triangle("Right_CatAng", 5, 30)
    assert t.valid
    assert t.c == pytest.approx(10.0)
    assert t.b == pytest.approx(8.7)
    assert t.B == pytest.approx(60.0)


def test_right_hypotenuse_and_angle():
    t = solve_triangle("Right_HypAng", 10, 30)
    assert t.valid
    assert t.a == pytest.approx(5.0)
    assert t.b == pytest.approx(8.7)


@pytest.mark.parametrize("mode", ["Right_CatAng", "Right_HypAng"])
@pytest.mark.parametrize("angle", [90, 120])
def test_right_modes_require_acute_angle(mode, angle):
    assert solve_triangle(mode, 5, angle).error == SolverMessage.ANGLE_NOT_ACUTE


def test_magnitude_bound():
    assert solve_triangle("SSS", 2_000_000, 1, 1).error == SolverMessage.VALUES_TOO_HIGH
    assert solve_triangle("SAS", 1, 2, 1_000_001).error == SolverMessage.VALUES_TOO_HIGH


def test_magnitude_checked_before_positivity():
    assert solve_triangle("SSS", 2_000_000, -1, 1).error == SolverMessage.VALUES_TOO_HIGH


@pytest.mark.parametrize("mode,values", [
    ("SSS", (3, 4, 0)),
    ("SSS", (-3, 4, 5)),
    ("Right", (3, -1, 0)),
    ("ASA", (0, 5, 30)),
])
def test_non_positive_inputs(mode, values):
    assert_zeroed(solve_triangle(mode, *values))
    assert solve_triangle(mode, *values).error == SolverMessage.NON_POSITIVE


def test_sas_angle_range():
    assert solve_triangle("SAS", 5, 180, 5).error == SolverMessage.ANGLE_OUT_OF_RANGE


def test_angle_pair_checks():
    assert solve_triangle("ASA", 200, 5, 10).error == SolverMessage.ANGLES_OUT_OF_RANGE
    assert solve_triangle("ASA", 100, 5, 90).error == SolverMessage.ANGLE_SUM_EXCEEDED
    assert solve_triangle("AAS", 90, 90, 5).error == SolverMessage.ANGLE_SUM_EXCEEDED


def test_unknown_mode():
    assert solve_triangle("Hexagon", 1, 2, 3).error == SolverMessage.UNKNOWN_MODE


def test_nan_input_is_not_a_real_triangle():
    assert solve_triangle("SSS", math.nan, 4, 5).error == SolverMessage.NOT_REAL
    assert solve_triangle("Right", math.nan, 4, 0).error == SolverMessage.NOT_REAL


def test_collapsed_side_does_not_raise():
    t = solve_triangle("SAS", 1, 1e-9, 1)
    assert not t.valid
    assert t.error in (SolverMessage.NUMERIC_ERROR, SolverMessage.NOT_REAL,
                       SolverMessage.INVALID_ANGLES, SolverMessage.DEGENERATE_SIDE)


def test_near_degenerate_area_is_not_negative():
    t = solve_triangle("SSS", 1, 1, 1.999999)
    assert t.valid
    assert t.area >= 0


def test_result_is_immutable():
    t = solve_triangle("SSS", 3, 4, 5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.a = 10


def test_mode_string_and_enum_agree():
    assert solve_triangle("SSS", 7, 8, 9) == solve_triangle(TriangleMode.SSS, 7, 8, 9)


def test_resolving_with_sas_reproduces_triangle():
    t = solve_triangle("SSS", 7, 8, 9)
    again = solve_triangle("SAS", t.b, t.A, t.c)
    assert again.valid
    assert again.a == pytest.approx(t.a, abs=0.1)
    assert again.B == pytest.approx(t.B, abs=0.2)
    assert again.C == pytest.approx(t.C, abs=0.2)


def test_invariants_hold_for_random_inputs():
    rng = np.random.default_rng(7)
    modes = list(TriangleMode)
    valid_count = 0
    for _ in range(500):
        mode = modes[int(rng.integers(len(modes)))]
        v1, v2, v3 = (float(x) for x in rng.uniform(0.5, 120, size=3))
        t = solve_triangle(mode, v1, v2, v3)
        if not t.valid:
            assert t.error
            continue
        valid_count += 1
        assert abs(t.A + t.B + t.C - 180) <= 0.5
        assert min(t.a, t.b, t.c, t.A, t.B, t.C, t.perimeter) > 0
        assert t.area >= 0
    assert valid_count > 50
