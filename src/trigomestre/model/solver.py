"""
Triangle Solver
===============
Maps a solving mode and three numeric inputs to a validated ``TriangleData``.

The solver is a pure function: it never raises to the caller. Every failure,
from rejected inputs to math domain errors, comes back as an invalid result
carrying a ``SolverMessage``.

Input meaning per mode:
    Right:        v1 = leg a, v2 = leg b
    Right_HypCat: v1 = hypotenuse c, v2 = leg a
    Right_CatAng: v1 = leg a, v2 = angle A (opposite)
    Right_HypAng: v1 = hypotenuse c, v2 = angle A
    SSS:          v1 = a, v2 = b, v3 = c
    SAS:          v1 = b, v2 = angle A (included), v3 = c
    ASA:          v1 = angle A, v2 = c, v3 = angle B
    AAS:          v1 = angle A, v2 = angle B, v3 = a
"""
from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import Callable, Dict, Union

from trigomestre.config import MAX_INPUT_VALUE, ANGLE_SUM_TOLERANCE
from trigomestre.model.geometry_utils import deg2rad, rad2deg, clean
from trigomestre.model.triangle import TriangleMode, TriangleData, CevianLengths, SolverMessage

logger = logging.getLogger(__name__)

# (a, b, c, A, B, C) with angles in degrees
Solution = tuple[float, float, float, float, float, float]


class _Rejected(Exception):
    """Raised inside a mode solver when a structural check fails."""

    def __init__(self, message: SolverMessage) -> None:
        super().__init__(message)
        self.message = message


def _check_angle_pair(A: float, B: float) -> None:
    if A <= 0 or A >= 180 or B <= 0 or B >= 180:
        raise _Rejected(SolverMessage.ANGLES_OUT_OF_RANGE)
    if A + B >= 180:
        raise _Rejected(SolverMessage.ANGLE_SUM_EXCEEDED)


def _check_acute(A: float) -> None:
    if A <= 0 or A >= 90:
        raise _Rejected(SolverMessage.ANGLE_NOT_ACUTE)


# ------------------------------
# Per-mode closed-form solutions
# ------------------------------

def _solve_sss(v1: float, v2: float, v3: float) -> Solution:
    a, b, c = v1, v2, v3
    if a + b <= c or a + c <= b or b + c <= a:
        raise _Rejected(SolverMessage.TRIANGLE_INEQUALITY)
    # Law of Cosines
    A = rad2deg(math.acos((b**2 + c**2 - a**2) / (2 * b * c)))
    B = rad2deg(math.acos((a**2 + c**2 - b**2) / (2 * a * c)))
    C = 180 - A - B
    return a, b, c, A, B, C


def _solve_sas(v1: float, v2: float, v3: float) -> Solution:
    b, A, c = v1, v2, v3
    if A <= 0 or A >= 180:
        raise _Rejected(SolverMessage.ANGLE_OUT_OF_RANGE)
    a = math.sqrt(b**2 + c**2 - 2 * b * c * math.cos(deg2rad(A)))
    B = rad2deg(math.acos((a**2 + c**2 - b**2) / (2 * a * c)))
    C = 180 - A - B
    return a, b, c, A, B, C


def _solve_asa(v1: float, v2: float, v3: float) -> Solution:
    A, c, B = v1, v2, v3
    _check_angle_pair(A, B)
    C = 180 - A - B
    # Law of Sines with c as reference
    a = c * math.sin(deg2rad(A)) / math.sin(deg2rad(C))
    b = c * math.sin(deg2rad(B)) / math.sin(deg2rad(C))
    return a, b, c, A, B, C


def _solve_aas(v1: float, v2: float, v3: float) -> Solution:
    A, B, a = v1, v2, v3
    _check_angle_pair(A, B)
    C = 180 - A - B
    # Law of Sines with a as reference
    b = a * math.sin(deg2rad(B)) / math.sin(deg2rad(A))
    c = a * math.sin(deg2rad(C)) / math.sin(deg2rad(A))
    return a, b, c, A, B, C


def _solve_right(v1: float, v2: float, v3: float) -> Solution:
    a, b = v1, v2
    c = math.hypot(a, b)
    A = rad2deg(math.atan(a / b))
    return a, b, c, A, 90 - A, 90.0


def _solve_right_hyp_cat(v1: float, v2: float, v3: float) -> Solution:
    c, a = v1, v2
    if a >= c:
        raise _Rejected(SolverMessage.LEG_NOT_SHORTER)
    b = math.sqrt(c**2 - a**2)
    A = rad2deg(math.asin(a / c))
    return a, b, c, A, 90 - A, 90.0


def _solve_right_cat_ang(v1: float, v2: float, v3: float) -> Solution:
    a, A = v1, v2
    _check_acute(A)
    c = a / math.sin(deg2rad(A))
    b = a / math.tan(deg2rad(A))
    return a, b, c, A, 90 - A, 90.0


def _solve_right_hyp_ang(v1: float, v2: float, v3: float) -> Solution:
    c, A = v1, v2
    _check_acute(A)
    a = c * math.sin(deg2rad(A))
    b = c * math.cos(deg2rad(A))
    return a, b, c, A, 90 - A, 90.0


_SOLVERS: Dict[TriangleMode, Callable[[float, float, float], Solution]] = {
    TriangleMode.SSS: _solve_sss,
    TriangleMode.SAS: _solve_sas,
    TriangleMode.ASA: _solve_asa,
    TriangleMode.AAS: _solve_aas,
    TriangleMode.RIGHT: _solve_right,
    TriangleMode.RIGHT_HYP_CAT: _solve_right_hyp_cat,
    TriangleMode.RIGHT_CAT_ANG: _solve_right_cat_ang,
    TriangleMode.RIGHT_HYP_ANG: _solve_right_hyp_ang,
}


# ------------------------------
# Validation stages
# ------------------------------

def _check_inputs(mode: TriangleMode, v1: float, v2: float, v3: float) -> None:
    """Magnitude and positivity checks, before any trigonometry."""
    if v1 > MAX_INPUT_VALUE or v2 > MAX_INPUT_VALUE or (not mode.is_right and v3 > MAX_INPUT_VALUE):
        raise _Rejected(SolverMessage.VALUES_TOO_HIGH)
    if v1 <= 0 or v2 <= 0:
        raise _Rejected(SolverMessage.NON_POSITIVE)
    if not mode.is_right and v3 <= 0:
        raise _Rejected(SolverMessage.NON_POSITIVE)


def _check_solution(solution: Solution) -> None:
    """Sanity checks applied to every mode after solving."""
    a, b, c, A, B, C = solution
    if not all(math.isfinite(x) for x in solution):
        raise _Rejected(SolverMessage.NOT_REAL)
    if A <= 0 or B <= 0 or C <= 0 or A >= 180 or B >= 180 or C >= 180:
        raise _Rejected(SolverMessage.INVALID_ANGLES)
    if abs((A + B + C) - 180) > ANGLE_SUM_TOLERANCE:
        raise _Rejected(SolverMessage.ANGLE_SUM_MISMATCH)
    if a <= 0 or b <= 0 or c <= 0:
        raise _Rejected(SolverMessage.DEGENERATE_SIDE)


def _build_result(solution: Solution) -> TriangleData:
    """Area, perimeter and cevians from a checked solution, display-rounded."""
    a, b, c, A, B, C = solution

    s = (a + b + c) / 2
    # Heron, clamped against a tiny negative radicand
    area = math.sqrt(max(0.0, s * (s - a) * (s - b) * (s - c)))

    heights = CevianLengths(
        a=clean(2 * area / a),
        b=clean(2 * area / b),
        c=clean(2 * area / c),
    )
    medians = CevianLengths(
        a=clean(0.5 * math.sqrt(max(0.0, 2 * b * b + 2 * c * c - a * a))),
        b=clean(0.5 * math.sqrt(max(0.0, 2 * a * a + 2 * c * c - b * b))),
        c=clean(0.5 * math.sqrt(max(0.0, 2 * a * a + 2 * b * b - c * c))),
    )
    bisectors = CevianLengths(
        a=clean(2 * b * c * math.cos(deg2rad(A / 2)) / (b + c)),
        b=clean(2 * a * c * math.cos(deg2rad(B / 2)) / (a + c)),
        c=clean(2 * a * b * math.cos(deg2rad(C / 2)) / (a + b)),
    )

    return TriangleData(
        a=clean(a), b=clean(b), c=clean(c),
        A=clean(A), B=clean(B), C=clean(C),
        area=clean(area),
        perimeter=clean(a + b + c),
        height=clean(2 * area / c),
        heights=heights,
        medians=medians,
        bisectors=bisectors,
        valid=True,
    )


@lru_cache(maxsize=512)
def solve_triangle(
    mode: Union[TriangleMode, str],
    v1: float,
    v2: float,
    v3: float = 0.0
) -> TriangleData:
    """
    Solve a triangle from three measurements.

    Args:
        mode: The solving mode (a ``TriangleMode`` or its string value).
        v1, v2, v3: The given values, see the module docstring. ``v3`` is
            ignored by the right-triangle modes.

    Returns:
        A valid ``TriangleData`` or an invalid one whose ``error`` names the
        failed check.
    """
    try:
        mode = TriangleMode(mode)
    except ValueError:
        logger.debug(f"Rejected unknown mode {mode!r}")
        return TriangleData.invalid(SolverMessage.UNKNOWN_MODE)

    try:
        _check_inputs(mode, v1, v2, v3)
        try:
            solution = _SOLVERS[mode](v1, v2, v3)
        except ValueError:
            # math domain error, e.g. acos of an argument outside [-1, 1]
            raise _Rejected(SolverMessage.NOT_REAL)
        except (ZeroDivisionError, OverflowError):
            raise _Rejected(SolverMessage.NUMERIC_ERROR)
        _check_solution(solution)
    except _Rejected as e:
        logger.debug(f"{mode} rejected ({v1}, {v2}, {v3}): {e.message}")
        return TriangleData.invalid(e.message)

    return _build_result(solution)
