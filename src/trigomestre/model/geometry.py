"""
Derived Geometry
================
Planar data for drawing a solved triangle: vertex coordinates, circumcircle,
presentation rotation and the feet of the cevians.

Coordinates are always recomputed from the scalar solution. Side c lies on
the x-axis with A at the origin and B at (c, 0); C sits at polar position
(b, A) measured from A. None of these functions accept an invalid triangle.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from math import cos, sin
from typing import Optional, TYPE_CHECKING

import numpy as np

from trigomestre.config import DEGENERATE_AREA, COLLINEAR_EPS, RIGHT_ANGLE_TOLERANCE
from trigomestre.model.geometry_primitives import Point
from trigomestre.model.geometry_utils import deg2rad, rotate_points
from trigomestre.model.triangle import TriangleData

if TYPE_CHECKING:
    import numpy.typing as npt


class Vertex(StrEnum):
    A = "A"
    B = "B"
    C = "C"


@dataclass(frozen=True)
class TriangleCoordinates:
    Ax: float
    Ay: float
    Bx: float
    By: float
    Cx: float
    Cy: float

    @property
    def A(self) -> Point:
        return Point(self.Ax, self.Ay)

    @property
    def B(self) -> Point:
        return Point(self.Bx, self.By)

    @property
    def C(self) -> Point:
        return Point(self.Cx, self.Cy)

    def vertex(self, name: Vertex | str) -> Point:
        return getattr(self, Vertex(name).value)

    @property
    def centroid(self) -> Point:
        return Point((self.Ax + self.Bx + self.Cx) / 3, (self.Ay + self.By + self.Cy) / 3)

    def to_array(self) -> npt.NDArray[np.float64]:
        """Vertices as a (3, 2) array in A, B, C order."""
        return np.array([
            [self.Ax, self.Ay],
            [self.Bx, self.By],
            [self.Cx, self.Cy],
        ])

    @classmethod
    def from_array(cls, pts: npt.ArrayLike) -> TriangleCoordinates:
        (ax, ay), (bx, by), (cx, cy) = np.asarray(pts, dtype=np.float64).reshape(3, 2)
        return cls(float(ax), float(ay), float(bx), float(by), float(cx), float(cy))


@dataclass(frozen=True)
class Circumcircle:
    Ox: float
    Oy: float
    R: float

    @property
    def center(self) -> Point:
        return Point(self.Ox, self.Oy)


@dataclass(frozen=True)
class CevianFeet:
    """
    Where the cevians from one vertex meet the opposite side, with the
    matching (rounded) lengths from the solution.
    """
    origin: Point
    altitude_foot: Point
    median_foot: Point
    bisector_foot: Point
    height: float
    median: float
    bisector: float


@dataclass
class DisplayOptions:
    """Label and overlay toggles consumed by the renderer."""
    show_side_a: bool = True
    show_side_b: bool = True
    show_side_c: bool = True
    show_angle_a: bool = True
    show_angle_b: bool = True
    show_angle_c: bool = True
    show_height: bool = False
    show_median: bool = False
    show_bisector: bool = False
    show_circumcircle: bool = False
    rotation: float = 0.0  # degrees, counter-clockwise about the centroid
    visual_origin: Vertex = Vertex.C
    font_scale: float = 1.0


def triangle_coordinates(triangle: TriangleData) -> TriangleCoordinates:
    """Place the triangle with side c on the x-axis and A at the origin."""
    angle_a = deg2rad(triangle.A)
    return TriangleCoordinates(
        Ax=0.0,
        Ay=0.0,
        Bx=triangle.c,
        By=0.0,
        Cx=triangle.b * cos(angle_a),
        Cy=triangle.b * sin(angle_a),
    )


def circumcircle(triangle: TriangleData, coords: TriangleCoordinates) -> Circumcircle:
    """
    Circle through the three vertices, for coordinates in the placement of
    ``triangle_coordinates``.

    Notes:
        - A (near) zero area gives a zero-radius circle at the midpoint of c.
        - With C (near) on the x-axis the center falls back to the midpoint of
          AB with radius c / 2.
    """
    if triangle.area <= DEGENERATE_AREA:
        return Circumcircle(Ox=coords.Bx / 2, Oy=0.0, R=0.0)

    radius = (triangle.a * triangle.b * triangle.c) / (4 * triangle.area)

    if abs(coords.Cy) < COLLINEAR_EPS:
        return Circumcircle(Ox=coords.Bx / 2, Oy=0.0, R=triangle.c / 2)

    # Perpendicular bisector of AB is x = c / 2; intersect with that of AC
    ox = coords.Bx / 2
    oy = (coords.Cy / 2) - (coords.Cx / coords.Cy) * (ox - coords.Cx / 2)
    return Circumcircle(Ox=ox, Oy=oy, R=radius)


def rotate_coordinates(coords: TriangleCoordinates, angle_deg: float) -> TriangleCoordinates:
    """Rotate the vertices counter-clockwise about the centroid."""
    if angle_deg == 0:
        return coords
    g = coords.centroid
    return TriangleCoordinates.from_array(rotate_points(coords.to_array(), angle_deg, (g.x, g.y)))


_ADJACENT: dict[Vertex, tuple[Vertex, Vertex, str, str]] = {
    # origin: (U, V, side adjacent to U's end, side adjacent to V's end)
    Vertex.A: (Vertex.B, Vertex.C, "c", "b"),
    Vertex.B: (Vertex.C, Vertex.A, "a", "c"),
    Vertex.C: (Vertex.A, Vertex.B, "b", "a"),
}


def cevian_feet(
    triangle: TriangleData,
    coords: TriangleCoordinates,
    origin: Vertex | str = Vertex.C
) -> CevianFeet:
    """
    Feet of the altitude, median and angle bisector drawn from ``origin``.

    Args:
        triangle: The solved triangle (provides side ratios and lengths).
        coords: Vertex positions, possibly rotated.
        origin: The vertex the cevians start from.

    Returns:
        The three feet on the opposite side UV together with their lengths.
    """
    origin = Vertex(origin)
    u_name, v_name, side_u, side_v = _ADJACENT[origin]
    p = coords.vertex(origin)
    u = coords.vertex(u_name)
    v = coords.vertex(v_name)

    uv = v - u
    up = p - u
    len_uv2 = uv.dot(uv)
    t = up.dot(uv) / (len_uv2 or 1)
    altitude_foot = u + uv * t

    median_foot = u.midpoint(v)

    # UD / DV equals (side adjacent at U) / (side adjacent at V)
    s1 = triangle.side(side_u)
    s2 = triangle.side(side_v)
    bisector_foot = Point(
        (s2 * u.x + s1 * v.x) / (s1 + s2),
        (s2 * u.y + s1 * v.y) / (s1 + s2),
    )

    key = origin.value.lower()
    return CevianFeet(
        origin=p,
        altitude_foot=altitude_foot,
        median_foot=median_foot,
        bisector_foot=bisector_foot,
        height=triangle.heights[key],
        median=triangle.medians[key],
        bisector=triangle.bisectors[key],
    )


def is_right_angle(angle: float) -> bool:
    return abs(angle - 90) < RIGHT_ANGLE_TOLERANCE


def drawing_bounds(
    coords: TriangleCoordinates,
    circle: Optional[Circumcircle] = None
) -> tuple[float, float, float, float]:
    """
    Axis-aligned bounds (min_x, max_x, min_y, max_y) of the drawing.

    When ``circle`` is given, the bounds also enclose the circumcircle.
    """
    pts = coords.to_array()
    lo = pts.min(axis=0)
    hi = pts.max(axis=0)
    if circle is not None:
        center = np.array([circle.Ox, circle.Oy])
        lo = np.minimum(lo, center - circle.R)
        hi = np.maximum(hi, center + circle.R)
    return float(lo[0]), float(hi[0]), float(lo[1]), float(hi[1])
