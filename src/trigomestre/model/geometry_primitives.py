"""
Geometric Primitives for the triangle drawing data.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union
import math


@dataclass(frozen=True)
class Vector:
    """
    A vector in the plane representing direction and magnitude.
    """
    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y


@dataclass(frozen=True)
class Point:
    """A simple geometric point in the plane."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Vector or Point from a Point.")

    def distance_to(self, other: Point) -> float:
        return (self - other).magnitude

    def midpoint(self, other: Point) -> Point:
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)
