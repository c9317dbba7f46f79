"""
Numeric Utilities
=================
Unit conversion, the display rounding applied to every solver output, the
locale tolerant number parser used at the input boundary and point rotation.
"""
from __future__ import annotations

import re
from math import pi
from typing import Optional, Union, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

_LEADING_NUMBER = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")


def deg2rad(degrees: float) -> float:
    return degrees * pi / 180

def rad2deg(radians: float) -> float:
    return radians * 180 / pi

def clean(value: float) -> float:
    """
    Round a value for display: 1 decimal place if |value| >= 1, else 3.
    Applied to every number stored on a solved triangle.
    """
    if abs(value) < 1:
        return round(value, 3)
    return round(value, 1)


def parse_number(text: Union[str, float, int, None], default: Optional[float] = 0.0) -> Optional[float]:
    """
    Parse user typed text into a float, accepting comma as decimal separator.

    Only the leading numeric part is read ("12,5 cm" -> 12.5). Text without a
    leading number returns ``default``.

    Args:
        text: Raw user input. Numbers are passed through as floats.
        default: Value returned for missing or unparseable input.

    Returns:
        The parsed value or ``default``.
    """
    if text is None:
        return default
    if isinstance(text, (int, float)):
        return float(text)

    match = _LEADING_NUMBER.match(text.replace(",", ".", 1))
    if match is None:
        return default
    return float(match.group(1))


def rotate_points(
    points: npt.ArrayLike,
    angle_deg: float,
    center: tuple[float, float] = (0.0, 0.0)
) -> npt.NDArray[np.float64]:
    """
    Rotate a set of 2D points counter-clockwise about a pivot.

    Args:
        points: Array-like of shape (n, 2).
        angle_deg: Rotation angle in degrees (positive = counter-clockwise).
        center: Pivot (cx, cy).

    Returns:
        Array of shape (n, 2) with the rotated points.
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    pivot = np.asarray(center, dtype=np.float64)

    theta = np.deg2rad(angle_deg)
    rotation = np.array([
        [np.cos(theta), -np.sin(theta)],
        [np.sin(theta), np.cos(theta)],
    ])
    return (pts - pivot) @ rotation.T + pivot


def rotate_point(
    x: float,
    y: float,
    angle_deg: float,
    center: tuple[float, float] = (0.0, 0.0)
) -> tuple[float, float]:
    """Rotate a single point counter-clockwise about ``center``."""
    rx, ry = rotate_points([[x, y]], angle_deg, center)[0]
    return float(rx), float(ry)
