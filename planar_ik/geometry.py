"""Low-level 2D geometry helpers for the planar arm solver."""
from __future__ import annotations

from typing import NamedTuple, Tuple

import numpy as np

Vec2 = Tuple[float, float]


class Point2D(NamedTuple):
    """Point in the arm frame: base at the origin, +x right, +y up."""

    x: float
    y: float


ORIGIN = Point2D(0.0, 0.0)


class Geometry:
    """Namespace-style container for low-level geometric helper methods."""

    @staticmethod
    def heading(angle_deg):
        """Unit vector pointing along ``angle_deg`` (counter-clockwise from +x).

        A scalar angle gives a Point2D; an array of n angles gives an (n, 2)
        array with one unit vector per row.
        """
        theta = np.radians(angle_deg)
        if np.ndim(theta) == 0:
            return Point2D(float(np.cos(theta)), float(np.sin(theta)))
        return np.column_stack((np.cos(theta), np.sin(theta)))

    @staticmethod
    def distance(p0: Vec2, p1: Vec2) -> float:
        return float(np.hypot(p1[0] - p0[0], p1[1] - p0[1]))

    @staticmethod
    def clamp_to_radius(p: Vec2, radius: float) -> Point2D:
        """Project ``p`` onto the disc of ``radius`` about the origin.

        Points already inside the disc are returned unchanged; points outside
        keep their direction and are pulled in to the rim.
        """
        r = float(np.hypot(p[0], p[1]))
        if r <= radius:
            return Point2D(float(p[0]), float(p[1]))
        angle = np.arctan2(p[1], p[0])
        return Point2D(float(radius * np.cos(angle)), float(radius * np.sin(angle)))


__all__ = [
    "Vec2",
    "Point2D",
    "ORIGIN",
    "Geometry",
]
