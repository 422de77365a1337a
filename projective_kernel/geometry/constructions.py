"""Polar helpers and classic tangency constructions built on the point/line algebra."""

from __future__ import annotations

import logging
import math
from typing import Tuple

from ..types import CornerSolution, Vec2
from .projective import Line, Point

logger = logging.getLogger(__name__)


def polar(radius: float, angle: float) -> Vec2:
    return math.cos(angle) * radius, math.sin(angle) * radius


def to_polar(vector: Vec2) -> Tuple[float, float]:
    """Return ``(r, theta)`` of a Cartesian vector."""

    return math.hypot(vector[0], vector[1]), math.atan2(vector[1], vector[0])


def elliptical(major_radius: float, minor_radius: float, angle: float) -> Vec2:
    return math.cos(angle) * major_radius, math.sin(angle) * minor_radius


def tan_tan_radius(
    apex: Point,
    side1: Point,
    side2: Point,
    radius: float,
    corner: CornerSolution = CornerSolution.INSIDE,
) -> Point:
    """Center of the circle of ``radius`` tangent to the edges ``apex-side1`` and ``apex-side2``.

    Each edge line is offset by ``±radius``; ``corner`` picks the sign pair and
    so which of the four candidate circles is returned. Parallel edges give an
    ideal point.
    """

    edge1 = Line.join(apex, side1)
    edge2 = Line.join(apex, side2)
    s1, s2 = corner.signs
    center = Point.meet(edge1.offset(s1 * radius), edge2.offset(s2 * radius))
    if not center.is_finite:
        logger.debug("tan-tan-radius edges are parallel; returning ideal point %r", center)
    return center


__all__ = [
    "polar",
    "to_polar",
    "elliptical",
    "tan_tan_radius",
]
