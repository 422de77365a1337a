from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Tuple, Union

from ..math_utils import _add2, _fmt, _rotate90, _scale2, _vec2
from .constructions import polar, to_polar
from .projective import Line, Point, segment_midpoint

logger = logging.getLogger(__name__)

# relative half-chord below which two intersection candidates are one tangency point
_TANGENT_EPS = 1e-12


@dataclass(frozen=True)
class Circle:
    """Circle with a homogeneous ``center`` and a non-negative ``radius``."""

    center: Point
    radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", float(self.radius))
        if not self.radius >= 0:
            raise ValueError(f"circle radius must be non-negative, got {self.radius!r}")

    @classmethod
    def at_origin(cls, radius: float) -> "Circle":
        return cls(Point.ORIGIN, radius)

    @classmethod
    def from_center_and_point(cls, center: Point, point: Point) -> "Circle":
        return cls(center, center.distance_to(point))

    @classmethod
    def from_diagonals(cls, point: Point, other: Point) -> "Circle":
        """Circle having the segment ``point``-``other`` as a diameter."""

        return cls.from_center_and_point(segment_midpoint(point, other), point)

    @property
    def is_degenerate(self) -> bool:
        return self.radius == 0

    def point_at(self, t: float) -> Point:
        return self.center.add_vector(polar(self.radius, t))

    def closest_point(self, target: Union[Point, Line]) -> Point:
        """Boundary point nearest a point (by bearing) or a line (via the center's projection)."""

        if isinstance(target, Line):
            return self.closest_point(target.closest_point(self.center))
        if isinstance(target, Point):
            _, theta = to_polar(self.center.vector_to(target))
            return self.point_at(theta)
        raise TypeError(f"cannot project {type(target).__name__} onto a circle")

    def distance_to(self, target: Union[Point, "Circle", Line]) -> float:
        """Signed gap to the target; negative when they overlap."""

        if isinstance(target, Point):
            return self.center.distance_to(target) - self.radius
        if isinstance(target, Circle):
            return self.center.distance_to(target.center) - self.radius - target.radius
        if isinstance(target, Line):
            return target.distance_to(self.center) - self.radius
        raise TypeError(f"cannot measure distance from Circle to {type(target).__name__}")

    def intersect(self, other: "Circle") -> Tuple[bool, Tuple[Point, ...]]:
        """Intersection points with ``other`` as ``(found, points)``.

        ``points`` holds one point at tangency and two otherwise. Separate,
        nested and concentric circles report ``(False, ())``.
        """

        r1, r2 = self.radius, other.radius
        d = self.center.distance_to(other.center)
        if not math.isfinite(d) or d == 0 or d > r1 + r2 or d < abs(r1 - r2):
            logger.debug("circles %s and %s do not intersect (d=%r)", self, other, d)
            return False, ()

        a = (r1 * r1 - r2 * r2 + d * d) / (2 * d)
        h = math.sqrt(max(r1 * r1 - a * a, 0.0))
        p0 = self.center.as_vector()
        axis = _scale2(1.0 / d, _vec2(p0, other.center.as_vector()))
        foot = _add2(p0, _scale2(a, axis))
        if h <= _TANGENT_EPS * max(r1, r2):
            return True, (Point.from_vector(foot),)

        offset = _scale2(h, _rotate90(axis))
        first = Point.from_vector(_add2(foot, offset))
        second = Point.from_vector(_add2(foot, _scale2(-1.0, offset)))
        return True, (first, second)

    def rotate_about(self, fulcrum: Point, angle: float) -> "Circle":
        return Circle(self.center.rotate_about(fulcrum, angle), self.radius)

    def mirror_about(self, axis: Line) -> "Circle":
        return Circle(self.center.mirror_about(axis), self.radius)

    def offset(self, distance: float) -> "Circle":
        """Concentric circle whose boundary is moved outward by ``distance``; cannot shrink past a point."""

        return Circle(self.center, self.radius + distance)

    def __format__(self, spec: str) -> str:
        cx, cy = self.center.as_vector()
        return f"Circle(x={_fmt(cx, spec)}, y={_fmt(cy, spec)}, r={_fmt(self.radius, spec)})"

    def __str__(self) -> str:
        return format(self, "")


__all__ = ["Circle"]
