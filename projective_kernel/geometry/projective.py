"""Homogeneous points and lines of the projective plane.

A :class:`Point` ``(x, y, w)`` sits at ``(x/w, y/w)``; ``w == 0`` is an ideal
point (a direction). A :class:`Line` ``(a, b, c)`` is the set ``a·x + b·y + c·w = 0``;
``a == b == 0`` is the line at infinity. Both are immutable and every operation
returns a new value. Degenerate inputs produce ideal points or infinite/NaN
Euclidean quantities rather than exceptions.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterator, Tuple, Union

from ..math_utils import _fmt, _midpoint2, _norm2, _safe_div, _sign
from ..types import Vec2

if TYPE_CHECKING:  # pragma: no cover
    from .circle import Circle

Triple = Tuple[float, float, float]


def _component(coords: Triple, index: int, kind: str) -> float:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < 3:
        raise IndexError(f"{kind} component index must be 0, 1 or 2, got {index!r}")
    return coords[index]


@dataclass(frozen=True)
class Point:
    """Homogeneous point ``(x, y, w)``."""

    x: float
    y: float
    w: float = 1.0

    EMPTY: ClassVar["Point"]
    ORIGIN: ClassVar["Point"]
    ALONG_X: ClassVar["Point"]
    ALONG_Y: ClassVar["Point"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "w", float(self.w))

    # -- construction -------------------------------------------------

    @classmethod
    def from_coordinates(cls, x: float, y: float) -> "Point":
        return cls(x, y, 1.0)

    @classmethod
    def from_vector(cls, vector: Vec2) -> "Point":
        return cls(vector[0], vector[1], 1.0)

    @staticmethod
    def meet(line1: "Line", line2: "Line") -> "Point":
        """Return the point common to both lines (ideal when they are parallel)."""

        return Point(
            line1.b * line2.c - line1.c * line2.b,
            line1.c * line2.a - line1.a * line2.c,
            line1.a * line2.b - line1.b * line2.a,
        )

    # -- components ---------------------------------------------------

    @property
    def u(self) -> float:
        return self.x

    @property
    def v(self) -> float:
        return self.y

    @property
    def coords(self) -> Triple:
        return (self.x, self.y, self.w)

    def __getitem__(self, index: int) -> float:
        return _component(self.coords, index, "point")

    def __iter__(self) -> Iterator[float]:
        return iter(self.coords)

    def __len__(self) -> int:
        return 3

    @property
    def is_finite(self) -> bool:
        return self.w != 0

    @property
    def is_empty(self) -> bool:
        return self.x == 0 and self.y == 0 and self.w == 0

    @property
    def weight(self) -> float:
        return self.w

    @property
    def weight_sqr(self) -> float:
        return self.w * self.w

    # -- euclidean views ----------------------------------------------

    def as_vector(self) -> Vec2:
        """Cartesian position ``(x/w, y/w)``; infinite or NaN for ideal points."""

        return _safe_div(self.x, self.w), _safe_div(self.y, self.w)

    def as_vector_from(self, origin: "Point") -> Vec2:
        return origin.vector_to(self)

    def vector_to(self, target: "Point") -> Vec2:
        return difference(target, self)

    def normalized(self) -> "Point":
        """Return the same point scaled so that ``w == 1``."""

        return Point.from_vector(self.as_vector())

    def dot(self, line: "Line") -> float:
        return dot(line, self)

    def distance_to(self, target: Union["Point", "Line", "Circle"]) -> float:
        """Euclidean distance to a point, a line (unsigned) or a circle (signed gap)."""

        if isinstance(target, Point):
            return _norm2(self.vector_to(target))
        if isinstance(target, Line):
            return abs(self.signed_distance_to(target))
        from .circle import Circle

        if isinstance(target, Circle):
            return target.distance_to(self)
        raise TypeError(f"cannot measure distance from Point to {type(target).__name__}")

    def signed_distance_to(self, line: "Line") -> float:
        """Distance to ``line`` carrying the side given by the incidence pairing."""

        return _safe_div(dot(line, self), line.weight * self.weight)

    def is_coincident(self, other: Union["Point", "Line"], tolerance: float = 0.0) -> bool:
        """Incidence with a line, or equal Cartesian position with a point, within ``tolerance``."""

        if isinstance(other, Line):
            return abs(dot(other, self)) <= tolerance
        if isinstance(other, Point):
            p = self.as_vector()
            q = other.as_vector()
            if tolerance == 0:
                return p == q
            return abs(p[0] - q[0]) <= tolerance and abs(p[1] - q[1]) <= tolerance
        raise TypeError(f"cannot test Point coincidence with {type(other).__name__}")

    # -- algebra ------------------------------------------------------

    def negate(self) -> "Point":
        return Point(-self.x, -self.y, -self.w)

    def scale(self, factor: float) -> "Point":
        return Point(factor * self.x, factor * self.y, factor * self.w)

    def add(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y, self.w + other.w)

    def subtract(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y, self.w - other.w)

    def add_vector(self, step: Vec2) -> "Point":
        """Translate by a Cartesian step, keeping the weight."""

        return Point(self.x + self.w * step[0], self.y + self.w * step[1], self.w)

    def subtract_vector(self, step: Vec2) -> "Point":
        return Point(self.x - self.w * step[0], self.y - self.w * step[1], self.w)

    # -- transforms ---------------------------------------------------

    def rotate_about(self, fulcrum: "Point", angle: float) -> "Point":
        fx, fy, fw = fulcrum.coords
        cos_t = math.cos(angle)
        sin_t = math.sin(angle)
        dx = self.x * fw - fx * self.w
        dy = self.y * fw - fy * self.w
        return Point(
            fx * self.w + dx * cos_t - dy * sin_t,
            fy * self.w + dx * sin_t + dy * cos_t,
            self.w * fw,
        )

    def mirror_about(self, axis: "Line") -> "Point":
        a, b, c = axis.coords
        return Point(
            self.x * (b * b - a * a) - 2 * a * (b * self.y + c * self.w),
            self.y * (a * a - b * b) - 2 * b * (a * self.x + c * self.w),
            self.w * (a * a + b * b),
        )

    # -- formatting ---------------------------------------------------

    def __format__(self, spec: str) -> str:
        px, py = self.as_vector()
        return f"Point(x={_fmt(px, spec)}, y={_fmt(py, spec)})"

    def __str__(self) -> str:
        return format(self, "")


@dataclass(frozen=True)
class Line:
    """Homogeneous line ``a·x + b·y + c·w = 0``."""

    a: float
    b: float
    c: float

    EMPTY: ClassVar["Line"]
    X_AXIS: ClassVar["Line"]
    Y_AXIS: ClassVar["Line"]
    HORIZON: ClassVar["Line"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", float(self.a))
        object.__setattr__(self, "b", float(self.b))
        object.__setattr__(self, "c", float(self.c))

    # -- construction -------------------------------------------------

    @staticmethod
    def join(point1: Point, point2: Point) -> "Line":
        """Return the line through both points; anti-commutative in its arguments."""

        return Line(
            point1.y * point2.w - point1.w * point2.y,
            point1.w * point2.x - point1.x * point2.w,
            point1.x * point2.y - point1.y * point2.x,
        )

    @classmethod
    def ray(cls, origin: Point, direction: Vec2) -> "Line":
        return cls.join(origin, origin.add_vector(direction))

    @classmethod
    def through_point_away_from_origin(cls, point: Point) -> "Line":
        """Line through ``point`` whose normal is the bearing from the origin to ``point``."""

        u, v, w = point.coords
        return cls(-w * u, -w * v, u * u + v * v)

    # -- components ---------------------------------------------------

    @property
    def coords(self) -> Triple:
        return (self.a, self.b, self.c)

    def __getitem__(self, index: int) -> float:
        return _component(self.coords, index, "line")

    def __iter__(self) -> Iterator[float]:
        return iter(self.coords)

    def __len__(self) -> int:
        return 3

    @property
    def is_finite(self) -> bool:
        return self.weight_sqr > 0

    @property
    def is_empty(self) -> bool:
        return self.a == 0 and self.b == 0 and self.c == 0

    @property
    def weight_sqr(self) -> float:
        return self.a * self.a + self.b * self.b

    @property
    def weight(self) -> float:
        return math.hypot(self.a, self.b)

    def dot(self, point: Point) -> float:
        return dot(self, point)

    def is_coincident(self, other: Union["Line", Point], tolerance: float = 0.0) -> bool:
        """Same oriented line (any positive scale), or incidence with a point."""

        if isinstance(other, Point):
            return abs(dot(self, other)) <= tolerance
        if isinstance(other, Line):
            w1 = self.weight
            w2 = other.weight
            return all(
                abs(mine * w2 - theirs * w1) <= tolerance * w1 * w2
                for mine, theirs in zip(self.coords, other.coords)
            )
        raise TypeError(f"cannot test Line coincidence with {type(other).__name__}")

    # -- euclidean views ----------------------------------------------

    def center(self) -> Point:
        """Foot of the perpendicular from the origin."""

        return Point(-self.c * self.a, -self.c * self.b, self.weight_sqr)

    def direction(self) -> Vec2:
        w = self.weight
        return _safe_div(self.b, w), _safe_div(-self.a, w)

    def normalized(self) -> "Line":
        w = self.weight
        return Line(_safe_div(self.a, w), _safe_div(self.b, w), _safe_div(self.c, w))

    def point_at(self, t: float) -> Point:
        """Point at signed arclength ``t`` from :meth:`center` along :meth:`direction`."""

        w = self.weight
        return Point(
            self.b * w * t - self.a * self.c,
            -self.a * w * t - self.b * self.c,
            w * w,
        )

    def parallel_distance_to(self, point: Point) -> float:
        """Arclength coordinate of ``point``'s projection, as used by :meth:`point_at`."""

        return _safe_div(self.b * point.x - self.a * point.y, self.weight * point.w)

    def point_from(self, point: Point, distance: float) -> Point:
        return self.point_at(self.parallel_distance_to(point) + distance)

    def closest_point(self, target: Union[Point, "Circle"]) -> Point:
        """Orthogonal projection of a point (or a circle's center) onto the line."""

        point = target if isinstance(target, Point) else target.center
        a, b, c = self.coords
        return Point(
            b * b * point.x - a * (b * point.y + c * point.w),
            a * a * point.y - b * (a * point.x + c * point.w),
            (a * a + b * b) * point.w,
        )

    def vector_to(self, target: Point) -> Vec2:
        return self.closest_point(target).vector_to(target)

    def signed_distance_to(self, target: Union[Point, "Circle"]) -> float:
        if isinstance(target, Point):
            return _safe_div(dot(self, target), self.weight * target.weight)
        d = self.signed_distance_to(target.center)
        return d - _sign(d) * target.radius

    def distance_to(self, target: Union[Point, "Circle"]) -> float:
        if isinstance(target, Point):
            return abs(self.signed_distance_to(target))
        return self.distance_to(target.center) - target.radius

    # -- derived lines ------------------------------------------------

    def parallel_through(self, point: Point) -> "Line":
        u, v, w = point.coords
        return Line(self.a * w, self.b * w, -self.a * u - self.b * v)

    def perpendicular_through(self, point: Point) -> "Line":
        u, v, w = point.coords
        return Line(-self.b * w, self.a * w, self.b * u - self.a * v)

    def offset(self, distance: float) -> "Line":
        """Parallel line shifted so signed distances drop by ``distance``."""

        return Line(self.a, self.b, self.c - distance * self.weight)

    def rotate_about(self, fulcrum: Point, angle: float) -> "Line":
        u, v, w = fulcrum.coords
        a, b, c = self.coords
        cos_t = math.cos(angle)
        sin_t = math.sin(angle)
        return Line(
            w * (a * cos_t - b * sin_t),
            w * (b * cos_t + a * sin_t),
            (b * u - a * v) * sin_t - (a * u + b * v) * cos_t + a * u + b * v + c * w,
        )

    def mirror_about(self, axis: "Line") -> "Line":
        oa, ob, oc = axis.coords
        a, b, c = self.coords
        return Line(
            a * (oa * oa - ob * ob) + 2 * oa * ob * b,
            2 * oa * ob * a + b * (ob * ob - oa * oa),
            2 * oa * oc * a + 2 * ob * oc * b - c * (oa * oa + ob * ob),
        )

    # -- algebra ------------------------------------------------------

    def negate(self) -> "Line":
        return Line(-self.a, -self.b, -self.c)

    def scale(self, factor: float) -> "Line":
        return Line(factor * self.a, factor * self.b, factor * self.c)

    def add(self, other: "Line") -> "Line":
        return Line(self.a + other.a, self.b + other.b, self.c + other.c)

    def subtract(self, other: "Line") -> "Line":
        return Line(self.a - other.a, self.b - other.b, self.c - other.c)

    # -- formatting ---------------------------------------------------

    def __format__(self, spec: str) -> str:
        terms = []
        if self.a != 0:
            terms.append(f"{_fmt(self.a, spec)}*x")
        if self.b != 0:
            terms.append(f"{_fmt(self.b, spec)}*y")
        if self.c != 0 or not terms:
            terms.append(_fmt(self.c, spec))
        return " + ".join(terms) + " = 0"

    def __str__(self) -> str:
        return format(self, "")


Point.EMPTY = Point(0.0, 0.0, 0.0)
Point.ORIGIN = Point(0.0, 0.0, 1.0)
Point.ALONG_X = Point(1.0, 0.0, 0.0)
Point.ALONG_Y = Point(0.0, 1.0, 0.0)

Line.EMPTY = Line(0.0, 0.0, 0.0)
Line.X_AXIS = Line(0.0, 1.0, 0.0)
Line.Y_AXIS = Line(-1.0, 0.0, 0.0)
Line.HORIZON = Line(0.0, 0.0, 1.0)


def dot(line: Line, point: Point) -> float:
    """Incidence pairing ``a·x + b·y + c·w``; zero exactly when ``point`` lies on ``line``."""

    return line.a * point.x + line.b * point.y + line.c * point.w


def difference(target: Point, reference: Point) -> Vec2:
    """Cartesian vector from ``reference`` to ``target``."""

    wa, wb = target.w, reference.w
    dx = wb * target.x - wa * reference.x
    dy = wb * target.y - wa * reference.y
    scale = wa * wb
    return _safe_div(dx, scale), _safe_div(dy, scale)


def join(point1: Point, point2: Point) -> Line:
    return Line.join(point1, point2)


def meet(line1: Line, line2: Line) -> Point:
    return Point.meet(line1, line2)


def segment_midpoint(p: Point, q: Point) -> Point:
    """Cartesian midpoint of two finite points."""

    return Point.from_vector(_midpoint2(p.as_vector(), q.as_vector()))


__all__ = [
    "Point",
    "Line",
    "dot",
    "difference",
    "join",
    "meet",
    "segment_midpoint",
]
