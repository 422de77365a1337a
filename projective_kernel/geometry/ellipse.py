"""Axis-aligned ellipse and its projection queries.

Closest points on the ellipse have no closed form in general. The projection
condition is rewritten in ``z = tan t`` and solved by fixed-point iteration
(:func:`~projective_kernel.numerics.gauss_point_iteration`) wherever that map
contracts. Offsets near the minor axis, where it does not, are solved by
bisection (:func:`~projective_kernel.numerics.bisection_root`) on the monotone
secular equation of the foot point. Failure to settle is reported as
:class:`~projective_kernel.types.NoConvergenceError` rather than replaced by an
arbitrary angle.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Union

from ..config import get_numerics_config
from ..math_utils import _fmt, _safe_div, _sign
from ..numerics import bisection_root, gauss_point_iteration
from ..types import NoConvergenceError, SolutionSet
from .circle import Circle
from .conic import ConicCoefficients
from .constructions import elliptical
from .projective import Line, Point

logger = logging.getLogger(__name__)

# the point iteration is used only where its Lipschitz bound is at most 1/2
_CONTRACTION_MARGIN = 2.0


@dataclass(frozen=True)
class Ellipse:
    """Ellipse ``center + (major·cos t, minor·sin t)``; any tilt belongs to the caller's frame.

    Either semi-axis may be the longer one; both must be positive.
    """

    center: Point
    major_axis: float
    minor_axis: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "major_axis", float(self.major_axis))
        object.__setattr__(self, "minor_axis", float(self.minor_axis))
        if not (self.major_axis > 0 and self.minor_axis > 0):
            raise ValueError(
                f"ellipse semi-axes must be positive, got {self.major_axis!r} and {self.minor_axis!r}"
            )

    @classmethod
    def at_origin(cls, major_axis: float, minor_axis: float) -> "Ellipse":
        return cls(Point.ORIGIN, major_axis, minor_axis)

    def point_at(self, t: float) -> Point:
        return self.center.add_vector(elliptical(self.major_axis, self.minor_axis, t))

    def coefficients(self) -> ConicCoefficients:
        a2 = self.major_axis * self.major_axis
        b2 = self.minor_axis * self.minor_axis
        cx, cy = self.center.as_vector()
        return ConicCoefficients(
            A=1 / a2,
            B=0.0,
            C=1 / b2,
            D=-cx / a2,
            E=-cy / b2,
            F=cx * cx / a2 + cy * cy / b2 - 1,
        )

    # -- projections --------------------------------------------------

    def closest_point(
        self,
        target: Union[Point, Circle, Line],
        tolerance: Optional[float] = None,
        *,
        branch: Optional[SolutionSet] = None,
    ) -> Point:
        """Foot point on the ellipse nearest a point, a circle's center or a line.

        Passing ``branch`` for a line selects the closed-form tangent point of
        :meth:`tangent_point` instead of the iteration.
        """

        if branch is not None:
            if not isinstance(target, Line):
                raise TypeError("branch selection only applies to lines")
            return self.tangent_point(target, branch)
        tol = get_numerics_config().loose_tolerance if tolerance is None else tolerance
        if isinstance(target, Circle):
            return self._closest_to_point(target.center, tol)
        if isinstance(target, Point):
            return self._closest_to_point(target, tol)
        if isinstance(target, Line):
            return self._closest_to_line(target, tol)
        raise TypeError(f"cannot project {type(target).__name__} onto an ellipse")

    def _closest_to_point(self, point: Point, tol: float) -> Point:
        dx, dy = self.center.vector_to(point)
        rx, ry = self.major_axis, self.minor_axis
        if rx == ry:
            logger.debug("ellipse is a circle; projecting %s by bearing", point)
            return self.point_at(math.atan2(dy, dx))
        if ry > rx:
            # exchanging x and y maps the angle s of the swapped ellipse to pi/2 - s
            return self.point_at(math.pi / 2 - self._point_foot_angle(dy, dx, ry, rx, tol))
        return self.point_at(self._point_foot_angle(dx, dy, rx, ry, tol))

    def _point_foot_angle(self, dx: float, dy: float, rx: float, ry: float, tol: float) -> float:
        # requires rx > ry
        q = rx * rx - ry * ry
        if dx == 0:
            # on the minor axis the nearer minor vertex wins, the center included
            return math.pi / 2 if dy >= 0 else -math.pi / 2
        if abs(dx) * rx < _CONTRACTION_MARGIN * q:
            return self._secular_foot_angle(dx, dy, rx, ry, tol)

        sign = _sign(dx)
        A = 2 * dx * rx / q
        B = 2 * dy * ry / q

        def iterate(z: float) -> float:
            return _safe_div(B + sign * 2 * z / math.sqrt(1 + z * z), A)

        result = gauss_point_iteration(iterate, 0.0, tol)
        if not result.converged:
            raise NoConvergenceError(
                f"closest point on {self} to offset ({dx:.6g}, {dy:.6g}) did not converge "
                f"after {result.iterations} iterations (z={result.x!r})"
            )
        z = float(result.x)
        return math.atan(z) if sign > 0 else math.atan(z) + math.pi

    def _secular_foot_angle(self, dx: float, dy: float, rx: float, ry: float, tol: float) -> float:
        """Foot angle for offsets where the point iteration does not contract.

        In the first quadrant the foot is ``(a²x/(s+a²), b²y/(s+b²))`` for the
        single root ``s > -b²`` of ``(a x/(s+a²))² + (b y/(s+b²))² = 1``, whose
        left side decreases monotonically in ``s``.
        """

        x0, y0 = abs(dx), abs(dy)
        a2, b2 = rx * rx, ry * ry
        if y0 == 0:
            fx = min(a2 * x0 / (a2 - b2), rx)
            fy = ry * math.sqrt(max(1.0 - (fx / rx) ** 2, 0.0))
        else:

            def secular(s: float) -> float:
                return (rx * x0 / (s + a2)) ** 2 + (ry * y0 / (s + b2)) ** 2 - 1.0

            low = -b2 + ry * y0
            high = -b2 + math.hypot(rx * x0, ry * y0)
            result = bisection_root(secular, low, high, tol)
            if not result.converged:
                raise NoConvergenceError(
                    f"closest point on {self} to offset ({dx:.6g}, {dy:.6g}) did not converge "
                    f"after {result.iterations} bisections (s={result.x!r})"
                )
            s = float(result.x)
            fx = a2 * x0 / (s + a2)
            fy = b2 * y0 / (s + b2)
        logger.debug("foot for offset (%r, %r) found from the secular equation", dx, dy)
        return math.atan2(math.copysign(fy / ry, dy), math.copysign(fx / rx, dx))

    def _closest_to_line(self, line: Line, tol: float) -> Point:
        a, b, c = line.coords
        cx, cy = self.center.as_vector()
        c += a * cx + b * cy
        rx, ry = self.major_axis, self.minor_axis

        # along the ellipse the line value is reach·cos(t - phi) + c
        reach = math.hypot(a * rx, b * ry)
        if reach > 0 and abs(c) <= reach:
            logger.debug("line %s crosses the ellipse", line)
            phi = math.atan2(b * ry, a * rx)
            return self.point_at(phi - math.acos(max(-1.0, min(1.0, -c / reach))))

        if a == 0:
            t = math.pi / 2
        elif abs(b * ry) > abs(a * rx):
            t = math.pi / 2 - self._line_tangent_angle(b, a, c, ry, rx, tol, line)
        else:
            t = self._line_tangent_angle(a, b, c, rx, ry, tol, line)

        # z = tan t fixes t only up to a half turn
        near = self.point_at(t)
        far = self.point_at(t + math.pi)
        if line.distance_to(far) < line.distance_to(near):
            return far
        return near

    def _line_tangent_angle(
        self, a: float, b: float, c: float, rx: float, ry: float, tol: float, line: Line
    ) -> float:
        # requires a != 0 and a line clear of the ellipse
        def iterate(z: float) -> float:
            numerator = (b * ry - a * rx * z) * (a * rx + b * ry * z)
            return _safe_div(numerator, a * c * rx * math.sqrt(1 + z * z)) + (b * ry) / (a * rx)

        result = gauss_point_iteration(iterate, 0.0, tol)
        if not result.converged:
            raise NoConvergenceError(
                f"closest point on {self} to {line} did not converge "
                f"after {result.iterations} iterations (z={result.x!r})"
            )
        return math.atan(float(result.x))

    def tangent_point(self, line: Line, branch: SolutionSet) -> Point:
        """Closed-form point whose tangent is parallel to ``line``; see :meth:`ConicCoefficients.tangent_point`."""

        return self.coefficients().tangent_point(line, branch)

    # -- distances ----------------------------------------------------

    def distance_to(
        self,
        target: Union[Point, Circle, Line],
        tolerance: Optional[float] = None,
        *,
        branch: Optional[SolutionSet] = None,
    ) -> float:
        """Distance from the ellipse's closest point to ``target``.

        With ``branch`` given (lines only) the closed-form tangent point is used
        instead of the iteration.
        """

        foot = self.closest_point(target, tolerance, branch=branch)
        return foot.distance_to(target)

    def __format__(self, spec: str) -> str:
        cx, cy = self.center.as_vector()
        return (
            f"Ellipse(x={_fmt(cx, spec)}, y={_fmt(cy, spec)}, "
            f"rx={_fmt(self.major_axis, spec)}, ry={_fmt(self.minor_axis, spec)})"
        )

    def __str__(self) -> str:
        return format(self, "")


__all__ = ["Ellipse"]
