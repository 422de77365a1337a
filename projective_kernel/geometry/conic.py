"""General conic ``A x² + 2B xy + C y² + 2D x + 2E y + F = 0``."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from ..types import NoRealIntersectionError, SolutionSet
from .projective import Line, Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConicCoefficients:
    """The six implicit coefficients of a conic; unpacks as ``(A, B, C, D, E, F)``."""

    A: float
    B: float
    C: float
    D: float
    E: float
    F: float

    def __post_init__(self) -> None:
        for name in ("A", "B", "C", "D", "E", "F"):
            object.__setattr__(self, name, float(getattr(self, name)))

    def __iter__(self) -> Iterator[float]:
        return iter((self.A, self.B, self.C, self.D, self.E, self.F))

    def matrix(self) -> np.ndarray:
        """Symmetric 3×3 form ``M`` with ``[x y 1] M [x y 1]ᵀ = 0``."""

        return np.array(
            [
                [self.A, self.B, self.D],
                [self.B, self.C, self.E],
                [self.D, self.E, self.F],
            ],
            dtype=float,
        )

    def evaluate(self, point: Point) -> float:
        """Homogeneous value of the conic at ``point``; zero on the curve."""

        x, y, w = point.coords
        return (
            self.A * x * x
            + 2 * self.B * x * y
            + self.C * y * y
            + 2 * self.D * x * w
            + 2 * self.E * y * w
            + self.F * w * w
        )

    def tangent_point(self, line: Line, branch: SolutionSet) -> Point:
        """Point of the conic whose tangent is parallel to ``line``.

        The candidates lie on the diameter ``u x + v y + w = 0`` conjugate to the
        line direction, with ``u = A·H − B·G``, ``v = B·H − C·G``, ``w = D·H − E·G``
        for the line ``(G, H, I)``. Walking that diameter from its foot along
        ``(−v, u)`` gives ``P t² + 2Q t + R = 0``; ``branch`` selects the
        ``−sqrt`` (FIRST) or ``+sqrt`` (SECOND) root. A negative discriminant
        raises :class:`NoRealIntersectionError`.
        """

        A, B, C, D, E, F = self
        G, H, _ = line.coords
        u = A * H - B * G
        v = B * H - C * G
        w = D * H - E * G
        s = u * u + v * v
        if s == 0:
            raise NoRealIntersectionError(f"line {line} has no conjugate diameter on this conic")

        x0 = -u * w / s
        y0 = -v * w / s
        dx, dy = -v, u
        P = A * dx * dx + 2 * B * dx * dy + C * dy * dy
        Q = (A * x0 + B * y0 + D) * dx + (B * x0 + C * y0 + E) * dy
        R = A * x0 * x0 + 2 * B * x0 * y0 + C * y0 * y0 + 2 * D * x0 + 2 * E * y0 + F

        if P == 0:
            if Q == 0:
                raise NoRealIntersectionError(f"conjugate diameter of {line} does not meet the conic")
            t = -R / (2 * Q)
        else:
            disc = Q * Q - P * R
            if not disc >= 0:
                logger.debug("tangent quadratic has discriminant %r for line %s", disc, line)
                raise NoRealIntersectionError(
                    f"no real tangent point parallel to {line} (discriminant {disc:.6g})"
                )
            t = (branch.sign * math.sqrt(disc) - Q) / P

        return Point(-u * w - t * v * s, -v * w + t * u * s, s)


__all__ = ["ConicCoefficients"]
