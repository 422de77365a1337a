from __future__ import annotations

from enum import Enum
from typing import Tuple

Vec2 = Tuple[float, float]


class GeometryError(Exception):
    """Base class for failures raised by the geometry kernel."""


class NoSolutionError(GeometryError):
    """Raised when a geometric query has no answer for the given inputs."""


class NoConvergenceError(NoSolutionError):
    """Raised when an iterative projection fails to settle on a finite value."""


class NoRealIntersectionError(NoSolutionError):
    """Raised when a closed-form quadratic has a negative discriminant."""


class UnbracketableRootError(GeometryError, ValueError):
    """Raised when bisection cannot find a sign change within its budget."""


class BracketInvariantError(GeometryError, RuntimeError):
    """Raised when neither half of a bisection bracket shows a sign change."""


class SolutionSet(Enum):
    """Root selector for two-branch closed forms."""

    FIRST = 0
    SECOND = 1

    @property
    def sign(self) -> int:
        return -1 if self is SolutionSet.FIRST else 1


class CornerSolution(Enum):
    """Which of the four fillet circles tangent to two edges to construct."""

    INSIDE = "inside"
    OPPOSING = "opposing"
    OUTSIDE1 = "outside1"
    OUTSIDE2 = "outside2"

    @property
    def signs(self) -> Tuple[int, int]:
        return _CORNER_SIGNS[self]


_CORNER_SIGNS = {
    CornerSolution.INSIDE: (1, -1),
    CornerSolution.OPPOSING: (-1, 1),
    CornerSolution.OUTSIDE1: (1, 1),
    CornerSolution.OUTSIDE2: (-1, -1),
}


__all__ = [
    "Vec2",
    "GeometryError",
    "NoSolutionError",
    "NoConvergenceError",
    "NoRealIntersectionError",
    "UnbracketableRootError",
    "BracketInvariantError",
    "SolutionSet",
    "CornerSolution",
]
