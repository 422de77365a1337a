"""Immutable plane primitives: homogeneous points and lines, circles and ellipses."""

from .circle import Circle
from .conic import ConicCoefficients
from .constructions import elliptical, polar, tan_tan_radius, to_polar
from .ellipse import Ellipse
from .projective import Line, Point, difference, dot, join, meet, segment_midpoint

__all__ = [
    "Circle",
    "ConicCoefficients",
    "Ellipse",
    "Line",
    "Point",
    "difference",
    "dot",
    "elliptical",
    "join",
    "meet",
    "polar",
    "segment_midpoint",
    "tan_tan_radius",
    "to_polar",
]
