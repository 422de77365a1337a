from .config import LOOSE_TOLERANCE, MAX_ITERATIONS, NumericsConfig, get_numerics_config, set_numerics_config
from .geometry import (
    Circle,
    ConicCoefficients,
    Ellipse,
    Line,
    Point,
    difference,
    dot,
    elliptical,
    join,
    meet,
    polar,
    segment_midpoint,
    tan_tan_radius,
    to_polar,
)
from .numerics import RootResult, bisection_root, gauss_point_iteration
from .types import (
    BracketInvariantError,
    CornerSolution,
    GeometryError,
    NoConvergenceError,
    NoRealIntersectionError,
    NoSolutionError,
    SolutionSet,
    UnbracketableRootError,
)

__all__ = [
    'Point',
    'Line',
    'Circle',
    'Ellipse',
    'ConicCoefficients',
    'dot',
    'join',
    'meet',
    'difference',
    'segment_midpoint',
    'polar',
    'to_polar',
    'elliptical',
    'tan_tan_radius',
    'CornerSolution',
    'SolutionSet',
    'RootResult',
    'gauss_point_iteration',
    'bisection_root',
    'NumericsConfig',
    'get_numerics_config',
    'set_numerics_config',
    'LOOSE_TOLERANCE',
    'MAX_ITERATIONS',
    'GeometryError',
    'NoSolutionError',
    'NoConvergenceError',
    'NoRealIntersectionError',
    'UnbracketableRootError',
    'BracketInvariantError',
]
