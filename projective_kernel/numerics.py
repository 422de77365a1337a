"""Scalar root finders used by the curve projections.

Two strategies are provided, each usable in single (``numpy.float32``) or
double (``numpy.float64``) precision:

* :func:`gauss_point_iteration` -- fixed-point iteration ``x <- f(x)``.
* :func:`bisection_root` -- bisection with automatic bracket expansion.

Both are bounded by :attr:`NumericsConfig.max_iterations`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Union

import numpy as np

from .config import get_numerics_config
from .logging_utils import debug_log_call
from .types import BracketInvariantError, UnbracketableRootError

logger = logging.getLogger(__name__)

Scalar = Union[float, np.floating]
DTypeLike = Union[type, np.dtype]


@dataclass(frozen=True)
class RootResult:
    """Outcome of a root search; unpacks as ``(converged, x)``."""

    converged: bool
    x: Scalar
    iterations: int

    def __iter__(self) -> Iterator[Any]:
        yield self.converged
        yield self.x


def _caster(dtype: DTypeLike) -> Callable[[Any], np.floating]:
    scalar_type = np.dtype(dtype).type
    if not issubclass(scalar_type, np.floating):
        raise TypeError(f"root finders need a floating dtype, got {np.dtype(dtype)}")
    return scalar_type


def _budget(max_iterations: Optional[int]) -> int:
    if max_iterations is not None:
        return max_iterations
    return get_numerics_config().max_iterations


def _require_finite_bracket(x_low: Scalar, f_low: Scalar, x_high: Scalar, f_high: Scalar) -> None:
    if not (math.isfinite(f_low) and math.isfinite(f_high)):
        raise UnbracketableRootError(
            f"f is not finite on the bracket [{x_low!r}, {x_high!r}] "
            f"(f_low={f_low!r}, f_high={f_high!r})"
        )


@debug_log_call(logger, name="gauss_point_iteration")
def gauss_point_iteration(
    f: Callable[[Scalar], Scalar],
    x_init: Scalar,
    tol: float,
    *,
    dtype: DTypeLike = np.float64,
    max_iterations: Optional[int] = None,
) -> RootResult:
    """Iterate ``x <- f(x)`` from ``x_init`` until successive values differ by at most ``tol``.

    Non-convergence is reported through :attr:`RootResult.converged`. A non-finite
    iterate ends the search immediately as not converged.
    """

    cast = _caster(dtype)
    budget = _budget(max_iterations)
    tol = cast(tol)
    x = cast(x_init)
    iterations = 0
    with np.errstate(over="ignore", invalid="ignore"):
        while iterations < budget:
            iterations += 1
            x_old = x
            x = cast(f(x))
            if not math.isfinite(x):
                logger.debug("gauss iteration hit non-finite value at iter=%d", iterations)
                return RootResult(False, x, iterations)
            if abs(x - x_old) <= tol:
                logger.debug("gauss iteration converged: iter=%d x=%r", iterations, x)
                return RootResult(True, x, iterations)

    logger.debug("gauss iteration exhausted %d iterations at x=%r", budget, x)
    return RootResult(False, x, iterations)


@debug_log_call(logger, name="bisection_root")
def bisection_root(
    f: Callable[[Scalar], Scalar],
    x_low: Scalar,
    x_high: Scalar,
    tol: float,
    *,
    dtype: DTypeLike = np.float64,
    max_iterations: Optional[int] = None,
) -> RootResult:
    """Find a root of ``f`` by bisection, widening ``[x_low, x_high]`` until it brackets one.

    Raises :class:`UnbracketableRootError` when no sign change is found within the
    iteration budget or ``f`` is not finite at a bracket end, and
    :class:`BracketInvariantError` if the bracket loses its sign change while
    narrowing (a non-monotonic or multi-root ``f``).
    """

    cast = _caster(dtype)
    budget = _budget(max_iterations)
    tol = cast(tol)
    half = cast(0.5)
    x_low, x_high = cast(x_low), cast(x_high)

    with np.errstate(over="ignore", invalid="ignore"):
        f_low, f_high = cast(f(x_low)), cast(f(x_high))
        if abs(f_low) <= tol:
            return RootResult(True, x_low, 0)
        if abs(f_high) <= tol:
            return RootResult(True, x_high, 0)

        expansions = 0
        _require_finite_bracket(x_low, f_low, x_high, f_high)
        while f_low * f_high > 0:
            if expansions >= budget:
                raise UnbracketableRootError(
                    f"no sign change found after {expansions} bracket expansions "
                    f"(last bracket [{x_low!r}, {x_high!r}])"
                )
            expansions += 1
            x_low, x_high = (3 * x_low - x_high) * half, (3 * x_high - x_low) * half
            f_low, f_high = cast(f(x_low)), cast(f(x_high))
            _require_finite_bracket(x_low, f_low, x_high, f_high)
        if expansions:
            logger.debug("bisection bracket expanded %d times to [%r, %r]", expansions, x_low, x_high)

        if abs(f_low) <= tol:
            return RootResult(True, x_low, 0)
        if abs(f_high) <= tol:
            return RootResult(True, x_high, 0)

        iterations = 0
        x = x_low
        while iterations < budget:
            iterations += 1
            x = (x_low + x_high) * half
            f_mid = cast(f(x))
            if abs(f_mid) <= tol:
                return RootResult(True, x, iterations)
            if f_low * f_mid < 0:
                x_high, f_high = x, f_mid
            elif f_high * f_mid < 0:
                x_low, f_low = x, f_mid
            else:
                raise BracketInvariantError(
                    f"bracket [{x_low!r}, {x_high!r}] lost its sign change at x={x!r} "
                    f"(f_low={f_low!r}, f_mid={f_mid!r}, f_high={f_high!r})"
                )
            if abs(x_high - x_low) <= 2 * tol:
                return RootResult(True, x, iterations)

    logger.debug("bisection exhausted %d iterations at x=%r", budget, x)
    return RootResult(False, x, iterations)


__all__ = [
    "RootResult",
    "gauss_point_iteration",
    "bisection_root",
]
