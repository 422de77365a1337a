from __future__ import annotations

import math

import numpy as np

from .types import Vec2


def _vec2(a: Vec2, b: Vec2) -> Vec2:
    return b[0] - a[0], b[1] - a[1]


def _add2(a: Vec2, b: Vec2) -> Vec2:
    return a[0] + b[0], a[1] + b[1]


def _scale2(factor: float, v: Vec2) -> Vec2:
    return factor * v[0], factor * v[1]


def _dot2(a: Vec2, b: Vec2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def _norm_sq2(v: Vec2) -> float:
    return _dot2(v, v)


def _norm2(v: Vec2) -> float:
    if not (math.isfinite(v[0]) and math.isfinite(v[1])):
        return math.hypot(*v)
    return math.sqrt(max(_norm_sq2(v), 0.0))


def _midpoint2(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0]) * 0.5, (a[1] + b[1]) * 0.5


def _rotate90(v: Vec2) -> Vec2:
    return -v[1], v[0]


def _safe_div(num: float, den: float) -> float:
    # IEEE semantics: x/0 -> +-inf, 0/0 -> nan
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.divide(np.float64(num), np.float64(den)))


def _sign(value: float) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def _fmt(value: float, spec: str) -> str:
    return format(value, spec or ".4g")


__all__ = [
    "_add2",
    "_dot2",
    "_fmt",
    "_midpoint2",
    "_norm2",
    "_norm_sq2",
    "_rotate90",
    "_safe_div",
    "_scale2",
    "_sign",
    "_vec2",
]
