"""Configuration helpers for the numerical routines."""

from __future__ import annotations

import copy
from dataclasses import dataclass

MAX_ITERATIONS = 512
LOOSE_TOLERANCE = 1e-6


@dataclass
class NumericsConfig:
    """Budget and default tolerance shared by the iterative solvers."""

    max_iterations: int = MAX_ITERATIONS
    loose_tolerance: float = LOOSE_TOLERANCE

    def __post_init__(self) -> None:
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be positive")
        if self.loose_tolerance < 0:
            raise ValueError("loose_tolerance must be non-negative")


_NUMERICS_CONFIG = NumericsConfig()


def get_numerics_config() -> NumericsConfig:
    return copy.deepcopy(_NUMERICS_CONFIG)


def set_numerics_config(config: NumericsConfig) -> None:
    global _NUMERICS_CONFIG
    _NUMERICS_CONFIG = copy.deepcopy(config)
