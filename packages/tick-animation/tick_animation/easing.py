"""Smoothing functions for animation progress.

Every function maps normalized progress in [0.0, 1.0] to an eased value.
Most stay inside [0.0, 1.0]; ``ease_out_elastic`` overshoots before settling.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from tick_animation.bezier import CubicBezier, solve_cubic_bezier

SmoothFunction = Callable[[float], float]

SIGMOID_MAX = 1 + math.exp(-6)

_ELASTIC_PERIOD = 0.6
_ELASTIC_SHIFT = _ELASTIC_PERIOD / 4


def linear(x: float) -> float:
    return x


def circle(x: float) -> float:
    return math.sqrt(2 * x - x * x)


def sigmoid(x: float) -> float:
    """Logistic curve scaled so that sigmoid(1) == 1."""
    return SIGMOID_MAX / (1 + math.exp(-12 * x + 6))


def ease_out_elastic(x: float) -> float:
    """Decaying sine overshoot. Endpoints are exact."""
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    return (
        2 ** (-10 * x)
        * math.sin((x - _ELASTIC_SHIFT) * (2 * math.pi) / _ELASTIC_PERIOD)
        + 1.0
    )


EASINGS: Mapping[str, SmoothFunction] = MappingProxyType({
    "linear": linear,
    "circle": circle,
    "sigmoid": sigmoid,
    "easeOutElastic": ease_out_elastic,
})


def get_available_smooth_functions() -> list[str]:
    """List registered easing names, for configuration editors."""
    return list(EASINGS)


@dataclass(frozen=True)
class NamedEasing:
    """A registry easing referenced by name."""

    name: str

    def __post_init__(self) -> None:
        if self.name not in EASINGS:
            raise KeyError(f"Unknown easing {self.name!r}")

    def __call__(self, x: float) -> float:
        return smooth(self, x)


def smooth(fn: SmoothFunction, x: float) -> float:
    """Apply a smoothing function to x.

    Tagged variants are evaluated directly from their parameters; any other
    callable is simply called.
    """
    if isinstance(fn, NamedEasing):
        return EASINGS[fn.name](x)
    if isinstance(fn, CubicBezier):
        return solve_cubic_bezier(x, fn.x1, fn.y1, fn.x2, fn.y2)
    return fn(x)
