"""Cubic-bezier easing curves with implicit endpoints (0, 0) and (1, 1).

The x-component is treated as a function of the curve parameter t and
inverted with Newton's method. Curves whose x-component is monotonic (the
usual CSS-style control points) converge well within the iteration limit.
Degenerate control points are not guarded against: a vanishing derivative
lets the iteration diverge and the result may be ``nan``.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

NEWTON_ITERATIONS = 10
NEWTON_TOLERANCE = 1e-6


def bezier_point(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
    u = 1 - t
    return u * u * u * p0 + 3 * u * u * t * p1 + 3 * u * t * t * p2 + t * t * t * p3


def _bezier_slope(t: float, p1: float, p2: float) -> float:
    # Derivative of bezier_point(t, 0, p1, p2, 1).
    return 3 * (1 - t) * (1 - t) * p1 + 6 * (1 - t) * t * (p2 - p1) + 3 * t * t * (1 - p2)


def _newton_step(f: float, df: float) -> float:
    if df == 0.0:
        # IEEE division semantics instead of ZeroDivisionError.
        return math.copysign(math.inf, f) * math.copysign(1.0, df)
    return f / df


def solve_cubic_bezier(x: float, x1: float, y1: float, x2: float, y2: float) -> float:
    """Return the curve's y at the point whose x-component equals x."""
    t = x
    for _ in range(NEWTON_ITERATIONS):
        f = bezier_point(t, 0, x1, x2, 1) - x
        if abs(f) < NEWTON_TOLERANCE:
            break
        t -= _newton_step(f, _bezier_slope(t, x1, x2))
    return bezier_point(t, 0, y1, y2, 1)


@dataclass(frozen=True)
class CubicBezier:
    """Easing defined by two control points, comparable by value."""

    x1: float
    y1: float
    x2: float
    y2: float

    def __call__(self, x: float) -> float:
        return solve_cubic_bezier(x, self.x1, self.y1, self.x2, self.y2)

    @property
    def name(self) -> str:
        return f"cubic-bezier {self.x1!r} {self.y1!r} {self.x2!r} {self.y2!r}"


def get_cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> CubicBezier:
    return CubicBezier(float(x1), float(y1), float(x2), float(y2))
