# brickwall/animation/easing.py
"""Easing curves mapping a time fraction in [0, 1] to an output fraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

Easing = Callable[[float], float]


def linear_easing(fraction: float) -> float:
    return fraction


@dataclass(frozen=True, slots=True)
class CubicBezierEasing:
    """
    CSS-style cubic bezier through (0, 0), (a, b), (c, d), (1, 1).
    `a` and `c` must lie in [0, 1] so x(t) is monotonic.
    """

    a: float
    b: float
    c: float
    d: float

    TOLERANCE = 1e-6
    MAX_ITERATIONS = 64

    def __post_init__(self):
        if not (0.0 <= self.a <= 1.0 and 0.0 <= self.c <= 1.0):
            raise ValueError(
                f"Control point x values must be in [0, 1], got {self.a}, {self.c}"
            )

    @staticmethod
    def _bezier(p1: float, p2: float, t: float) -> float:
        u = 1.0 - t
        return 3.0 * p1 * u * u * t + 3.0 * p2 * u * t * t + t * t * t

    def __call__(self, fraction: float) -> float:
        if fraction <= 0.0:
            return 0.0
        if fraction >= 1.0:
            return 1.0

        # Bisection on x(t) = fraction
        lo, hi = 0.0, 1.0
        t = fraction
        for _ in range(self.MAX_ITERATIONS):
            x = self._bezier(self.a, self.c, t)
            if abs(x - fraction) < self.TOLERANCE:
                break
            if x < fraction:
                lo = t
            else:
                hi = t
            t = (lo + hi) / 2.0

        return self._bezier(self.b, self.d, t)


FastOutSlowInEasing = CubicBezierEasing(0.4, 0.0, 0.2, 1.0)
LinearOutSlowInEasing = CubicBezierEasing(0.0, 0.0, 0.2, 1.0)
FastOutLinearInEasing = CubicBezierEasing(0.4, 0.0, 1.0, 1.0)
LinearEasing: Easing = linear_easing
