"""One-dimensional root bracketing: bisection, secant and false position."""

from __future__ import annotations

import math
from collections.abc import Callable

__all__ = ["bisect", "secant", "false_position", "kahan_a"]

Function = Callable[[float], float]


def _differ(a: float, b: float) -> bool:
    """True when a and b have opposite signs, in the copysign sense."""
    return a != math.copysign(a, b)


def _next_bracket(
    f: Function, x0: float, x1: float, pick: Callable[[float, float, float, float], float]
) -> tuple[float, float]:
    if not x0 <= x1:
        raise ValueError("bracket must satisfy x0 <= x1")
    if x0 == x1:
        return x0, x1
    y0 = f(x0)
    if y0 == 0:
        return x0, x0
    y1 = f(x1)
    if y1 == 0:
        return x1, x1
    if not _differ(y0, y1):
        raise ValueError("root is not bracketed")
    x2 = pick(x0, y0, x1, y1)
    y2 = f(x2)
    if _differ(y0, y2):
        return x0, x2
    if not _differ(y1, y2):
        raise ValueError("root is not bracketed")
    return x2, x1


def bisect(f: Function, x0: float, x1: float) -> tuple[float, float]:
    """Halve the bracket [x0, x1] around a root of f and return the new bracket."""
    return _next_bracket(f, x0, x1, lambda a, _ya, b, _yb: (a + b) / 2)


def _secant_point(x0: float, y0: float, x1: float, y1: float) -> float:
    if y1 == y0:
        raise ValueError("secant is horizontal")
    return x0 - y0 * (x1 - x0) / (y1 - y0)


def secant(f: Function, x0: float, x1: float) -> float:
    """Return where the line through (x0, f(x0)) and (x1, f(x1)) meets zero."""
    return _secant_point(x0, f(x0), x1, f(x1))


def false_position(f: Function, x0: float, x1: float) -> tuple[float, float]:
    """Narrow the bracket [x0, x1] at the secant point and return the new bracket."""
    return _next_bracket(f, x0, x1, _secant_point)


def kahan_a(x: float) -> float:
    """Evaluate 6x - x**4 - 1."""
    return 6 * x - x**4 - 1