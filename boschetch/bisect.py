"""Bisection root finding on a closed interval."""

from __future__ import annotations

from typing import Callable

__all__ = ["NoSignChangeError", "find_root"]


class NoSignChangeError(ValueError):
    """The function has the same sign at both ends of the interval."""


def find_root(
    func: Callable[[float], float],
    lower: float = 0.0,
    upper: float = 1.0,
    eps: float = 1e-6,
    max_iterations: int = 100,
) -> float:
    """Return a root of ``func`` between ``lower`` and ``upper`` by bisection.

    The interval is halved until it is no wider than ``eps`` or until
    ``max_iterations`` halvings have been made. The last midpoint is
    returned, or ``lower`` if no halving took place.
    """
    a, b = float(lower), float(upper)
    func_a = func(a)
    if func_a * func(b) > 0:
        raise NoSignChangeError(
            "There is no sign change between lower and upper limit!"
        )

    result = a
    iterations = 0
    while iterations < max_iterations and (b - a) > eps:
        result = (a + b) / 2.0
        if func(result) * func_a < 0:
            b = result
        else:
            a = result
            func_a = func(a)
        iterations += 1
    return result