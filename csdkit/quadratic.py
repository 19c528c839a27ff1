"""Real roots of quadratic equations."""

import math


def solve_quadratic(a: float, b: float, c: float) -> tuple[float, float] | None:
    """Return the real roots of ``a*x**2 + b*x + c = 0``, or None if there are none.

    A double root is returned twice.
    """
    if a == 0:
        raise ValueError("coefficient a must be non-zero")
    delta = b * b - 4 * a * c
    if delta > 0:
        root = math.sqrt(delta)
        return (-b + root) / (2 * a), (-b - root) / (2 * a)
    if delta == 0:
        x = -b / (2 * a)
        return x, x
    return None