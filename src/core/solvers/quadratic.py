"""Real roots of a quadratic polynomial."""

from __future__ import annotations

import math


def quadratic_roots(a: float, b: float, c: float) -> list[float]:
    """Solve ``a*x**2 + b*x + c = 0`` over the reals.

    Returns ``[]`` when the discriminant is negative, a single root when it is
    exactly zero, and otherwise ``[(-b + sqrt(disc)) / 2a, (-b - sqrt(disc)) / 2a]``
    in that order (not sorted).

    ``a == 0`` is not special-cased: the division raises ``ZeroDivisionError``.
    Callers guard against a degenerate leading coefficient.
    """

    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return []
    if discriminant == 0:
        return [-b / (2 * a)]
    sqrt_disc = math.sqrt(discriminant)
    return [(-b + sqrt_disc) / (2 * a), (-b - sqrt_disc) / (2 * a)]
