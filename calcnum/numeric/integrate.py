"""
Integration (:mod:`calcnum.numeric.integrate`)
==============================================

.. currentmodule:: calcnum.numeric.integrate

Simple Newton-Cotes quadrature rules over a single interval, and
composite trapezoid rules in one and two dimensions.  No adaptive
refinement is done.
"""
from __future__ import annotations

from collections.abc import Callable


# ======================================================================
# Single interval rules.

def midpoint(f: Callable[[float], float], a: float, b: float) -> float:
    """Midpoint rule :math:`(b - a) f((a + b) / 2)`."""
    return (b - a) * f((a + b) / 2)


def trapezoid(f: Callable[[float], float], a: float, b: float) -> float:
    """Trapezoid rule :math:`(b - a)(f(a) + f(b)) / 2`."""
    return (b - a) * (f(a) + f(b)) / 2


def simpson(f: Callable[[float], float], a: float, b: float) -> float:
    """
    Simpson's rule :math:`(b - a)(f(a) + 4 f(m) + f(b)) / 6` where `m`
    is the midpoint.  Exact for cubics.
    """
    return (b - a) * (f(a) + 4 * f((a + b) / 2) + f(b)) / 6


# ----------------------------------------------------------------------

def trapezoid_composite(f: Callable[[float], float], a: float, b: float,
                        n: int) -> float:
    """
    Approximate the integral of `f` from `a` to `b` using `n` equal
    trapezoids.

    Parameters
    ----------
    f : Callable[[float], float]
        Function to integrate.
    a, b : float
        Integration limits.
    n : int
        Number of trapezoids (>= 1).

    Returns
    -------
    float
        Approximate integral.

    Raises
    ------
    ValueError
        If ``n < 1``.

    Examples
    --------
    >>> trapezoid_composite(lambda x: x, 0.0, 2.0, 4)
    2.0
    """
    if n < 1:
        raise ValueError("Require n >= 1.")

    h = (b - a) / n

    # Interior points are counted twice.
    inner = 0.0
    for i in range(1, n):
        inner += f(a + i * h)

    return h * (f(a) + 2 * inner + f(b)) / 2


# ======================================================================
# Double integrals.

def trapezoid_2d(f: Callable[[float, float], float], a: float, b: float,
                 c: float, d: float) -> float:
    """
    Trapezoid rule for the double integral of ``f(x, y)`` over a single
    rectangle, using the four corner values.  Here `y` runs from `a` to
    `b` and `x` runs from `c` to `d`.
    """
    return (d - c) * (b - a) * (f(d, b) + f(d, a) + f(c, b) + f(c, a)) / 4


def trapezoid_2d_composite(f: Callable[[float, float], float], a: float,
                           b: float, c: float, d: float, n: int) -> float:
    """
    Approximate the double integral of ``f(x, y)`` for `y` from `a` to
    `b` and `x` from `c` to `d`, by summing ``n * n`` single rectangle
    trapezoid rules (see `trapezoid_2d`).

    Raises
    ------
    ValueError
        If ``n < 1``.

    Examples
    --------
    >>> f = lambda x, y: x + y
    >>> round(trapezoid_2d_composite(f, 0.0, 1.0, 0.0, 2.0, 4), 12)
    3.0
    """
    if n < 1:
        raise ValueError("Require n >= 1.")

    hx, hy = (d - c) / n, (b - a) / n

    total = 0.0
    for i in range(n):
        y_i = a + i * hy
        for j in range(n):
            x_j = c + j * hx
            total += trapezoid_2d(f, y_i, y_i + hy, x_j, x_j + hx)

    return total
