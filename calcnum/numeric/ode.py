"""
ODE Integration (:mod:`calcnum.numeric.ode`)
============================================

.. currentmodule:: calcnum.numeric.ode

Fixed step solution of initial value problems.
"""
from __future__ import annotations

from collections.abc import Callable

import numpy as np
import numpy.typing as npt


# ======================================================================

def euler(x0: float, xf: float, y0: npt.ArrayLike,
          f: Callable[[float, npt.ArrayLike], npt.ArrayLike],
          h: float = 0.1) -> tuple[float, np.ndarray | float]:
    r"""
    Solve the initial value problem :math:`y' = f(x, y)`, :math:`y(x_0)
    = y_0` using the explicit (forward) Euler method:

        :math:`y_{i+1} = y_i + h f(x_i, y_i)`

    Parameters
    ----------
    x0, xf : float
        Initial and final `x`.
    y0 : float or array_like
        Initial value.  An array gives a system of equations.
    f : Callable[[float, y], y]
        Derivative :math:`y'`.
    h : float, default = 0.1
        Step size (> 0).

    Returns
    -------
    x, y : float, float or ndarray
        Final `x` and corresponding `y`.

    Raises
    ------
    ValueError
        If ``h <= 0``.

    Notes
    -----
    ``int((xf - x0) / h)`` steps are taken, so the final `x` may fall
    slightly short of `xf` if `h` does not divide the interval.

    Examples
    --------
    >>> euler(0.0, 1.0, 1.0, lambda x, y: 0.0 * y + 2.0, h=0.25)
    (1.0, 3.0)
    """
    if h <= 0:
        raise ValueError("Require h > 0.")

    n_steps = int((xf - x0) / h)
    x = x0
    y = np.asarray(y0, dtype=float) if np.ndim(y0) > 0 else y0
    for _ in range(n_steps):
        y = y + h * f(x, y)
        x = x + h

    return x, y
