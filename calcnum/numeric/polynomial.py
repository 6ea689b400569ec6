"""
Polynomials (:mod:`calcnum.numeric.polynomial`)
===============================================

.. currentmodule:: calcnum.numeric.polynomial

Least squares fitting, polynomial interpolation and evaluation.
Coefficients are always stored in increasing power order ``[c0, c1,
c2, ...]``, i.e. :math:`p(x) = c_0 + c_1 x + c_2 x^2 + ...`.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np
import numpy.typing as npt


# ======================================================================

def least_squares(x: npt.ArrayLike, y: npt.ArrayLike,
                  funcs: Sequence[Callable[[float], float]]
                  ) -> np.ndarray[float]:
    """
    Find the coefficients `c` of the combination of basis functions
    :math:`F(x) = c_0 f_0(x) + c_1 f_1(x) + ...` that best fits the
    points `(x, y)` in the least squares sense.

    The matrix :math:`V_{ij} = f_j(x_i)` is assembled and the normal
    equations :math:`V^T V c = V^T y` are solved.

    Parameters
    ----------
    x, y : array_like of float, shape (n,)
        Data points.
    funcs : Sequence[Callable[[float], float]], length m
        Basis functions.  For a polynomial of degree 2 use e.g.
        ``[lambda x: 1, lambda x: x, lambda x: x**2]``.

    Returns
    -------
    np.ndarray of float, shape (m,)
        Coefficients corresponding to each of `funcs`.

    Raises
    ------
    ValueError
        If `x` and `y` have different lengths or there are fewer points
        than basis functions.
    numpy.linalg.LinAlgError
        If the normal equations are singular.

    Examples
    --------
    Fit a straight line to points on ``y = 1 + 2x``:

    >>> least_squares([0, 1, 2], [1, 3, 5], [lambda x: 1, lambda x: x])
    array([1., 2.])
    """
    x, y = np.asarray(x, dtype=float), np.asarray(y, dtype=float)
    if np.ndim(x) != 1 or x.shape[0] != y.shape[0]:
        raise ValueError("'x' and 'y' must have the same length.")
    if len(funcs) < 1 or len(x) < len(funcs):
        raise ValueError("Require at least one basis function and no "
                         "fewer points than basis functions.")

    v = np.empty((len(x), len(funcs)))
    for i, x_i in enumerate(x):
        for j, f_j in enumerate(funcs):
            v[i, j] = f_j(x_i)

    return np.linalg.solve(v.T @ v, v.T @ y)


# ----------------------------------------------------------------------

def vandermonde(x: npt.ArrayLike, y: npt.ArrayLike) -> np.ndarray[float]:
    """
    Coefficients of the polynomial of degree ``n - 1`` passing through
    the `n` points `(x, y)`, found by solving the Vandermonde system
    :math:`V c = y` with :math:`V_{ij} = x_i^j`.

    Parameters
    ----------
    x : array_like of float, shape (n,)
        Distinct `x` values.
    y : array_like of float, shape (n,), (1, n) or (n, k)
        Corresponding `y` values.  A single row `(1, n)` is treated as
        shape `(n,)`.  Otherwise if 2D, each column is interpolated
        separately.

    Returns
    -------
    np.ndarray of float, shape (n,) or (n, k)
        Coefficients in increasing power order.

    Raises
    ------
    ValueError
        If `x` is not 1D or lengths differ.
    numpy.linalg.LinAlgError
        If `x` contains repeated values.

    Examples
    --------
    >>> vandermonde([0, 1, 2], [1, 2, 5])  # y = 1 + x**2
    array([1., 0., 1.])
    """
    x, y = np.asarray(x, dtype=float), np.asarray(y, dtype=float)
    if y.ndim == 2 and y.shape[0] == 1 and np.size(x) != 1:
        y = y[0]  # Row of values.

    if np.ndim(x) != 1 or y.ndim not in (1, 2) or x.shape[0] != y.shape[0]:
        raise ValueError("'x' must be 1D and 'y' must have the same "
                         "number of rows.")

    v = np.vander(x, increasing=True)
    return np.linalg.solve(v, y)


# ----------------------------------------------------------------------

def poly_eval(coeffs: npt.ArrayLike, x: npt.ArrayLike
              ) -> np.ndarray | float:
    """
    Evaluate polynomial :math:`c_0 + c_1 x + c_2 x^2 + ...` at `x`
    (scalar or array), given coefficients in increasing power order as
    returned by `least_squares` or `vandermonde`.

    Examples
    --------
    >>> poly_eval([1, 0, 1], 3.0)
    10.0
    """
    coeffs = np.asarray(coeffs, dtype=float)
    acc, x_pow = 0.0, 1.0
    for c in coeffs:
        acc = acc + c * x_pow
        x_pow = x_pow * np.asarray(x)

    return acc[()] if isinstance(acc, np.ndarray) else float(acc)
