"""
Numeric (:mod:`calcnum.numeric`)
================================

.. currentmodule:: calcnum.numeric

Core numeric routines.  Each is a single stateless calculation; the
iterative equation solvers are in the `solve` subpackage.

.. autosummary::
    :toctree:

    solve
    integrate
    ode
    polynomial

"""
from .integrate import (midpoint, simpson, trapezoid, trapezoid_composite,
                        trapezoid_2d, trapezoid_2d_composite)
from .ode import euler
from .polynomial import least_squares, poly_eval, vandermonde
