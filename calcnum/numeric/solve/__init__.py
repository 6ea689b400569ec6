"""
=======================================
Solvers (:mod:`calcnum.numeric.solve`)
=======================================

.. currentmodule:: calcnum.numeric.solve

Iterative solvers for scalar equations.  Each solver returns a
`SolverResult` whose `status` gives the reason it stopped; failure to
converge is reported this way rather than by raising an exception.

Functions
---------

.. autosummary::
    :toctree:

    bisection
    newton
    fixed_point
    conv_tol
    classify_exit

Classes
-------

.. autosummary::
    :toctree:

    ExitStatus
    SolverInfo
    SolverOptions
    SolverResult
    TerminationBudget

"""

from .bisect_root import bisection
from .fixed_point import fixed_point
from .newton import newton
from .options import (SolverOptions, TerminationBudget, conv_tol,
                      resolve_options)
from .status import ExitStatus, SolverInfo, SolverResult, classify_exit
