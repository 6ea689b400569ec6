from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


# ======================================================================

class ExitStatus(Enum):
    """
    Reason an iterative solver stopped.

    Attributes
    ----------
    SUCCESS
        Convergence criteria were met.
    MAX_ITERATIONS
        The iteration limit was reached first.
    MAX_TIME
        The time limit was reached first.
    OPPOSITE_SIGNS
        Bisection only: `f(a)` and `f(b)` do not have opposite signs.
    ZERO_DERIVATIVE
        Newton only: the derivative magnitude fell to the convergence
        tolerance.
    UNKNOWN
        Stopped for no recognised reason.  This indicates a logic error.
    """
    SUCCESS = 'success'
    MAX_ITERATIONS = 'max_iterations'
    MAX_TIME = 'max_time'
    OPPOSITE_SIGNS = 'opposite_signs'
    ZERO_DERIVATIVE = 'zero_derivative'
    UNKNOWN = 'unknown'

    def __str__(self):
        return self.value


class SolverResult(NamedTuple):
    """
    Final solver state, which can be unpacked as ``x, value, status``.
    `value` is `f(x)` for root finders and `g(x)` for fixed-point
    iteration.
    """
    x: float
    value: float
    status: ExitStatus

    @property
    def converged(self) -> bool:
        return self.status is ExitStatus.SUCCESS


@dataclass(frozen=True, kw_only=True)
class SolverInfo:
    """
    Diagnostic information returned alongside `SolverResult` when
    ``full_output=True``.

    Parameters
    ----------
    its : int
        Number of passes through the refinement loop.
    fevals : int
        Number of evaluations of `f` (or of the map `g`).
    dfevals : int, default = 0
        Number of derivative evaluations (Newton only).
    elapsed : float
        Time spent from the start of the budget to the final check.
    epsilon : float
        Convergence tolerance used for the function value test.
    epsilon_interval : float, optional
        Bisection only: tolerance used for the bracket width test.
    interval : (float, float), optional
        Bisection only: the final bracket `(a, b)`.
    """
    its: int
    fevals: int
    dfevals: int = 0
    elapsed: float
    epsilon: float
    epsilon_interval: float | None = None
    interval: tuple[float, float] | None = None


# ----------------------------------------------------------------------

def classify_exit(resolved: bool, exhausted: bool, its: int,
                  max_iter: int) -> ExitStatus:
    """
    Map the final `resolved` / `exhausted` flags of a solver loop to an
    `ExitStatus`.  Convergence takes priority over an exhausted budget,
    and the iteration limit takes priority over the time limit.
    """
    if resolved:
        return ExitStatus.SUCCESS
    elif exhausted:
        if its >= max_iter:
            return ExitStatus.MAX_ITERATIONS
        return ExitStatus.MAX_TIME
    return ExitStatus.UNKNOWN
