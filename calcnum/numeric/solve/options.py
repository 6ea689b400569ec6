from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from time import monotonic


# ======================================================================


@dataclass(frozen=True, kw_only=True)
class SolverOptions:
    """
    Tolerances and budgets shared by the iterative solvers.  A new
    instance is built for each solver call, so options never leak
    between calls.

    Parameters
    ----------
    atol : float, default = 1e-8
        Absolute part of the convergence tolerance (>= 0).
    rtol : float, default = 1e-8
        Relative part of the convergence tolerance (>= 0).  This is
        scaled by a problem-specific value, see `conv_tol`.
    max_time : float, default = 10.0
        Wall-clock budget in seconds (>= 0).
    max_iter : int, default = 1000
        Iteration budget (>= 0).
    """
    atol: float = 1e-8
    rtol: float = 1e-8
    max_time: float = 10.0
    max_iter: int = 1000

    def __post_init__(self):
        """Check tolerances and budgets are non-negative."""
        for name in ('atol', 'rtol', 'max_time', 'max_iter'):
            if not getattr(self, name) >= 0:  # Also rejects NaN.
                raise ValueError(f"Require '{name}' >= 0.")

    def epsilon(self, scale: float) -> float:
        """Shorthand for ``conv_tol(self.atol, self.rtol, scale)``."""
        return conv_tol(self.atol, self.rtol, scale)


def resolve_options(options: SolverOptions | None,
                    **overrides) -> SolverOptions:
    """
    Return `options` (or the defaults if `None`) with any keyword
    `overrides` applied.  Unknown keywords raise `TypeError`.
    """
    if options is None:
        return SolverOptions(**overrides)
    return replace(options, **overrides)


# ----------------------------------------------------------------------

def conv_tol(atol: float, rtol: float, scale: float) -> float:
    """
    Combined convergence tolerance ``atol + rtol * |scale|``.

    Each solver picks its own `scale` once at entry, e.g. the largest
    endpoint value magnitude for bisection or ``|f(x0)|`` for Newton's
    method.  The tolerance is not updated as the solution proceeds.
    """
    return atol + rtol * abs(scale)


# ----------------------------------------------------------------------

class TerminationBudget:
    """
    Tracks the iteration and wall-clock budget of a single solver run.
    The clock starts when the budget is created.

    Parameters
    ----------
    max_iter : int
        Iteration limit.
    max_time : float
        Time limit, in the units returned by `clock` (seconds for the
        default).
    clock : Callable[[], float], default = time.monotonic
        Source of the current time.  Tests may supply a fake clock.
    """

    def __init__(self, max_iter: int, max_time: float,
                 clock: Callable[[], float] = monotonic):
        self.max_iter, self.max_time = max_iter, max_time
        self._clock = clock
        self._t_start = clock()

    def elapsed(self) -> float:
        """Time since the budget was created."""
        return self._clock() - self._t_start

    def exhausted(self, its: int, elapsed: float) -> bool:
        """Returns `True` if either the iteration or time limit is
        reached."""
        return its >= self.max_iter or elapsed >= self.max_time
