from __future__ import annotations

import logging
from collections.abc import Callable
from time import monotonic

from .options import SolverOptions, TerminationBudget, resolve_options
from .status import ExitStatus, SolverInfo, SolverResult, classify_exit

logger = logging.getLogger(__name__)


# ======================================================================

def bisection(f: Callable[[float], float], a: float, b: float,
              options: SolverOptions = None, *,
              clock: Callable[[], float] = monotonic,
              log: logging.Logger = None, full_output: bool = False,
              **overrides) -> SolverResult | tuple[SolverResult,
                                                   SolverInfo]:
    r"""
    Approximate solution of :math:`f(x) = 0` on interval :math:`x \in
    [a, b]` by the bisection method.  For bisection to work
    :math:`f(x)` must change sign across the interval, i.e. ``f(a)``
    and ``f(b)`` must have opposite signs.

    Two tolerances are computed once from the starting interval:

        - Function value: ``ε = atol + rtol * max(|f(a)|, |f(b)|)``.
        - Interval width: ``ε_ab = atol + rtol * |b - a|``.

    The search stops with ``SUCCESS`` when ``|f(x)| <= ε`` or ``|b - a|
    <= ε_ab``, or when the iteration / time budget is exhausted.

    Examples
    --------
    >>> x, fx, status = bisection(lambda x_: x_**2 - 2, 0.0, 2.0,
    ...                           atol=1e-12, rtol=0.0)
    >>> round(x, 8), str(status)
    (1.41421356, 'success')
    >>> bisection(lambda x_: x_**2 + 1, 0.0, 1.0).status
    <ExitStatus.OPPOSITE_SIGNS: 'opposite_signs'>

    Parameters
    ----------
    f : Callable[[float], float]
        Function which we are searching for a root.
    a, b : float
        Each end of the search interval.
    options : SolverOptions, optional
        Tolerances and budgets.  If `None` the defaults are used.
    clock : Callable[[], float], default = time.monotonic
        Time source for the `max_time` budget.
    log : logging.Logger, optional
        Destination for the diagnostic trace.  Defaults to this
        module's logger.
    full_output : bool, default = False
        If `True` also return a `SolverInfo` object.
    overrides :
        Keyword values replacing fields of `options` (e.g. ``atol=0``).

    Returns
    -------
    result : SolverResult
        `(x, f(x), status)`.  If the endpoints fail to bracket a root,
        `status` is ``OPPOSITE_SIGNS`` and `x` is `a`.
    info : SolverInfo
        Only if ``full_output=True``.

    Notes
    -----
    - The half interval is chosen by the sign of ``f(a) * f(x)``.  If
      this product is exactly zero (which includes underflow of very
      small values) the right half is kept.  An exact root at the
      midpoint is only accepted by the value test on the next check.
    - `iter` counts passes through the refinement loop; the initial
      midpoint evaluation is not counted.
    """
    opts = resolve_options(options, **overrides)
    log = logger if log is None else log

    fa, fb = f(a), f(b)
    fevals = 2
    eps = opts.epsilon(max(abs(fa), abs(fb)))
    eps_ab = opts.epsilon(b - a)

    def _info(its_: int, elapsed_: float) -> SolverInfo:
        return SolverInfo(its=its_, fevals=fevals, elapsed=elapsed_,
                          epsilon=eps, epsilon_interval=eps_ab,
                          interval=(a, b))

    def _result(res: SolverResult, its_: int = 0, elapsed_: float = 0.0):
        if full_output:
            return res, _info(its_, elapsed_)
        return res

    # Check starting conditions.
    if abs(fa) <= eps:
        return _result(SolverResult(a, fa, ExitStatus.SUCCESS))
    elif abs(fb) <= eps:
        return _result(SolverResult(b, fb, ExitStatus.SUCCESS))
    elif fa * fb >= 0:
        log.info("Bisection: f(a) = %s and f(b) = %s do not have "
                 "opposite signs.", fa, fb)
        return _result(SolverResult(a, fa, ExitStatus.OPPOSITE_SIGNS))

    x = (a + b) / 2
    fx = f(x)
    fevals += 1

    its = 0
    budget = TerminationBudget(opts.max_iter, opts.max_time, clock)
    elapsed = budget.elapsed()

    resolved = abs(fx) <= eps or abs(b - a) <= eps_ab
    exhausted = budget.exhausted(its, elapsed)

    # Main loop.
    while not (resolved or exhausted):
        # Narrow the interval to the side with the sign change.
        if fa * fx < 0:
            b, fb = x, fx
        else:
            a, fa = x, fx

        x = (a + b) / 2
        fx = f(x)
        fevals += 1

        its += 1
        elapsed = budget.elapsed()
        resolved = abs(fx) <= eps or abs(b - a) <= eps_ab
        exhausted = budget.exhausted(its, elapsed)

        log.debug("... Iteration %d: x = [%s, %s, %s], f(x) = %s",
                  its, a, x, b, fx)

    status = classify_exit(resolved, exhausted, its, opts.max_iter)
    log.info("Bisection: %s after %d iterations, %.6g s, interval "
             "width = %s, x = %s, f(x) = %s.", status, its, elapsed,
             abs(b - a), x, fx)

    return _result(SolverResult(x, fx, status), its, elapsed)
