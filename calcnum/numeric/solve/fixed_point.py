from __future__ import annotations

import logging
from collections.abc import Callable
from time import monotonic

from .options import SolverOptions, TerminationBudget, resolve_options
from .status import SolverInfo, SolverResult, classify_exit

logger = logging.getLogger(__name__)


# ======================================================================

def fixed_point(g: Callable[[float], float], x0: float,
                options: SolverOptions = None, *,
                clock: Callable[[], float] = monotonic,
                log: logging.Logger = None, full_output: bool = False,
                **overrides) -> SolverResult | tuple[SolverResult,
                                                     SolverInfo]:
    """
    Find the fixed point :math:`x = g(x)` by direct iteration starting
    from `x0`.

    The tolerance ``ε = atol + rtol * |g(x0)|`` is computed once at the
    start and the iteration stops with ``SUCCESS`` when ``|g(x) - x| <=
    ε``.

    Examples
    --------
    >>> from math import cos
    >>> x, gx, status = fixed_point(cos, 0.0)
    >>> round(x, 6), status.value
    (0.739085, 'success')

    Parameters
    ----------
    g : Callable[[float], float]
        Map which returns a better estimate of `x`.
    x0 : float
        Starting point.
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
        Keyword values replacing fields of `options`.

    Returns
    -------
    result : SolverResult
        `(x, g(x), status)`.
    info : SolverInfo
        Only if ``full_output=True``.

    Notes
    -----
    Each iteration applies `g` twice: first ``x = g(x)`` and then ``gx
    = g(x)`` using the updated `x`, so convergence is tested on
    ``|g(g(x_prev)) - g(x_prev)|``.  The reported iteration count is
    therefore half the number of map applications in the loop, i.e.
    ``fevals == 2 * its + 1``.
    """
    opts = resolve_options(options, **overrides)
    log = logger if log is None else log

    x = x0
    gx = g(x)
    fevals = 1
    eps = opts.epsilon(gx)
    log.debug("Fixed point: ε = %s", eps)

    its = 0
    budget = TerminationBudget(opts.max_iter, opts.max_time, clock)
    elapsed = budget.elapsed()

    resolved = abs(gx - x) <= eps
    exhausted = budget.exhausted(its, elapsed)

    while not (resolved or exhausted):
        x = g(x)
        gx = g(x)
        fevals += 2

        its += 1
        elapsed = budget.elapsed()
        resolved = abs(gx - x) <= eps
        exhausted = budget.exhausted(its, elapsed)

        log.debug("... Iteration %d: x = %s, g(x) = %s", its, x, gx)

    status = classify_exit(resolved, exhausted, its, opts.max_iter)
    log.info("Fixed point: %s after %d iterations, %.6g s, x = %s, "
             "g(x) = %s.", status, its, elapsed, x, gx)

    result = SolverResult(x, gx, status)
    if full_output:
        return result, SolverInfo(its=its, fevals=fevals,
                                  elapsed=elapsed, epsilon=eps)
    return result
