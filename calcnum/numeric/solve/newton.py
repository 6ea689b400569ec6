from __future__ import annotations

import logging
from collections.abc import Callable
from time import monotonic

from .options import SolverOptions, TerminationBudget, resolve_options
from .status import ExitStatus, SolverInfo, SolverResult, classify_exit

logger = logging.getLogger(__name__)


# ======================================================================

def newton(f: Callable[[float], float], df_dx: Callable[[float], float],
           x0: float, options: SolverOptions = None, *,
           clock: Callable[[], float] = monotonic,
           log: logging.Logger = None, full_output: bool = False,
           **overrides) -> SolverResult | tuple[SolverResult,
                                                SolverInfo]:
    r"""
    Find a zero of scalar function `f` using the Newton-Raphson method
    starting from `x0`:

        :math:`x_{n+1} = x_n - f(x_n) / f'(x_n)`

    The tolerance ``ε = atol + rtol * |f(x0)|`` is computed once at the
    start and the iteration stops with ``SUCCESS`` when ``|f(x)| <= ε``.
    Good and bad starting points exist and convergence cannot be known
    in advance.

    Examples
    --------
    >>> res = newton(lambda x: x**2 - 2, lambda x: 2 * x, 1.0)
    >>> round(res.x, 10), res.status.value
    (1.4142135624, 'success')

    Parameters
    ----------
    f : Callable[[float], float]
        Function which we are searching for a root.
    df_dx : Callable[[float], float]
        Derivative of `f`.
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
        `(x, f(x), status)`.
    info : SolverInfo
        Only if ``full_output=True``.

    Notes
    -----
    The iteration stops with ``ZERO_DERIVATIVE`` as soon as
    ``|f'(x)| <= ε``, leaving `x` at the last point.  The same `ε`
    (scaled by ``|f(x0)|``) is used for this test as for the function
    value.
    """
    opts = resolve_options(options, **overrides)
    log = logger if log is None else log

    x = x0
    fx = f(x)
    fevals, dfevals = 1, 0
    eps = opts.epsilon(fx)

    its = 0
    budget = TerminationBudget(opts.max_iter, opts.max_time, clock)
    elapsed = budget.elapsed()

    resolved = abs(fx) <= eps
    exhausted = budget.exhausted(its, elapsed)
    status = None

    while not (resolved or exhausted):
        # Stop if the step would be huge or undefined.
        dfx = df_dx(x)
        dfevals += 1
        if abs(dfx) <= eps:
            status = ExitStatus.ZERO_DERIVATIVE
            break

        x = x - fx / dfx
        fx = f(x)
        fevals += 1

        its += 1
        elapsed = budget.elapsed()
        resolved = abs(fx) <= eps
        exhausted = budget.exhausted(its, elapsed)

        log.debug("... Iteration %d: x = %s, f(x) = %s", its, x, fx)

    if status is None:
        status = classify_exit(resolved, exhausted, its, opts.max_iter)

    log.info("Newton: %s after %d iterations, %.6g s, x = %s, "
             "f(x) = %s.", status, its, elapsed, x, fx)

    result = SolverResult(x, fx, status)
    if full_output:
        return result, SolverInfo(its=its, fevals=fevals, dfevals=dfevals,
                                  elapsed=elapsed, epsilon=eps)
    return result
