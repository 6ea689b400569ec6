import logging
from unittest import TestCase

from .scalar_tst_functions import (SQRT2, FakeClock, f_no_root, f_sqr2)


# ======================================================================

def f_tiny(x):
    """Root lies left of x = 0.5, but f(0) * f(0.5) underflows to -0."""
    if x < 0.5:
        return -1e-150
    elif x == 0.5:
        return 1e-180
    return 1e-150


def f_small(x):
    """As for `f_tiny` but f(0) * f(0.5) does not underflow."""
    if x < 0.5:
        return -1e-150
    elif x == 0.5:
        return 1e-100
    return 1e-150


# ----------------------------------------------------------------------

class TestBisection(TestCase):
    def test_bisection(self):
        from calcnum.numeric.solve import (bisection, ExitStatus,
                                           SolverOptions)

        # Check normal operation for different tolerances.
        for atol, rtol in ((1e-8, 1e-8), (1e-12, 0.0), (0.0, 1e-10),
                           (1e-4, 1e-3)):
            opts = SolverOptions(atol=atol, rtol=rtol)
            x, fx, status = bisection(f_sqr2, 0.0, 2.0, opts)
            self.assertIs(status, ExitStatus.SUCCESS)
            self.assertLessEqual(abs(x - SQRT2), opts.epsilon(2.0))
            self.assertEqual(fx, f_sqr2(x))

        # Keyword overrides give the same result as options.
        self.assertEqual(bisection(f_sqr2, 0.0, 2.0, atol=1e-4, rtol=1e-3),
                         bisection(f_sqr2, 0.0, 2.0,
                                   SolverOptions(atol=1e-4, rtol=1e-3)))

    def test_tight_tolerance(self):
        from calcnum.numeric.solve import bisection, ExitStatus

        # Matches the docstring example.
        x, _, status = bisection(f_sqr2, 0.0, 2.0, atol=1e-12, rtol=0.0)
        self.assertIs(status, ExitStatus.SUCCESS)
        self.assertEqual(round(x, 8), 1.41421356)
        self.assertLessEqual(abs(x - SQRT2), 1e-12)

    def test_full_output(self):
        from calcnum.numeric.solve import bisection, ExitStatus

        res, info = bisection(f_sqr2, 0.0, 2.0, full_output=True)
        self.assertIs(res.status, ExitStatus.SUCCESS)
        self.assertGreater(info.its, 0)
        self.assertEqual(info.fevals, info.its + 3)
        self.assertAlmostEqual(info.epsilon, 3e-8)
        self.assertAlmostEqual(info.epsilon_interval, 3e-8)

        a, b = info.interval
        self.assertTrue(a <= SQRT2 <= b)
        self.assertEqual(res.x, (a + b) / 2)

    def test_opposite_signs(self):
        from calcnum.numeric.solve import bisection, ExitStatus

        res, info = bisection(f_no_root, 0.0, 1.0, full_output=True)
        self.assertEqual(res, (0.0, 1.0, ExitStatus.OPPOSITE_SIGNS))
        self.assertEqual(info.its, 0)
        self.assertEqual(info.fevals, 2)

    def test_endpoint_roots(self):
        from calcnum.numeric.solve import bisection, ExitStatus

        def f(x):
            return x - 1.0

        self.assertEqual(bisection(f, 1.0, 3.0),
                         (1.0, 0.0, ExitStatus.SUCCESS))
        self.assertEqual(bisection(f, -1.0, 1.0),
                         (1.0, 0.0, ExitStatus.SUCCESS))

        # Root exactly at first midpoint is accepted before iterating.
        res, info = bisection(f, 0.0, 2.0, full_output=True)
        self.assertEqual(res, (1.0, 0.0, ExitStatus.SUCCESS))
        self.assertEqual(info.its, 0)

    def test_max_iter(self):
        from calcnum.numeric.solve import bisection, ExitStatus

        # No refinement if max_iter = 0, the first midpoint is returned.
        res, info = bisection(f_sqr2, 0.0, 2.0, max_iter=0,
                              full_output=True)
        self.assertEqual(res, (1.0, -1.0, ExitStatus.MAX_ITERATIONS))
        self.assertEqual(info.its, 0)

        res, info = bisection(f_sqr2, 0.0, 2.0, max_iter=3,
                              full_output=True)
        self.assertIs(res.status, ExitStatus.MAX_ITERATIONS)
        self.assertEqual(info.its, 3)
        self.assertEqual(info.interval, (1.25, 1.5))
        self.assertEqual(res.x, 1.375)

        # Initial checks still take priority.
        self.assertIs(bisection(f_no_root, 0.0, 1.0, max_iter=0).status,
                      ExitStatus.OPPOSITE_SIGNS)

    def test_max_time(self):
        from calcnum.numeric.solve import bisection, ExitStatus

        res, info = bisection(f_sqr2, 0.0, 2.0, max_time=2.5,
                              clock=FakeClock(), full_output=True)
        self.assertIs(res.status, ExitStatus.MAX_TIME)
        self.assertEqual(info.its, 2)
        self.assertEqual(info.elapsed, 3.0)

        res = bisection(f_sqr2, 0.0, 2.0, max_time=0.0)
        self.assertIs(res.status, ExitStatus.MAX_TIME)
        self.assertEqual(res.x, 1.0)

        # Iteration limit reported when both are exhausted.
        res = bisection(f_sqr2, 0.0, 2.0, max_time=0.0, max_iter=0)
        self.assertIs(res.status, ExitStatus.MAX_ITERATIONS)

    def test_zero_product_goes_right(self):
        from calcnum.numeric.solve import bisection, ExitStatus

        # f(a) * f(x) underflows to zero, so the right half is kept even
        # though the sign change is in the left half.
        res, info = bisection(f_tiny, 0.0, 1.0, atol=0.0, rtol=0.0,
                              max_iter=1, full_output=True)
        self.assertEqual(res, (0.75, 1e-150, ExitStatus.MAX_ITERATIONS))
        self.assertEqual(info.interval, (0.5, 1.0))

        # Without underflow the left half is kept.
        res, info = bisection(f_small, 0.0, 1.0, atol=0.0, rtol=0.0,
                              max_iter=1, full_output=True)
        self.assertEqual(res, (0.25, -1e-150, ExitStatus.MAX_ITERATIONS))
        self.assertEqual(info.interval, (0.0, 0.5))

    def test_repeatable(self):
        from calcnum.numeric.solve import bisection

        self.assertEqual(bisection(f_sqr2, 0.0, 2.0),
                         bisection(f_sqr2, 0.0, 2.0))

    def test_logging(self):
        from calcnum.numeric.solve import bisection

        log = logging.getLogger('calcnum.test.bisection')
        with self.assertLogs(log, level=logging.DEBUG):
            res_logged = bisection(f_sqr2, 0.0, 2.0, log=log)

        log.disabled = True
        try:
            res_silent = bisection(f_sqr2, 0.0, 2.0, log=log)
        finally:
            log.disabled = False

        self.assertEqual(res_logged, res_silent)
