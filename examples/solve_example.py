#!usr/bin/env python3

# Examples of the scalar equation solvers, with the diagnostic trace
# printed to the console.

import logging
from math import cos

from calcnum.numeric.solve import (bisection, fixed_point, newton,
                                   SolverOptions)

logging.basicConfig(level=logging.INFO, format="%(message)s")


def f(x):
    return x ** 2 - x - 1


def df_dx(x):
    return 2 * x - 1


opts = SolverOptions(atol=1e-12, rtol=0.0, max_iter=100)

# Golden ratio by bisection and Newton's method.
print(bisection(f, 1.0, 2.0, opts))
print(newton(f, df_dx, 1.0, opts))

# Endpoints that do not bracket a root.
print(bisection(f, 2.0, 3.0, opts))

# Dottie number: x = cos(x).
res, info = fixed_point(cos, 0.0, opts, full_output=True)
print(res, info)
