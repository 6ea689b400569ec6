#!usr/bin/env python3

# Examples of fitting, interpolation, quadrature and ODE stepping.

import numpy as np

from calcnum.numeric import (euler, least_squares, poly_eval, simpson,
                             trapezoid_composite, trapezoid_2d_composite,
                             vandermonde)

# Example data points.
x = [-1.2, 0.2, 1.1, 2.0, 3.9, 5.0]
y = [1.2, 0.2, 1.4, 4.3, 15.0, 25.0]

# Least squares quadratic and interpolating polynomial.
c_fit = least_squares(x, y, [lambda x_: 1.0, lambda x_: x_,
                             lambda x_: x_ ** 2])
c_int = vandermonde(x, y)
print(f"Quadratic fit: {c_fit}")
print(f"Interpolant at x = 3.0: {poly_eval(c_int, 3.0):.4f}")

# Integrals of sin(x) on [0, π] (exact = 2).
print(f"Simpson: {simpson(np.sin, 0.0, np.pi):.6f}")
print(f"Composite trapezoid (n = 50): "
      f"{trapezoid_composite(np.sin, 0.0, np.pi, 50):.6f}")

# Double integral of x * y for y in [0, 1], x in [0, 2] (exact = 1).
print(f"2-D trapezoid: "
      f"{trapezoid_2d_composite(lambda x_, y_: x_ * y_, 0, 1, 0, 2, 10)}")

# y' = -2xy, y(0) = 1 (exact y(1) = exp(-1)).
print(euler(0.0, 1.0, 1.0, lambda x_, y_: -2 * x_ * y_, h=0.01))
