import math
from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose


# ======================================================================

class TestEuler(TestCase):
    def test_euler_scalar(self):
        from calcnum.numeric.ode import euler

        # Constant derivative is integrated exactly.
        x, y = euler(0.0, 2.0, 1.0, lambda x_, y_: 3.0, h=0.5)
        self.assertAlmostEqual(x, 2.0)
        self.assertAlmostEqual(y, 7.0)

        # y' = y gives (1 + h)^n.
        x, y = euler(0.0, 1.0, 1.0, lambda x_, y_: y_, h=0.25)
        self.assertAlmostEqual(y, 1.25 ** 4)

        # First order convergence towards e.
        _, y = euler(0.0, 1.0, 1.0, lambda x_, y_: y_, h=1e-4)
        self.assertAlmostEqual(y, math.e, places=3)

    def test_euler_system(self):
        from calcnum.numeric.ode import euler

        # Harmonic oscillator y = [u, u'], one step.
        def f(x_, y_):
            return np.array([y_[1], -y_[0]])

        x, y = euler(0.0, 0.1, [1.0, 0.0], f, h=0.1)
        self.assertAlmostEqual(x, 0.1)
        assert_allclose(y, [1.0, -0.1])

    def test_euler_steps(self):
        from calcnum.numeric.ode import euler

        # Whole steps only: 2.5 steps truncates to 2.
        x, y = euler(0.0, 1.0, 0.0, lambda x_, y_: 1.0, h=0.4)
        self.assertAlmostEqual(x, 0.8)
        self.assertAlmostEqual(y, 0.8)

        with self.assertRaises(ValueError):
            euler(0.0, 1.0, 0.0, lambda x_, y_: 1.0, h=0.0)
