"""
.. This module acts as the top-level API documentation.

.. module: calcnum

Small numerical-analysis toolkit: polynomial fitting and interpolation,
quadrature, an explicit ODE stepper and scalar equation solvers.  See
the `numeric` and `numeric.solve` subpackages.
"""

__version__ = "0.1.0"

import logging

# ======================================================================

# Diagnostic traces from the solvers are silent unless the application
# configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())
