"""
dgps/quadratic_dgp.py — Scenario 3: Quadratic Y(0), Gaussian income.

DGP: Y0_i = alpha0 + beta0 * x_i + gamma * x_i^2 + e0_i

Y(1) stays linear. The quadratic term vanishes at x = 0, so the effect at
the cutoff is unchanged, but a linear fit on the control side is misspecified.
"""

import numpy as np

from dgps.linear_dgp import LinearDGP

class QuadraticDGP(LinearDGP):
    def __init__(self, n: int = 1000, cutoff: float = 96.0,
                 gamma: float = 0.3, **kwargs):
        super().__init__(n=n, cutoff=cutoff, **kwargs)
        self.gamma = gamma

    def _mean_y0(self, x: np.ndarray) -> np.ndarray:
        return super()._mean_y0(x) + self.gamma * x ** 2
