"""
dgps/manipulation_dgp.py — Scenario 2: Income manipulation just below the cutoff.

DGP: with probability share_band, income_i ~ U(band_low, band_high)
     otherwise                    income_i ~ N(mu, sigma)

Outcomes are linear as in LinearDGP. The band sits just below the cutoff,
so every manipulator ends up treated.
"""

import numpy as np
from typing import Optional

from dgps.linear_dgp import LinearDGP

class ManipulationDGP(LinearDGP):
    """
    Sharp RDD whose running variable bunches just below the cutoff.

    Parameters
    ----------
    share_band : float, default=0.10
        Mixture weight of the uniform band.
    band_low, band_high : float, optional
        Bounds of the uniform band. Default to (cutoff - 2, cutoff).

    Remaining parameters as in LinearDGP.
    """

    def __init__(self, n: int = 1000, cutoff: float = 96.0,
                 share_band: float = 0.10,
                 band_low: Optional[float] = None,
                 band_high: Optional[float] = None,
                 **kwargs):
        super().__init__(n=n, cutoff=cutoff, **kwargs)
        if not 0.0 <= share_band <= 1.0:
            raise ValueError(f"share_band must lie in [0, 1], got {share_band}.")
        self.share_band = share_band
        self.band_low = self.cutoff - 2.0 if band_low is None else float(band_low)
        self.band_high = self.cutoff if band_high is None else float(band_high)
        if self.band_low >= self.band_high:
            raise ValueError(
                f"Empty band: band_low={self.band_low} >= band_high={self.band_high}.")

    def _draw_income(self, rng: np.random.Generator) -> np.ndarray:
        in_band = rng.random(self.n) < self.share_band
        gaussian = rng.normal(self.mu_income, self.sigma_income, size=self.n)
        # uniform() is half-open, so band draws stay strictly below band_high
        band = rng.uniform(self.band_low, self.band_high, size=self.n)
        return np.where(in_band, band, gaussian)
