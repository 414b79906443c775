"""
dgps/linear_dgp.py — Scenario 1: Gaussian income, linear potential outcomes.

DGP: income_i ~ N(mu, sigma),  x_i = income_i - c
     D_i  = 1{income_i <= c}
     Y0_i = alpha0 + beta0 * x_i + e0_i
     Y1_i = alpha1 + beta1 * x_i + e1_i
     Y_i  = D_i * Y1_i + (1 - D_i) * Y0_i

Treated units sit at or below the cutoff. The effect at the cutoff is
alpha1 - alpha0.
"""

import numpy as np
import pandas as pd
from typing import Optional

class LinearDGP:
    """
    Sharp RDD with a Gaussian running variable and linear outcomes.

    Parameters
    ----------
    n : int
        Number of units per sample.
    cutoff : float
        Treatment threshold on the income scale.
    mu_income, sigma_income : float
        Mean and standard deviation of income.
    alpha0, beta0 : float
        Intercept and slope of Y(0) in the recentered running variable.
    alpha1, beta1 : float
        Intercept and slope of Y(1) in the recentered running variable.
    sigma_eps : float
        Standard deviation of the outcome noise (same for Y(0) and Y(1)).
    """

    def __init__(self, n: int = 1000, cutoff: float = 96.0,
                 mu_income: float = 100.0, sigma_income: float = 10.0,
                 alpha0: float = 30.0, beta0: float = 1.5,
                 alpha1: float = 50.0, beta1: float = 2.0,
                 sigma_eps: float = 5.0):
        if n < 1:
            raise ValueError(f"n must be positive, got {n}.")
        if sigma_income <= 0 or sigma_eps < 0:
            raise ValueError("sigma_income must be > 0 and sigma_eps >= 0.")
        self.n = n
        self._cutoff = float(cutoff)
        self.mu_income = mu_income
        self.sigma_income = sigma_income
        self.alpha0 = alpha0
        self.beta0 = beta0
        self.alpha1 = alpha1
        self.beta1 = beta1
        self.sigma_eps = sigma_eps

    def sample(self, seed: Optional[int] = None) -> pd.DataFrame:
        rng = np.random.default_rng(seed)

        income = self._draw_income(rng)
        x = income - self._cutoff
        treatment = (income <= self._cutoff).astype(int)

        e0 = rng.normal(0.0, self.sigma_eps, size=self.n)
        e1 = rng.normal(0.0, self.sigma_eps, size=self.n)
        y0 = self._mean_y0(x) + e0
        y1 = self._mean_y1(x) + e1
        y = np.where(treatment == 1, y1, y0)

        df = pd.DataFrame({
            "income": income,
            "x": x,
            "treatment": treatment,
            "y0": y0,
            "y1": y1,
            "y": y,
        })
        return df

    def _draw_income(self, rng: np.random.Generator) -> np.ndarray:
        return rng.normal(self.mu_income, self.sigma_income, size=self.n)

    def _mean_y0(self, x: np.ndarray) -> np.ndarray:
        return self.alpha0 + self.beta0 * x

    def _mean_y1(self, x: np.ndarray) -> np.ndarray:
        return self.alpha1 + self.beta1 * x

    @property
    def cutoff(self) -> float:
        return self._cutoff

    @property
    def true_effect(self) -> float:
        return float(self._mean_y1(np.zeros(1))[0] - self._mean_y0(np.zeros(1))[0])
