"""
estimators/interaction_ols.py — Local interaction-term OLS estimator.

Contains all windowed-regression logic including:
- Strict bandwidth restriction around the cutoff
- OLS of y on x, treatment and their interaction
- Window diagnostics for detecting degenerate treated/control overlap
"""

import numpy as np
import pandas as pd
import statsmodels.formula.api as smf
from dataclasses import dataclass
from typing import Tuple, Union

Bandwidth = Union[float, Tuple[float, float]]

class DegenerateWindowError(ValueError):
    """Raised when a bandwidth window cannot identify the jump at the cutoff."""


@dataclass
class WindowDiagnostics:
    """Observations retained by the bandwidth window."""
    lower: float
    upper: float
    n_treated: int
    n_control: int

    def __str__(self):
        return (f"Window ({self.lower:.3f}, {self.upper:.3f}): "
                f"{self.n_treated} treated, {self.n_control} control")


def window_bounds(bandwidth: Bandwidth) -> Tuple[float, float]:
    """
    Convert a bandwidth into (lower, upper) bounds on the recentered scale.

    A scalar gives the symmetric window (-h, h); a pair (h_left, h_right)
    gives (-h_left, h_right).
    """
    if np.ndim(bandwidth) == 0:
        h_left = h_right = float(bandwidth)
    else:
        h_left, h_right = (float(h) for h in bandwidth)
    if h_left <= 0 or h_right <= 0:
        raise ValueError(f"Bandwidths must be positive, got {bandwidth!r}.")
    return -h_left, h_right


def restrict_window(df: pd.DataFrame, bandwidth: Bandwidth,
                    x: str = "x") -> pd.DataFrame:
    """Keep rows with lower < x < upper. Units on a boundary are dropped."""
    lower, upper = window_bounds(bandwidth)
    mask = (df[x] > lower) & (df[x] < upper)
    return df.loc[mask]


class InteractionOLSEstimator:
    """
    Local linear RDD estimator via a fully interacted OLS regression.

    Restricts the sample to a bandwidth window around the cutoff and fits:
    y = b0 + b1·x + τ·D + b3·x·D + ε

    where x is the running variable recentered at the cutoff and D is the
    treatment indicator. τ is the jump at x = 0, i.e. the local effect at the
    cutoff, provided the outcome is linear within the window on each side.
    A curved outcome biases τ without any numerical warning.

    Parameters
    ----------
    bandwidth : float or (float, float)
        Symmetric half-width, or (left, right) half-widths.

    Attributes
    ----------
    estimate : float
        Coefficient on the treatment indicator (after calling fit)
    std_error : float
        Its OLS standard error (after calling fit)
    diagnostics : WindowDiagnostics
        Window counts (after calling fit)
    """

    def __init__(self, bandwidth: Bandwidth = 10.0):
        window_bounds(bandwidth)
        self.bandwidth = bandwidth
        self._estimate = np.nan
        self._std_error = np.nan
        self._diagnostics = None

    def fit(self, df: pd.DataFrame, y: str = "y", x: str = "x",
            d: str = "treatment") -> None:
        """
        Fit the interaction regression inside the bandwidth window.

        Parameters
        ----------
        df : pd.DataFrame
            Sample with the recentered running variable, treatment and outcome.
        y : str
            Name of outcome column
        x : str
            Name of recentered running-variable column
        d : str
            Name of treatment indicator column (0/1)

        Raises
        ------
        DegenerateWindowError
            If either side of the cutoff has fewer than two observations in
            the window, or the design matrix is rank deficient.
        """
        self._estimate = np.nan
        self._std_error = np.nan

        lower, upper = window_bounds(self.bandwidth)
        local = restrict_window(df, self.bandwidth, x=x)
        local = pd.DataFrame({"y": local[y], "x": local[x], "treatment": local[d]})

        n_treated = int((local["treatment"] == 1).sum())
        n_control = int((local["treatment"] == 0).sum())
        self._diagnostics = WindowDiagnostics(lower, upper, n_treated, n_control)

        if n_treated < 2 or n_control < 2:
            raise DegenerateWindowError(
                f"Cannot fit both sides of the cutoff. {self._diagnostics}")

        model = smf.ols("y ~ x + treatment + x:treatment", data=local)
        rank = np.linalg.matrix_rank(model.exog)
        if rank < model.exog.shape[1]:
            raise DegenerateWindowError(
                f"Design matrix has rank {rank} < {model.exog.shape[1]}. "
                f"{self._diagnostics}")

        res = model.fit()
        self._estimate = float(res.params["treatment"])
        self._std_error = float(res.bse["treatment"])

    @property
    def estimate(self) -> float:
        """Point estimate of treatment effect."""
        return self._estimate

    @property
    def std_error(self) -> float:
        """Standard error of the treatment coefficient."""
        return self._std_error

    @property
    def diagnostics(self) -> WindowDiagnostics:
        """Window diagnostics from last fit."""
        return self._diagnostics

    @property
    def name(self) -> str:
        """Estimator name for reporting."""
        return "OLS"
