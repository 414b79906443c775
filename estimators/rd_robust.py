"""
estimators/rd_robust.py — Local-linear robust RDD estimator (rdrobust).

Bandwidth selection, kernel weighting and bias correction are delegated to
rdrobust. Only its input contract (y, x, c, p, bwselect, kernel) and output
contract (coef, se, bws, N_h) are relied upon.

rdrobust treats units at or above the cutoff as treated and reports
lim_{x↓c} E[Y|x] - lim_{x↑c} E[Y|x]. In this design treatment is assigned at
or below the cutoff, so the reported jump is control minus treated.

References
----------
Calonico, S., Cattaneo, M. D., & Titiunik, R. (2014). Robust nonparametric
confidence intervals for regression-discontinuity designs. Econometrica,
82(6), 2295-2326.
"""

import numpy as np
import pandas as pd
from dataclasses import dataclass
from rdrobust import rdrobust

INFERENCE_ROWS = {"conventional": 0, "bias-corrected": 1, "robust": 2}

@dataclass
class BandwidthDiagnostics:
    """Bandwidths chosen by rdrobust and the observations they retain."""
    h_left: float
    h_right: float
    n_left: int
    n_right: int

    def __str__(self):
        return (f"h = ({self.h_left:.3f}, {self.h_right:.3f}), "
                f"N_h = ({self.n_left}, {self.n_right})")


def align_treatment_side(coef: float) -> float:
    """
    Convert an rdrobust jump (right minus left) into treated minus control
    for a design where units below the cutoff are treated.
    """
    return -coef


class RobustRDEstimator:
    """
    Local-linear RDD estimator with data-driven bandwidths.

    Parameters
    ----------
    p : int, default=1
        Order of the local polynomial.
    bwselect : str, default="msetwo"
        rdrobust bandwidth selector. "msetwo" picks separate MSE-optimal
        bandwidths on each side of the cutoff.
    kernel : str, default="triangular"
        Kernel passed to rdrobust.
    inference : {"conventional", "bias-corrected", "robust"}
        Which rdrobust row to report as estimate and standard error.
    cutoff : float, default=0.0
        Cutoff on the scale of the running-variable column passed to fit().

    Attributes
    ----------
    estimate : float
        Sign-aligned treatment effect (after calling fit)
    std_error : float
        Standard error of the reported row (after calling fit)
    diagnostics : BandwidthDiagnostics
        Chosen bandwidths (after calling fit)
    """

    def __init__(self, p: int = 1, bwselect: str = "msetwo",
                 kernel: str = "triangular", inference: str = "conventional",
                 cutoff: float = 0.0):
        if inference not in INFERENCE_ROWS:
            raise ValueError(
                f"inference must be one of {sorted(INFERENCE_ROWS)}, got {inference!r}.")
        self.p = p
        self.bwselect = bwselect
        self.kernel = kernel
        self.inference = inference
        self.cutoff = cutoff
        self._estimate = np.nan
        self._std_error = np.nan
        self._diagnostics = None

    def fit(self, df: pd.DataFrame, y: str = "y", x: str = "x") -> None:
        """
        Fit rdrobust to a sample.

        Parameters
        ----------
        df : pd.DataFrame
            Sample with outcome and running-variable columns.
        y : str
            Name of outcome column
        x : str
            Name of running-variable column (on the scale of self.cutoff)
        """
        self._estimate = np.nan
        self._std_error = np.nan

        res = rdrobust(
            y=df[y].to_numpy(), x=df[x].to_numpy(), c=self.cutoff,
            p=self.p, kernel=self.kernel, bwselect=self.bwselect,
        )

        row = INFERENCE_ROWS[self.inference]
        self._estimate = align_treatment_side(float(res.coef.iloc[row, 0]))
        self._std_error = float(res.se.iloc[row, 0])
        self._diagnostics = BandwidthDiagnostics(
            h_left=float(res.bws.iloc[0, 0]),
            h_right=float(res.bws.iloc[0, 1]),
            n_left=int(res.N_h[0]),
            n_right=int(res.N_h[1]),
        )

    @property
    def estimate(self) -> float:
        """Point estimate of treatment effect, treated minus control."""
        return self._estimate

    @property
    def std_error(self) -> float:
        """Standard error of the reported row."""
        return self._std_error

    @property
    def diagnostics(self) -> BandwidthDiagnostics:
        """Bandwidth diagnostics from last fit."""
        return self._diagnostics

    @property
    def name(self) -> str:
        """Estimator name for reporting."""
        return "RDROBUST"
