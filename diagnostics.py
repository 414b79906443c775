"""
diagnostics.py — Running-variable density checks around the cutoff.

A sharp RDD assumes units cannot sort across the threshold. Bunching of the
running variable just below the cutoff shows up as a count imbalance between
equal-width windows on either side.
"""

import numpy as np
import pandas as pd
from dataclasses import dataclass

@dataclass
class DensityDiagnostics:
    """Counts in (c - width, c] and (c, c + width)."""
    width: float
    n_below: int
    n_above: int

    @property
    def ratio(self) -> float:
        """n_below / n_above; inf if nothing lies above."""
        if self.n_above == 0:
            return np.inf if self.n_below > 0 else np.nan
        return self.n_below / self.n_above

    def __str__(self):
        return (f"Within {self.width:g} of cutoff: {self.n_below} below, "
                f"{self.n_above} above (ratio {self.ratio:.2f})")


def density_around_cutoff(df: pd.DataFrame, width: float = 2.0,
                          x: str = "x", cutoff: float = 0.0) -> DensityDiagnostics:
    """
    Count observations in equal windows on each side of the cutoff.
    The cutoff itself belongs to the lower window, matching treatment assignment.
    """
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}.")
    dist = df[x].to_numpy() - cutoff
    n_below = int(((dist > -width) & (dist <= 0)).sum())
    n_above = int(((dist > 0) & (dist < width)).sum())
    return DensityDiagnostics(width=float(width), n_below=n_below, n_above=n_above)
