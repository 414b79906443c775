"""
protocols.py - Interface definitions for RDD DGPs and estimators.

Uses typing.Protocol for structural subtyping: classes do NOT need to
explicitly inherit from these; they just need the right methods/properties.
"""
from typing import Protocol, runtime_checkable
import pandas as pd


@runtime_checkable
class DGPProtocol(Protocol):
    """Protocol for regression-discontinuity data generating processes."""

    def sample(self, seed: int | None = None) -> pd.DataFrame:
        """Generate one sample dataset.
        Must return a DataFrame with at least: income, x, treatment, y0, y1, y
        """
        ...

    @property
    def cutoff(self) -> float:
        """Cutoff on the raw running-variable scale."""
        ...

    @property
    def true_effect(self) -> float:
        """True treatment effect at the cutoff (treated minus control)."""
        ...


@runtime_checkable
class EstimatorProtocol(Protocol):
    """Protocol for estimators of the effect at the cutoff."""

    def fit(self, df: pd.DataFrame) -> None:
        """Fit estimator to a sample with columns: x, treatment, y"""
        ...

    @property
    def estimate(self) -> float:
        """Point estimate of treatment effect."""
        ...

    @property
    def std_error(self) -> float:
        """Standard error of the point estimate."""
        ...

    @property
    def name(self) -> str:
        """Estimator name for reporting."""
        ...
