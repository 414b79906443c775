"""
report.py — Plain-text tables for single-sample estimates and bias summaries.
"""

import pandas as pd
from dataclasses import dataclass, asdict
from tabulate import tabulate
from typing import Iterable, List

@dataclass(frozen=True)
class EstimateRecord:
    label: str
    estimate: float
    std_error: float


def estimates_frame(records: Iterable[EstimateRecord]) -> pd.DataFrame:
    return pd.DataFrame([asdict(r) for r in records],
                        columns=["label", "estimate", "std_error"])


def format_estimates(records: Iterable[EstimateRecord],
                     tablefmt: str = "github", floatfmt: str = ".3f") -> str:
    df = estimates_frame(records)
    return tabulate(df, headers=["", "Estimate", "Std. Err."],
                    tablefmt=tablefmt, floatfmt=floatfmt, showindex=False)


def format_bias_table(rows: List[dict], tablefmt: str = "github",
                      floatfmt: str = ".3f") -> str:
    """Rows are dicts with scenario, estimator, true_effect, mean, bias, sd, rmse."""
    df = pd.DataFrame(rows)[["scenario", "estimator", "true_effect", "mean",
                             "bias", "sd", "rmse"]]
    return tabulate(df, headers=["Scenario", "Estimator", "Truth", "Mean",
                                 "Bias", "SD", "RMSE"],
                    tablefmt=tablefmt, floatfmt=floatfmt, showindex=False)
