"""Tests for the running-variable density check."""

import numpy as np
import pandas as pd
import pytest

from dgps import LinearDGP, ManipulationDGP
from diagnostics import DensityDiagnostics, density_around_cutoff


class TestDensityAroundCutoff:
    def test_window_edges(self):
        df = pd.DataFrame({"x": [-2.0, -1.5, 0.0, 0.5, 2.0, 3.0]})
        diag = density_around_cutoff(df, width=2.0)
        assert diag.n_below == 2
        assert diag.n_above == 1
        assert diag.ratio == pytest.approx(2.0)

    def test_raw_scale_cutoff(self):
        df = pd.DataFrame({"income": [95.5, 96.0, 96.5, 99.0]})
        diag = density_around_cutoff(df, width=1.0, x="income", cutoff=96.0)
        assert (diag.n_below, diag.n_above) == (2, 1)

    def test_empty_upper_window(self):
        assert DensityDiagnostics(1.0, 3, 0).ratio == np.inf
        assert np.isnan(DensityDiagnostics(1.0, 0, 0).ratio)

    def test_non_positive_width(self):
        with pytest.raises(ValueError):
            density_around_cutoff(pd.DataFrame({"x": [0.0]}), width=0.0)

    def test_flags_manipulation(self):
        clean = density_around_cutoff(LinearDGP(n=20000).sample(seed=2))
        bunched = density_around_cutoff(ManipulationDGP(n=20000).sample(seed=2))
        assert clean.ratio < 1.3
        assert bunched.ratio > 1.5
        assert "below" in str(bunched)
