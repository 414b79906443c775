"""Tests for the Monte Carlo bias evaluator."""

import numpy as np
import pandas as pd
import pytest

from runner import SimulationResult, SimulationRunner, evaluate_bias


class _RecordingDGP:
    """Returns a one-row frame whose y equals the seed."""

    cutoff = 0.0
    true_effect = 20.0

    def __init__(self):
        self.seeds = []

    def sample(self, seed=None):
        self.seeds.append(seed)
        return pd.DataFrame({"y": [float(seed)]})


class _MeanEstimator:
    name = "MEAN"

    def __init__(self):
        self.estimate = np.nan
        self.std_error = np.nan

    def fit(self, df):
        self.estimate = float(df["y"].mean())
        self.std_error = 1.0


class TestSummarize:
    def test_statistics(self):
        res = SimulationRunner._summarize([18.0, 22.0], [1.0, 3.0], 20.0)
        assert res.mean == pytest.approx(20.0)
        assert res.bias == pytest.approx(0.0)
        assert res.sd == pytest.approx(np.sqrt(8.0))
        assert res.rmse == pytest.approx(2.0)
        assert res.mean_se == pytest.approx(2.0)
        assert res.n_reps == 2
        assert res.true_effect == 20.0

    def test_bias_is_difference_of_magnitudes(self):
        over = SimulationRunner._summarize([25.0, 25.0], [1.0, 1.0], 20.0)
        assert over.bias == pytest.approx(-5.0)
        shrunk = SimulationRunner._summarize([-18.0, -18.0], [1.0, 1.0], -20.0)
        assert shrunk.bias == pytest.approx(2.0)

    def test_nan_estimates_dropped(self):
        res = SimulationRunner._summarize([18.0, np.nan, 22.0],
                                          [1.0, np.nan, 1.0], 20.0)
        assert res.n_reps == 2
        assert res.mean == pytest.approx(20.0)

    def test_all_nan_raises(self):
        with pytest.raises(ValueError, match="NaN"):
            SimulationRunner._summarize([np.nan, np.nan], [np.nan, np.nan], 20.0)

    def test_single_replication_sd_zero(self):
        res = SimulationRunner._summarize([19.0], [1.0], 20.0)
        assert res.sd == 0.0

    def test_str(self):
        res = SimulationResult("OLS", 20.0, 0.0, 1.0, 1.0, 1.0, 10, 20.0)
        assert "Bias=0.0000" in str(res)


class TestSimulationRunner:
    def test_seeds_increment_from_first_seed(self):
        dgp = _RecordingDGP()
        SimulationRunner(dgp, _MeanEstimator()).simulate(n_sim=3, first_seed=5)
        assert dgp.seeds == [5, 6, 7]

    def test_result_carries_estimator_name(self):
        res = SimulationRunner(_RecordingDGP(), _MeanEstimator()).simulate(
            n_sim=3, first_seed=19)
        assert res.estimator_name == "MEAN"
        assert res.mean == pytest.approx(20.0)
        assert res.bias == pytest.approx(0.0)
        assert res.n_reps == 3

    def test_estimator_errors_propagate(self):
        class Failing(_MeanEstimator):
            def fit(self, df):
                raise ValueError("degenerate")

        with pytest.raises(ValueError, match="degenerate"):
            SimulationRunner(_RecordingDGP(), Failing()).simulate(n_sim=2)

    def test_rejects_non_positive_n_sim(self):
        with pytest.raises(ValueError):
            SimulationRunner(_RecordingDGP(), _MeanEstimator()).simulate(n_sim=0)

    def test_verbose_progress(self, capsys):
        SimulationRunner(_RecordingDGP(), _MeanEstimator()).simulate(
            n_sim=1000, first_seed=0, verbose=True)
        assert "1000/1000 replications done" in capsys.readouterr().out

    def test_evaluate_bias_matches_runner(self):
        a = evaluate_bias(_RecordingDGP(), _MeanEstimator(), n_sim=4, first_seed=2)
        b = SimulationRunner(_RecordingDGP(), _MeanEstimator()).simulate(
            n_sim=4, first_seed=2)
        assert a == b
