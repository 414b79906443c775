#runner.py — Monte Carlo bias evaluation.


import numpy as np
from dataclasses import dataclass

@dataclass
class SimulationResult:
    """Summary statistics from a Monte Carlo run.

    bias is |true_effect| - |mean|: positive when the estimates shrink
    toward zero, negative when they overshoot.
    """
    estimator_name: str
    mean: float
    bias: float
    sd: float
    rmse: float
    mean_se: float
    n_reps: int
    true_effect: float

    def __str__(self):
        return (f"Mean={self.mean:.4f}, Bias={self.bias:.4f}, "
                f"SD={self.sd:.4f}, RMSE={self.rmse:.4f}, N={self.n_reps}")

class SimulationRunner:
    """
    Monte Carlo simulation runner for RDD estimators.

    Pairs a DGP with an estimator and runs R replications, computing
    summary statistics (mean, bias, SD, RMSE).

    Parameters
    ----------
    dgp : DGPProtocol
        Data generating process with .sample(seed) and .true_effect
    estimator : EstimatorProtocol
        Estimator with .fit(df), .estimate and .std_error

    Example
    -------
    >>> from dgps.quadratic_dgp import QuadraticDGP
    >>> from estimators.interaction_ols import InteractionOLSEstimator
    >>> runner = SimulationRunner(QuadraticDGP(n=1000), InteractionOLSEstimator(10.0))
    >>> result = runner.simulate(n_sim=1000, first_seed=123)
    >>> print(result)
    """

    def __init__(self, dgp, estimator):
        self.dgp = dgp
        self.estimator = estimator

    def simulate(self, n_sim: int = 10000, first_seed: int = 123,
                 verbose: bool = False) -> SimulationResult:
        """
        Run Monte Carlo simulation.

        Parameters
        ----------
        n_sim : int
            Number of replications
        first_seed : int
            Starting seed (incremented by 1 for each replication)
        verbose : bool
            Print progress updates

        Returns
        -------
        SimulationResult
            Summary statistics across replications
        """
        if n_sim < 1:
            raise ValueError(f"n_sim must be positive, got {n_sim}.")

        estimates = np.full(n_sim, np.nan)
        std_errors = np.full(n_sim, np.nan)

        for r in range(n_sim):
            if verbose and n_sim > 1 and (r + 1) % 1000 == 0:
                print(f"  {r + 1}/{n_sim} replications done...")

            df = self.dgp.sample(seed=first_seed + r)
            self.estimator.fit(df)
            estimates[r] = self.estimator.estimate
            std_errors[r] = self.estimator.std_error

        result = self._summarize(estimates, std_errors, self.dgp.true_effect)
        result.estimator_name = getattr(self.estimator, "name", "")
        return result

    @staticmethod
    def _summarize(estimates, std_errors, true_effect) -> SimulationResult:
        """Compute summary statistics from estimates and the known truth."""
        est = np.asarray(estimates, dtype=float)
        se = np.asarray(std_errors, dtype=float)

        mask = ~np.isnan(est)
        est = est[mask]
        se = se[mask]

        if len(est) == 0:
            raise ValueError("All estimates are NaN.")

        truth = float(true_effect)
        mean_est = float(est.mean())
        bias = abs(truth) - abs(mean_est)
        sd = float(est.std(ddof=1)) if len(est) > 1 else 0.0
        rmse = float(np.sqrt(((est - truth) ** 2).mean()))
        mean_se = float(np.nanmean(se)) if np.any(~np.isnan(se)) else np.nan

        return SimulationResult(
            estimator_name="",
            mean=mean_est,
            bias=bias,
            sd=sd,
            rmse=rmse,
            mean_se=mean_se,
            n_reps=len(est),
            true_effect=truth,
        )


def evaluate_bias(dgp, estimator, n_sim: int = 10000,
                  first_seed: int = 123, verbose: bool = False) -> SimulationResult:
    """
    Bias of one estimator under one DGP.
    Convenience function wrapping SimulationRunner.
    """
    return SimulationRunner(dgp, estimator).simulate(
        n_sim=n_sim, first_seed=first_seed, verbose=verbose)
