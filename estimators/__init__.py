"""estimators package — RDD estimators of the effect at the cutoff."""

from estimators.interaction_ols import InteractionOLSEstimator, DegenerateWindowError
from estimators.rd_robust import RobustRDEstimator, align_treatment_side

__all__ = ['InteractionOLSEstimator', 'DegenerateWindowError',
           'RobustRDEstimator', 'align_treatment_side']
