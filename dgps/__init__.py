"""dgps package — Data Generating Processes."""

from dgps.linear_dgp import LinearDGP
from dgps.manipulation_dgp import ManipulationDGP
from dgps.quadratic_dgp import QuadraticDGP

__all__ = [
    "LinearDGP",
    "ManipulationDGP",
    "QuadraticDGP",
]
