"""Experimentation layer: replication runner, CI analysis."""

from intake.experiment.runner import multiple_replications, replications_to_dataframe
from intake.experiment.analysis import compute_ci, summarise_replications

__all__ = [
    "multiple_replications",
    "replications_to_dataframe",
    "compute_ci",
    "summarise_replications",
]
