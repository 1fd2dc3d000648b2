"""Batch simulation runner."""

from typing import Callable, Dict, List, Optional

import pandas as pd

from intake.core.scenario import Scenario
from intake.model.processes import run_simulation

DEFAULT_METRICS = [
    "arrivals",
    "departures",
    "dispatched_urgent",
    "dispatched_normal",
    "mean_wait",
    "p95_wait",
    "max_wait",
    "urgent_mean_wait",
    "normal_mean_wait",
    "still_urgent",
    "still_normal",
]


def multiple_replications(
    scenario: Scenario,
    n_reps: int = 30,
    metric_names: Optional[List[str]] = None,
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> Dict[str, List[float]]:
    """Run multiple replications and collect specified metrics.

    Each replication uses a different random seed (base_seed + rep_number)
    to ensure independent samples.

    Args:
        scenario: Base scenario configuration.
        n_reps: Number of replications to run.
        metric_names: List of metric names to collect. If None, collects
            DEFAULT_METRICS.
        progress_callback: Optional callback(current_rep, total_reps) for
            progress reporting.

    Returns:
        Dictionary mapping metric names to lists of values across replications.
    """
    if metric_names is None:
        metric_names = DEFAULT_METRICS

    results: Dict[str, List[float]] = {name: [] for name in metric_names}

    for rep in range(n_reps):
        rep_scenario = scenario.clone_with_seed(scenario.random_seed + rep)
        run_results = run_simulation(rep_scenario)

        for name in metric_names:
            if name in run_results:
                results[name].append(run_results[name])

        if progress_callback is not None:
            progress_callback(rep + 1, n_reps)

    return results


def replications_to_dataframe(results: Dict[str, List[float]]) -> pd.DataFrame:
    """Tabulate replication results, one row per replication."""
    df = pd.DataFrame({name: values for name, values in results.items() if values})
    df.index.name = "replication"
    return df
