"""Confidence interval tools for replication output."""

from typing import Dict, List

import numpy as np
import pandas as pd
from scipy import stats


def compute_ci(values: List[float], confidence: float = 0.95) -> Dict:
    """Compute confidence interval for a metric.

    Args:
        values: List of metric values from replications.
        confidence: Confidence level (default 0.95 for 95% CI).

    Returns:
        Dictionary containing:
        - mean: Sample mean
        - std: Sample standard deviation
        - se: Standard error
        - ci_lower: Lower bound of CI
        - ci_upper: Upper bound of CI
        - ci_half_width: Half-width of CI
        - n: Sample size
    """
    n = len(values)
    if n < 2:
        mean = float(values[0]) if n == 1 else 0.0
        return {
            "mean": mean,
            "std": 0.0,
            "se": 0.0,
            "ci_lower": mean,
            "ci_upper": mean,
            "ci_half_width": 0.0,
            "n": n,
        }

    arr = np.array(values, dtype=float)
    mean = float(np.mean(arr))
    std = float(np.std(arr, ddof=1))
    se = float(stats.sem(arr))

    # t-critical value for confidence level
    t_crit = stats.t.ppf((1 + confidence) / 2, df=n - 1)
    half_width = float(t_crit * se)

    return {
        "mean": mean,
        "std": std,
        "se": se,
        "ci_lower": mean - half_width,
        "ci_upper": mean + half_width,
        "ci_half_width": half_width,
        "n": n,
    }


def summarise_replications(
    results: Dict[str, List[float]], confidence: float = 0.95
) -> pd.DataFrame:
    """CI table with one row per metric."""
    rows = []
    for name, values in results.items():
        ci = compute_ci(values, confidence)
        rows.append({"metric": name, **ci})
    columns = ["metric", "mean", "std", "se", "ci_lower", "ci_upper", "ci_half_width", "n"]
    return pd.DataFrame(rows, columns=columns).set_index("metric")
