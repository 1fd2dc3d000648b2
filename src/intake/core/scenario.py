"""Scenario configuration dataclass."""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from intake.core.clock import to_minute
from intake.core.entities import FIRST_MINUTE, LAST_MINUTE


@dataclass
class Scenario:
    """Configuration for a simulation scenario.

    Contains all parameters needed to run a simulated day, including
    population size, urgency mix, per-tick service capacity and the
    random seed for reproducibility.

    Attributes:
        n_patients: Number of patients generated for the day.
        p_urgent: Probability that a generated patient is Urgent.
        min_serve: Minimum patients served per tick.
        max_serve: Maximum patients served per tick (inclusive).
        start_time: First simulated minute (int or HH:MM).
        end_time: Last simulated minute (int or HH:MM).
        random_seed: Master seed for reproducibility.
    """

    # Population
    n_patients: int = 100
    p_urgent: float = 0.5

    # Service capacity per tick, drawn uniformly from [min_serve, max_serve]
    min_serve: int = 5
    max_serve: int = 10

    # Horizon (minute of day)
    start_time: int = FIRST_MINUTE
    end_time: int = LAST_MINUTE

    # Reproducibility
    random_seed: int = 42

    # RNG streams (created in __post_init__)
    rng_population: Optional[np.random.Generator] = None
    rng_service: Optional[np.random.Generator] = None

    def __post_init__(self) -> None:
        """Validate parameters and initialise separate RNG streams."""
        if self.n_patients < 0:
            raise ValueError(f"n_patients must be non-negative, got {self.n_patients}")
        if not 0.0 <= self.p_urgent <= 1.0:
            raise ValueError(f"p_urgent must be in [0, 1], got {self.p_urgent}")
        if self.min_serve < 0 or self.max_serve < self.min_serve:
            raise ValueError(
                f"serve range must satisfy 0 <= min_serve <= max_serve, "
                f"got {self.min_serve}-{self.max_serve}"
            )
        self.start_time = to_minute(self.start_time)
        self.end_time = to_minute(self.end_time)
        if self.end_time < self.start_time:
            raise ValueError("end_time must not precede start_time")

        self.rng_population = np.random.default_rng(self.random_seed)
        self.rng_service = np.random.default_rng(self.random_seed + 1)

    @property
    def run_length(self) -> int:
        """Number of simulated minutes in the horizon."""
        return self.end_time - self.start_time + 1

    def draw_serve_count(self) -> int:
        """Sample this tick's service capacity from the service stream."""
        return int(self.rng_service.integers(self.min_serve, self.max_serve + 1))

    def clone_with_seed(self, new_seed: int) -> "Scenario":
        """Create a copy of this scenario with a different seed.

        Args:
            new_seed: The new random seed to use.

        Returns:
            A new Scenario instance with updated seed and fresh RNGs.
        """
        return Scenario(
            n_patients=self.n_patients,
            p_urgent=self.p_urgent,
            min_serve=self.min_serve,
            max_serve=self.max_serve,
            start_time=self.start_time,
            end_time=self.end_time,
            random_seed=new_seed,
        )
