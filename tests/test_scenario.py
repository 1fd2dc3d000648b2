"""Tests for Scenario configuration."""

import numpy as np
import pytest

from intake.core.errors import InvalidTimeValue
from intake.core.scenario import Scenario


class TestScenarioDefaults:
    """Test default scenario creation."""

    def test_default_values(self):
        """Default scenario has expected parameter values."""
        scenario = Scenario()

        assert scenario.n_patients == 100
        assert scenario.p_urgent == 0.5
        assert scenario.min_serve == 5
        assert scenario.max_serve == 10
        assert scenario.start_time == 0
        assert scenario.end_time == 1439
        assert scenario.random_seed == 42
        assert scenario.run_length == 1440

    def test_rng_streams_created(self):
        """RNG streams are created in __post_init__."""
        scenario = Scenario()

        assert isinstance(scenario.rng_population, np.random.Generator)
        assert isinstance(scenario.rng_service, np.random.Generator)

    def test_time_strings_normalised(self):
        """HH:MM horizon values become integer minutes."""
        scenario = Scenario(start_time="05:00", end_time="06:00")
        assert scenario.start_time == 300
        assert scenario.end_time == 360
        assert scenario.run_length == 61


class TestScenarioValidation:
    """Invalid parameters are rejected at construction."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"n_patients": -1},
            {"p_urgent": 1.5},
            {"min_serve": -1},
            {"min_serve": 6, "max_serve": 5},
            {"start_time": 600, "end_time": 500},
        ],
    )
    def test_invalid_parameters(self, kwargs):
        """Out-of-range parameters raise ValueError."""
        with pytest.raises(ValueError):
            Scenario(**kwargs)

    def test_invalid_time(self):
        """Malformed horizon times raise InvalidTimeValue."""
        with pytest.raises(InvalidTimeValue):
            Scenario(end_time="25:00")


class TestServeCount:
    """Per-tick service capacity draws."""

    def test_draws_within_range(self):
        """Serve counts cover the inclusive range."""
        scenario = Scenario(min_serve=5, max_serve=10)
        draws = [scenario.draw_serve_count() for _ in range(500)]

        assert min(draws) >= 5
        assert max(draws) <= 10
        assert set(draws) == set(range(5, 11))

    def test_fixed_capacity(self):
        """Equal bounds give a constant capacity."""
        scenario = Scenario(min_serve=3, max_serve=3)
        assert all(scenario.draw_serve_count() == 3 for _ in range(20))


class TestCloneWithSeed:
    """Test scenario cloning."""

    def test_clone_keeps_parameters(self):
        """Clone copies parameters with the new seed."""
        scenario = Scenario(n_patients=50, p_urgent=0.2, min_serve=1, max_serve=2)
        clone = scenario.clone_with_seed(7)

        assert clone.n_patients == 50
        assert clone.p_urgent == 0.2
        assert clone.min_serve == 1
        assert clone.max_serve == 2
        assert clone.random_seed == 7

    def test_same_seed_same_stream(self):
        """Same seed gives the same population stream."""
        a = Scenario(random_seed=3)
        b = a.clone_with_seed(3)
        assert a.rng_population.random() == b.rng_population.random()
