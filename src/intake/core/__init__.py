"""Core foundation layer: scenario configuration, clock, errors, entities."""

from intake.core.scenario import Scenario
from intake.core.clock import SimulationClock, format_time, parse_time, to_minute
from intake.core.entities import Gender, PatientState, SimState, Urgency
from intake.core.errors import (
    EmptyQueue,
    IntakeError,
    InvalidIdentifier,
    InvalidTimeValue,
)

__all__ = [
    "Scenario",
    "SimulationClock",
    "format_time",
    "parse_time",
    "to_minute",
    "Gender",
    "PatientState",
    "SimState",
    "Urgency",
    "EmptyQueue",
    "IntakeError",
    "InvalidIdentifier",
    "InvalidTimeValue",
]
