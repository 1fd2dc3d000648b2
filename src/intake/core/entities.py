"""Core entity definitions for the simulation.

This module contains enums and basic types that are used across
the codebase, placed here to avoid circular imports.
"""

from enum import Enum, IntEnum


# Minute-of-day bounds (00:00 .. 23:59)
FIRST_MINUTE = 0
LAST_MINUTE = 1439
MINUTES_PER_DAY = LAST_MINUTE + 1

# Egyptian National ID length
ID_LENGTH = 14


class Urgency(Enum):
    """Patient urgency class, fixed at creation.

    Values match the labels used in population records and reports.
    """
    URGENT = "Urgent"
    NORMAL = "Normal"


class Gender(Enum):
    """Gender tag carried on the patient record."""
    MALE = "M"
    FEMALE = "F"


class PatientState(IntEnum):
    """Lifecycle of a single patient. Transitions only move forward."""
    PENDING = 1   # In the pending pool, not yet arrived
    QUEUED = 2    # In the urgent or normal queue
    SERVED = 3    # In the done collection, wait time frozen


class SimState(Enum):
    """Simulation loop state."""
    RUNNING = "running"
    HALTED = "halted"
