"""Model layer: patient, queues, scheduling system, SimPy driver."""

from intake.model.patient import Patient
from intake.model.queues import NormalQueue, PendingPool, UrgentQueue
from intake.model.population import (
    generate_population,
    patients_from_records,
    screen_population,
    validate_id,
)
from intake.model.scheduler import PatientSchedulingSystem
from intake.model.processes import run_simulation

__all__ = [
    "Patient",
    "PendingPool",
    "UrgentQueue",
    "NormalQueue",
    "generate_population",
    "patients_from_records",
    "screen_population",
    "validate_id",
    "PatientSchedulingSystem",
    "run_simulation",
]
