"""
Pj Intake - minute-stepped patient intake simulation.

Patients arrive over a simulated day, are dispatched into an urgent
priority queue or a normal FIFO queue, and are served urgent-first.
Built with SimPy, NumPy and pandas.
"""

__version__ = "0.1.0"

from intake.core.scenario import Scenario
from intake.model.scheduler import PatientSchedulingSystem
from intake.model.processes import run_simulation

__all__ = ["Scenario", "PatientSchedulingSystem", "run_simulation", "__version__"]
