"""SimPy process logic for the minute-stepped intake day."""

import logging
from typing import Any, Dict, Generator, List, Optional

import simpy

from intake.core.clock import SimulationClock, TimeValue, format_time, to_minute
from intake.core.scenario import Scenario
from intake.model.patient import Patient
from intake.model.population import generate_population
from intake.model.scheduler import PatientSchedulingSystem

logger = logging.getLogger(__name__)


def tick_process(
    env: simpy.Environment,
    system: PatientSchedulingSystem,
    clock: SimulationClock,
    scenario: Scenario,
    stop_at: Optional[int] = None,
) -> Generator[simpy.Event, None, None]:
    """One dispatch/serve cycle per simulated minute.

    Dispatch always precedes serve within a tick, so patients arriving
    this minute can be served this minute.

    Args:
        env: SimPy environment (one time unit = one minute).
        system: Scheduling system holding the patient containers.
        clock: Simulation clock; the loop ends when it halts.
        scenario: Scenario configuration with the service RNG.
        stop_at: Optional last minute to process before stopping the clock.

    Yields:
        SimPy timeout events, one per tick.
    """
    while clock.is_running:
        system.dispatch(clock.now)
        system.serve(scenario.draw_serve_count())

        if clock.advance() is None:
            logger.info("Simulation completed for a full day")
            break
        if stop_at is not None and clock.now > stop_at:
            logger.info(f"Simulation stopped after {format_time(stop_at)}")
            clock.stop()
            break
        yield env.timeout(1)


def run_simulation(
    scenario: Scenario,
    patients: Optional[List[Patient]] = None,
    stop_at: Optional[TimeValue] = None,
) -> Dict[str, Any]:
    """Execute a single simulated day.

    Args:
        scenario: Scenario configuration with all parameters.
        patients: Population to use. If None, one is generated from
            ``scenario.rng_population``. Patients are consumed by the
            run (left SERVED or QUEUED), so a list cannot be reused for a
            second run; build a fresh population instead.
        stop_at: Optional minute (int or HH:MM) at which to halt early.

    Returns:
        Dictionary containing simulation results:
        - arrivals, departures, dispatched_urgent, dispatched_normal
        - mean_wait, median_wait, p95_wait, max_wait, p_delay
        - urgent_mean_wait, normal_mean_wait
        - still_pending, still_urgent, still_normal
        - done_ids: Served identifiers in service order
        - ticks: Number of simulated minutes processed
        - summary: SummaryReport for the run
        - system: The PatientSchedulingSystem after the run

    Raises:
        ValueError: If ``patients`` holds a patient that is not PENDING
            or the same patient object twice.
    """
    if patients is None:
        patients = generate_population(
            scenario.n_patients, scenario.rng_population, scenario.p_urgent
        )
    stop_minute = to_minute(stop_at) if stop_at is not None else None

    system = PatientSchedulingSystem()
    system.populate(patients)
    clock = SimulationClock(start=scenario.start_time, end=scenario.end_time)

    # Initialize SimPy environment on the scenario's start minute
    env = simpy.Environment(initial_time=scenario.start_time)
    env.process(tick_process(env, system, clock, scenario, stop_minute))
    env.run()

    results = system.results.compute_metrics()
    counts = system.counts()
    results["still_pending"] = counts["pending"]
    results["still_urgent"] = counts["urgent"]
    results["still_normal"] = counts["normal"]
    results["done_ids"] = system.done()
    results["ticks"] = clock.ticks
    results["summary"] = system.summary_report()
    results["system"] = system
    return results
