"""Patient scheduling system: dispatcher, server and reporter.

Owns the four patient containers (pending pool, urgent queue, normal
queue, done collection). Each patient lives in exactly one of them and
moves forward only: pending -> queued -> served.

Example usage:
    system = PatientSchedulingSystem()
    system.populate(patients)
    for minute in range(start, end + 1):
        system.dispatch(minute)
        system.serve(k)
    print(format_summary(system.summary_report()))
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from intake.core.clock import TimeValue, to_minute
from intake.core.entities import PatientState
from intake.core.errors import InvalidTimeValue
from intake.model.patient import Patient
from intake.model.queues import NormalQueue, PendingPool, UrgentQueue
from intake.results.collector import ResultsCollector, ServiceEvent
from intake.results.reporting import StatusSnapshot, SummaryReport

logger = logging.getLogger(__name__)

ServiceListener = Callable[[ServiceEvent], None]


class PatientSchedulingSystem:
    """Dispatch and serve patients on a manually advanced minute clock.

    The driver calls ``dispatch(t)`` then ``serve(k)`` once per tick,
    with non-decreasing ``t``. Patients dispatched in a tick are
    eligible for service in that same tick.

    Attributes:
        pending: Patients not yet arrived.
        urgent_queue: Urgent patients, earliest arrival first.
        normal_queue: Normal patients, FIFO.
        done_patients: Served patients in service order.
        results: Dispatch counters and service events.
        current_time: Last dispatched minute (None before the first tick).
    """

    def __init__(self, results: Optional[ResultsCollector] = None):
        self.pending = PendingPool()
        self.urgent_queue = UrgentQueue()
        self.normal_queue = NormalQueue()
        self.done_patients: List[Patient] = []
        self.results = results if results is not None else ResultsCollector()
        self.current_time: Optional[int] = None
        self._listeners: List[ServiceListener] = []

    # Population

    def populate(self, patients: Iterable[Patient]) -> int:
        """Seed the pending pool.

        Identifiers are not revalidated here; screen raw input with
        ``screen_population`` first. The whole batch is checked before
        anything is added, so a rejected batch leaves the pool unchanged.

        Returns:
            Number of patients added.

        Raises:
            ValueError: If a patient has already left the pending state
                (e.g. it was served in an earlier run), or the same
                patient object appears twice.
        """
        patients = list(patients)
        seen = {id(p) for p in self.pending}
        for patient in patients:
            if patient.state is not PatientState.PENDING:
                raise ValueError(
                    f"Patient {patient.id} is {patient.state.name}, not PENDING"
                )
            if id(patient) in seen:
                raise ValueError(f"Patient {patient.id} is already in the population")
            seen.add(id(patient))

        for patient in patients:
            self.pending.add(patient)
        logger.debug(f"Populated pending pool with {len(patients)} patients")
        return len(patients)

    def add_listener(self, listener: ServiceListener) -> None:
        """Register a callback invoked with each ServiceEvent."""
        self._listeners.append(listener)

    # Dispatcher

    def dispatch(self, current_time: TimeValue) -> List[Patient]:
        """Move every arrived patient into its service queue.

        Args:
            current_time: Minute of day (int) or zero-padded HH:MM.

        Returns:
            Patients dispatched this call, in population order.

        Raises:
            InvalidTimeValue: If the time is malformed, outside the day,
                or earlier than the previous dispatch. State is unchanged.
        """
        minute = to_minute(current_time)
        if self.current_time is not None and minute < self.current_time:
            raise InvalidTimeValue(
                current_time, f"time cannot move backwards from {self.current_time}"
            )
        self.current_time = minute

        released = self.pending.release_eligible(minute)
        for patient in released:
            patient.mark_queued()
            if patient.is_urgent:
                self.urgent_queue.push(patient)
            else:
                self.normal_queue.push(patient)
            self.results.record_dispatch(patient.urgency)
            logger.debug(
                f"Dispatched {patient.urgency.value} patient {patient.id} "
                f"(arrival {patient.arrival_label})"
            )
        return released

    # Server

    def serve(self, max_count: int) -> List[ServiceEvent]:
        """Serve up to ``max_count`` patients, urgent queue first.

        Stops early without error when both queues are empty.

        Raises:
            ValueError: If ``max_count`` is not a non-negative integer.
        """
        if isinstance(max_count, bool) or not isinstance(max_count, int) or max_count < 0:
            raise ValueError(f"max_count must be a non-negative integer, got {max_count!r}")

        events: List[ServiceEvent] = []
        for _ in range(max_count):
            if len(self.urgent_queue) > 0:
                patient = self.urgent_queue.pop_highest_priority()
            elif len(self.normal_queue) > 0:
                patient = self.normal_queue.pop_front()
            else:
                break
            events.append(self._serve_patient(patient))

        if self.current_time is not None:
            self.results.record_queue_state(
                self.current_time, len(self.urgent_queue), len(self.normal_queue)
            )
        return events

    def _serve_patient(self, patient: Patient) -> ServiceEvent:
        wait = patient.record_service(self.current_time)
        self.done_patients.append(patient)

        event = ServiceEvent(
            patient_id=patient.id,
            urgency=patient.urgency,
            arrival_time=patient.arrival_time,
            service_time=self.current_time,
            wait_time=wait,
        )
        self.results.record_service(event)
        logger.info(
            f"Serving Patient ID: {patient.id}, Type: {patient.urgency.value}, "
            f"Wait Time: {wait} minutes."
        )
        for listener in self._listeners:
            listener(event)
        return event

    # Reporter

    def waiting_urgent(self) -> List[str]:
        return [p.id for p in self.urgent_queue.peek_all()]

    def waiting_normal(self) -> List[str]:
        return [p.id for p in self.normal_queue.peek_all()]

    def done(self) -> List[str]:
        return [p.id for p in self.done_patients]

    def pending_ids(self) -> List[str]:
        return [p.id for p in self.pending.peek_all()]

    def summary(self) -> Dict[str, Any]:
        """Dispatch totals and the average frozen wait over served patients."""
        return {
            "total_dispatched_urgent": self.results.dispatched_urgent,
            "total_dispatched_normal": self.results.dispatched_normal,
            "average_wait_time": self.results.average_wait(),
        }

    def status_snapshot(self) -> StatusSnapshot:
        return StatusSnapshot(
            waiting_urgent=self.waiting_urgent(),
            waiting_normal=self.waiting_normal(),
            done=self.done(),
            current_time=self.current_time,
        )

    def summary_report(self) -> SummaryReport:
        return SummaryReport(
            total_patients=self.results.arrivals,
            total_urgent=self.results.dispatched_urgent,
            total_normal=self.results.dispatched_normal,
            average_wait_time=self.results.average_wait(),
            total_served=len(self.done_patients),
        )

    def counts(self) -> Dict[str, int]:
        """Patients held in each container."""
        return {
            "pending": len(self.pending),
            "urgent": len(self.urgent_queue),
            "normal": len(self.normal_queue),
            "done": len(self.done_patients),
        }

    def is_idle(self) -> bool:
        """True when nobody is pending or queued."""
        counts = self.counts()
        return counts["pending"] == counts["urgent"] == counts["normal"] == 0
