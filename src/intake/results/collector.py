"""Event logging during simulation runs."""

from dataclasses import dataclass, field
from typing import Dict, List, Any

import numpy as np
import pandas as pd

from intake.core.entities import Urgency


@dataclass(frozen=True)
class ServiceEvent:
    """Record of a single patient being served.

    Attributes:
        patient_id: Identifier of the served patient.
        urgency: Urgency class of the patient.
        arrival_time: Minute the patient arrived.
        service_time: Minute the patient was served.
        wait_time: Frozen wait (service_time - arrival_time).
    """
    patient_id: str
    urgency: Urgency
    arrival_time: int
    service_time: int
    wait_time: int


@dataclass
class ResultsCollector:
    """Collect and compute simulation metrics.

    This class accumulates dispatch counts and service events during a
    run and computes summary metrics afterwards.

    Attributes:
        dispatched_urgent: Running count of urgent patients dispatched.
        dispatched_normal: Running count of normal patients dispatched.
        service_events: Service events in service order.
        queue_log: List of (time, n_urgent, n_normal) after each tick.
    """

    dispatched_urgent: int = 0
    dispatched_normal: int = 0
    service_events: List[ServiceEvent] = field(default_factory=list)
    queue_log: List[tuple] = field(default_factory=list)

    @property
    def arrivals(self) -> int:
        return self.dispatched_urgent + self.dispatched_normal

    @property
    def departures(self) -> int:
        return len(self.service_events)

    @property
    def wait_times(self) -> List[int]:
        return [e.wait_time for e in self.service_events]

    def record_dispatch(self, urgency: Urgency) -> None:
        """Increment the dispatch counter for ``urgency``."""
        if urgency is Urgency.URGENT:
            self.dispatched_urgent += 1
        else:
            self.dispatched_normal += 1

    def record_service(self, event: ServiceEvent) -> None:
        self.service_events.append(event)

    def record_queue_state(self, time: int, n_urgent: int, n_normal: int) -> None:
        """Record queue lengths at the end of a tick."""
        self.queue_log.append((time, n_urgent, n_normal))

    def average_wait(self) -> float:
        """Mean frozen wait over served patients; 0.0 when none served."""
        if not self.service_events:
            return 0.0
        return sum(self.wait_times) / len(self.service_events)

    def compute_metrics(self) -> Dict[str, Any]:
        """Compute all KPIs from collected data.

        Returns:
            Dictionary containing:
            - arrivals, departures, dispatched_urgent, dispatched_normal
            - mean_wait, median_wait, p95_wait, max_wait
            - urgent_mean_wait, normal_mean_wait
            - p_delay: Proportion of served patients who waited at all
            - max_queue_urgent, max_queue_normal
        """
        metrics: Dict[str, Any] = {
            "arrivals": self.arrivals,
            "departures": self.departures,
            "dispatched_urgent": self.dispatched_urgent,
            "dispatched_normal": self.dispatched_normal,
            "mean_wait": self.average_wait(),
        }

        if self.service_events:
            waits = np.array(self.wait_times, dtype=float)
            metrics["median_wait"] = float(np.percentile(waits, 50))
            metrics["p95_wait"] = float(np.percentile(waits, 95))
            metrics["max_wait"] = float(np.max(waits))
            metrics["p_delay"] = float(np.mean(waits > 0))
        else:
            metrics["median_wait"] = metrics["p95_wait"] = metrics["max_wait"] = 0.0
            metrics["p_delay"] = 0.0

        for urgency in Urgency:
            waits = [e.wait_time for e in self.service_events if e.urgency is urgency]
            key = f"{urgency.value.lower()}_mean_wait"
            metrics[key] = float(np.mean(waits)) if waits else 0.0

        if self.queue_log:
            metrics["max_queue_urgent"] = max(n for _, n, _ in self.queue_log)
            metrics["max_queue_normal"] = max(n for _, _, n in self.queue_log)
        else:
            metrics["max_queue_urgent"] = metrics["max_queue_normal"] = 0

        return metrics

    def to_dataframe(self) -> pd.DataFrame:
        """Served patients as a DataFrame, one row per service event."""
        columns = ["patient_id", "urgency", "arrival_time", "service_time", "wait_time"]
        rows = [
            {
                "patient_id": e.patient_id,
                "urgency": e.urgency.value,
                "arrival_time": e.arrival_time,
                "service_time": e.service_time,
                "wait_time": e.wait_time,
            }
            for e in self.service_events
        ]
        return pd.DataFrame(rows, columns=columns)
