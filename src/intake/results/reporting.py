"""Read-only status and summary views, with plain-text rendering."""

from dataclasses import dataclass, field
from typing import List, Optional

from intake.core.clock import format_time


@dataclass(frozen=True)
class StatusSnapshot:
    """Point-in-time view of the queues and the done collection.

    Attributes:
        waiting_urgent: Urgent ids in priority order.
        waiting_normal: Normal ids in FIFO order.
        done: Served ids in service order.
        current_time: Last dispatched minute, None before the first tick.
    """
    waiting_urgent: List[str] = field(default_factory=list)
    waiting_normal: List[str] = field(default_factory=list)
    done: List[str] = field(default_factory=list)
    current_time: Optional[int] = None


@dataclass(frozen=True)
class SummaryReport:
    """End-of-run summary.

    Attributes:
        total_patients: Patients dispatched into either queue.
        total_urgent: Urgent patients dispatched.
        total_normal: Normal patients dispatched.
        average_wait_time: Mean frozen wait over served patients (minutes).
        total_served: Patients in the done collection.
    """
    total_patients: int
    total_urgent: int
    total_normal: int
    average_wait_time: float
    total_served: int = 0


def format_status(snapshot: StatusSnapshot) -> str:
    """Render a snapshot as the three-section status block."""
    lines = []
    if snapshot.current_time is not None:
        lines.append(f"Current Time: {format_time(snapshot.current_time)}")
        lines.append("")
    lines.append("Waiting Urgent Patients:")
    lines.append(" ".join(snapshot.waiting_urgent))
    lines.append("")
    lines.append("Waiting Normal Patients:")
    lines.append(" ".join(snapshot.waiting_normal))
    lines.append("")
    lines.append("Done Patients:")
    lines.append(" ".join(snapshot.done))
    return "\n".join(lines)


def format_summary(report: SummaryReport) -> str:
    """Render the simulation summary block."""
    return "\n".join([
        "Simulation Summary:",
        "--------------------------------",
        f"Total Patients: {report.total_patients}",
        f"Urgent Patients: {report.total_urgent}",
        f"Normal Patients: {report.total_normal}",
        f"Patients Served: {report.total_served}",
        f"Average Waiting Time: {report.average_wait_time:.2f} minutes.",
    ])
