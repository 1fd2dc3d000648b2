"""Results and metrics layer: event logging, KPI computation, reporting."""

from intake.results.collector import ResultsCollector, ServiceEvent
from intake.results.reporting import (
    StatusSnapshot,
    SummaryReport,
    format_status,
    format_summary,
)

__all__ = [
    "ResultsCollector",
    "ServiceEvent",
    "StatusSnapshot",
    "SummaryReport",
    "format_status",
    "format_summary",
]
