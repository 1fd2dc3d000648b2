"""Tests for ResultsCollector and the text reports."""

import pandas as pd
import pytest

from intake.core.entities import Urgency
from intake.results.collector import ResultsCollector, ServiceEvent
from intake.results.reporting import (
    StatusSnapshot,
    SummaryReport,
    format_status,
    format_summary,
)


def event(patient_id, urgency, arrival, served):
    return ServiceEvent(patient_id, urgency, arrival, served, served - arrival)


class TestResultsCollector:
    """Test ResultsCollector dataclass."""

    def test_create_collector(self):
        """Can create empty collector."""
        collector = ResultsCollector()

        assert collector.arrivals == 0
        assert collector.departures == 0
        assert collector.service_events == []

    def test_record_dispatch(self):
        """Dispatches are counted per urgency class."""
        collector = ResultsCollector()

        collector.record_dispatch(Urgency.URGENT)
        collector.record_dispatch(Urgency.NORMAL)
        collector.record_dispatch(Urgency.NORMAL)

        assert collector.dispatched_urgent == 1
        assert collector.dispatched_normal == 2
        assert collector.arrivals == 3

    def test_record_service(self):
        """Service events increment departures."""
        collector = ResultsCollector()

        collector.record_service(event("a", Urgency.URGENT, 0, 5))
        collector.record_service(event("b", Urgency.NORMAL, 0, 10))

        assert collector.departures == 2
        assert collector.wait_times == [5, 10]


class TestMetricsComputation:
    """Test metrics computation."""

    def test_empty_collector_metrics(self):
        """Empty collector returns zero metrics."""
        metrics = ResultsCollector().compute_metrics()

        assert metrics["arrivals"] == 0
        assert metrics["departures"] == 0
        assert metrics["mean_wait"] == 0.0
        assert metrics["p95_wait"] == 0.0
        assert metrics["p_delay"] == 0.0
        assert metrics["max_queue_urgent"] == 0

    def test_wait_statistics(self):
        """Wait statistics computed correctly."""
        collector = ResultsCollector()
        for i, wait in enumerate([0, 5, 10, 15, 20]):
            collector.record_service(event(str(i), Urgency.NORMAL, 0, wait))

        metrics = collector.compute_metrics()

        assert metrics["mean_wait"] == 10.0
        assert metrics["median_wait"] == 10.0
        assert metrics["max_wait"] == 20.0
        assert metrics["p_delay"] == 0.8

    def test_per_class_means(self):
        """Mean wait is split by urgency class."""
        collector = ResultsCollector()
        collector.record_service(event("u1", Urgency.URGENT, 0, 2))
        collector.record_service(event("u2", Urgency.URGENT, 0, 4))
        collector.record_service(event("n1", Urgency.NORMAL, 0, 9))

        metrics = collector.compute_metrics()

        assert metrics["urgent_mean_wait"] == 3.0
        assert metrics["normal_mean_wait"] == 9.0

    def test_queue_peaks(self):
        """Peak queue lengths come from the queue log."""
        collector = ResultsCollector()
        collector.record_queue_state(0, 2, 5)
        collector.record_queue_state(1, 4, 1)

        metrics = collector.compute_metrics()

        assert metrics["max_queue_urgent"] == 4
        assert metrics["max_queue_normal"] == 5


class TestDataFrameExport:
    """Test pandas export."""

    def test_to_dataframe(self):
        """Service events export one row each."""
        collector = ResultsCollector()
        collector.record_service(event("a", Urgency.URGENT, 3, 5))

        df = collector.to_dataframe()

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == [
            "patient_id", "urgency", "arrival_time", "service_time", "wait_time"
        ]
        assert df.iloc[0]["urgency"] == "Urgent"
        assert df.iloc[0]["wait_time"] == 2

    def test_empty_dataframe_has_columns(self):
        """Empty export still has the expected columns."""
        df = ResultsCollector().to_dataframe()
        assert df.empty
        assert "wait_time" in df.columns


class TestFormatting:
    """Test plain-text rendering."""

    def test_format_status(self):
        """Status block lists each container."""
        snapshot = StatusSnapshot(["u1", "u2"], ["n1"], ["d1"], current_time=302)

        text = format_status(snapshot)

        assert "Current Time: 05:02" in text
        assert "Waiting Urgent Patients:\nu1 u2" in text
        assert "Waiting Normal Patients:\nn1" in text
        assert "Done Patients:\nd1" in text

    def test_format_status_before_first_tick(self):
        """No time line before the first dispatch."""
        text = format_status(StatusSnapshot())
        assert "Current Time" not in text

    def test_format_summary(self):
        """Summary block shows totals and average wait."""
        report = SummaryReport(
            total_patients=3, total_urgent=2, total_normal=1,
            average_wait_time=4 / 3, total_served=3,
        )

        text = format_summary(report)

        assert "Total Patients: 3" in text
        assert "Urgent Patients: 2" in text
        assert "Normal Patients: 1" in text
        assert "Average Waiting Time: 1.33 minutes." in text
