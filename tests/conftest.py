"""Pytest fixtures for Pj Intake tests."""

import pytest

from intake.core.entities import Gender, Urgency
from intake.model.patient import Patient


@pytest.fixture
def default_seed() -> int:
    """Default random seed for reproducible tests."""
    return 42


@pytest.fixture
def make_patient():
    """Factory for patients with sequential 14-digit ids."""
    counter = iter(range(10**13, 10**14))

    def _make(arrival_time=0, urgency=Urgency.NORMAL, patient_id=None, gender=Gender.MALE):
        if patient_id is None:
            patient_id = str(next(counter))
        return Patient(patient_id, gender, arrival_time, urgency)

    return _make


@pytest.fixture
def three_patients(make_patient):
    """Urgent@05:00, Normal@05:00, Urgent@05:02."""
    return [
        make_patient(300, Urgency.URGENT, "10000000000001"),
        make_patient(300, Urgency.NORMAL, "10000000000002"),
        make_patient(302, Urgency.URGENT, "10000000000003"),
    ]
