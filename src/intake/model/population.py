"""Population generation and identifier screening.

Patients are drawn from an injected NumPy generator so a given seed
always yields the same day.
"""

import logging
from typing import Any, Dict, Iterable, List

import numpy as np

from intake.core.clock import to_minute
from intake.core.entities import ID_LENGTH, MINUTES_PER_DAY, Gender, Urgency
from intake.core.errors import InvalidIdentifier
from intake.model.patient import Patient

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")


def validate_id(value: Any) -> bool:
    """True if ``value`` is a string of exactly 14 ASCII digits."""
    return isinstance(value, str) and len(value) == ID_LENGTH and set(value) <= _DIGITS


def require_valid_id(value: Any) -> str:
    """Return ``value`` unchanged if valid.

    Raises:
        InvalidIdentifier: If ``value`` fails the 14-digit check.
    """
    if not validate_id(value):
        raise InvalidIdentifier(value)
    return value


def generate_random_id(rng: np.random.Generator) -> str:
    """Draw a 14-digit identifier."""
    return "".join(str(d) for d in rng.integers(0, 10, size=ID_LENGTH))


def generate_random_time(rng: np.random.Generator) -> int:
    """Draw an arrival minute uniformly over the day."""
    return int(rng.integers(0, MINUTES_PER_DAY))


def generate_urgency(rng: np.random.Generator, p_urgent: float = 0.5) -> Urgency:
    return Urgency.URGENT if rng.random() < p_urgent else Urgency.NORMAL


def generate_gender(rng: np.random.Generator) -> Gender:
    return Gender.MALE if rng.random() < 0.5 else Gender.FEMALE


def generate_population(
    count: int,
    rng: np.random.Generator,
    p_urgent: float = 0.5,
) -> List[Patient]:
    """Generate ``count`` patients with random ids, arrivals and urgency.

    Any draw whose id fails validation is discarded and redrawn, so the
    result always holds exactly ``count`` valid patients.

    Args:
        count: Number of patients to generate.
        rng: NumPy random generator.
        p_urgent: Probability a patient is Urgent.

    Returns:
        List of patients in generation order.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    patients: List[Patient] = []
    while len(patients) < count:
        patient_id = generate_random_id(rng)
        gender = generate_gender(rng)
        arrival = generate_random_time(rng)
        urgency = generate_urgency(rng, p_urgent)

        if not validate_id(patient_id):
            logger.warning(f"Regenerating patient with invalid id {patient_id!r}")
            continue

        patients.append(Patient(patient_id, gender, arrival, urgency))

    logger.debug(f"Generated population of {len(patients)} patients")
    return patients


def screen_population(patients: Iterable[Patient]) -> List[Patient]:
    """Drop patients whose identifier fails validation.

    Invalid entries are logged and skipped, never fatal.
    """
    valid: List[Patient] = []
    for patient in patients:
        try:
            require_valid_id(patient.id)
        except InvalidIdentifier as e:
            logger.warning(f"Dropping patient from population: {e}")
            continue
        valid.append(patient)
    return valid


def patients_from_records(records: Iterable[Dict[str, Any]]) -> List[Patient]:
    """Build a screened population from plain dictionaries.

    Each record needs ``id``, ``arrival_time`` (minute or HH:MM) and
    ``urgency`` ("Urgent"/"Normal"); ``gender`` ("M"/"F") defaults to M.

    Raises:
        InvalidTimeValue: If an arrival time is malformed.
        ValueError: If an urgency or gender label is unknown.
    """
    patients = []
    for record in records:
        patients.append(
            Patient(
                id=record["id"],
                gender=Gender(record.get("gender", Gender.MALE.value)),
                arrival_time=to_minute(record["arrival_time"]),
                urgency=Urgency(record["urgency"]),
            )
        )
    return screen_population(patients)
