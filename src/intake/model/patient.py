"""Patient entity definition."""

from dataclasses import dataclass
from typing import Optional

from intake.core.clock import format_time, validate_minute
from intake.core.entities import Gender, PatientState, Urgency

_FIXED_FIELDS = frozenset({"id", "gender", "arrival_time", "urgency"})


@dataclass(eq=False)
class Patient:
    """Patient entity tracking intake from arrival to service.

    Identity is the object itself: two records sharing an ``id`` are
    distinct entries. The same object moves between the pending pool,
    a service queue and the done collection; it is never copied.
    ``id``, ``gender``, ``arrival_time`` and ``urgency`` are fixed once
    set; reassigning them raises AttributeError.

    Attributes:
        id: 14-digit national identifier.
        gender: Gender tag.
        arrival_time: Minute of day the patient arrives (fixed).
        urgency: Urgent or Normal (fixed).
        wait_time: Minutes waited; frozen when served.
        service_time: Minute the patient was served.
        state: Lifecycle state (PENDING -> QUEUED -> SERVED).
    """

    id: str
    gender: Gender
    arrival_time: int
    urgency: Urgency
    wait_time: int = 0
    service_time: Optional[int] = None
    state: PatientState = PatientState.PENDING

    def __post_init__(self) -> None:
        validate_minute(self.arrival_time)

    def __setattr__(self, name, value) -> None:
        # Identity fields are write-once
        if name in _FIXED_FIELDS and name in self.__dict__:
            raise AttributeError(f"Patient.{name} cannot be reassigned")
        super().__setattr__(name, value)

    @property
    def is_urgent(self) -> bool:
        return self.urgency is Urgency.URGENT

    @property
    def arrival_label(self) -> str:
        """Arrival time as HH:MM."""
        return format_time(self.arrival_time)

    @property
    def is_served(self) -> bool:
        return self.state is PatientState.SERVED

    def waited(self, now: int) -> int:
        """Minutes waited as of ``now``.

        Grows with ``now`` while queued and returns the frozen value
        once the patient has been served.
        """
        if self.is_served:
            return self.wait_time
        return max(0, now - self.arrival_time)

    def mark_queued(self) -> None:
        """Move from PENDING to QUEUED."""
        if self.state is not PatientState.PENDING:
            raise ValueError(f"Patient {self.id} already left the pending pool")
        self.state = PatientState.QUEUED

    def record_service(self, now: int) -> int:
        """Freeze the wait time at service minute ``now``.

        Returns:
            The frozen wait time in minutes.
        """
        if self.state is not PatientState.QUEUED:
            raise ValueError(f"Patient {self.id} is not queued ({self.state.name})")
        if now < self.arrival_time:
            raise ValueError(
                f"Patient {self.id} cannot be served at {now} before arriving at {self.arrival_time}"
            )
        self.wait_time = now - self.arrival_time
        self.service_time = now
        self.state = PatientState.SERVED
        return self.wait_time
