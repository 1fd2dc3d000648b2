"""Patient containers: pending pool, urgent priority queue, normal FIFO queue."""

import heapq
import itertools
from collections import deque
from typing import Deque, Iterable, List, Optional, Tuple

from intake.core.errors import EmptyQueue
from intake.model.patient import Patient


class PendingPool:
    """Patients that have not yet arrived.

    Population order is kept, so patients released in the same tick
    come out in the order they were seeded.
    """

    def __init__(self, patients: Optional[Iterable[Patient]] = None):
        self._patients: List[Patient] = list(patients or [])

    def add(self, patient: Patient) -> None:
        self._patients.append(patient)

    def release_eligible(self, current_time: int) -> List[Patient]:
        """Remove and return every patient with arrival_time <= current_time.

        Single pass; each patient is released at most once.
        """
        released: List[Patient] = []
        remaining: List[Patient] = []
        for patient in self._patients:
            if patient.arrival_time <= current_time:
                released.append(patient)
            else:
                remaining.append(patient)
        self._patients = remaining
        return released

    def next_arrival(self) -> Optional[int]:
        """Earliest arrival minute still pending, or None if empty."""
        if not self._patients:
            return None
        return min(p.arrival_time for p in self._patients)

    def peek_all(self) -> List[Patient]:
        return list(self._patients)

    def __len__(self) -> int:
        return len(self._patients)

    def __iter__(self):
        return iter(list(self._patients))


class UrgentQueue:
    """Min-heap of urgent patients, earliest arrival first."""
    # push/pop = O(log n)

    def __init__(self):
        self._heap: List[Tuple[int, int, Patient]] = []
        self._counter = itertools.count()  # tie-breaker: insertion order

    def push(self, patient: Patient) -> None:
        if not patient.is_urgent:
            raise ValueError(f"Patient {patient.id} is not urgent")
        heapq.heappush(self._heap, (patient.arrival_time, next(self._counter), patient))

    def pop_highest_priority(self) -> Patient:
        """Remove and return the patient with the earliest arrival time.

        Raises:
            EmptyQueue: If the queue holds no patients.
        """
        if not self._heap:
            raise EmptyQueue("Urgent queue is empty")
        _, _, patient = heapq.heappop(self._heap)
        return patient

    def peek_all(self) -> List[Patient]:
        """Ordered snapshot; the heap itself is left untouched."""
        return [patient for _, _, patient in sorted(self._heap, key=lambda e: e[:2])]

    def __len__(self) -> int:
        return len(self._heap)


class NormalQueue:
    """Strict FIFO of normal patients."""

    def __init__(self):
        self._items: Deque[Patient] = deque()

    def push(self, patient: Patient) -> None:
        if patient.is_urgent:
            raise ValueError(f"Patient {patient.id} is urgent")
        self._items.append(patient)

    def pop_front(self) -> Patient:
        """Remove and return the longest-queued patient.

        Raises:
            EmptyQueue: If the queue holds no patients.
        """
        if not self._items:
            raise EmptyQueue("Normal queue is empty")
        return self._items.popleft()

    def peek_all(self) -> List[Patient]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)
