"""Minute-of-day time handling and the simulation clock.

Time is held as an integer minute (0 = 00:00, 1439 = 23:59). HH:MM
strings are only accepted and produced at the edges, always zero-padded.
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Union

from intake.core.entities import FIRST_MINUTE, LAST_MINUTE, SimState
from intake.core.errors import InvalidTimeValue

TimeValue = Union[int, str]

_HHMM = re.compile(r"^(\d{2}):(\d{2})$")


def parse_time(text: str) -> int:
    """Convert a zero-padded HH:MM string to a minute of the day.

    Args:
        text: Time string such as "05:02".

    Returns:
        Minute of the day (0-1439).

    Raises:
        InvalidTimeValue: If the string is not a valid zero-padded time.
    """
    if not isinstance(text, str):
        raise InvalidTimeValue(text, "expected an HH:MM string")
    match = _HHMM.match(text)
    if match is None:
        raise InvalidTimeValue(text, "expected zero-padded HH:MM")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidTimeValue(text, "hour must be 00-23 and minute 00-59")
    return hours * 60 + minutes


def format_time(minute: int) -> str:
    """Render a minute of the day as zero-padded HH:MM."""
    minute = validate_minute(minute)
    return f"{minute // 60:02d}:{minute % 60:02d}"


def validate_minute(minute: int) -> int:
    """Check that an integer minute lies within the day.

    Raises:
        InvalidTimeValue: For non-integers (bools included) or values
            outside 0-1439.
    """
    if isinstance(minute, bool) or not isinstance(minute, int):
        raise InvalidTimeValue(minute, "expected an integer minute")
    if not FIRST_MINUTE <= minute <= LAST_MINUTE:
        raise InvalidTimeValue(minute, f"minute must be {FIRST_MINUTE}-{LAST_MINUTE}")
    return minute


def to_minute(value: TimeValue) -> int:
    """Normalise an integer minute or HH:MM string to an integer minute."""
    if isinstance(value, str):
        return parse_time(value)
    return validate_minute(value)


@dataclass
class SimulationClock:
    """Manually advanced simulation clock.

    The clock starts RUNNING at ``start`` and halts either when
    ``stop()`` is called or when advancing would pass ``end``.

    Attributes:
        start: First simulated minute.
        end: Last simulated minute (inclusive, default 23:59).
        now: Current simulated minute.
        state: RUNNING or HALTED.
        ticks: Number of completed advances.
    """

    start: int = FIRST_MINUTE
    end: int = LAST_MINUTE
    now: int = field(init=False)
    state: SimState = field(init=False, default=SimState.RUNNING)
    ticks: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.start = to_minute(self.start)
        self.end = to_minute(self.end)
        if self.end < self.start:
            raise InvalidTimeValue(self.end, "end must not precede start")
        self.now = self.start

    @property
    def is_running(self) -> bool:
        return self.state is SimState.RUNNING

    @property
    def label(self) -> str:
        """Current time as HH:MM."""
        return format_time(self.now)

    def advance(self) -> Optional[int]:
        """Move forward one minute.

        Returns:
            The new minute, or None if the clock has halted.
        """
        if not self.is_running:
            return None
        self.ticks += 1
        if self.now >= self.end:
            self.state = SimState.HALTED
            return None
        self.now += 1
        return self.now

    def stop(self) -> None:
        """Halt the clock at the current tick boundary."""
        self.state = SimState.HALTED
