"""Exception types raised by the intake core."""


class IntakeError(Exception):
    """Base class for all intake simulation errors."""


class EmptyQueue(IntakeError, LookupError):
    """Raised when popping from an empty service queue.

    The server never raises this: running out of patients ends the
    tick's service loop normally.
    """


class InvalidIdentifier(IntakeError, ValueError):
    """Raised when a patient identifier is not exactly 14 digits."""

    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f"Invalid patient identifier: {identifier!r}")


class InvalidTimeValue(IntakeError, ValueError):
    """Raised for a minute outside 0-1439 or a malformed HH:MM string."""

    def __init__(self, value, reason: str = "expected minute 0-1439 or HH:MM"):
        self.value = value
        super().__init__(f"Invalid time value {value!r}: {reason}")
