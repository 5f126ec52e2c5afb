"""
Exception types raised by py-drills.

Library code raises these and lets them propagate; only the command line
entry point catches them and turns them into an exit status.
"""


class DrillsError(Exception):
    """Base class for all py-drills errors."""


class InvalidRangeError(DrillsError, ValueError):
    """Raised when a range draw is requested with min greater than max."""

    def __init__(self, min_val, max_val):
        self.min_val = min_val
        self.max_val = max_val
        super().__init__(f"Invalid range: min ({min_val}) is greater than max ({max_val})")


class BoundConversionError(DrillsError, OverflowError):
    """Raised when a range bound cannot be represented in the result type."""

    def __init__(self, value, type_name: str):
        self.value = value
        self.type_name = type_name
        super().__init__(f"Bound {value} is not representable as {type_name}")


class InputError(DrillsError, ValueError):
    """Raised when a console token cannot be parsed as the expected type."""

    def __init__(self, token: str, expected: str):
        self.token = token
        self.expected = expected
        super().__init__(f"Expected {expected}, got {token!r}")


class InputExhausted(DrillsError, EOFError):
    """Raised when input ends while a value is still expected."""
