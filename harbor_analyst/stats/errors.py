"""Errors raised by the aggregation engine and its chart results."""

from __future__ import annotations


class StatsError(Exception):
    """Base class for statistics errors."""


class InvalidParameters(StatsError):
    """Raised when a stats method is called with parameters it cannot honour.

    Attributes
    ----------
    method
        Name of the stats method.
    reason
        Why the parameters were rejected.

    """

    def __init__(self, method: str, reason: str) -> None:
        """Initialise with the stats method name and rejection reason."""
        self.method = method
        self.reason = reason
        super().__init__(f"{method}: invalid parameters: {reason}")


class InvariantViolation(StatsError):
    """Raised when a chart result is used against its contract.

    This signals a programming error, such as reading a title that was never
    set, rather than bad input data.
    """
