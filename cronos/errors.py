"""Exceptions raised or carried by cronos operations."""


class CronosError(ValueError):
    """Base class for all cronos errors."""


class InvalidDateError(CronosError):
    """A date, instant, or interval does not describe a valid point in time."""


class NegativeDurationError(CronosError):
    """A duration subtraction would produce a negative span."""
