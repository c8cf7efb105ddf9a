"""Durations built from calendar-relative and absolute time fields.

A :class:`Duration` stores up to seven integer fields. A field left out is kept
as ``None`` so callers can tell "unspecified" from an explicit zero; every
computation reads it as zero. Comparison and arithmetic go through the flat
millisecond aggregate returned by :func:`to_milliseconds`, and results are
re-expanded into the canonical, fully populated form by
:func:`of_milliseconds`.

Example:
    >>> from cronos import duration
    >>> d = duration.of_milliseconds(90_000)
    >>> duration.minutes(d), duration.seconds(d)
    (1, 30)
    >>> duration.subtract(amount=d, duration=duration.make(hours=1)).success
    False
"""

import logging
from dataclasses import dataclass, fields
from typing import Any

from typing_extensions import override

from cronos.constants import (
    MILLISECONDS_IN_DAY,
    MILLISECONDS_IN_HOUR,
    MILLISECONDS_IN_MINUTE,
    MILLISECONDS_IN_MONTH,
    MILLISECONDS_IN_SECOND,
    MILLISECONDS_IN_YEAR,
)
from cronos.errors import NegativeDurationError
from cronos.result import Result

logger = logging.getLogger(__name__)

# Largest unit first; decomposition walks this table in order
_UNITS: tuple[tuple[str, int], ...] = (
    ("years", MILLISECONDS_IN_YEAR),
    ("months", MILLISECONDS_IN_MONTH),
    ("days", MILLISECONDS_IN_DAY),
    ("hours", MILLISECONDS_IN_HOUR),
    ("minutes", MILLISECONDS_IN_MINUTE),
    ("seconds", MILLISECONDS_IN_SECOND),
    ("milliseconds", 1),
)


@dataclass(frozen=True, kw_only=True, eq=False)
class Duration:
    """A span of time, possibly only partially specified.

    Fields are not normalized on construction: ``Duration(seconds=90)`` keeps
    ``seconds=90``. Equality, hashing and ordering use the millisecond
    aggregate, so it still equals ``Duration(minutes=1, seconds=30)``.
    """

    milliseconds: int | None = None
    seconds: int | None = None
    minutes: int | None = None
    hours: int | None = None
    days: int | None = None
    months: int | None = None
    years: int | None = None

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return to_milliseconds(self) == to_milliseconds(other)

    @override
    def __hash__(self) -> int:
        return hash(to_milliseconds(self))

    def __lt__(self, other: "Duration") -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return lt(comparison=other, duration=self)

    def __le__(self, other: "Duration") -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return lte(comparison=other, duration=self)

    def __gt__(self, other: "Duration") -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return gt(comparison=other, duration=self)

    def __ge__(self, other: "Duration") -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return gte(comparison=other, duration=self)

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return add(amount=self, duration=other)

    @override
    def __str__(self) -> str:
        parts = [
            f"{f.name}={getattr(self, f.name)}"
            for f in fields(self)
            if getattr(self, f.name) is not None
        ]
        return f"Duration({', '.join(parts)})"

    @property
    def is_canonical(self) -> bool:
        """True if this duration is exactly what of_milliseconds would build."""
        return _field_values(self) == _field_values(
            of_milliseconds(to_milliseconds(self))
        )


def _field_values(duration: Duration) -> dict[str, Any]:
    return {f.name: getattr(duration, f.name) for f in fields(duration)}


def make(
    *,
    milliseconds: int | None = None,
    seconds: int | None = None,
    minutes: int | None = None,
    hours: int | None = None,
    days: int | None = None,
    months: int | None = None,
    years: int | None = None,
) -> Duration:
    """Build a duration from any subset of its fields. No validation is done."""
    return Duration(
        milliseconds=milliseconds,
        seconds=seconds,
        minutes=minutes,
        hours=hours,
        days=days,
        months=months,
        years=years,
    )


def of_milliseconds(total: int) -> Duration:
    """Decompose a millisecond count into its canonical duration.

    Works largest unit first, taking the floor quotient at each step and
    carrying the remainder down. Every field of the result is present.

    Floor division means a negative total drives the largest unit negative and
    leaves non-negative remainders below it, e.g. ``-1`` ms becomes
    ``years=-1, months=11, days=30, hours=10, minutes=29, seconds=5,
    milliseconds=999``.
    """
    values: dict[str, int] = {}
    remainder = total
    for name, scale in _UNITS:
        values[name], remainder = divmod(remainder, scale)
    return Duration(**values)


def to_milliseconds(duration: Duration) -> int:
    """Collapse a duration to its flat millisecond aggregate (absent = 0)."""
    return sum(
        (getattr(duration, name) or 0) * scale for name, scale in _UNITS
    )


def equal(comparison: Duration, duration: Duration) -> bool:
    return to_milliseconds(duration) == to_milliseconds(comparison)


def gt(comparison: Duration, duration: Duration) -> bool:
    """True if ``duration`` is strictly longer than ``comparison``."""
    return to_milliseconds(duration) > to_milliseconds(comparison)


def gte(comparison: Duration, duration: Duration) -> bool:
    return to_milliseconds(duration) >= to_milliseconds(comparison)


def lt(comparison: Duration, duration: Duration) -> bool:
    """True if ``duration`` is strictly shorter than ``comparison``."""
    return to_milliseconds(duration) < to_milliseconds(comparison)


def lte(comparison: Duration, duration: Duration) -> bool:
    return to_milliseconds(duration) <= to_milliseconds(comparison)


def add(amount: Duration, duration: Duration) -> Duration:
    """Sum two durations into canonical form. Never fails."""
    return of_milliseconds(to_milliseconds(amount) + to_milliseconds(duration))


def subtract(amount: Duration, duration: Duration) -> Result[Duration]:
    """Compute ``amount - duration``.

    Returns:
        A successful Result holding the canonical difference, or a failed
        Result carrying NegativeDurationError when ``duration`` is longer
        than ``amount``.
    """
    total = to_milliseconds(amount) - to_milliseconds(duration)
    if total < 0:
        logger.debug("Refusing negative duration subtraction: %d ms", total)
        return Result.err(
            NegativeDurationError(
                f"Subtraction would produce a negative duration ({total} ms)"
            )
        )
    return Result.ok(of_milliseconds(total))


# Accessors: stored field value, absence read as zero


def milliseconds(duration: Duration) -> int:
    return duration.milliseconds or 0


def seconds(duration: Duration) -> int:
    return duration.seconds or 0


def minutes(duration: Duration) -> int:
    return duration.minutes or 0


def hours(duration: Duration) -> int:
    return duration.hours or 0


def days(duration: Duration) -> int:
    return duration.days or 0


def months(duration: Duration) -> int:
    return duration.months or 0


def years(duration: Duration) -> int:
    return duration.years or 0
