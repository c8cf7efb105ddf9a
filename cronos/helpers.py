"""Everyday helpers composed from dates, durations and intervals.

Argument order follows the rest of the library: the value being operated on
comes last, the thing it is measured against or shifted by comes first, so
``is_after(comparison=deadline, date=now())`` reads as "is now after the
deadline".
"""

import builtins
from collections.abc import Iterable
from dataclasses import replace
from datetime import timezone
from time import time_ns

from dateutil.parser import isoparse

from cronos import duration as dur
from cronos import interval as ivl
from cronos.constants import MILLISECONDS_IN_SECOND
from cronos.date import Date
from cronos.errors import InvalidDateError
from cronos.result import Result


def now() -> Date:
    """The current instant, in UTC."""
    return Date.of_milliseconds(time_ns() // 1_000_000)


def equal(a: Date, b: Date) -> bool:
    return a == b


def compare(a: Date, b: Date) -> int:
    """-1, 0 or 1 as ``a`` is before, at, or after ``b``."""
    left, right = a.to_milliseconds(), b.to_milliseconds()
    return (left > right) - (left < right)


def add(duration: dur.Duration, date: Date) -> Date:
    return date.add(duration)


def sub(duration: dur.Duration, date: Date) -> Date:
    return date.sub(duration)


def closest(dates: Iterable[Date], date: Date) -> Date:
    """The date in ``dates`` nearest to ``date``; earliest wins a tie.

    Raises:
        ValueError: If ``dates`` is empty
    """
    target = date.to_milliseconds()
    candidates = list(dates)
    if not candidates:
        raise ValueError("closest() needs at least one candidate date")
    return builtins.min(
        candidates,
        key=lambda d: (abs(d.to_milliseconds() - target), d.to_milliseconds()),
    )


def clamp(interval: ivl.Interval, date: Date) -> Date:
    """Pull ``date`` inside ``interval`` (ends inclusive)."""
    if date < interval.start:
        return interval.start
    if date > interval.end:
        return interval.end
    return date


def is_after(comparison: Date, date: Date) -> bool:
    return date > comparison


def is_before(comparison: Date, date: Date) -> bool:
    return date < comparison


def is_future(date: Date) -> bool:
    return date > now()


def is_past(date: Date) -> bool:
    return date < now()


def is_within(interval: ivl.Interval, date: Date) -> bool:
    return ivl.contains(interval, date)


def max(a: Date, b: Date) -> Date:
    return a if a >= b else b


def min(a: Date, b: Date) -> Date:
    return a if a <= b else b


def to_iso_string(date: Date) -> str:
    """ISO 8601 text with millisecond precision and the numeric offset."""
    return str(date)


def of_string(text: str) -> Result[Date]:
    """Parse ISO 8601 text. A missing offset is read as UTC."""
    try:
        dt = isoparse(text)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return Result.ok(Date.of_datetime(dt))
    except (ValueError, OverflowError) as exc:
        return Result.err(
            InvalidDateError(f"Cannot parse {text!r} as a date: {exc}")
        )


def to_unix(date: Date) -> int:
    """Whole seconds since the Unix epoch (floored)."""
    return date.to_milliseconds() // MILLISECONDS_IN_SECOND


def of_unix(seconds: int) -> Date:
    return Date.of_milliseconds(seconds * MILLISECONDS_IN_SECOND)


def to_unix_duration(date: Date) -> dur.Duration:
    """Unix time as a duration holding only its seconds field."""
    return dur.make(seconds=to_unix(date))


def of_unix_duration(duration: dur.Duration) -> Date:
    """Date for a Unix-time duration. Only the seconds field is read."""
    return of_unix(dur.seconds(duration))


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // b
    return quotient if a >= 0 else -quotient


# Millisecond helpers


def add_milliseconds(amount: int, date: Date) -> Date:
    return date.add(dur.make(milliseconds=amount))


def sub_milliseconds(amount: int, date: Date) -> Date:
    return date.sub(dur.make(milliseconds=amount))


def difference_in_milliseconds(a: Date, b: Date) -> int:
    """Signed milliseconds from ``b`` to ``a``."""
    return a.to_milliseconds() - b.to_milliseconds()


def milliseconds(date: Date) -> int:
    return date.millisecond


def set_milliseconds(amount: int, date: Date) -> Date:
    return replace(date, millisecond=amount)


def is_same_millisecond(a: Date, b: Date) -> bool:
    return a == b


def start_of_millisecond(date: Date) -> Date:
    return date


def end_of_millisecond(date: Date) -> Date:
    return date


# Second helpers


def add_seconds(amount: int, date: Date) -> Date:
    return date.add(dur.make(seconds=amount))


def sub_seconds(amount: int, date: Date) -> Date:
    return date.sub(dur.make(seconds=amount))


def difference_in_seconds(a: Date, b: Date) -> int:
    """Whole seconds from ``b`` to ``a``, truncated toward zero."""
    return _trunc_div(difference_in_milliseconds(a, b), MILLISECONDS_IN_SECOND)


def seconds(date: Date) -> int:
    return date.second


def set_seconds(amount: int, date: Date) -> Date:
    return replace(date, second=amount)


def is_same_second(a: Date, b: Date) -> bool:
    return start_of_second(a) == start_of_second(b)


def start_of_second(date: Date) -> Date:
    return replace(date, millisecond=0)


def end_of_second(date: Date) -> Date:
    return replace(date, millisecond=MILLISECONDS_IN_SECOND - 1)
