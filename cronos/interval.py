"""Closed date ranges: overlap checks, lengths and unit-by-unit enumeration.

Both ends of an :class:`Interval` are inclusive. Two intervals that only touch
at a single instant therefore overlap.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Literal

from dateutil.relativedelta import relativedelta
from typing_extensions import override

from cronos.constants import (
    DAYS_IN_WEEK,
    MILLISECONDS_IN_DAY,
    MILLISECONDS_IN_HOUR,
    MILLISECONDS_IN_MINUTE,
    MILLISECONDS_IN_SECOND,
    MONTHS_IN_YEAR,
)
from cronos.date import Date
from cronos.errors import InvalidDateError

Unit = Literal[
    "milliseconds", "seconds", "minutes", "hours", "days", "weeks", "months", "years"
]


@dataclass(frozen=True, kw_only=True)
class Interval:
    start: Date
    end: Date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidDateError(
                f"Interval start ({self.start}) must be <= end ({self.end})"
            )

    @override
    def __str__(self) -> str:
        return f"Interval({self.start}→{self.end}, {milliseconds(self)}ms)"


def make(start: Date, end: Date) -> Interval:
    return Interval(start=start, end=end)


def start(interval: Interval) -> Date:
    return interval.start


def end(interval: Interval) -> Date:
    return interval.end


def are_overlapping(comparison: Interval, interval: Interval) -> bool:
    """True if the two intervals share at least one instant (ends inclusive)."""
    return comparison.start <= interval.end and interval.start <= comparison.end


def contains(interval: Interval, date: Date) -> bool:
    return interval.start <= date <= interval.end


# Lengths: exact units are floored, months/years count whole calendar steps


def milliseconds(interval: Interval) -> int:
    return interval.end.to_milliseconds() - interval.start.to_milliseconds()


def seconds(interval: Interval) -> int:
    return milliseconds(interval) // MILLISECONDS_IN_SECOND


def minutes(interval: Interval) -> int:
    return milliseconds(interval) // MILLISECONDS_IN_MINUTE


def hours(interval: Interval) -> int:
    return milliseconds(interval) // MILLISECONDS_IN_HOUR


def days(interval: Interval) -> int:
    return milliseconds(interval) // MILLISECONDS_IN_DAY


def weeks(interval: Interval) -> int:
    return days(interval) // DAYS_IN_WEEK


def _calendar_delta(interval: Interval) -> relativedelta:
    # Both ends on one wall clock so month boundaries line up. The start's
    # offset is preferred; near 9999-12-31 the end may not exist there, and
    # then the start (which is earlier) fits in the end's offset instead.
    start_dt = interval.start.to_datetime()
    end_dt = interval.end.to_datetime()
    try:
        return relativedelta(end_dt.astimezone(start_dt.tzinfo), start_dt)
    except OverflowError:
        return relativedelta(end_dt, start_dt.astimezone(end_dt.tzinfo))


def months(interval: Interval) -> int:
    delta = _calendar_delta(interval)
    return delta.years * MONTHS_IN_YEAR + delta.months


def years(interval: Interval) -> int:
    return _calendar_delta(interval).years


# Enumeration


def _each(interval: Interval, unit: Unit) -> Iterator[Date]:
    """Yield dates from start, one unit apart, while not after end.

    Each step is measured from the start rather than the previous date, so a
    monthly walk from Jan 31 gives Feb 28/29, Mar 31, Apr 30, ...
    """
    origin = interval.start.to_datetime()
    step = 0
    while True:
        if unit == "milliseconds":
            delta = relativedelta(microseconds=step * 1000)
        else:
            delta = relativedelta(**{unit: step})
        try:
            shifted = origin + delta
        except (OverflowError, ValueError):
            return
        current = Date.of_datetime(shifted)
        if current > interval.end:
            return
        yield current
        step += 1


def each_millisecond(interval: Interval) -> Iterator[Date]:
    return _each(interval, "milliseconds")


def each_second(interval: Interval) -> Iterator[Date]:
    return _each(interval, "seconds")


def each_minute(interval: Interval) -> Iterator[Date]:
    return _each(interval, "minutes")


def each_hour(interval: Interval) -> Iterator[Date]:
    return _each(interval, "hours")


def each_day(interval: Interval) -> Iterator[Date]:
    return _each(interval, "days")


def each_week(interval: Interval) -> Iterator[Date]:
    return _each(interval, "weeks")


def each_month(interval: Interval) -> Iterator[Date]:
    return _each(interval, "months")


def each_year(interval: Interval) -> Iterator[Date]:
    return _each(interval, "years")
