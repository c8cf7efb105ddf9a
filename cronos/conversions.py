"""Whole-number conversions between time units.

Results are floored when the target unit is larger than the source unit.
``years_to_days`` uses the mean Gregorian year.
"""

import math

from cronos.constants import (
    DAYS_IN_WEEK,
    DAYS_IN_YEAR,
    MILLISECONDS_IN_HOUR,
    MILLISECONDS_IN_MINUTE,
    MILLISECONDS_IN_SECOND,
    MINUTES_IN_HOUR,
    MONTHS_IN_YEAR,
    SECONDS_IN_HOUR,
    SECONDS_IN_MINUTE,
)


def days_to_weeks(days: int) -> int:
    return days // DAYS_IN_WEEK


def weeks_to_days(weeks: int) -> int:
    return weeks * DAYS_IN_WEEK


def hours_to_milliseconds(hours: int) -> int:
    return hours * MILLISECONDS_IN_HOUR


def hours_to_minutes(hours: int) -> int:
    return hours * MINUTES_IN_HOUR


def hours_to_seconds(hours: int) -> int:
    return hours * SECONDS_IN_HOUR


def milliseconds_to_hours(milliseconds: int) -> int:
    return milliseconds // MILLISECONDS_IN_HOUR


def milliseconds_to_minutes(milliseconds: int) -> int:
    return milliseconds // MILLISECONDS_IN_MINUTE


def milliseconds_to_seconds(milliseconds: int) -> int:
    return milliseconds // MILLISECONDS_IN_SECOND


def minutes_to_hours(minutes: int) -> int:
    return minutes // MINUTES_IN_HOUR


def minutes_to_milliseconds(minutes: int) -> int:
    return minutes * MILLISECONDS_IN_MINUTE


def minutes_to_seconds(minutes: int) -> int:
    return minutes * SECONDS_IN_MINUTE


def months_to_years(months: int) -> int:
    return months // MONTHS_IN_YEAR


def years_to_months(years: int) -> int:
    return years * MONTHS_IN_YEAR


def years_to_days(years: int) -> int:
    """Mean-year days in ``years`` years, floored (1 year -> 365 days)."""
    return math.floor(years * DAYS_IN_YEAR)


def seconds_to_hours(seconds: int) -> int:
    return seconds // SECONDS_IN_HOUR


def seconds_to_milliseconds(seconds: int) -> int:
    return seconds * MILLISECONDS_IN_SECOND


def seconds_to_minutes(seconds: int) -> int:
    return seconds // SECONDS_IN_MINUTE
