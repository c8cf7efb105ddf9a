from cronos import constants, conversions, duration, interval
from cronos.date import Date
from cronos.duration import Duration
from cronos.errors import CronosError, InvalidDateError, NegativeDurationError
from cronos.helpers import (
    add,
    add_milliseconds,
    add_seconds,
    clamp,
    closest,
    compare,
    difference_in_milliseconds,
    difference_in_seconds,
    end_of_millisecond,
    end_of_second,
    equal,
    is_after,
    is_before,
    is_future,
    is_past,
    is_same_millisecond,
    is_same_second,
    is_within,
    max,
    milliseconds,
    min,
    now,
    of_string,
    of_unix,
    of_unix_duration,
    seconds,
    set_milliseconds,
    set_seconds,
    start_of_millisecond,
    start_of_second,
    sub,
    sub_milliseconds,
    sub_seconds,
    to_iso_string,
    to_unix,
    to_unix_duration,
)
from cronos.interval import Interval
from cronos.result import Result

__all__ = [
    "Date",
    "Duration",
    "Interval",
    "Result",
    "CronosError",
    "InvalidDateError",
    "NegativeDurationError",
    "constants",
    "conversions",
    "duration",
    "interval",
    "now",
    "equal",
    "compare",
    "add",
    "sub",
    "closest",
    "clamp",
    "is_after",
    "is_before",
    "is_future",
    "is_past",
    "is_within",
    "max",
    "min",
    "to_iso_string",
    "of_string",
    "to_unix",
    "of_unix",
    "to_unix_duration",
    "of_unix_duration",
    "add_milliseconds",
    "sub_milliseconds",
    "difference_in_milliseconds",
    "milliseconds",
    "set_milliseconds",
    "is_same_millisecond",
    "start_of_millisecond",
    "end_of_millisecond",
    "add_seconds",
    "sub_seconds",
    "difference_in_seconds",
    "seconds",
    "set_seconds",
    "is_same_second",
    "start_of_second",
    "end_of_second",
]
