"""Tests for the top-level date helpers."""

import pytest

import cronos
from cronos import Date, InvalidDateError, duration, interval


def at(hour: int = 0, minute: int = 0, second: int = 0, millisecond: int = 0) -> Date:
    return Date(
        year=2024,
        month=5,
        day=6,
        hour=hour,
        minute=minute,
        second=second,
        millisecond=millisecond,
    )


class TestComparison:
    def test_equal_and_compare(self):
        assert cronos.equal(at(1), Date(year=2024, month=5, day=6, hour=3, offset_hours=2))
        assert cronos.compare(at(1), at(2)) == -1
        assert cronos.compare(at(2), at(1)) == 1
        assert cronos.compare(at(1), at(1)) == 0

    def test_is_after_and_before(self):
        assert cronos.is_after(comparison=at(1), date=at(2))
        assert not cronos.is_after(comparison=at(2), date=at(2))
        assert cronos.is_before(comparison=at(2), date=at(1))
        assert not cronos.is_before(comparison=at(1), date=at(2))

    def test_max_and_min(self):
        assert cronos.max(at(1), at(2)) == at(2)
        assert cronos.min(at(1), at(2)) == at(1)

    def test_future_and_past(self):
        assert cronos.is_future(Date(year=9999, month=1, day=1))
        assert cronos.is_past(Date(year=1970, month=1, day=1))
        assert not cronos.is_future(Date(year=1970, month=1, day=1))


class TestClosestAndClamp:
    def test_closest(self):
        candidates = [at(1), at(5), at(9)]
        assert cronos.closest(dates=candidates, date=at(6)) == at(5)

    def test_closest_tie_prefers_earliest(self):
        assert cronos.closest(dates=[at(4), at(2)], date=at(3)) == at(2)

    def test_closest_requires_candidates(self):
        with pytest.raises(ValueError):
            cronos.closest(dates=[], date=at(3))

    def test_clamp(self):
        window = interval.make(at(9), at(17))
        assert cronos.clamp(interval=window, date=at(6)) == at(9)
        assert cronos.clamp(interval=window, date=at(20)) == at(17)
        assert cronos.clamp(interval=window, date=at(12)) == at(12)

    def test_is_within_includes_ends(self):
        window = interval.make(at(9), at(17))
        assert cronos.is_within(interval=window, date=at(9))
        assert cronos.is_within(interval=window, date=at(17))
        assert not cronos.is_within(interval=window, date=at(17, millisecond=1))


class TestShift:
    def test_add_and_sub(self):
        shift = duration.make(hours=2, minutes=15)
        assert cronos.add(duration=shift, date=at(1)) == at(3, 15)
        assert cronos.sub(duration=shift, date=at(3, 15)) == at(1)

    def test_milliseconds_roll_over(self):
        assert cronos.add_milliseconds(amount=1, date=at(1, 0, 0, 999)) == at(1, 0, 1)
        assert cronos.sub_milliseconds(amount=1, date=at(1)) == at(0, 59, 59, 999)

    def test_seconds(self):
        assert cronos.add_seconds(amount=75, date=at(1)) == at(1, 1, 15)
        assert cronos.sub_seconds(amount=1, date=at(1)) == at(0, 59, 59)


class TestStrings:
    def test_to_iso_string(self):
        assert cronos.to_iso_string(at(7, 8, 9, 123)) == "2024-05-06T07:08:09.123+00:00"

    def test_of_string_with_offset(self):
        result = cronos.of_string("2024-05-06T07:08:09.123+02:00")
        assert result.success
        d = result.unwrap()
        assert (d.hour, d.millisecond, d.offset_hours) == (7, 123, 2)
        assert d == at(5, 8, 9, 123)

    def test_of_string_without_offset_is_utc(self):
        assert cronos.of_string("2024-05-06").unwrap() == at()

    def test_of_string_round_trip(self):
        d = Date(year=1999, month=12, day=31, hour=23, offset_hours=-5, offset_minutes=-30)
        assert cronos.of_string(cronos.to_iso_string(d)).unwrap() == d

    def test_of_string_failure(self):
        result = cronos.of_string("not a date")
        assert not result.success
        assert isinstance(result.error, InvalidDateError)
        with pytest.raises(InvalidDateError):
            result.unwrap()

    def test_of_string_invalid_calendar_date(self):
        assert not cronos.of_string("2023-02-29").success


class TestUnix:
    def test_to_unix_floors(self):
        assert cronos.to_unix(Date(year=1970, month=1, day=1, second=1, millisecond=500)) == 1
        assert cronos.to_unix(Date.of_milliseconds(-1)) == -1

    def test_of_unix(self):
        assert cronos.of_unix(86_400) == Date(year=1970, month=1, day=2)

    def test_unix_duration_holds_only_seconds(self):
        d = cronos.to_unix_duration(Date(year=1970, month=1, day=1, minute=1))
        assert d.seconds == 60
        assert d.minutes is None
        assert d.milliseconds is None

    def test_of_unix_duration_reads_only_seconds(self):
        d = duration.make(minutes=5, seconds=60)
        assert cronos.of_unix_duration(d) == Date(year=1970, month=1, day=1, minute=1)


class TestMillisecondHelpers:
    def test_getter_and_setter(self):
        d = cronos.set_milliseconds(amount=250, date=at(1))
        assert cronos.milliseconds(d) == 250

    def test_setter_validates(self):
        with pytest.raises(InvalidDateError):
            cronos.set_milliseconds(amount=1000, date=at(1))

    def test_difference(self):
        assert cronos.difference_in_milliseconds(at(1, 0, 1), at(1)) == 1_000
        assert cronos.difference_in_milliseconds(at(1), at(1, 0, 1)) == -1_000

    def test_same_millisecond(self):
        assert cronos.is_same_millisecond(at(1, 0, 0, 5), at(1, 0, 0, 5))
        assert not cronos.is_same_millisecond(at(1, 0, 0, 5), at(1, 0, 0, 6))

    def test_start_and_end_are_identity(self):
        d = at(1, 2, 3, 4)
        assert cronos.start_of_millisecond(d) == d
        assert cronos.end_of_millisecond(d) == d


class TestSecondHelpers:
    def test_getter_and_setter(self):
        d = cronos.set_seconds(amount=42, date=at(1))
        assert cronos.seconds(d) == 42

    def test_difference_truncates_toward_zero(self):
        assert cronos.difference_in_seconds(at(1, 0, 1, 500), at(1)) == 1
        assert cronos.difference_in_seconds(at(1), at(1, 0, 1, 500)) == -1

    def test_start_and_end_of_second(self):
        d = at(1, 2, 3, 4)
        assert cronos.start_of_second(d) == at(1, 2, 3, 0)
        assert cronos.end_of_second(d) == at(1, 2, 3, 999)

    def test_same_second(self):
        assert cronos.is_same_second(at(1, 0, 3, 1), at(1, 0, 3, 998))
        assert not cronos.is_same_second(at(1, 0, 3, 999), at(1, 0, 4, 0))


def test_now_is_utc():
    current = cronos.now()
    assert current.offset_hours == 0
    assert not cronos.is_future(Date.of_milliseconds(current.to_milliseconds() - 1))
