"""Calendar instants with a fixed numeric UTC offset."""

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import NoReturn

from dateutil.relativedelta import relativedelta
from typing_extensions import override

from cronos import duration as dur
from cronos.constants import MAX_TIME, MILLISECONDS_IN_SECOND, MIN_TIME
from cronos.errors import InvalidDateError

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


@dataclass(frozen=True, kw_only=True, eq=False)
class Date:
    """A wall-clock reading together with the UTC offset it was taken in.

    ``offset_minutes`` carries its own sign, so UTC-05:30 is
    ``offset_hours=-5, offset_minutes=-30``. Equality and ordering compare the
    instant, so the same moment written in two offsets is equal.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    offset_hours: int = 0
    offset_minutes: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.millisecond < MILLISECONDS_IN_SECOND:
            self._invalid(f"millisecond must be in 0..999, got {self.millisecond}")
        if not -60 < self.offset_minutes < 60:
            self._invalid(
                f"offset_minutes must be in -59..59, got {self.offset_minutes}"
            )
        try:
            self.to_datetime()
        except ValueError as exc:
            self._invalid(str(exc))

    def _invalid(self, reason: str) -> NoReturn:
        logger.debug("Rejected date %r: %s", self, reason)
        raise InvalidDateError(f"Invalid date: {reason}")

    @property
    def offset(self) -> timedelta:
        return timedelta(hours=self.offset_hours, minutes=self.offset_minutes)

    def to_datetime(self) -> datetime:
        """Timezone-aware datetime for this date, in its own offset."""
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond * 1000,
            tzinfo=timezone(self.offset),
        )

    @classmethod
    def of_datetime(cls, dt: datetime) -> "Date":
        """Build a date from a timezone-aware datetime, dropping sub-ms digits."""
        offset = dt.utcoffset()
        if offset is None:
            raise TypeError(
                f"Date requires a timezone-aware datetime.\n"
                f"Got naive datetime: {dt!r}\n"
                f"Hint: datetime(..., tzinfo=timezone.utc)"
            )
        if offset % timedelta(minutes=1):
            raise InvalidDateError(
                f"Invalid date: offset {offset} is not a whole number of minutes"
            )
        total = offset // timedelta(minutes=1)
        sign = -1 if total < 0 else 1
        offset_hours, offset_minutes = divmod(abs(total), 60)
        return cls(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
            millisecond=dt.microsecond // 1000,
            offset_hours=sign * offset_hours,
            offset_minutes=sign * offset_minutes,
        )

    def to_milliseconds(self) -> int:
        """Milliseconds since the Unix epoch for this instant."""
        return (self.to_datetime() - EPOCH) // _ONE_MS

    @classmethod
    def of_milliseconds(
        cls, total: int, *, offset_hours: int = 0, offset_minutes: int = 0
    ) -> "Date":
        """Date for an epoch-millisecond instant, read in the given offset.

        Raises:
            InvalidDateError: If the instant is outside MIN_TIME..MAX_TIME or
                cannot be written as a calendar date.
        """
        if not MIN_TIME <= total <= MAX_TIME:
            raise InvalidDateError(
                f"Invalid date: {total} ms is outside {MIN_TIME}..{MAX_TIME}"
            )
        try:
            zone = timezone(timedelta(hours=offset_hours, minutes=offset_minutes))
            dt = (EPOCH + total * _ONE_MS).astimezone(zone)
        except (OverflowError, ValueError) as exc:
            raise InvalidDateError(
                f"Invalid date: {total} ms has no calendar representation"
            ) from exc
        return cls.of_datetime(dt)

    def add(self, duration: dur.Duration) -> "Date":
        """Shift forward by a duration.

        Years and months move the calendar (clamping to the end of shorter
        months), the remaining fields add exact elapsed time.
        """
        return self._shift(duration, 1)

    def sub(self, duration: dur.Duration) -> "Date":
        return self._shift(duration, -1)

    def _shift(self, duration: dur.Duration, sign: int) -> "Date":
        exact = dur.to_milliseconds(
            replace(duration, years=None, months=None)
        )
        calendar = relativedelta(
            years=sign * dur.years(duration), months=sign * dur.months(duration)
        )
        try:
            shifted = self.to_datetime() + calendar + sign * exact * _ONE_MS
        except (OverflowError, ValueError) as exc:
            raise InvalidDateError(
                f"Invalid date: shifting {self} by {duration} leaves the "
                f"representable range"
            ) from exc
        return Date.of_datetime(shifted)

    def with_offset(self, offset_hours: int = 0, offset_minutes: int = 0) -> "Date":
        """Same instant, re-expressed in another fixed offset."""
        return Date.of_milliseconds(
            self.to_milliseconds(),
            offset_hours=offset_hours,
            offset_minutes=offset_minutes,
        )

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.to_milliseconds() == other.to_milliseconds()

    @override
    def __hash__(self) -> int:
        return hash(self.to_milliseconds())

    def __lt__(self, other: "Date") -> bool:
        return self.to_milliseconds() < other.to_milliseconds()

    def __le__(self, other: "Date") -> bool:
        return self.to_milliseconds() <= other.to_milliseconds()

    def __gt__(self, other: "Date") -> bool:
        return self.to_milliseconds() > other.to_milliseconds()

    def __ge__(self, other: "Date") -> bool:
        return self.to_milliseconds() >= other.to_milliseconds()

    @override
    def __str__(self) -> str:
        return self.to_datetime().isoformat(timespec="milliseconds")
