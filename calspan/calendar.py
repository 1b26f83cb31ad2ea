"""Calendar systems and the instant arithmetic built on them.

A calendar knows how to add span fields to an instant and how to decompose
the gap between two instants back into fields. Everything that compares or
applies spans takes the calendar as an explicit argument, falling back to
``DEFAULT_CALENDAR`` (Gregorian, UTC) when none is given.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, overload
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta
from typing_extensions import override

from calspan.errors import OutOfRangeError
from calspan.span import CompositeSpan, Span
from calspan.util import EPOCH_DAY, EPOCH_MONTH, EPOCH_YEAR, MAX_YEAR, MIN_YEAR

logger = logging.getLogger(__name__)


class Calendar(ABC):
    """A calendar system that spans are applied through."""

    @property
    @abstractmethod
    def epoch(self) -> datetime:
        """Default reference instant for projecting spans."""
        pass

    @abstractmethod
    def add_fields(self, instant: datetime, fields: CompositeSpan) -> datetime:
        """Return ``instant`` moved by ``fields``.

        Raises:
            OutOfRangeError: If the result cannot be represented
        """
        pass

    @abstractmethod
    def fields_between(self, start: datetime, end: datetime) -> CompositeSpan:
        """Return the fields that take ``start`` to ``end``."""
        pass

    @abstractmethod
    def coerce_instant(self, value: Any) -> datetime:
        """Convert an instant-like value to an aware datetime in this calendar."""
        pass


class GregorianCalendar(Calendar):
    """Proleptic Gregorian calendar in an IANA time zone.

    Years, months and days move the wall clock: years and months first, with
    the day clamped to the end of a shorter month (Jan 31 + 1 month is the last
    day of February), then days. Hours, minutes and seconds are elapsed time,
    so one hour across a daylight saving change is always 3600 real seconds.
    """

    def __init__(self, tz: str = "UTC"):
        """
        Initialize a Gregorian calendar.

        Args:
            tz: IANA timezone name (e.g., "UTC", "US/Pacific", "Europe/London")

        Example:
            >>> cal = GregorianCalendar("Europe/London")
            >>> cal.epoch.isoformat()
            '1970-01-01T00:00:00+01:00'
        """
        self.tz: str = tz
        self.zone: ZoneInfo = ZoneInfo(tz)

    def __repr__(self) -> str:
        return f"GregorianCalendar(tz={self.tz!r})"

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GregorianCalendar):
            return NotImplemented
        return self.tz == other.tz

    @override
    def __hash__(self) -> int:
        return hash((GregorianCalendar, self.tz))

    @property
    @override
    def epoch(self) -> datetime:
        return datetime(EPOCH_YEAR, EPOCH_MONTH, EPOCH_DAY, tzinfo=self.zone)

    @override
    def add_fields(self, instant: datetime, fields: CompositeSpan) -> datetime:
        instant = self.coerce_instant(instant)
        try:
            wall = instant + relativedelta(
                years=fields.years, months=fields.months, days=fields.days
            )
            elapsed = timedelta(
                hours=fields.hours, minutes=fields.minutes, seconds=fields.seconds
            )
            result = (wall.astimezone(timezone.utc) + elapsed).astimezone(self.zone)
        except (OverflowError, ValueError) as exc:
            logger.debug("Adding %s to %s overflowed: %s", fields, instant, exc)
            raise OutOfRangeError(
                f"Adding {fields} to {instant.isoformat()} leaves the representable "
                f"range (years {MIN_YEAR}-{MAX_YEAR}).",
                instant=instant,
                fields=fields,
            ) from exc
        return result

    @override
    def fields_between(self, start: datetime, end: datetime) -> CompositeSpan:
        """Decompose the gap between two instants into span fields.

        Whole years, months and days are measured on the wall clock and the
        remainder as elapsed seconds, so ``add_fields(start, result) == end``.
        Sub-second remainders are truncated.

        Example:
            >>> cal = GregorianCalendar()
            >>> cal.fields_between(cal.epoch, cal.epoch.replace(month=3, hour=2))
            CompositeSpan(years=0, months=2, days=0, hours=2, minutes=0, seconds=0)
        """
        start = self.coerce_instant(start)
        end = self.coerce_instant(end)

        calendar_part = relativedelta(
            end.replace(tzinfo=None), start.replace(tzinfo=None)
        )
        dated = CompositeSpan(
            years=calendar_part.years,
            months=calendar_part.months,
            days=calendar_part.days,
        )
        midpoint = self.add_fields(start, dated)

        remainder = end.astimezone(timezone.utc) - midpoint.astimezone(timezone.utc)
        total = int(remainder.total_seconds())
        sign = -1 if total < 0 else 1
        hours, rest = divmod(abs(total), 3600)
        minutes, seconds = divmod(rest, 60)

        return CompositeSpan(
            years=dated.years,
            months=dated.months,
            days=dated.days,
            hours=sign * hours,
            minutes=sign * minutes,
            seconds=sign * seconds,
        )

    @override
    def coerce_instant(self, value: Any) -> datetime:
        """Convert an instant-like value to an aware datetime in this zone.

        Accepts:
        - datetime: Must be timezone-aware, converted to this calendar's zone
        - date: Midnight of that day in this calendar's zone
        - int: Unix timestamp in seconds

        Raises:
            TypeError: If value is an unsupported type or naive datetime
        """
        if isinstance(value, datetime):
            if value.tzinfo is None:
                raise TypeError(
                    f"Calendar instants must be timezone-aware datetimes.\n"
                    f"Got naive datetime: {value!r}\n"
                    f"Hint: Add timezone info:\n"
                    f"  from zoneinfo import ZoneInfo\n"
                    f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
                    f"# or 'US/Pacific', etc.\n"
                    f"  # Or use timezone.utc for UTC:\n"
                    f"  dt = datetime(..., tzinfo=timezone.utc)"
                )
            if value.tzinfo is self.zone:
                return value
            return value.astimezone(self.zone)
        if isinstance(value, date):
            return datetime.combine(value, time.min, tzinfo=self.zone)
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return datetime.fromtimestamp(value, tz=self.zone)
            except (OverflowError, OSError, ValueError) as exc:
                raise OutOfRangeError(
                    f"Timestamp {value} is outside the representable range.",
                    instant=value,
                ) from exc
        raise TypeError(
            f"Calendar instant must be datetime, date, or int.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Examples:\n"
            f"  datetime(2015, 7, 15, tzinfo=timezone.utc)  # timezone-aware datetime\n"
            f"  date(2015, 7, 15)  # midnight in the calendar's zone\n"
            f"  1436918400  # int (Unix seconds)"
        )


DEFAULT_CALENDAR: Calendar = GregorianCalendar()


def project(
    span: Span,
    reference: datetime | date | int | None = None,
    calendar: Calendar | None = None,
) -> datetime:
    """Anchor a span at a reference instant and return where it lands.

    Args:
        span: Single-unit or composite span
        reference: Instant to add the span to (default: the calendar's epoch,
            1970-01-01 00:00:00 in its zone)
        calendar: Calendar system (default: Gregorian in UTC)

    Raises:
        OutOfRangeError: If the resulting instant cannot be represented

    Example:
        >>> from calspan import span
        >>> project(span(1, "year")).isoformat()
        '1971-01-01T00:00:00+00:00'
    """
    calendar = calendar or DEFAULT_CALENDAR
    anchor = calendar.epoch if reference is None else calendar.coerce_instant(reference)
    return calendar.add_fields(anchor, span.to_composite())


@overload
def shift(instant: None, span: Span, calendar: Calendar | None = None) -> None: ...


@overload
def shift(
    instant: datetime | date | int, span: Span, calendar: Calendar | None = None
) -> datetime: ...


def shift(
    instant: datetime | date | int | None,
    span: Span,
    calendar: Calendar | None = None,
) -> datetime | None:
    """Move an instant forward by a span.

    An absent instant stays absent, so a chain of shifts on ``None`` yields
    ``None`` instead of failing.

    Example:
        >>> from calspan import days
        >>> shift(None, days(5)) is None
        True
    """
    if instant is None:
        return None
    calendar = calendar or DEFAULT_CALENDAR
    return calendar.add_fields(calendar.coerce_instant(instant), span.to_composite())


@overload
def unshift(instant: None, span: Span, calendar: Calendar | None = None) -> None: ...


@overload
def unshift(
    instant: datetime | date | int, span: Span, calendar: Calendar | None = None
) -> datetime: ...


def unshift(
    instant: datetime | date | int | None,
    span: Span,
    calendar: Calendar | None = None,
) -> datetime | None:
    """Move an instant backward by a span (shift by the negated span)."""
    return shift(instant, -span, calendar)


def between(
    start: datetime | date | int,
    end: datetime | date | int,
    calendar: Calendar | None = None,
) -> CompositeSpan:
    """Return the composite span that takes ``start`` to ``end``."""
    calendar = calendar or DEFAULT_CALENDAR
    return calendar.fields_between(
        calendar.coerce_instant(start), calendar.coerce_instant(end)
    )
