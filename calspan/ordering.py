"""Equality and ordering of spans by calendar projection.

Spans have no absolute length: whether a month equals 31 days depends on
which month. Two spans are compared by adding both to the same reference
instant and comparing where they land. The reference and calendar are
explicit keyword arguments; the operators on span objects use the defaults
(Gregorian UTC calendar, reference 1970-01-01T00:00:00).

At that default reference ``1 year == 365 days`` and ``1 month == 31 days``
hold, because 1970 is not a leap year and January has 31 days. Pass a
different ``reference`` and they need not.
"""

from datetime import date, datetime, timezone

from calspan.calendar import DEFAULT_CALENDAR, Calendar, project
from calspan.span import CalendarSpan, Span

Reference = datetime | date | int | None


def fast_compare(a: Span, b: Span) -> int | None:
    """Compare two spans without projecting them, when that is safe.

    Only two single-unit spans of the same unit qualify: adding more of one
    unit always lands strictly later, whatever the reference, so the amounts
    decide. Calendars must keep each field strictly monotonic for this to
    hold; GregorianCalendar does. Returns None for every other pair.

    ``compare`` does not take this shortcut: it always projects, so spans
    beyond the representable range raise OutOfRangeError.
    """
    if (
        isinstance(a, CalendarSpan)
        and isinstance(b, CalendarSpan)
        and a.unit is b.unit
    ):
        return (a.amount > b.amount) - (a.amount < b.amount)
    return None


def projection_key(
    span: Span, *, reference: Reference = None, calendar: Calendar | None = None
) -> datetime:
    """Return the instant a span reaches from the reference, in UTC.

    Spans with equal keys are equal, and keys sort in span order. Keys are
    UTC so that instants in a repeated fall-back hour, which share a wall
    clock time in the calendar's zone, still compare by absolute time.
    """
    landed = project(span, reference, calendar or DEFAULT_CALENDAR)
    return landed.astimezone(timezone.utc)


def compare(
    a: Span,
    b: Span,
    *,
    reference: Reference = None,
    calendar: Calendar | None = None,
) -> int:
    """Three-way comparison of two spans under a fixed reference.

    Args:
        a: Left span
        b: Right span
        reference: Instant both spans are anchored at (default: the calendar's
            epoch, 1970-01-01 00:00:00 in its zone)
        calendar: Calendar system (default: Gregorian in UTC)

    Returns:
        -1 if ``a`` lands before ``b``, 0 if they land together, 1 otherwise

    Raises:
        OutOfRangeError: If either projection cannot be represented

    Example:
        >>> from calspan import months, years
        >>> compare(months(11), years(1))
        -1
    """
    left = projection_key(a, reference=reference, calendar=calendar)
    right = projection_key(b, reference=reference, calendar=calendar)
    if left == right:
        return 0
    return -1 if left < right else 1


def equals(
    a: Span,
    b: Span,
    *,
    reference: Reference = None,
    calendar: Calendar | None = None,
) -> bool:
    """True if both spans land on the same instant from the reference.

    Example:
        >>> from datetime import date
        >>> from calspan import days, year
        >>> equals(year(1), days(365))
        True
        >>> equals(year(1), days(365), reference=date(2024, 1, 1))
        False
    """
    return compare(a, b, reference=reference, calendar=calendar) == 0


def is_before(
    a: Span,
    b: Span,
    *,
    reference: Reference = None,
    calendar: Calendar | None = None,
) -> bool:
    """True if ``a`` lands strictly before ``b`` from the reference."""
    return compare(a, b, reference=reference, calendar=calendar) < 0
